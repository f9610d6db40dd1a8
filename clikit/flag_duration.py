"""A flag holding a duration."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from .flag import Flag
from .flagset import DurationValue, FlagSet, format_duration, parse_duration


@dataclass(eq=False)
class DurationFlag(Flag):
    """A flag whose value is a duration such as "1h30m" or "1.5s".

    When ``destination`` is set, every name of the flag shares that value.
    """

    value: timedelta = timedelta(0)
    destination: DurationValue | None = None

    _kind = "duration"
    _convert = staticmethod(parse_duration)
    _value_type = DurationValue

    def names(self) -> list[str]:
        """The name and aliases of the flag."""
        return super().names()

    def is_set(self) -> bool:
        """Whether the flag was set from the environment or a file."""
        return super().is_set()

    def is_required(self) -> bool:
        """Whether the flag must be given."""
        return super().is_required()

    def is_visible(self) -> bool:
        """Whether the flag shows in help."""
        return super().is_visible()

    def takes_value(self) -> bool:
        return True

    def get_usage(self) -> str:
        """The usage text of the flag."""
        return super().get_usage()

    def get_value(self) -> str:
        return format_duration(self.value)

    def _initial(self) -> timedelta:
        return self.value if self.value is not None else timedelta(0)

    def apply(self, flag_set: FlagSet) -> None:
        """Take the value from env or file if present, then define every name."""
        super().apply(flag_set)


def lookup_duration(name: str, flag_set: FlagSet) -> timedelta:
    """The duration value of the named flag, or zero if missing or unparsable."""
    entry = flag_set.lookup(name)
    if entry is None:
        return timedelta(0)
    try:
        return parse_duration(str(entry.value))
    except ValueError:
        return timedelta(0)