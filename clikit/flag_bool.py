"""A flag holding a boolean value."""

from __future__ import annotations

from dataclasses import dataclass

from .flag import Flag
from .flagset import BoolValue, FlagSet, parse_bool


@dataclass(eq=False)
class BoolFlag(Flag):
    """A flag that is true when given and needs no argument.

    When ``destination`` is set, every name of the flag shares that value.
    """

    value: bool = False
    destination: BoolValue | None = None

    _kind = "bool"
    _convert = staticmethod(parse_bool)
    _value_type = BoolValue

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
        return False

    def get_usage(self) -> str:
        """The usage text of the flag."""
        return super().get_usage()

    def get_value(self) -> str:
        return ""

    def _initial(self) -> bool:
        return bool(self.value)

    def apply(self, flag_set: FlagSet) -> None:
        """Take the value from env or file if present, then define every name."""
        super().apply(flag_set)


def lookup_bool(name: str, flag_set: FlagSet) -> bool:
    """The boolean value of the named flag, or False if missing or not a bool."""
    entry = flag_set.lookup(name)
    if entry is None:
        return False
    try:
        return parse_bool(str(entry.value))
    except ValueError:
        return False