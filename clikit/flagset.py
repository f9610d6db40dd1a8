"""A small flag set in the style of single-dash command-line flags."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import timedelta
from decimal import Decimal, InvalidOperation
from typing import Iterator

_TRUE = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE = {"0", "f", "F", "FALSE", "false", "False"}

_UNIT_NS = {
    "ns": Decimal(1),
    "us": Decimal(1000),
    "µs": Decimal(1000),
    "μs": Decimal(1000),
    "ms": Decimal(1_000_000),
    "s": Decimal(1_000_000_000),
    "m": Decimal(60_000_000_000),
    "h": Decimal(3_600_000_000_000),
}
_COMPONENT = re.compile(r"(\d+\.?\d*|\.\d+)(ns|us|µs|μs|ms|s|m|h)")


class FlagError(Exception):
    """Raised when defining, setting or parsing flags fails."""


def parse_bool(text: str) -> bool:
    """Parse a boolean the way command-line flags accept it."""
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ValueError(f'strconv.ParseBool: parsing "{text}": invalid syntax')


def parse_duration(text: str) -> timedelta:
    """Parse a duration such as "1h30m" or "1.5s"."""
    error = ValueError(f'time: invalid duration "{text}"')
    rest = text
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]
    if rest == "0":
        return timedelta(0)
    if not rest:
        raise error
    total = Decimal(0)
    pos = 0
    while pos < len(rest):
        match = _COMPONENT.match(rest, pos)
        if match is None:
            raise error
        try:
            number = Decimal(match.group(1))
        except InvalidOperation as exc:
            raise error from exc
        total += number * _UNIT_NS[match.group(2)]
        pos = match.end()
    micros = int((total / 1000).to_integral_value())
    return timedelta(microseconds=-micros if negative else micros)


def _trim(whole: int, frac: int, width: int) -> str:
    if not frac:
        return str(whole)
    return f"{whole}.{frac:0{width}d}".rstrip("0")


def format_duration(duration: timedelta) -> str:
    """Format a duration as "2h3m6s", "1.5s", "100ms" and the like."""
    micros = duration // timedelta(microseconds=1)
    if micros == 0:
        return "0s"
    sign = "-" if micros < 0 else ""
    micros = abs(micros)
    if micros < 1000:
        return f"{sign}{micros}µs"
    if micros < 1_000_000:
        return f"{sign}{_trim(micros // 1000, micros % 1000, 3)}ms"
    hours, rem = divmod(micros, 3_600_000_000)
    minutes, rem = divmod(rem, 60_000_000)
    seconds = _trim(rem // 1_000_000, rem % 1_000_000, 6)
    if hours:
        return f"{sign}{hours}h{minutes}m{seconds}s"
    if minutes:
        return f"{sign}{minutes}m{seconds}s"
    return f"{sign}{seconds}s"


def _format_float(number: float) -> str:
    if number.is_integer() and abs(number) < 1e21:
        return str(int(number))
    return repr(number)


class Value:
    """A settable flag value holding a plain string."""

    is_bool_flag = False

    def __init__(self, value: object = "") -> None:
        self.value = value

    def set(self, text: str) -> None:
        self.value = text

    def get(self) -> object:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


class StringValue(Value):
    """A string flag value."""


class BoolValue(Value):
    """A boolean flag value; it may be given without an argument."""

    is_bool_flag = True

    def __init__(self, value: bool = False) -> None:
        super().__init__(value)

    def set(self, text: str) -> None:
        try:
            self.value = parse_bool(text)
        except ValueError:
            raise ValueError("parse error") from None

    def __str__(self) -> str:
        return "true" if self.value else "false"


class IntValue(Value):
    """An integer flag value; accepts 0x, 0o and 0b prefixes."""

    def __init__(self, value: int = 0) -> None:
        super().__init__(value)

    def set(self, text: str) -> None:
        try:
            self.value = int(text, 0)
        except ValueError:
            try:
                self.value = int(text, 10)
            except ValueError:
                raise ValueError("parse error") from None


class FloatValue(Value):
    """A floating-point flag value."""

    def __init__(self, value: float = 0.0) -> None:
        super().__init__(value)

    def set(self, text: str) -> None:
        try:
            self.value = float(text)
        except ValueError:
            raise ValueError("parse error") from None

    def __str__(self) -> str:
        return _format_float(float(self.value))


class DurationValue(Value):
    """A duration flag value held as a timedelta."""

    def __init__(self, value: timedelta = timedelta(0)) -> None:
        super().__init__(value)

    def set(self, text: str) -> None:
        try:
            self.value = parse_duration(text)
        except ValueError:
            raise ValueError("parse error") from None

    def __str__(self) -> str:
        return format_duration(self.value)


@dataclass(eq=False)
class FlagEntry:
    """One defined flag: its name, usage, value and default text."""

    name: str
    usage: str
    value: Value
    default_text: str


class FlagSet:
    """A named set of flags that parses an argument list."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self._formal: dict[str, FlagEntry] = {}
        self._actual: dict[str, FlagEntry] = {}
        self._args: list[str] = []
        self.parsed = False

    def define(self, name: str, value: Value, usage: str = "") -> Value:
        """Define a flag; raise FlagError if the name is taken."""
        if name in self._formal:
            raise FlagError(f"{self.name} flag redefined: {name}")
        self._formal[name] = FlagEntry(name, usage, value, str(value))
        return value

    def lookup(self, name: str) -> FlagEntry | None:
        return self._formal.get(name)

    def set(self, name: str, value: str) -> None:
        """Set a flag by name and mark it as given."""
        entry = self._formal.get(name)
        if entry is None:
            raise FlagError(f"no such flag -{name}")
        try:
            entry.value.set(value)
        except ValueError as exc:
            raise FlagError(str(exc)) from exc
        self._actual[name] = entry

    def parse(self, arguments: list[str]) -> None:
        """Parse flags from the front of the arguments; keep the rest as args."""
        self.parsed = True
        args = list(arguments)
        try:
            while args:
                text = args[0]
                if len(text) < 2 or text[0] != "-":
                    break
                minuses = 1
                if text[1] == "-":
                    minuses = 2
                    if len(text) == 2:
                        args.pop(0)
                        break
                name = text[minuses:]
                if not name or name[0] == "-" or name[0] == "=":
                    raise FlagError(f"bad flag syntax: {text}")
                args.pop(0)
                has_value = False
                value = ""
                if "=" in name:
                    name, value = name.split("=", 1)
                    has_value = True
                entry = self._formal.get(name)
                if entry is None:
                    if name in ("help", "h"):
                        raise FlagError("flag: help requested")
                    raise FlagError(f"flag provided but not defined: -{name}")
                if entry.value.is_bool_flag:
                    if has_value:
                        try:
                            entry.value.set(value)
                        except ValueError as exc:
                            raise FlagError(
                                f'invalid boolean value "{value}" for -{name}: {exc}'
                            ) from exc
                    else:
                        entry.value.set("true")
                else:
                    if not has_value and args:
                        value = args.pop(0)
                        has_value = True
                    if not has_value:
                        raise FlagError(f"flag needs an argument: -{name}")
                    try:
                        entry.value.set(value)
                    except ValueError as exc:
                        raise FlagError(
                            f'invalid value "{value}" for flag -{name}: {exc}'
                        ) from exc
                self._actual[name] = entry
        finally:
            self._args = args

    def visit(self) -> Iterator[FlagEntry]:
        """Yield the flags that were set, in name order."""
        for name in sorted(self._actual):
            yield self._actual[name]

    def visit_all(self) -> Iterator[FlagEntry]:
        """Yield all defined flags, in name order."""
        for name in sorted(self._formal):
            yield self._formal[name]

    def args(self) -> list[str]:
        return list(self._args)

    def nflag(self) -> int:
        return len(self._actual)