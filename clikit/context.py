"""The context handed to actions: parsed flags, arguments and ancestry."""

from __future__ import annotations

from datetime import timedelta
from typing import Any, Iterable

from .errors import RequiredFlagsError
from .flag_bool import lookup_bool
from .flag_duration import lookup_duration
from .flagset import FlagSet


def _display_name(entry_name: str) -> str:
    parts = [part.strip() for part in entry_name.split(",")]
    name = parts[0]
    for part in parts:
        if len(part) > len(name):
            name = part
    return name


def _names_of(flag_set: FlagSet) -> list[str]:
    return [name for name in (_display_name(e.name) for e in flag_set.visit()) if name]


class Context:
    """Parsed flags and arguments for one level of an application run.

    Lookups fall back from this context to its parents.
    """

    def __init__(
        self,
        app: Any = None,
        flag_set: FlagSet | None = None,
        parent: Context | None = None,
    ) -> None:
        self.app = app
        self.flag_set = flag_set if flag_set is not None else FlagSet()
        self.parent = parent
        self.command: Any = None
        self.shell_complete = parent.shell_complete if parent is not None else False

    def num_flags(self) -> int:
        """The number of flags set in this context."""
        return self.flag_set.nflag()

    def set(self, name: str, value: str) -> None:
        """Set a flag of this context to a value."""
        self.flag_set.set(name, value)

    def is_set(self, name: str) -> bool:
        """Whether the flag was given on the command line, in env or in a file."""
        flag_set = self.lookup_flag_set(name)
        if flag_set is None:
            return False
        if any(entry.name == name for entry in flag_set.visit()):
            return True
        found = self.lookup_flag(name)
        return found.is_set() if found is not None else False

    def local_flag_names(self) -> list[str]:
        """Names of the flags set in this context."""
        return _names_of(self.flag_set)

    def flag_names(self) -> list[str]:
        """Names of the flags set in this context and its parents."""
        return [name for ctx in self.lineage() for name in _names_of(ctx.flag_set)]

    def lineage(self) -> list[Context]:
        """This context and its ancestors, from child to root."""
        chain = []
        current: Context | None = self
        while current is not None:
            chain.append(current)
            current = current.parent
        return chain

    def value(self, name: str) -> Any:
        """The value of the named flag, or None if no context defines it."""
        flag_set = self.lookup_flag_set(name)
        if flag_set is None:
            return None
        return flag_set.lookup(name).value.get()

    def args(self) -> list[str]:
        """The arguments left after flag parsing."""
        return self.flag_set.args()

    def narg(self) -> int:
        return len(self.args())

    def lookup_flag(self, name: str) -> Any:
        """The flag definition with that name from the commands or the app."""
        for ctx in self.lineage():
            if ctx.command is None:
                continue
            found = _find_flag(getattr(ctx.command, "flags", None) or [], name)
            if found is not None:
                return found
        if self.app is not None:
            return _find_flag(getattr(self.app, "flags", None) or [], name)
        return None

    def lookup_flag_set(self, name: str) -> FlagSet | None:
        """The nearest flag set, from this context upwards, that defines the name."""
        for ctx in self.lineage():
            if ctx.flag_set.lookup(name) is not None:
                return ctx.flag_set
        return None

    def check_required_flags(self, flags: Iterable[Any]) -> None:
        """Raise RequiredFlagsError naming the required flags that were not set."""
        missing = []
        for flag in flags:
            is_required = getattr(flag, "is_required", None)
            if not callable(is_required) or not is_required():
                continue
            present = False
            flag_name = ""
            for key in flag.names():
                if len(key) > 1:
                    flag_name = key
                if self.is_set(key.strip()):
                    present = True
            if not present and flag_name:
                missing.append(flag_name)
        if missing:
            raise RequiredFlagsError(missing)

    def bool(self, name: str) -> Any:
        """The boolean value of the named flag, or False if not found."""
        flag_set = self.lookup_flag_set(name)
        if flag_set is None:
            return False
        return lookup_bool(name, flag_set)

    def duration(self, name: str) -> timedelta:
        """The duration value of the named flag, or zero if not found."""
        flag_set = self.lookup_flag_set(name)
        if flag_set is None:
            return timedelta(0)
        return lookup_duration(name, flag_set)


def _find_flag(flags: Iterable[Any], name: str) -> Any:
    for flag in flags:
        if name in flag.names():
            return flag
    return None