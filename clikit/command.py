"""Commands: named actions with their own flags and subcommands."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable

from .flag import new_flag_set, normalize_flags, visible_flags
from .flagset import FlagSet


@dataclass(eq=False)
class Command:
    """A subcommand of an application.

    The callbacks receive a context; ``on_usage_error`` also receives the
    error and whether it happened in a subcommand.
    """

    name: str = ""
    aliases: list[str] = field(default_factory=list)
    usage: str = ""
    usage_text: str = ""
    description: str = ""
    args_usage: str = ""
    category: str = ""
    bash_complete: Callable[[Any], None] | None = None
    before: Callable[[Any], None] | None = None
    after: Callable[[Any], None] | None = None
    action: Callable[[Any], None] | None = None
    on_usage_error: Callable[[Any, Exception, bool], None] | None = None
    subcommands: list[Command] = field(default_factory=list)
    flags: list[Any] = field(default_factory=list)
    skip_flag_parsing: bool = False
    hide_help: bool = False
    hide_help_command: bool = False
    hidden: bool = False
    use_short_option_handling: bool = False
    help_name: str = ""
    command_name_path: list[str] | None = None
    custom_help_template: str = ""

    def full_name(self) -> str:
        """The name including the parent commands, if known."""
        if self.command_name_path is None:
            return self.name
        return " ".join(self.command_name_path)

    def names(self) -> list[str]:
        """The name followed by the aliases."""
        return [self.name, *self.aliases]

    def has_name(self, name: str) -> bool:
        return name in self.names()

    def visible_flags(self) -> list[Any]:
        """The flags that are not hidden."""
        return visible_flags(self.flags)

    def append_flag(self, flag: Any) -> None:
        """Add a flag unless this very flag is already present."""
        if not any(existing is flag for existing in self.flags):
            self.flags.append(flag)

    def new_flag_set(self) -> FlagSet:
        return new_flag_set(self.name, self.flags)

    def parse_flags(self, arguments: list[str]) -> FlagSet:
        """Parse the arguments that follow the command name in ``arguments``.

        Raises FlagError on unknown flags, bad values or a flag given
        under two of its names.
        """
        flag_set = self.new_flag_set()
        tail = list(arguments[1:])
        if self.skip_flag_parsing:
            flag_set.parse(["--", *tail])
            return flag_set
        flag_set.parse(tail)
        normalize_flags(self.flags, flag_set)
        return flag_set


def has_command(commands: Iterable[Command], command: Command) -> bool:
    """Whether this very command object is among the commands."""
    return any(existing is command for existing in commands)