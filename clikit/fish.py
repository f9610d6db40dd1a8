"""Lines of a fish shell completion script."""

from __future__ import annotations

from typing import Any, Iterable

from .flag_bool import BoolFlag

_HELP_FLAG = BoolFlag(name="help", aliases=["h"], usage="show help")


def _is_doc_flag(flag: Any) -> bool:
    return all(
        callable(getattr(flag, attr, None))
        for attr in ("names", "takes_value", "get_usage", "get_value")
    )


def prepare_fish_flags(
    app_name: str, flags: Iterable[Any], previous_commands: list[str]
) -> list[str]:
    """One ``complete`` line per documentable flag."""
    completions = []
    for flag in flags:
        if not _is_doc_flag(flag):
            continue
        line = (
            f"complete -c {app_name} -n "
            f"'{fish_subcommand_helper(app_name, previous_commands)}'"
        )
        line += fish_add_file_flag(flag)
        for index, option in enumerate(flag.names()):
            switch = "-l" if index == 0 else "-s"
            line += f" {switch} {option.strip()}"
        if flag.takes_value():
            line += " -r"
        if flag.get_usage():
            line += f" -d '{escape_single_quotes(flag.get_usage())}'"
        completions.append(line)
    return completions


def prepare_fish_commands(
    app_name: str,
    commands: Iterable[Any],
    all_commands: list[str],
    previous_commands: list[str],
) -> list[str]:
    """Completion lines for visible commands, their flags and subcommands.

    The names of every visited command are appended to ``all_commands``.
    """
    completions: list[str] = []
    for command in commands:
        if command.hidden:
            continue
        names = command.names()
        line = (
            f"complete -r -c {app_name} -n "
            f"'{fish_subcommand_helper(app_name, previous_commands)}' "
            f"-a '{' '.join(names)}'"
        )
        if command.usage:
            line += f" -d '{escape_single_quotes(command.usage)}'"
        if not command.hide_help:
            completions.extend(prepare_fish_flags(app_name, [_HELP_FLAG], names))
        all_commands.extend(names)
        completions.append(line)
        completions.extend(prepare_fish_flags(app_name, command.flags, names))
        if command.subcommands:
            completions.extend(
                prepare_fish_commands(app_name, command.subcommands, all_commands, names)
            )
    return completions


def fish_add_file_flag(flag: Any) -> str:
    """" -f" to suppress file completion, unless the flag takes a file."""
    if getattr(flag, "takes_file", False):
        return ""
    return " -f"


def fish_subcommand_helper(app_name: str, previous_commands: list[str]) -> str:
    if previous_commands:
        return "__fish_seen_subcommand_from " + " ".join(previous_commands)
    return f"__fish_{app_name}_no_subcommand"


def escape_single_quotes(text: str) -> str:
    return text.replace("'", "\\'")