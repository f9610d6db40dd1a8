"""Markdown fragments describing commands and flags."""

from __future__ import annotations

from typing import Any, Iterable


def prepare_commands(commands: Iterable[Any], level: int) -> list[str]:
    """One markdown section per visible command, subcommands following their parent."""
    sections: list[str] = []
    for command in commands:
        if command.hidden:
            continue
        usage_text = prepare_usage_text(command)
        usage = prepare_usage(command, usage_text)
        prepared = (
            f"{'#' * (level + 2)} {', '.join(command.names())}\n\n{usage}{usage_text}"
        )
        flags = prepare_args_with_values(command.flags)
        if flags:
            prepared += "\n" + "\n".join(flags)
        sections.append(prepared)
        if command.subcommands:
            sections.extend(prepare_commands(command.subcommands, level + 1))
    return sections


def prepare_args_with_values(flags: Iterable[Any]) -> list[str]:
    return prepare_flags(flags, ", ", "**", "**", '""', True)


def prepare_args_synopsis(flags: Iterable[Any]) -> list[str]:
    return prepare_flags(flags, "|", "[", "]", "[value]", False)


def _is_doc_flag(flag: Any) -> bool:
    return all(
        callable(getattr(flag, attr, None))
        for attr in ("names", "takes_value", "get_usage", "get_value")
    )


def prepare_flags(
    flags: Iterable[Any],
    sep: str,
    opener: str,
    closer: str,
    value: str,
    add_details: bool,
) -> list[str]:
    """Render each documentable flag on its own line, sorted."""
    lines = []
    for flag in flags:
        if not _is_doc_flag(flag):
            continue
        rendered = []
        for name in flag.names():
            trimmed = name.strip()
            prefix = "--" if len(trimmed) > 1 else "-"
            rendered.append(prefix + trimmed)
        arg = opener + sep.join(rendered) + closer
        if flag.takes_value():
            arg += f"={value}"
        if add_details:
            arg += flag_details(flag)
        lines.append(arg + "\n")
    return sorted(lines)


def flag_details(flag: Any) -> str:
    """The usage of a flag with its default value, if any."""
    description = flag.get_usage()
    value = flag.get_value()
    if value:
        description += " (default: " + value + ")"
    return ": " + description


def prepare_usage_text(command: Any) -> str:
    """A one-line usage text as a note, several lines as a code block."""
    if not command.usage_text:
        return ""
    text = command.usage_text.strip("\n")
    if "\n" in text:
        return "".join(f"    {line}\n" for line in text.split("\n"))
    return f">{text}\n"


def prepare_usage(command: Any, usage_text: str) -> str:
    if not command.usage:
        return ""
    usage = command.usage + "\n"
    if usage_text:
        usage += "\n"
    return usage