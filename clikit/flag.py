"""The flag base class and the helpers for help text, env vars and parsing."""

from __future__ import annotations

import os
import re
import sys
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Iterable

from .flagset import FlagEntry, FlagError, FlagSet, StringValue, Value, format_duration

DEFAULT_PLACEHOLDER = "value"

_COMMA_WHITESPACE = re.compile(r"[, ]+.*")


def _quote(text: str) -> str:
    escaped = (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\t", "\\t")
    )
    return f'"{escaped}"'


def _format_plain(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        return repr(value)
    if isinstance(value, timedelta):
        return format_duration(value)
    return str(value)


@dataclass(eq=False)
class Flag:
    """A command-line flag; by itself it holds a string value.

    When ``destination`` is set, every name of the flag shares that value.
    """

    name: str = ""
    aliases: list[str] = field(default_factory=list)
    usage: str = ""
    env_vars: list[str] = field(default_factory=list)
    file_path: str = ""
    required: bool = False
    hidden: bool = False
    value: Any = None
    default_text: str = ""
    has_been_set: bool = False
    destination: Value | None = None

    _kind = "string"
    _convert = staticmethod(str)
    _value_type = StringValue

    def names(self) -> list[str]:
        return flag_names(self.name, self.aliases)

    def is_set(self) -> bool:
        """Whether the flag was set from the environment or a file."""
        return self.has_been_set

    def is_required(self) -> bool:
        return self.required

    def is_visible(self) -> bool:
        return not self.hidden

    def takes_value(self) -> bool:
        return True

    def get_usage(self) -> str:
        return self.usage

    def get_value(self) -> str:
        return "" if self.value is None else _format_plain(self.value)

    def _initial(self) -> Any:
        """The value a freshly defined name starts with."""
        return "" if self.value is None else self.value

    def apply(self, flag_set: FlagSet) -> None:
        """Take the value from env or file if present, then define every name."""
        found = flag_from_env_or_file(self.env_vars, self.file_path)
        if found:
            try:
                self.value = self._convert(found)
            except ValueError as exc:
                raise FlagError(
                    f"could not parse {_quote(found)} as {self._kind} value "
                    f"for flag {self.name}: {exc}"
                ) from exc
            self.has_been_set = True
        holder = self.destination
        if holder is not None:
            holder.value = self._initial()
        for name in self.names():
            target = holder if holder is not None else self._value_type(self._initial())
            flag_set.define(name, target, self.usage)

    def __str__(self) -> str:
        return stringify_flag(self)


def flag_names(name: str, aliases: Iterable[str] | None) -> list[str]:
    """The name and aliases, each cut at its first comma or space."""
    return [_COMMA_WHITESPACE.sub("", part) for part in [name, *(aliases or [])]]


def prefix_for(name: str) -> str:
    """One dash for a single-letter name, two otherwise."""
    prefix = "--"
    if len(name) == 1:
        prefix = "-"
    return prefix


def unquote_usage(usage: str) -> tuple[str, str]:
    """Return the back-quoted placeholder, if any, and the usage without quotes."""
    start = usage.find("`")
    if start >= 0:
        end = usage.find("`", start + 1)
        if end >= 0:
            name = usage[start + 1 : end]
            return name, usage[:start] + name + usage[end + 1 :]
    return "", usage


def prefixed_names(names: list[str], placeholder: str) -> str:
    parts = []
    last = len(names) - 1
    for i, name in enumerate(names):
        if not name:
            continue
        text = prefix_for(name) + name
        if placeholder:
            text += " " + placeholder
        if i < last:
            text += ", "
        parts.append(text)
    return "".join(parts)


def with_env_hint(env_vars: list[str] | None, text: str) -> str:
    if not env_vars:
        return text
    if sys.platform == "win32":
        return text + " [%" + "%, %".join(env_vars) + "%]"
    return text + " [$" + ", $".join(env_vars) + "]"


def with_file_hint(file_path: str, text: str) -> str:
    return text + (f" [{file_path}]" if file_path else "")


def format_default(text: str) -> str:
    return f" (default: {text})"


def stringify_slice_flag(usage: str, names: list[str], default_values: list[str]) -> str:
    placeholder, usage = unquote_usage(usage)
    if not placeholder:
        placeholder = DEFAULT_PLACEHOLDER
    default = format_default(", ".join(default_values)) if default_values else ""
    usage_with_default = (usage + default).strip()
    multi = "(accepts multiple inputs)"
    if usage_with_default:
        multi = "\t" + multi
    return f"{prefixed_names(names, placeholder)}\t{usage_with_default}{multi}"


def stringify_flag(flag: Any) -> str:
    """Render a flag as one line of help text."""
    default_values = getattr(flag, "default_values", None)
    if callable(default_values):
        return with_env_hint(
            getattr(flag, "env_vars", None),
            stringify_slice_flag(flag.usage, flag.names(), default_values()),
        )

    placeholder, usage = unquote_usage(getattr(flag, "usage", ""))
    value = getattr(flag, "value", None)
    needs_placeholder = False
    default = ""
    if value is not None:
        needs_placeholder = not isinstance(value, bool)
        if isinstance(value, str) and value:
            default = format_default(_quote(value))
        else:
            default = format_default(_format_plain(value))
    default_text = getattr(flag, "default_text", "")
    if default_text:
        needs_placeholder = not isinstance(value, bool)
        default = format_default(default_text)
    if default == format_default(""):
        default = ""
    if needs_placeholder and not placeholder:
        placeholder = DEFAULT_PLACEHOLDER
    usage_with_default = (usage + default).strip()
    return with_env_hint(
        getattr(flag, "env_vars", None),
        f"{prefixed_names(flag.names(), placeholder)}\t{usage_with_default}",
    )


def visible_flags(flags: Iterable[Any]) -> list[Any]:
    return [f for f in flags if hasattr(f, "is_visible") and f.is_visible()]


def has_flag(flags: Iterable[Any], flag: Any) -> bool:
    return any(existing is flag for existing in flags)


def flag_from_env_or_file(env_vars: Iterable[str] | None, file_path: str) -> str | None:
    """The first set environment variable, else the first readable file, else None."""
    for env_var in env_vars or []:
        found = os.environ.get(env_var.strip())
        if found is not None:
            return found
    for path in (file_path or "").split(","):
        if not path:
            continue
        try:
            with open(path, encoding="utf-8") as handle:
                return handle.read()
        except OSError:
            continue
    return None


def new_flag_set(name: str, flags: Iterable[Any]) -> FlagSet:
    flag_set = FlagSet(name)
    for flag in flags:
        flag.apply(flag_set)
    return flag_set


def copy_flag(name: str, entry: FlagEntry, flag_set: FlagSet) -> None:
    serialize = getattr(entry.value, "serialize", None)
    text = serialize() if callable(serialize) else str(entry.value)
    try:
        flag_set.set(name, text)
    except FlagError:
        pass


def normalize_flags(flags: Iterable[Any], flag_set: FlagSet) -> None:
    """Copy a value given under one name of a flag to all its other names."""
    visited = {entry.name for entry in flag_set.visit()}
    for flag in flags:
        parts = [name.strip(" ") for name in flag.names()]
        if len(parts) == 1:
            continue
        found: FlagEntry | None = None
        for name in parts:
            if name in visited:
                if found is not None:
                    raise FlagError(
                        f"Cannot use two forms of the same flag: {name} {found.name}"
                    )
                found = flag_set.lookup(name)
        if found is None:
            continue
        for name in parts:
            if name not in visited:
                copy_flag(name, found, flag_set)