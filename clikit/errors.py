"""Error types and the default exit-code handling for applications."""

from __future__ import annotations

import sys
from typing import Callable, Iterable, TextIO


def _quote(text: str) -> str:
    escaped = (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\t", "\\t")
    )
    return f'"{escaped}"'


class ExitError(Exception):
    """An error that carries the exit code the process should end with."""

    def __init__(self, message: object, exit_code: int) -> None:
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code

    def __str__(self) -> str:
        return str(self.message)


class MultiError(Exception):
    """An error that wraps several errors."""

    def __init__(self, *args: BaseException) -> None:
        super().__init__(*args)
        self._errors = list(args)

    @property
    def errors(self) -> list[BaseException]:
        """A copy of the wrapped errors."""
        return list(self._errors)

    def __str__(self) -> str:
        return "\n".join(str(err) for err in self._errors)


class RequiredFlagsError(Exception):
    """Raised when flags marked as required were not given."""

    def __init__(self, missing_flags: Iterable[str]) -> None:
        self.missing_flags = list(missing_flags)
        super().__init__(self.missing_flags)

    def __str__(self) -> str:
        if len(self.missing_flags) == 1:
            return f"Required flag {_quote(self.missing_flags[0])} not set"
        joined = ", ".join(self.missing_flags)
        return f"Required flags {_quote(joined)} not set"


def exit_error(message: object, exit_code: int) -> ExitError:
    """Wrap a message and exit code into an ExitError."""
    return ExitError(message, exit_code)


def handle_exit_coder(
    err: BaseException | None,
    err_writer: TextIO | None = None,
    exiter: Callable[[int], object] | None = None,
) -> None:
    """Print an ExitError or MultiError and call the exiter with its code.

    Other errors, and None, are ignored.
    """
    if err is None:
        return
    writer = err_writer if err_writer is not None else sys.stderr
    exit_with = exiter if exiter is not None else sys.exit

    if isinstance(err, ExitError):
        text = str(err)
        if text:
            print(text, file=writer)
        exit_with(err.exit_code)
        return

    if isinstance(err, MultiError):
        exit_with(_handle_multi_error(err, writer))


def _handle_multi_error(multi: MultiError, writer: TextIO) -> int:
    code = 1
    for inner in multi.errors:
        if isinstance(inner, MultiError):
            code = _handle_multi_error(inner, writer)
        elif inner is not None:
            print(str(inner), file=writer)
            if isinstance(inner, ExitError):
                code = inner.exit_code
    return code