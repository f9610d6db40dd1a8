"""Building blocks for command-line applications: flag sets, flags, contexts, commands, doc fragments and fish completion lines."""

__version__ = "0.1.0"

__all__ = [
    "command",
    "context",
    "docs",
    "errors",
    "fish",
    "flag",
    "flag_bool",
    "flag_duration",
    "flagset",
]