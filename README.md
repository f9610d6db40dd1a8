# clikit

Building blocks for command-line applications in pure Python, with no
dependencies outside the standard library.

## What it offers

- **Flag sets** (`clikit.flagset`): `FlagSet` parses single- or double-dash
  flags from the front of an argument list and keeps the rest as arguments.
  Values are `Value`/`StringValue`, `BoolValue`, `IntValue`, `FloatValue`
  and `DurationValue`; `parse_bool`, `parse_duration` and `format_duration`
  handle boolean text and durations such as `2h3m6s` or `1.5s`. Errors are
  raised as `FlagError`.
- **Flags** (`clikit.flag`, `clikit.flag_bool`, `clikit.flag_duration`):
  `Flag` (a string flag), `BoolFlag` and `DurationFlag`, with aliases,
  usage text, defaults, `default_text`, a shared `destination` value, and
  values taken from environment variables (`env_vars`) or files
  (`file_path`). `str(flag)` gives the help line, for example
  `--hooting value\t(default: 1s)`. `new_flag_set` defines a list of flags
  on a new `FlagSet`; `normalize_flags` copies a value given under one name
  of a flag to its other names.
- **Contexts** (`clikit.context`): `Context` gives the parsed arguments,
  `bool` and `duration` values and raw `value`s, tells whether a flag was
  set (`is_set`), looks through parent contexts (`lineage`,
  `lookup_flag_set`) and raises `RequiredFlagsError` from
  `check_required_flags`.
- **Commands** (`clikit.command`): `Command` with names, aliases,
  subcommands, visible flags and `parse_flags`, which parses the arguments
  following the command name (honouring `skip_flag_parsing`).
- **Documentation fragments** (`clikit.docs`): `prepare_commands`,
  `prepare_args_with_values`, `prepare_args_synopsis`,
  `prepare_usage_text` and `prepare_usage` build Markdown pieces for
  commands and flags.
- **Fish completion lines** (`clikit.fish`): `prepare_fish_flags` and
  `prepare_fish_commands` build `complete` lines for the fish shell.
- **Errors** (`clikit.errors`): `ExitError`, `MultiError`,
  `RequiredFlagsError`, `exit_error` and `handle_exit_coder`.

## Example

```python
import datetime

from clikit.context import Context
from clikit.flag import new_flag_set, normalize_flags
from clikit.flag_bool import BoolFlag
from clikit.flag_duration import DurationFlag

flags = [
    BoolFlag(name="verbose", aliases=["V"], usage="talk more"),
    DurationFlag(name="timeout", value=datetime.timedelta(seconds=30)),
]
flag_set = new_flag_set("tool", flags)
flag_set.parse(["-V", "--timeout", "1m30s", "input.txt"])
normalize_flags(flags, flag_set)

ctx = Context(None, flag_set, None)
assert ctx.bool("verbose") is True
assert ctx.duration("timeout") == datetime.timedelta(seconds=90)
assert ctx.args() == ["input.txt"]
```

## Exit handling

```python
import io

from clikit.errors import exit_error, handle_exit_coder

codes = []
stream = io.StringIO()
handle_exit_coder(exit_error("something went wrong", 3), stream, codes.append)
assert codes == [3]
assert stream.getvalue() == "something went wrong\n"
```

Without an exiter, `handle_exit_coder` calls `sys.exit`; without a writer
it prints to standard error.

## What it does not do

There is no application object that dispatches to commands: `Command` only
parses its flags, and running actions, `before`/`after` hooks and help
output are left to the caller. Help screens, full Markdown or man pages and
complete fish scripts are not rendered; the package provides the lines and
sections such output is built from. Only string, boolean and duration flag
types are provided.

## Running the tests

```
pip install -e .[test]
pytest
```