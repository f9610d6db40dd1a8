from dataclasses import dataclass

from clikit.command import Command
from clikit.fish import (
    escape_single_quotes,
    fish_add_file_flag,
    fish_subcommand_helper,
    prepare_fish_commands,
    prepare_fish_flags,
)
from clikit.flag import Flag
from clikit.flag_bool import BoolFlag


@dataclass(eq=False)
class FileFlag(Flag):
    takes_file: bool = False


def test_subcommand_helper():
    assert fish_subcommand_helper("greet", []) == "__fish_greet_no_subcommand"
    assert (
        fish_subcommand_helper("greet", ["config", "c"])
        == "__fish_seen_subcommand_from config c"
    )


def test_escape_single_quotes_round_trip():
    text = "some 'usage' text"
    escaped = escape_single_quotes(text)
    assert escaped.count("\\'") == text.count("'")
    assert escaped.replace("\\'", "'") == text
    assert escape_single_quotes("plain") == "plain"


def test_file_flag():
    assert fish_add_file_flag(FileFlag(name="socket", takes_file=True)) == ""
    assert fish_add_file_flag(FileFlag(name="socket")) == " -f"
    assert fish_add_file_flag(BoolFlag(name="x")) == " -f"


def test_prepare_fish_flags_bool():
    flag = BoolFlag(name="another-flag", aliases=["b"], usage="another usage text")
    assert prepare_fish_flags("greet", [flag], []) == [
        "complete -c greet -n '__fish_greet_no_subcommand' -f -l another-flag -s b "
        "-d 'another usage text'"
    ]


def test_prepare_fish_flags_value_and_escape():
    flag = FileFlag(name="socket", aliases=["s"], usage="some 'usage' text", takes_file=True)
    (line,) = prepare_fish_flags("greet", [flag], ["config"])
    assert line.startswith("complete -c greet -n '__fish_seen_subcommand_from config'")
    assert " -f" not in line
    assert " -l socket -s s -r" in line
    assert line.endswith(f"-d '{escape_single_quotes(flag.usage)}'")


def test_prepare_fish_flags_skips_non_flags():
    assert prepare_fish_flags("greet", [object(), BoolFlag(name="v")], []) == [
        line for line in prepare_fish_flags("greet", [BoolFlag(name="v")], [])
    ]
    assert len(prepare_fish_flags("greet", [object()], [])) == 0


def test_prepare_fish_commands():
    commands = [
        Command(
            name="config",
            aliases=["c"],
            usage="another usage test",
            flags=[BoolFlag(name="another-flag", aliases=["b"])],
            subcommands=[Command(name="sub-config", aliases=["s", "ss"], hide_help=True)],
        ),
        Command(name="hidden-command", hidden=True),
        Command(name="info", aliases=["i", "in"], hide_help=True),
    ]
    all_commands: list[str] = []
    lines = prepare_fish_commands("greet", commands, all_commands, [])

    assert all_commands == ["config", "c", "sub-config", "s", "ss", "info", "i", "in"]
    assert all("hidden-command" not in line for line in lines)
    assert all(line.startswith("complete ") for line in lines)

    command_lines = [line for line in lines if line.startswith("complete -r -c greet")]
    assert len(command_lines) == 3
    assert "-a 'config c'" in command_lines[0]
    assert command_lines[0].endswith("-d 'another usage test'")
    assert "__fish_seen_subcommand_from config c" in command_lines[1]
    assert "-a 'sub-config s ss'" in command_lines[1]

    help_lines = [line for line in lines if " -l help -s h" in line]
    assert len(help_lines) == 1
    assert "__fish_seen_subcommand_from config c" in help_lines[0]
    assert any(" -l another-flag -s b" in line for line in lines)