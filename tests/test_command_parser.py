import pytest

from core.commands import (
    DeleteTask,
    NewProject,
    NoOp,
    OpenProject,
    Quit,
    RenameTask,
    Save,
    SaveAndQuit,
    SetPriority,
    ToggleShowFinished,
    ToggleShowToday,
)
from interface.command_parser import RENAME_PLACEHOLDER, parse_command


@pytest.mark.parametrize(
    "line, expected",
    [
        (":q", Quit()),
        (":quit", Quit()),
        (":w", Save()),
        (":save", Save()),
        (":wq", SaveAndQuit()),
        (":x", SaveAndQuit()),
        (":tmod 2 buy milk", RenameTask(2, "buy milk")),
        (":tmod 0   spaced    out  ", RenameTask(0, "spaced out")),
        (":tdel 3", DeleteTask(3)),
        (":tpri 1 -5", SetPriority(1, -5)),
        (":pnew groceries", NewProject("groceries")),
        (":popen work", OpenProject("work")),
        (":sfin off", ToggleShowFinished(False)),
        (":sfin TRUE", ToggleShowFinished(True)),
        (":stoday yes", ToggleShowToday(True)),
        (":stoday 0", ToggleShowToday(False)),
        ("q", Quit()),
    ],
)
def test_parse_known_commands(line, expected):
    assert parse_command(line) == expected


def test_rename_without_text_uses_placeholder():
    assert parse_command(":tmod 4") == RenameTask(4, RENAME_PLACEHOLDER)
    assert RENAME_PLACEHOLDER == "untitled"


@pytest.mark.parametrize(
    "line",
    [
        "",
        "   ",
        ":",
        ":bogus",
        ":tmod",
        ":tmod x text",
        ":tmod -1 text",
        ":tdel",
        ":tdel two",
        ":tpri 1",
        ":tpri 1 high",
        ":pnew",
        ":popen",
        ":sfin",
        ":sfin maybe",
        ":stoday 2",
    ],
)
def test_malformed_input_is_noop(line):
    assert parse_command(line) == NoOp()


def test_parser_accepts_none():
    assert parse_command(None) == NoOp()
