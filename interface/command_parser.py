"""Command-line grammar: ``:<name> [args...]`` -> typed command.

Every input has a parse. Unknown names, empty lines and malformed
arguments all become ``NoOp``.
"""

from typing import Callable, Dict, List, Optional

from core.commands import (
    Command,
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

COMMAND_PREFIX = ":"
RENAME_PLACEHOLDER = "untitled"

_TRUE_TOKENS = {"true", "on", "yes", "1"}
_FALSE_TOKENS = {"false", "off", "no", "0"}


def _index(token: Optional[str]) -> Optional[int]:
    if token is None:
        return None
    try:
        value = int(token)
    except ValueError:
        return None
    return value if value >= 0 else None


def _integer(token: Optional[str]) -> Optional[int]:
    if token is None:
        return None
    try:
        return int(token)
    except ValueError:
        return None


def _boolean(token: Optional[str]) -> Optional[bool]:
    if token is None:
        return None
    lowered = token.lower()
    if lowered in _TRUE_TOKENS:
        return True
    if lowered in _FALSE_TOKENS:
        return False
    return None


def _arg(args: List[str], pos: int) -> Optional[str]:
    return args[pos] if pos < len(args) else None


def _rename(args: List[str]) -> Command:
    index = _index(_arg(args, 0))
    if index is None:
        return NoOp()
    tail = " ".join(args[1:])
    return RenameTask(index, tail or RENAME_PLACEHOLDER)


def _delete(args: List[str]) -> Command:
    index = _index(_arg(args, 0))
    return NoOp() if index is None else DeleteTask(index)


def _priority(args: List[str]) -> Command:
    index = _index(_arg(args, 0))
    value = _integer(_arg(args, 1))
    if index is None or value is None:
        return NoOp()
    return SetPriority(index, value)


def _project(factory: Callable[[str], Command]) -> Callable[[List[str]], Command]:
    def build(args: List[str]) -> Command:
        name = _arg(args, 0)
        return factory(name) if name else NoOp()

    return build


def _toggle(factory: Callable[[bool], Command]) -> Callable[[List[str]], Command]:
    def build(args: List[str]) -> Command:
        value = _boolean(_arg(args, 0))
        return NoOp() if value is None else factory(value)

    return build


COMMANDS: Dict[str, Callable[[List[str]], Command]] = {
    "q": lambda args: Quit(),
    "quit": lambda args: Quit(),
    "w": lambda args: Save(),
    "save": lambda args: Save(),
    "wq": lambda args: SaveAndQuit(),
    "x": lambda args: SaveAndQuit(),
    "tmod": _rename,
    "tdel": _delete,
    "tpri": _priority,
    "pnew": _project(NewProject),
    "popen": _project(OpenProject),
    "sfin": _toggle(ToggleShowFinished),
    "stoday": _toggle(ToggleShowToday),
}


def parse_command(line: str) -> Command:
    tokens = (line or "").split()
    if not tokens:
        return NoOp()
    head, args = tokens[0], tokens[1:]
    if head.startswith(COMMAND_PREFIX):
        head = head[len(COMMAND_PREFIX):]
    builder = COMMANDS.get(head)
    if builder is None:
        return NoOp()
    return builder(args)


__all__ = ["COMMANDS", "COMMAND_PREFIX", "RENAME_PLACEHOLDER", "parse_command"]
