"""Typed commands produced from the command line."""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class Save:
    pass


@dataclass(frozen=True)
class SaveAndQuit:
    pass


@dataclass(frozen=True)
class RenameTask:
    index: int
    content: str


@dataclass(frozen=True)
class DeleteTask:
    index: int


@dataclass(frozen=True)
class SetPriority:
    # Parsed and carried; nothing consumes the value yet.
    index: int
    value: int


@dataclass(frozen=True)
class NewProject:
    name: str


@dataclass(frozen=True)
class OpenProject:
    name: str


@dataclass(frozen=True)
class ToggleShowFinished:
    value: bool


@dataclass(frozen=True)
class ToggleShowToday:
    value: bool


@dataclass(frozen=True)
class NoOp:
    pass


Command = Union[
    Quit,
    Save,
    SaveAndQuit,
    RenameTask,
    DeleteTask,
    SetPriority,
    NewProject,
    OpenProject,
    ToggleShowFinished,
    ToggleShowToday,
    NoOp,
]

__all__ = [
    "Command",
    "Quit",
    "Save",
    "SaveAndQuit",
    "RenameTask",
    "DeleteTask",
    "SetPriority",
    "NewProject",
    "OpenProject",
    "ToggleShowFinished",
    "ToggleShowToday",
    "NoOp",
]
