"""Editable input line shared by the insert bar and the command bar."""

from dataclasses import dataclass
from typing import Union

from core.text_buffer import TextBuffer
from interface.keys import KeyCode, KeyEvent
from util.text_width import has_defined_width


@dataclass(frozen=True)
class StillEditing:
    pass


@dataclass(frozen=True)
class Aborted:
    pass


@dataclass(frozen=True)
class Finished:
    text: str


EditResult = Union[StillEditing, Aborted, Finished]

STILL_EDITING = StillEditing()
ABORTED = Aborted()


class EditSurface:
    """TextBuffer plus the keystroke policy of a single-line input.

    Enter hands the content back as ``Finished`` and resets the buffer;
    Backspace on an empty buffer yields ``Aborted`` so the owner can close
    the surface. Every other key leaves the surface active.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self.buffer = TextBuffer()

    @property
    def text(self) -> str:
        return self.buffer.text

    @property
    def cursor_column(self) -> int:
        return self.buffer.cursor_column

    def clear(self) -> None:
        self.buffer.clear()

    def handle_key(self, event: KeyEvent) -> EditResult:
        buf = self.buffer
        code = event.code
        if code == KeyCode.CHAR and not event.ctrl:
            if has_defined_width(event.char):
                buf.insert(event.char)
        elif code == KeyCode.PASTE:
            for ch in event.char:
                if has_defined_width(ch):
                    buf.insert(ch)
        elif code == KeyCode.ENTER:
            content = buf.text
            buf.clear()
            return Finished(content)
        elif code == KeyCode.BACKSPACE:
            if not buf.delete_before():
                return ABORTED
        elif code == KeyCode.DELETE:
            if not buf.at_end():
                buf.delete_at_cursor()
        elif event.is_ctrl("u"):
            buf.clear()
        elif event.is_ctrl("a"):
            buf.jump_to_start()
        elif code == KeyCode.LEFT:
            buf.move_left()
        elif code == KeyCode.RIGHT:
            buf.move_right()
        return STILL_EDITING


__all__ = ["EditSurface", "EditResult", "StillEditing", "Aborted", "Finished"]
