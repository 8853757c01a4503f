"""Library-independent key events and translation from prompt_toolkit presses."""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from prompt_toolkit.key_binding import KeyPress
from prompt_toolkit.keys import Keys


class KeyCode(Enum):
    CHAR = "char"
    ENTER = "enter"
    BACKSPACE = "backspace"
    DELETE = "delete"
    ESC = "esc"
    TAB = "tab"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    HOME = "home"
    END = "end"
    PASTE = "paste"
    OTHER = "other"


@dataclass(frozen=True)
class KeyEvent:
    code: KeyCode
    char: str = ""
    ctrl: bool = False

    @classmethod
    def of(cls, ch: str) -> "KeyEvent":
        return cls(KeyCode.CHAR, ch)

    @classmethod
    def ctrl_key(cls, ch: str) -> "KeyEvent":
        return cls(KeyCode.CHAR, ch.lower(), ctrl=True)

    @classmethod
    def paste(cls, text: str) -> "KeyEvent":
        return cls(KeyCode.PASTE, text)

    def is_char(self, ch: str) -> bool:
        return self.code == KeyCode.CHAR and not self.ctrl and self.char == ch

    def is_ctrl(self, ch: str) -> bool:
        return self.code == KeyCode.CHAR and self.ctrl and self.char == ch


ENTER = KeyEvent(KeyCode.ENTER)
BACKSPACE = KeyEvent(KeyCode.BACKSPACE)
DELETE = KeyEvent(KeyCode.DELETE)
ESC = KeyEvent(KeyCode.ESC)
TAB = KeyEvent(KeyCode.TAB)
LEFT = KeyEvent(KeyCode.LEFT)
RIGHT = KeyEvent(KeyCode.RIGHT)
UP = KeyEvent(KeyCode.UP)
DOWN = KeyEvent(KeyCode.DOWN)

# Enter, Tab and Backspace share codes with c-m, c-i and c-h, so they are
# matched before the generic control-key range.
_NAMED_KEYS = {
    Keys.Enter: ENTER,
    Keys.ControlJ: ENTER,
    Keys.Tab: TAB,
    Keys.Backspace: BACKSPACE,
    Keys.Delete: DELETE,
    Keys.Escape: ESC,
    Keys.Left: LEFT,
    Keys.Right: RIGHT,
    Keys.Up: UP,
    Keys.Down: DOWN,
    Keys.Home: KeyEvent(KeyCode.HOME),
    Keys.End: KeyEvent(KeyCode.END),
}


def key_event_from_press(press: KeyPress) -> KeyEvent:
    key = press.key
    if key == Keys.BracketedPaste:
        return KeyEvent.paste(press.data or "")
    named = _NAMED_KEYS.get(key)
    if named is not None:
        return named
    key_name = key.value if isinstance(key, Keys) else str(key)
    if key_name.startswith("c-") and len(key_name) == 3:
        return KeyEvent.ctrl_key(key_name[2])
    if len(key_name) == 1:
        return KeyEvent.of(key_name)
    return KeyEvent(KeyCode.OTHER, key_name)


def key_events_from_presses(presses: List[KeyPress]) -> List[KeyEvent]:
    return [key_event_from_press(p) for p in presses]


def describe(event: KeyEvent) -> Optional[str]:
    if event.code == KeyCode.CHAR:
        return f"c-{event.char}" if event.ctrl else event.char
    return event.code.value


__all__ = [
    "KeyCode",
    "KeyEvent",
    "ENTER",
    "BACKSPACE",
    "DELETE",
    "ESC",
    "TAB",
    "LEFT",
    "RIGHT",
    "UP",
    "DOWN",
    "key_event_from_press",
    "key_events_from_presses",
    "describe",
]
