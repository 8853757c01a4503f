"""Single-line editable text with a width-aware cursor."""

from typing import List

from util.text_width import char_width


class TextBuffer:
    """Characters plus an insertion point tracked in characters and in cells.

    `cursor_column` is always the summed display width of the characters
    before `insertion_index`; every mutator updates both together.
    """

    def __init__(self, text: str = "") -> None:
        self._chars: List[str] = []
        self._index = 0
        self._column = 0
        for ch in text:
            self.insert(ch)

    @property
    def text(self) -> str:
        return "".join(self._chars)

    @property
    def insertion_index(self) -> int:
        return self._index

    @property
    def cursor_column(self) -> int:
        return self._column

    def __len__(self) -> int:
        return len(self._chars)

    def at_end(self) -> bool:
        return self._index == len(self._chars)

    def insert(self, ch: str) -> None:
        if len(ch) != 1:
            raise ValueError(f"insert expects a single character, got {ch!r}")
        width = char_width(ch)
        self._chars.insert(self._index, ch)
        self._index += 1
        self._column += width

    def delete_before(self) -> bool:
        """Remove the character left of the cursor.

        Returns False when the buffer is empty (nothing to delete; the owning
        surface should close). At the start of a non-empty buffer this is a
        no-op that still returns True.
        """
        if not self._chars:
            return False
        if self._index == 0:
            return True
        width = char_width(self._chars[self._index - 1])
        del self._chars[self._index - 1]
        self._index -= 1
        self._column -= width
        return True

    def delete_at_cursor(self) -> None:
        if self._index < len(self._chars):
            del self._chars[self._index]

    def move_left(self) -> None:
        if self._index == 0:
            return
        self._column -= char_width(self._chars[self._index - 1])
        self._index -= 1

    def move_right(self) -> None:
        if self._index >= len(self._chars):
            return
        self._column += char_width(self._chars[self._index])
        self._index += 1

    def clear(self) -> None:
        self._chars = []
        self._index = 0
        self._column = 0

    def jump_to_start(self) -> None:
        self._index = 0
        self._column = 0

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        return f"TextBuffer(text={self.text!r}, index={self._index}, column={self._column})"


__all__ = ["TextBuffer"]
