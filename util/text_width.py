from wcwidth import wcwidth


class UndefinedWidthError(ValueError):
    """Raised for characters the terminal has no defined width for."""


def char_width(ch: str) -> int:
    """Return the number of terminal cells `ch` occupies.

    Control characters have no defined width; asking for one is a bug in the
    caller, so it raises instead of silently returning zero.
    """
    w = wcwidth(ch)
    if w < 0:
        raise UndefinedWidthError(f"character {ch!r} has no defined display width")
    return w


def has_defined_width(ch: str) -> bool:
    return wcwidth(ch) >= 0


def text_width(text: str) -> int:
    return sum(char_width(ch) for ch in text)


__all__ = ["UndefinedWidthError", "char_width", "has_defined_width", "text_width"]
