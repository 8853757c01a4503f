"""Width-aware trimming and padding for table cells."""

from wcwidth import wcwidth

ELLIPSIS = "…"


def _cell_width(ch: str) -> int:
    # Stored task text may carry control characters; they render as nothing.
    return max(0, wcwidth(ch))


def display_width(text: str) -> int:
    """Return visual width of text accounting for wide/narrow characters."""
    return sum(_cell_width(ch) for ch in text)


def trim_display(text: str, width: int) -> str:
    """Trim text so visible width doesn't exceed `width`, marking the cut with an ellipsis."""
    if width <= 0:
        return ""
    if display_width(text) <= width:
        return text
    acc = []
    used = 0
    limit = width - 1
    for ch in text:
        w = _cell_width(ch)
        if used + w > limit:
            break
        acc.append(ch)
        used += w
    return "".join(acc) + ELLIPSIS


def pad_display(text: str, width: int) -> str:
    """Trim and pad with spaces to exact visible width."""
    trimmed = trim_display(text, width)
    gap = width - display_width(trimmed)
    return trimmed + " " * gap if gap > 0 else trimmed


__all__ = ["display_width", "trim_display", "pad_display"]
