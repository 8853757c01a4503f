"""Navigation helpers for the task table."""

from application.context import AppContext


def move_vertical_selection(ctx: AppContext, delta: int) -> None:
    """
    Move the selected row by `delta`, wrapping around both ends of the view.

    An empty view pins the selection to 0.
    """
    total = len(ctx.view())
    if total <= 0:
        ctx.selected_index = 0
        return
    ctx.selected_index = (ctx.selected_index + delta) % total


def ensure_visible(selected: int, offset: int, height: int) -> int:
    """Return a scroll offset that keeps row `selected` inside a window of `height` rows."""
    if height <= 0:
        return 0
    if selected < offset:
        return selected
    if selected >= offset + height:
        return selected - height + 1
    return max(0, offset)


__all__ = ["move_vertical_selection", "ensure_visible"]
