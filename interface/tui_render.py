"""Task table rendering for BarnacleTUI."""

from datetime import datetime
from typing import List, Optional, Tuple

from application.context import AppContext
from core import ItemStatus, WorkItem
from interface.constants import NO_VALUE, STARTED_FORMAT, TABLE_COLUMNS
from interface.tui_display import pad_display
from interface.tui_navigation import ensure_visible

ID_WIDTH = 4
STARTED_WIDTH = 16
DAYS_WIDTH = 5
MIN_CONTENT_WIDTH = 10

Fragments = List[Tuple[str, str]]


def started_cell(item: WorkItem) -> str:
    return item.started_time.strftime(STARTED_FORMAT) if item.started_time else NO_VALUE


def days_cell(item: WorkItem, now: Optional[datetime] = None) -> str:
    if item.status == ItemStatus.FINISHED:
        return NO_VALUE
    return str(item.age_days(now))


def content_width(total_width: int) -> int:
    fixed = ID_WIDTH + STARTED_WIDTH + DAYS_WIDTH + 3
    return max(MIN_CONTENT_WIDTH, total_width - fixed)


def format_row(index: int, item: WorkItem, width: int, now: Optional[datetime] = None) -> str:
    cells = [
        pad_display(str(index), ID_WIDTH),
        pad_display(f"{item.status.icon} {item.content}", content_width(width)),
        pad_display(started_cell(item), STARTED_WIDTH),
        pad_display(days_cell(item, now), DAYS_WIDTH),
    ]
    return " ".join(cells)


def format_header(width: int) -> str:
    ident, content, started, days = TABLE_COLUMNS
    return " ".join(
        [
            pad_display(ident, ID_WIDTH),
            pad_display(content, content_width(width)),
            pad_display(started, STARTED_WIDTH),
            pad_display(days, DAYS_WIDTH),
        ]
    )


def table_title(ctx: AppContext) -> str:
    project = ctx.project_name or "no project"
    return f"{project}({ctx.filter.label}):"


def build_table_fragments(
    ctx: AppContext,
    width: int,
    height: int,
    offset: int = 0,
    now: Optional[datetime] = None,
) -> Tuple[Fragments, int]:
    """Return the table fragments and the scroll offset used to draw them.

    `height` counts every line including the title and header rows.
    """
    items = ctx.view()
    rows_height = max(1, height - 2)
    # A shrunken view must not leave blank rows under the last task.
    offset = min(offset, max(0, len(items) - rows_height))
    offset = ensure_visible(ctx.selected_index, offset, rows_height)
    fragments: Fragments = [
        ("class:title", table_title(ctx) + "\n"),
        ("class:header", format_header(width) + "\n"),
    ]
    if not items:
        fragments.append(("class:text.dim", "  no tasks, press i to add one"))
        return fragments, 0
    visible = items[offset : offset + rows_height]
    for pos, item in enumerate(visible, start=offset):
        style = f"class:{item.status.style}"
        if pos == ctx.selected_index:
            style = f"{style} class:selected"
        fragments.append((style, format_row(pos, item, width, now)))
        if pos < offset + len(visible) - 1:
            fragments.append(("", "\n"))
    return fragments, offset


__all__ = [
    "build_table_fragments",
    "content_width",
    "days_cell",
    "format_header",
    "format_row",
    "started_cell",
    "table_title",
]
