"""Status bar builder for BarnacleTUI."""

from dataclasses import asdict
from typing import List, Tuple

from prompt_toolkit.formatted_text import FormattedText

from application.context import AppContext
from core import ItemStatus
from util.sync_status import sync_status_fragments


def build_status_text(ctx: AppContext, store_label: str) -> FormattedText:
    items = ctx.view()
    started = sum(1 for t in items if t.status == ItemStatus.STARTED)
    finished = sum(1 for t in items if t.status == ItemStatus.FINISHED)
    project = ctx.project_name or "—"

    parts: List[Tuple[str, str]] = [
        ("class:header", f" {project} "),
        ("class:border", "│ "),
        ("class:text", f"{ctx.filter.label} "),
        ("class:text.dim", f"{len(items)} shown · {started} started · {finished} finished "),
    ]
    if not ctx.config.show_finished:
        parts.append(("class:text.dim", "· finished hidden "))
    if ctx.config.show_today:
        parts.append(("class:text.dim", "· today "))
    parts.append(("class:border", "│ "))
    snapshot = asdict(ctx.sync.status)
    parts.extend(sync_status_fragments(snapshot, store_label, ctx.project_name is not None))
    message = ctx.current_status_message()
    if message:
        parts.append(("class:border", " │ "))
        parts.append(("class:icon.warn", message))
    return FormattedText(parts)


__all__ = ["build_status_text"]
