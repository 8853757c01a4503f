"""Single-key actions of Global mode, kept out of the controller."""

from typing import Callable, Optional

from application.context import AppContext
from core import WorkItem, next_filter


def _with_selected(ctx: AppContext, action: Callable[[str], Optional[WorkItem]], message: str) -> None:
    item = ctx.selected_item()
    if item is None:
        return
    action(item.id)
    ctx.select_task(item.id)
    ctx.set_status_message(message.format(content=item.content))
    ctx.after_mutation()


def start_selected(ctx: AppContext) -> None:
    _with_selected(ctx, ctx.tasks.start, "Started: {content}")


def finish_selected(ctx: AppContext) -> None:
    _with_selected(ctx, ctx.tasks.finish, "Finished: {content}")


def wont_fix_selected(ctx: AppContext) -> None:
    _with_selected(ctx, ctx.tasks.wont_fix, "Won't fix: {content}")


def delete_selected(ctx: AppContext) -> None:
    item = ctx.selected_item()
    if item is None:
        return
    removed = ctx.tasks.remove(item.id)
    if removed is None:
        return
    ctx.register = removed
    ctx.clamp_selection()
    ctx.set_status_message(f"Deleted: {removed.content} (p to paste)")
    ctx.after_mutation()


def paste_register(ctx: AppContext) -> None:
    if ctx.register is None:
        ctx.set_status_message("Nothing to paste")
        return
    pasted = ctx.tasks.paste(ctx.register)
    ctx.select_task(pasted.id)
    ctx.after_mutation()


def append_task(ctx: AppContext, content: str) -> WorkItem:
    item = ctx.tasks.append(content)
    ctx.select_task(item.id)
    ctx.after_mutation()
    return item


def reload_project(ctx: AppContext) -> None:
    if ctx.sync.project is None:
        ctx.set_status_message("No project open (:popen <name> or :pnew <name>)")
        return
    items = ctx.sync.load()
    if items is None:
        ctx.set_status_message(ctx.sync.status.last_error or "Reload failed", ttl=6)
        return
    ctx.clamp_selection()
    ctx.set_status_message(f"Reloaded {len(items)} tasks from {ctx.project_name}")


def save_detached(ctx: AppContext) -> None:
    if ctx.sync.save(wait=False):
        ctx.set_status_message(f"Saving {ctx.project_name}…")
    else:
        ctx.set_status_message(ctx.sync.status.last_error or "Save failed", ttl=6)


def cycle_filter(ctx: AppContext) -> None:
    current = ctx.selected_item()
    ctx.filter = next_filter(ctx.filter)
    if current is not None:
        ctx.select_task(current.id)
    else:
        ctx.clamp_selection()


def toggle_help(ctx: AppContext) -> None:
    ctx.help_visible = not ctx.help_visible


def request_quit(ctx: AppContext) -> None:
    ctx.should_quit = True


__all__ = [
    "start_selected",
    "finish_selected",
    "wont_fix_selected",
    "delete_selected",
    "paste_register",
    "append_task",
    "reload_project",
    "save_detached",
    "cycle_filter",
    "toggle_help",
    "request_quit",
]
