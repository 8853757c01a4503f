"""Execution of parsed command-line commands against the application context."""

import logging
from typing import Callable, Dict, Type

from core.commands import (
    Command,
    DeleteTask,
    NewProject,
    NoOp,
    OpenProject,
    Quit,
    RenameTask,
    Save,
    SaveAndQuit,
    SetPriority,
    ToggleShowFinished,
    ToggleShowToday,
)
from application.context import AppContext
from interface.tui_actions import request_quit, save_detached

logger = logging.getLogger("barnacle.tui")


def _no_task(ctx: AppContext, index: int) -> None:
    ctx.set_status_message(f"No task at row {index}")


def handle_quit(ctx: AppContext, cmd: Quit) -> None:
    request_quit(ctx)


def handle_save(ctx: AppContext, cmd: Save) -> None:
    save_detached(ctx)


def handle_save_and_quit(ctx: AppContext, cmd: SaveAndQuit) -> None:
    if ctx.sync.project is None:
        if ctx.unsaved_edits:
            ctx.set_status_message("No project open, edits not saved: :pnew <name> keeps them, :q discards them", ttl=8)
            return
        request_quit(ctx)
        return
    if ctx.sync.save(wait=True):
        request_quit(ctx)
        return
    error = ctx.sync.status.last_error or "save failed"
    ctx.set_status_message(f"{error}; use :q to quit without saving", ttl=8)


def handle_rename(ctx: AppContext, cmd: RenameTask) -> None:
    item = ctx.tasks.resolve(cmd.index, ctx.view_options())
    if item is None:
        _no_task(ctx, cmd.index)
        return
    ctx.tasks.set_content(item.id, cmd.content)
    ctx.after_mutation()


def handle_delete(ctx: AppContext, cmd: DeleteTask) -> None:
    item = ctx.tasks.resolve(cmd.index, ctx.view_options())
    if item is None:
        _no_task(ctx, cmd.index)
        return
    ctx.register = ctx.tasks.remove(item.id)
    ctx.clamp_selection()
    ctx.after_mutation()


def handle_priority(ctx: AppContext, cmd: SetPriority) -> None:
    # Priorities are parsed but not stored on task records.
    logger.debug("priority %s ignored for row %s", cmd.value, cmd.index)


def _save_before_switch(ctx: AppContext) -> bool:
    if ctx.sync.project is None or ctx.sync.save(wait=True):
        return True
    error = ctx.sync.status.last_error or "save failed"
    ctx.set_status_message(f"{error}; project not switched", ttl=8)
    return False


def _remember_project(ctx: AppContext) -> None:
    ctx.selected_index = 0
    ctx.unsaved_edits = False
    ctx.config.current_project = ctx.project_name
    ctx.persist_config()


def handle_new_project(ctx: AppContext, cmd: NewProject) -> None:
    # Edits made before any project existed move into the new one.
    adopt = ctx.sync.project is None and ctx.unsaved_edits
    if not _save_before_switch(ctx):
        return
    ref = ctx.sync.create_project(cmd.name)
    if ref is None:
        ctx.set_status_message(ctx.sync.status.last_error or f"Could not create {cmd.name}", ttl=6)
        return
    ctx.sync.project = ref
    saved = True
    if adopt:
        saved = ctx.sync.save(wait=True)
    else:
        ctx.tasks.replace_all([])
    _remember_project(ctx)
    if saved:
        ctx.set_status_message(f"Created project {ref.name}")
    else:
        ctx.set_status_message(f"Created {ref.name} but saving tasks failed: {ctx.sync.status.last_error}", ttl=8)


def handle_open_project(ctx: AppContext, cmd: OpenProject) -> None:
    ref = ctx.sync.find_project(cmd.name)
    if ref is None:
        ctx.set_status_message(ctx.sync.status.last_error or f"No project named {cmd.name}", ttl=6)
        return
    if not _save_before_switch(ctx):
        return
    items = ctx.sync.load(ref)
    if items is None:
        ctx.set_status_message(ctx.sync.status.last_error or f"Could not open {cmd.name}", ttl=6)
        return
    _remember_project(ctx)
    ctx.set_status_message(f"Opened {ref.name} ({len(items)} tasks)")


def handle_show_finished(ctx: AppContext, cmd: ToggleShowFinished) -> None:
    ctx.config.show_finished = cmd.value
    ctx.clamp_selection()
    ctx.persist_config()


def handle_show_today(ctx: AppContext, cmd: ToggleShowToday) -> None:
    ctx.config.show_today = cmd.value
    ctx.clamp_selection()
    ctx.persist_config()


def handle_noop(ctx: AppContext, cmd: NoOp) -> None:
    return None


HANDLERS: Dict[Type, Callable] = {
    Quit: handle_quit,
    Save: handle_save,
    SaveAndQuit: handle_save_and_quit,
    RenameTask: handle_rename,
    DeleteTask: handle_delete,
    SetPriority: handle_priority,
    NewProject: handle_new_project,
    OpenProject: handle_open_project,
    ToggleShowFinished: handle_show_finished,
    ToggleShowToday: handle_show_today,
    NoOp: handle_noop,
}


def dispatch_command(ctx: AppContext, cmd: Command, line: str = "") -> None:
    if isinstance(cmd, NoOp) and line.strip():
        ctx.set_status_message(f"Not a command: {line.strip()}")
        return
    HANDLERS[type(cmd)](ctx, cmd)


__all__ = ["HANDLERS", "dispatch_command"]
