"""Modal key routing: Global, Insert and Command modes."""

from enum import Enum
from typing import Callable, Dict, Optional

from application.context import AppContext
from interface.command_handlers import dispatch_command
from interface.command_parser import COMMAND_PREFIX, parse_command
from interface.edit_surface import Aborted, EditSurface, Finished
from interface.keys import KeyCode, KeyEvent
from interface.tui_actions import (
    append_task,
    cycle_filter,
    delete_selected,
    finish_selected,
    paste_register,
    reload_project,
    request_quit,
    save_detached,
    start_selected,
    toggle_help,
    wont_fix_selected,
)
from interface.tui_navigation import move_vertical_selection


class AppMode(Enum):
    GLOBAL = "Global"
    INSERT = "Insert"
    COMMAND = "Command"

    @property
    def title(self) -> str:
        return f"{self.value} Mode:"


def _move(delta: int) -> Callable:
    return lambda ctx: move_vertical_selection(ctx, delta)


GLOBAL_CHAR_ACTIONS: Dict[str, Callable] = {
    "s": start_selected,
    "f": finish_selected,
    "w": wont_fix_selected,
    "d": delete_selected,
    "p": paste_register,
    "r": reload_project,
    "o": save_detached,
    "k": _move(-1),
    "j": _move(1),
    "?": toggle_help,
    "q": request_quit,
}

GLOBAL_CODE_ACTIONS: Dict[KeyCode, Callable] = {
    KeyCode.UP: _move(-1),
    KeyCode.DOWN: _move(1),
    KeyCode.TAB: cycle_filter,
}


class ModeController:
    """Routes key events to the active edit surface or to Global actions.

    Both surfaces persist for the lifetime of the controller; leaving a mode
    through Escape clears its surface, leaving through Enter has already
    cleared it.
    """

    def __init__(self, ctx: AppContext) -> None:
        self.ctx = ctx
        self.mode = AppMode.GLOBAL
        self.insert_surface = EditSurface("insert")
        self.command_surface = EditSurface("command")

    @property
    def mode_name(self) -> str:
        return self.mode.title

    @property
    def active_surface(self) -> Optional[EditSurface]:
        if self.mode == AppMode.INSERT:
            return self.insert_surface
        if self.mode == AppMode.COMMAND:
            return self.command_surface
        return None

    @property
    def cursor_column(self) -> int:
        surface = self.active_surface
        return surface.cursor_column if surface else 0

    @property
    def buffer_text(self) -> str:
        surface = self.active_surface
        return surface.text if surface else ""

    def handle_key(self, event: KeyEvent) -> None:
        if event.is_ctrl("c"):
            request_quit(self.ctx)
            return
        if self.ctx.should_quit:
            return
        surface = self.active_surface
        if surface is None:
            self._handle_global(event)
            return
        if event.code == KeyCode.ESC:
            surface.clear()
            self.mode = AppMode.GLOBAL
            return
        result = surface.handle_key(event)
        if isinstance(result, Aborted):
            self.mode = AppMode.GLOBAL
        elif isinstance(result, Finished):
            finished_mode = self.mode
            self.mode = AppMode.GLOBAL
            if finished_mode == AppMode.INSERT:
                append_task(self.ctx, result.text)
            else:
                dispatch_command(self.ctx, parse_command(result.text), result.text)

    def _handle_global(self, event: KeyEvent) -> None:
        if event.is_char("i"):
            self.mode = AppMode.INSERT
            return
        if event.is_char(COMMAND_PREFIX):
            self.mode = AppMode.COMMAND
            self.command_surface.handle_key(event)
            return
        if event.is_ctrl("d"):
            delete_selected(self.ctx)
            return
        action = None
        if event.code == KeyCode.CHAR and not event.ctrl:
            action = GLOBAL_CHAR_ACTIONS.get(event.char)
        elif event.code in GLOBAL_CODE_ACTIONS:
            action = GLOBAL_CODE_ACTIONS[event.code]
        if action is not None:
            action(self.ctx)


__all__ = ["AppMode", "ModeController", "GLOBAL_CHAR_ACTIONS", "GLOBAL_CODE_ACTIONS"]
