"""prompt_toolkit front end: one key handler feeding the ModeController."""

import logging
import os
from typing import Optional

from prompt_toolkit.application import Application
from prompt_toolkit.data_structures import Point
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.containers import DynamicContainer
from prompt_toolkit.layout.controls import FormattedTextControl

from application.context import AppContext
from interface.keys import key_event_from_press
from interface.mode_controller import ModeController
from interface.tui_footer import build_help_text, build_input_text, build_mode_title
from interface.tui_render import build_table_fragments
from interface.tui_status import build_status_text
from interface.tui_themes import DEFAULT_THEME, build_style

logger = logging.getLogger("barnacle.tui")

# Rows outside the table: mode title, input line, status bar.
CHROME_HEIGHT = 3

# The default bindings swallow these keys with exact-match no-ops, so they
# need exact bindings of their own to reach the controller.
ROUTED_KEYS = (
    "enter",
    "c-j",
    "escape",
    "backspace",
    "delete",
    "tab",
    "left",
    "right",
    "up",
    "down",
    "home",
    "end",
    "c-a",
    "c-c",
    "c-d",
    "c-u",
    Keys.BracketedPaste,
)


class BarnacleTUI:
    def __init__(self, ctx: AppContext, store_label: str = "local", theme: str = DEFAULT_THEME, input=None, output=None):
        self.ctx = ctx
        self.controller = ModeController(ctx)
        self.store_label = store_label
        self.table_offset = 0
        self.style = build_style(theme)

        kb = KeyBindings()
        kb.timeout = 0
        for key in ROUTED_KEYS:
            kb.add(key, eager=True)(self._on_key)
        kb.add(Keys.Any, eager=True)(self._on_key)
        self.key_bindings = kb

        self.table_window = Window(content=FormattedTextControl(self.get_table_text), always_hide_cursor=True, wrap_lines=False)
        self.help_window = Window(content=FormattedTextControl(self.get_help_text), always_hide_cursor=True)
        self.body_container = DynamicContainer(lambda: self.help_window if self.ctx.help_visible else self.table_window)
        self.mode_title = Window(content=FormattedTextControl(lambda: build_mode_title(self.controller)), height=1)
        self.input_control = FormattedTextControl(
            self.get_input_text,
            focusable=True,
            show_cursor=True,
            get_cursor_position=lambda: Point(x=self.controller.cursor_column, y=0),
        )
        self.input_window = Window(content=self.input_control, height=1, wrap_lines=False)
        self.status_bar = Window(content=FormattedTextControl(self.get_status_text), height=1, always_hide_cursor=True)

        root = HSplit([self.body_container, self.mode_title, self.input_window, self.status_bar])
        self.app = Application(
            layout=Layout(root, focused_element=self.input_window),
            key_bindings=kb,
            style=self.style,
            full_screen=True,
            refresh_interval=1.0,
            input=input,
            output=output,
        )
        # Standalone Escape must not wait for the default 0.5s sequence timeout.
        try:
            self.app.ttimeoutlen = max(0.0, float(os.getenv("BARNACLE_TUI_TTIMEOUTLEN", "0.05")))
        except ValueError:
            self.app.ttimeoutlen = 0.05

    def _on_key(self, event) -> None:
        for press in event.key_sequence:
            self.controller.handle_key(key_event_from_press(press))
        if self.ctx.should_quit:
            event.app.exit()

    def terminal_size(self):
        size = self.app.output.get_size()
        return size.columns, size.rows

    def get_table_text(self) -> FormattedText:
        width, rows = self.terminal_size()
        fragments, self.table_offset = build_table_fragments(
            self.ctx, width, max(3, rows - CHROME_HEIGHT), self.table_offset
        )
        return FormattedText(fragments)

    def get_help_text(self) -> FormattedText:
        width, _ = self.terminal_size()
        return build_help_text(width)

    def get_input_text(self) -> FormattedText:
        return build_input_text(self.controller)

    def get_status_text(self) -> FormattedText:
        return build_status_text(self.ctx, self.store_label)

    def force_render(self) -> None:
        self.app.invalidate()

    def run(self) -> None:
        logger.info("tui started (project=%s)", self.ctx.project_name)
        self.app.run()


__all__ = ["BarnacleTUI", "ROUTED_KEYS"]
