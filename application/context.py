"""Application state shared by the key controller, command handlers and renderer."""

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from application.sync_service import SyncCoordinator
from application.task_store import TaskStore, ViewOptions
from config import ClientConfig
from core import FilterMode, WorkItem

logger = logging.getLogger("barnacle.tui")

DEFAULT_STATUS_TTL = 4.0


@dataclass
class AppContext:
    tasks: TaskStore
    sync: SyncCoordinator
    config: ClientConfig = field(default_factory=ClientConfig)
    config_writer: Optional[Callable[[ClientConfig], None]] = None
    selected_index: int = 0
    filter: FilterMode = FilterMode.ALL
    register: Optional[WorkItem] = None
    status_message: str = ""
    status_expires: float = 0.0
    should_quit: bool = False
    help_visible: bool = False
    unsaved_edits: bool = False
    clock: Callable[[], float] = time.monotonic

    @property
    def project_name(self) -> Optional[str]:
        return self.sync.project_name

    def view_options(self) -> ViewOptions:
        return ViewOptions(
            filter=self.filter,
            show_finished=self.config.show_finished,
            show_today=self.config.show_today,
        )

    def view(self) -> List[WorkItem]:
        return self.tasks.view(self.view_options())

    def selected_item(self) -> Optional[WorkItem]:
        return self.tasks.resolve(self.selected_index, self.view_options())

    def clamp_selection(self) -> None:
        total = len(self.view())
        self.selected_index = max(0, min(self.selected_index, total - 1)) if total else 0

    def select_task(self, task_id: str) -> None:
        position = self.tasks.position_in_view(task_id, self.view_options())
        if position is not None:
            self.selected_index = position
        else:
            self.clamp_selection()

    def set_status_message(self, message: str, ttl: float = DEFAULT_STATUS_TTL) -> None:
        self.status_message = message
        self.status_expires = self.clock() + ttl

    def current_status_message(self) -> str:
        if self.status_message and self.clock() >= self.status_expires:
            self.status_message = ""
        return self.status_message

    def persist_config(self) -> None:
        if self.config_writer is None:
            return
        try:
            self.config_writer(self.config)
        except OSError as exc:
            logger.warning("failed to write config: %s", exc)
            self.set_status_message(f"config not saved: {exc}")

    def after_mutation(self) -> None:
        """Launch a detached save when auto-save is on; flag edits with no project to hold them."""
        if self.sync.project is None:
            self.unsaved_edits = True
        elif self.config.auto_save:
            self.sync.save(wait=False)


__all__ = ["AppContext", "DEFAULT_STATUS_TTL"]
