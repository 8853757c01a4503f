"""Remote load/save of the whole task collection for the current project."""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor, wait
from dataclasses import dataclass, replace
from datetime import datetime
from threading import Lock
from typing import List, Optional, Set

from application.ports import ProjectRef, RemoteStore
from application.task_store import TaskStore
from core import WorkItem
from infrastructure.task_codec import EMPTY_DOCUMENT, decode_items, encode_items

logger = logging.getLogger("barnacle.sync")

STATUS_TIME_FORMAT = "%H:%M:%S"


@dataclass
class SyncStatus:
    last_pull: Optional[str] = None
    last_push: Optional[str] = None
    last_error: str = ""
    in_flight: int = 0


class SyncCoordinator:
    """Owns remote I/O for one TaskStore.

    Loads always block. Every save takes a snapshot on the calling thread and
    is queued on a single worker, so writes land in submission order and a
    blocking save (``wait=True``) is never overtaken by an older detached
    one. Failures are logged and recorded in :attr:`status`; nothing raised
    by the store escapes.
    """

    def __init__(
        self,
        remote: RemoteStore,
        tasks: TaskStore,
        project: Optional[ProjectRef] = None,
    ) -> None:
        self.remote = remote
        self.tasks = tasks
        self.project = project
        # One worker: queued saves must reach the store in order.
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="barnacle-save")
        self._pending: Set[Future] = set()
        self._lock = Lock()
        self._status = SyncStatus()
        self._closed = False

    @property
    def status(self) -> SyncStatus:
        with self._lock:
            return replace(self._status, in_flight=len(self._pending))

    @property
    def project_name(self) -> Optional[str]:
        return self.project.name if self.project else None

    def list_projects(self) -> List[ProjectRef]:
        try:
            return list(self.remote.list_projects())
        except Exception as exc:
            self._report("list projects", exc)
            return []

    def find_project(self, name: str) -> Optional[ProjectRef]:
        for ref in self.list_projects():
            if ref.name == name:
                return ref
        return None

    def load(self, project: Optional[ProjectRef] = None) -> Optional[List[WorkItem]]:
        target = project or self.project
        if target is None:
            self._set_error("no project selected")
            return None
        try:
            items = decode_items(self.remote.fetch(target))
        except Exception as exc:
            self._report(f"load {target.name}", exc)
            return None
        self.tasks.replace_all(items)
        self.project = target
        with self._lock:
            self._status.last_pull = _stamp()
            self._status.last_error = ""
        logger.info("loaded %d tasks from %s", len(items), target.name)
        return items

    def create_project(self, name: str) -> Optional[ProjectRef]:
        """Create an empty project file and return its reference."""
        ref = ProjectRef(name)
        try:
            self.remote.replace(ref, EMPTY_DOCUMENT)
        except Exception as exc:
            self._report(f"create {name}", exc)
            return None
        return self.find_project(name) or ref

    def save(self, wait: bool = False) -> bool:
        """Write the whole collection to the current project.

        With ``wait`` the call returns once this write and every save queued
        before it have finished, and reports the result of this write.
        Without it, True means the save was queued; its outcome shows up in
        :attr:`status`.
        """
        project = self.project
        if project is None:
            self._set_error("no project selected")
            return False
        snapshot = self.tasks.snapshot()
        future: Optional[Future] = None
        with self._lock:
            if not self._closed:
                future = self._executor.submit(self._write, project, snapshot)
                self._pending.add(future)
            elif not wait:
                self._status.last_error = "save skipped: shutting down"
                return False
        if future is None:
            # Executor is gone; drain anything still running, then write here.
            self.join()
            return self._write(project, snapshot)
        future.add_done_callback(self._forget)
        if wait:
            return future.result()
        return True

    def pending(self) -> int:
        with self._lock:
            return len(self._pending)

    def join(self, timeout: Optional[float] = None) -> bool:
        """Wait for detached saves; True when none remain outstanding."""
        with self._lock:
            futures = list(self._pending)
        if not futures:
            return True
        _, not_done = wait(futures, timeout=timeout)
        return not not_done

    def shutdown(self, timeout: Optional[float] = None) -> bool:
        with self._lock:
            self._closed = True
        finished = self.join(timeout)
        self._executor.shutdown(wait=finished)
        if not finished:
            logger.warning("exiting with %d save(s) still in flight", self.pending())
        return finished

    def _write(self, project: ProjectRef, items: List[WorkItem]) -> bool:
        try:
            self.remote.replace(project, encode_items(items))
        except Exception as exc:
            self._report(f"save {project.name}", exc)
            return False
        with self._lock:
            self._status.last_push = _stamp()
            self._status.last_error = ""
        logger.info("saved %d tasks to %s", len(items), project.name)
        return True

    def _forget(self, future: Future) -> None:
        with self._lock:
            self._pending.discard(future)

    def _report(self, action: str, exc: Exception) -> None:
        logger.warning("%s failed: %s", action, exc)
        self._set_error(f"{action} failed: {exc}")

    def _set_error(self, message: str) -> None:
        with self._lock:
            self._status.last_error = message[:120]


def _stamp() -> str:
    return datetime.now().strftime(STATUS_TIME_FORMAT)


__all__ = ["SyncCoordinator", "SyncStatus"]
