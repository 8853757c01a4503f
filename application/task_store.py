"""In-memory task collection and view derivation."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Callable, Iterator, List, Optional

from core import FilterMode, ItemStatus, WorkItem, new_item_id

_HIDDEN_WHEN_NOT_SHOWING_FINISHED = (ItemStatus.FINISHED, ItemStatus.WONT_FIX)


@dataclass
class ViewOptions:
    filter: FilterMode = FilterMode.ALL
    show_finished: bool = True
    show_today: bool = False
    today: date = field(default_factory=date.today)

    def accepts(self, item: WorkItem) -> bool:
        if not item.is_visible(self.filter):
            return False
        if (
            self.filter == FilterMode.ALL
            and not self.show_finished
            and item.status in _HIDDEN_WHEN_NOT_SHOWING_FINISHED
        ):
            return False
        if self.show_today and not item.touched_on(self.today):
            return False
        return True


class TaskStore:
    """Ordered task records.

    Storage order is insertion order. Views are filtered and stably sorted
    by status rank; view indices always go through :meth:`view`.
    """

    def __init__(self, items: Optional[List[WorkItem]] = None) -> None:
        self._items: List[WorkItem] = list(items or [])

    @property
    def items(self) -> List[WorkItem]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[WorkItem]:
        return iter(list(self._items))

    def append(self, content: str) -> WorkItem:
        item = WorkItem(content=content, id=self._fresh_id())
        self._items.append(item)
        return item

    def insert(self, item: WorkItem) -> WorkItem:
        if self.find(item.id) is not None:
            raise ValueError(f"duplicate task id: {item.id}")
        self._items.append(item)
        return item

    def paste(self, template: WorkItem) -> WorkItem:
        """Append a copy of `template` under a fresh identifier."""
        copy = template.clone()
        copy.id = self._fresh_id()
        self._items.append(copy)
        return copy

    def remove(self, task_id: str) -> Optional[WorkItem]:
        for idx, item in enumerate(self._items):
            if item.id == task_id:
                return self._items.pop(idx)
        return None

    def find(self, task_id: str) -> Optional[WorkItem]:
        for item in self._items:
            if item.id == task_id:
                return item
        return None

    def mutate(self, task_id: str, action: Callable[[WorkItem], None]) -> Optional[WorkItem]:
        item = self.find(task_id)
        if item is not None:
            action(item)
        return item

    def start(self, task_id: str) -> Optional[WorkItem]:
        return self.mutate(task_id, WorkItem.start)

    def finish(self, task_id: str) -> Optional[WorkItem]:
        return self.mutate(task_id, WorkItem.finish)

    def wont_fix(self, task_id: str) -> Optional[WorkItem]:
        return self.mutate(task_id, WorkItem.wont_fix)

    def set_content(self, task_id: str, content: str) -> Optional[WorkItem]:
        def _apply(item: WorkItem) -> None:
            item.content = content

        return self.mutate(task_id, _apply)

    def view(self, options: Optional[ViewOptions] = None) -> List[WorkItem]:
        opts = options or ViewOptions()
        visible = [item for item in self._items if opts.accepts(item)]
        return sorted(visible, key=lambda item: item.status.rank)

    def resolve(self, view_index: int, options: Optional[ViewOptions] = None) -> Optional[WorkItem]:
        current = self.view(options)
        if 0 <= view_index < len(current):
            return current[view_index]
        return None

    def position_in_view(self, task_id: str, options: Optional[ViewOptions] = None) -> Optional[int]:
        for idx, item in enumerate(self.view(options)):
            if item.id == task_id:
                return idx
        return None

    def replace_all(self, items: List[WorkItem]) -> None:
        self._items = list(items)

    def snapshot(self) -> List[WorkItem]:
        return [item.clone() for item in self._items]

    def _fresh_id(self) -> str:
        while True:
            candidate = new_item_id()
            if self.find(candidate) is None:
                return candidate


__all__ = ["TaskStore", "ViewOptions"]
