from enum import Enum
from typing import Final, List, Optional


class ItemStatus(Enum):
    """Task status; value is (wire label, display rank, style class, icon)."""

    NOT_STARTED = ("UnStarted", 0, "status.todo", "○")
    STARTED = ("Started", 1, "status.started", "●")
    FINISHED = ("Finished", 2, "status.finished", "✓")
    WONT_FIX = ("WontFix", 3, "status.wontfix", "✗")

    @property
    def label(self) -> str:
        return self.value[0]

    @property
    def rank(self) -> int:
        return self.value[1]

    @property
    def style(self) -> str:
        return self.value[2]

    @property
    def icon(self) -> str:
        return self.value[3]

    @classmethod
    def from_string(cls, value: str) -> "ItemStatus":
        token = (value or "").strip().replace("_", "").replace(" ", "").lower()
        token = _STATUS_ALIASES.get(token, token)
        for status in cls:
            if status.label.lower() == token:
                return status
        raise ValueError(f"Invalid task status: {value!r}")


_STATUS_ALIASES: Final = {
    "notstarted": "unstarted",
    "todo": "unstarted",
    "active": "started",
    "done": "finished",
    "wontdo": "wontfix",
}


class FilterMode(Enum):
    ALL = ("All", None)
    STARTED = ("Started", ItemStatus.STARTED)
    FINISHED = ("Finished", ItemStatus.FINISHED)
    WONT_FIX = ("WontFix", ItemStatus.WONT_FIX)

    @property
    def label(self) -> str:
        return self.value[0]

    @property
    def status(self) -> Optional[ItemStatus]:
        return self.value[1]

    def accepts(self, status: ItemStatus) -> bool:
        return self.status is None or self.status == status


FILTER_CYCLE: Final[List[FilterMode]] = [
    FilterMode.ALL,
    FilterMode.STARTED,
    FilterMode.FINISHED,
    FilterMode.WONT_FIX,
]


def next_filter(current: FilterMode, step: int = 1) -> FilterMode:
    """Return the filter `step` positions after `current` in FILTER_CYCLE."""
    idx = FILTER_CYCLE.index(current)
    return FILTER_CYCLE[(idx + step) % len(FILTER_CYCLE)]


def filter_from_string(value: str) -> FilterMode:
    token = (value or "").strip().replace("_", "").lower()
    for mode in FILTER_CYCLE:
        if mode.label.lower() == token:
            return mode
    raise ValueError(f"Invalid filter: {value!r}")
