import uuid
from dataclasses import dataclass, field, replace
from datetime import date, datetime
from typing import Any, Dict, Optional

from .status import FilterMode, ItemStatus

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def new_item_id() -> str:
    return uuid.uuid4().hex


def _now() -> datetime:
    # Whole seconds only: the wire format has no sub-second precision.
    return datetime.now().replace(microsecond=0)


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    return value.strftime(TIMESTAMP_FORMAT) if value else None


def parse_timestamp(value: Any) -> Optional[datetime]:
    if not value:
        return None
    if isinstance(value, datetime):
        return value
    raw = str(value).strip()
    try:
        return datetime.strptime(raw, TIMESTAMP_FORMAT)
    except ValueError:
        return datetime.fromisoformat(raw)


@dataclass
class WorkItem:
    """A single task."""

    content: str
    id: str = field(default_factory=new_item_id)
    status: ItemStatus = ItemStatus.NOT_STARTED
    created_time: datetime = field(default_factory=_now)
    started_time: Optional[datetime] = None
    finished_time: Optional[datetime] = None

    def start(self) -> None:
        self.started_time = _now()
        self.status = ItemStatus.STARTED
        self.finished_time = None

    def finish(self) -> None:
        self.finished_time = _now()
        self.status = ItemStatus.FINISHED

    def wont_fix(self) -> None:
        self.status = ItemStatus.WONT_FIX

    def is_visible(self, mode: FilterMode) -> bool:
        return mode.accepts(self.status)

    def touched_on(self, day: date) -> bool:
        """True when the task was created, started or finished on `day`."""
        stamps = (self.created_time, self.started_time, self.finished_time)
        return any(ts is not None and ts.date() == day for ts in stamps)

    def age_days(self, now: Optional[datetime] = None) -> int:
        return ((now or datetime.now()) - self.created_time).days

    def clone(self) -> "WorkItem":
        return replace(self)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "content": self.content,
            "status": self.status.label,
            "created_time": format_timestamp(self.created_time),
            "started_time": format_timestamp(self.started_time),
            "finished_time": format_timestamp(self.finished_time),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WorkItem":
        if not isinstance(data, dict):
            raise ValueError(f"task record must be an object, got {type(data).__name__}")
        created = parse_timestamp(data.get("created_time")) or _now()
        return cls(
            content=str(data.get("content") or ""),
            id=str(data.get("id") or new_item_id()),
            status=ItemStatus.from_string(str(data.get("status") or ItemStatus.NOT_STARTED.label)),
            created_time=created,
            started_time=parse_timestamp(data.get("started_time")),
            finished_time=parse_timestamp(data.get("finished_time")),
        )


__all__ = ["WorkItem", "TIMESTAMP_FORMAT", "new_item_id", "format_timestamp", "parse_timestamp"]
