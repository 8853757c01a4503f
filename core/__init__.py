from .status import FILTER_CYCLE, FilterMode, ItemStatus, filter_from_string, next_filter
from .text_buffer import TextBuffer
from .work_item import TIMESTAMP_FORMAT, WorkItem, new_item_id

__all__ = [
    "FILTER_CYCLE",
    "FilterMode",
    "ItemStatus",
    "filter_from_string",
    "next_filter",
    "TextBuffer",
    "TIMESTAMP_FORMAT",
    "WorkItem",
    "new_item_id",
]
