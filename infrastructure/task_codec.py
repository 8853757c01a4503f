"""JSON wire format for a project's task list."""

import json
from typing import Iterable, List

from core import WorkItem

EMPTY_DOCUMENT = b"[]"


class TaskCodecError(ValueError):
    pass


def encode_items(items: Iterable[WorkItem]) -> bytes:
    payload = [item.to_dict() for item in items]
    return json.dumps(payload, ensure_ascii=False, indent=2).encode("utf-8")


def decode_items(raw: bytes) -> List[WorkItem]:
    """Parse a project document.

    An empty document is an empty project. Records missing an id get a
    fresh one; duplicated ids are re-issued so identifiers stay unique.
    """
    text = raw.decode("utf-8") if isinstance(raw, (bytes, bytearray)) else str(raw)
    if not text.strip():
        return []
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise TaskCodecError(f"project document is not valid JSON: {exc}") from exc
    if not isinstance(data, list):
        raise TaskCodecError("project document must be a JSON list")
    items: List[WorkItem] = []
    seen = set()
    for entry in data:
        try:
            item = WorkItem.from_dict(entry)
        except ValueError as exc:
            raise TaskCodecError(f"invalid task record: {exc}") from exc
        if item.id in seen:
            item = WorkItem.from_dict({**entry, "id": None})
        seen.add(item.id)
        items.append(item)
    return items


__all__ = ["EMPTY_DOCUMENT", "TaskCodecError", "encode_items", "decode_items"]
