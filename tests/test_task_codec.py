import json
from datetime import datetime

import pytest

from core import ItemStatus, WorkItem
from infrastructure.task_codec import EMPTY_DOCUMENT, TaskCodecError, decode_items, encode_items


def test_encode_uses_wire_labels_and_timestamp_format():
    item = WorkItem("buy milk", id="abc", created_time=datetime(2024, 3, 1, 8, 30, 0))
    item.status = ItemStatus.WONT_FIX
    payload = json.loads(encode_items([item]).decode("utf-8"))
    assert payload == [
        {
            "id": "abc",
            "content": "buy milk",
            "status": "WontFix",
            "created_time": "2024-03-01 08:30:00",
            "started_time": None,
            "finished_time": None,
        }
    ]


def test_decode_accepts_legacy_status_and_missing_id():
    raw = json.dumps(
        [
            {"content": "a", "status": "NotStarted", "created_time": "2024-01-02 03:04:05"},
            {"id": "x", "content": "b", "status": "Finished", "finished_time": "2024-01-03 00:00:00"},
        ]
    ).encode("utf-8")
    items = decode_items(raw)
    assert items[0].status == ItemStatus.NOT_STARTED
    assert items[0].id
    assert items[0].created_time == datetime(2024, 1, 2, 3, 4, 5)
    assert items[1].finished_time == datetime(2024, 1, 3)


def test_decode_reissues_duplicate_ids():
    raw = json.dumps([{"id": "same", "content": "a"}, {"id": "same", "content": "b"}])
    items = decode_items(raw.encode("utf-8"))
    assert items[0].id == "same"
    assert items[1].id != "same"


def test_empty_documents_are_empty_projects():
    assert decode_items(EMPTY_DOCUMENT) == []
    assert decode_items(b"") == []
    assert decode_items(b"  \n") == []


@pytest.mark.parametrize("raw", [b"{not json", b'{"a": 1}', b'[1, 2]', b'[{"status": "Paused"}]'])
def test_decode_rejects_malformed_documents(raw):
    with pytest.raises(TaskCodecError):
        decode_items(raw)


def test_unicode_content_survives():
    item = WorkItem("купить 中文")
    assert decode_items(encode_items([item]))[0].content == "купить 中文"
