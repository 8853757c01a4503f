from datetime import date, datetime, timedelta

import pytest

from application.task_store import TaskStore, ViewOptions
from core import FILTER_CYCLE, FilterMode, ItemStatus, WorkItem, next_filter


def _store(*contents):
    store = TaskStore()
    items = [store.append(text) for text in contents]
    return store, items


def test_finished_filter_shows_only_finished():
    store, (a, b, c) = _store("a", "b", "c")
    store.finish(b.id)
    store.start(c.id)
    view = store.view(ViewOptions(filter=FilterMode.FINISHED))
    assert [item.id for item in view] == [b.id]


def test_all_view_sorts_by_status_stably():
    store, items = _store("n1", "s1", "f1", "w1", "n2", "s2")
    by_name = {item.content: item for item in items}
    store.start(by_name["s1"].id)
    store.start(by_name["s2"].id)
    store.finish(by_name["f1"].id)
    store.wont_fix(by_name["w1"].id)
    view = [item.content for item in store.view(ViewOptions())]
    assert view == ["n1", "n2", "s1", "s2", "f1", "w1"]
    assert [item.content for item in store.items] == ["n1", "s1", "f1", "w1", "n2", "s2"]


def test_start_clears_finished_timestamp():
    item = WorkItem("x")
    item.finish()
    assert item.finished_time is not None
    item.start()
    assert item.status == ItemStatus.STARTED
    assert item.finished_time is None
    assert item.started_time is not None


def test_finish_after_wont_fix_is_allowed():
    item = WorkItem("x")
    item.wont_fix()
    item.finish()
    assert item.status == ItemStatus.FINISHED


def test_resolve_out_of_range_returns_none():
    store, _ = _store("only")
    assert store.resolve(5) is None
    assert store.resolve(-1) is None
    assert store.resolve(0).content == "only"


def test_mutations_on_unknown_id_are_noops():
    store, _ = _store("a")
    assert store.start("missing") is None
    assert store.remove("missing") is None


def test_insert_rejects_duplicate_ids():
    store, (a,) = _store("a")
    with pytest.raises(ValueError):
        store.insert(WorkItem("dup", id=a.id))


def test_paste_assigns_fresh_id():
    store, (a,) = _store("a")
    removed = store.remove(a.id)
    pasted = store.paste(removed)
    again = store.paste(removed)
    assert pasted.content == "a"
    assert len({pasted.id, again.id, a.id}) == 3


def test_snapshot_is_independent_copy():
    store, (a,) = _store("a")
    snap = store.snapshot()
    store.set_content(a.id, "changed")
    store.append("b")
    assert [item.content for item in snap] == ["a"]


def test_show_finished_false_hides_done_tasks_in_all_view():
    store, (a, b, c) = _store("a", "b", "c")
    store.finish(b.id)
    store.wont_fix(c.id)
    hidden = ViewOptions(show_finished=False)
    assert [item.id for item in store.view(hidden)] == [a.id]
    explicit = ViewOptions(filter=FilterMode.FINISHED, show_finished=False)
    assert [item.id for item in store.view(explicit)] == [b.id]


def test_show_today_limits_to_recent_activity():
    today = date(2024, 5, 10)
    old = WorkItem("old", created_time=datetime(2024, 5, 1, 9, 0, 0))
    touched = WorkItem("touched", created_time=datetime(2024, 5, 1, 9, 0, 0), started_time=datetime(2024, 5, 10, 8, 0, 0))
    fresh = WorkItem("fresh", created_time=datetime(2024, 5, 10, 7, 0, 0))
    store = TaskStore([old, touched, fresh])
    view = store.view(ViewOptions(show_today=True, today=today))
    assert [item.content for item in view] == ["touched", "fresh"]


def test_filter_cycle_wraps():
    assert next_filter(FilterMode.ALL) == FilterMode.STARTED
    assert next_filter(FILTER_CYCLE[-1]) == FilterMode.ALL
    assert next_filter(FilterMode.ALL, -1) == FilterMode.WONT_FIX


def test_age_days_counts_whole_days():
    item = WorkItem("x", created_time=datetime(2024, 1, 1, 12, 0, 0))
    assert item.age_days(datetime(2024, 1, 4, 11, 0, 0)) == 2
    assert item.age_days(datetime(2024, 1, 1, 12, 0, 0) + timedelta(days=7)) == 7
