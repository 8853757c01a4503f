import typing

import pytest

from application.context import AppContext
from application.ports import ProjectRef
from application.sync_service import SyncCoordinator
from application.task_store import TaskStore
from config import ClientConfig
from core import FilterMode, ItemStatus
from interface.keys import BACKSPACE, DOWN, ENTER, ESC, TAB, UP, KeyEvent
from interface import tui_actions
from interface.mode_controller import AppMode, ModeController


class DummyStore:
    def __init__(self):
        self.files = {}

    def list_projects(self):
        return [ProjectRef(name) for name in self.files]

    def fetch(self, project):
        return self.files[project.name]

    def replace(self, project, content):
        self.files[project.name] = content


@pytest.fixture
def ctx():
    tasks = TaskStore()
    sync = SyncCoordinator(DummyStore(), tasks)
    context = AppContext(tasks=tasks, sync=sync, config=ClientConfig(auto_save=False))
    yield context
    sync.shutdown()


def _keys(controller, text):
    for ch in text:
        controller.handle_key(KeyEvent.of(ch))


def _add(controller, text):
    controller.handle_key(KeyEvent.of("i"))
    _keys(controller, text)
    controller.handle_key(ENTER)


def test_insert_then_escape_returns_to_global_with_empty_surface(ctx):
    controller = ModeController(ctx)
    controller.handle_key(KeyEvent.of("i"))
    assert controller.mode == AppMode.INSERT
    assert controller.mode_name == "Insert Mode:"
    _keys(controller, "half")
    assert controller.buffer_text == "half"
    controller.handle_key(ESC)
    assert controller.mode == AppMode.GLOBAL
    assert controller.buffer_text == ""
    assert controller.cursor_column == 0
    controller.handle_key(KeyEvent.of("i"))
    assert controller.buffer_text == ""
    assert len(ctx.tasks) == 0


def test_insert_finished_appends_and_selects_task(ctx):
    controller = ModeController(ctx)
    _add(controller, "one")
    _add(controller, "two")
    assert controller.mode == AppMode.GLOBAL
    assert [item.content for item in ctx.tasks] == ["one", "two"]
    assert ctx.selected_item().content == "two"


def test_colon_enters_command_mode_and_is_forwarded(ctx):
    controller = ModeController(ctx)
    controller.handle_key(KeyEvent.of(":"))
    assert controller.mode == AppMode.COMMAND
    assert controller.buffer_text == ":"
    assert controller.cursor_column == 1
    _keys(controller, "q")
    controller.handle_key(ENTER)
    assert ctx.should_quit


def test_backspace_past_colon_aborts_command(ctx):
    controller = ModeController(ctx)
    controller.handle_key(KeyEvent.of(":"))
    controller.handle_key(BACKSPACE)
    assert controller.mode == AppMode.COMMAND
    controller.handle_key(BACKSPACE)
    assert controller.mode == AppMode.GLOBAL


def test_global_keys_change_status(ctx):
    controller = ModeController(ctx)
    _add(controller, "task")
    controller.handle_key(KeyEvent.of("s"))
    assert ctx.selected_item().status == ItemStatus.STARTED
    controller.handle_key(KeyEvent.of("f"))
    assert ctx.selected_item().status == ItemStatus.FINISHED
    controller.handle_key(KeyEvent.of("w"))
    assert ctx.selected_item().status == ItemStatus.WONT_FIX


def test_global_letters_are_not_inserted(ctx):
    controller = ModeController(ctx)
    _keys(controller, "xyz")
    assert controller.mode == AppMode.GLOBAL
    assert controller.buffer_text == ""
    assert len(ctx.tasks) == 0


def test_selection_wraps_around(ctx):
    controller = ModeController(ctx)
    for text in ("a", "b", "c"):
        _add(controller, text)
    ctx.selected_index = 0
    controller.handle_key(UP)
    assert ctx.selected_index == 2
    controller.handle_key(DOWN)
    assert ctx.selected_index == 0
    controller.handle_key(KeyEvent.of("k"))
    assert ctx.selected_index == 2
    controller.handle_key(KeyEvent.of("j"))
    assert ctx.selected_index == 0


def test_delete_and_paste_register(ctx):
    controller = ModeController(ctx)
    _add(controller, "a")
    _add(controller, "b")
    original = ctx.selected_item()
    controller.handle_key(KeyEvent.ctrl_key("d"))
    assert [item.content for item in ctx.tasks] == ["a"]
    assert ctx.register is not None
    controller.handle_key(KeyEvent.of("p"))
    assert [item.content for item in ctx.tasks] == ["a", "b"]
    assert ctx.selected_item().id != original.id


def test_tab_cycles_filter(ctx):
    controller = ModeController(ctx)
    controller.handle_key(TAB)
    assert ctx.filter == FilterMode.STARTED
    for _ in range(3):
        controller.handle_key(TAB)
    assert ctx.filter == FilterMode.ALL


def test_ctrl_c_quits_from_insert_mode(ctx):
    controller = ModeController(ctx)
    controller.handle_key(KeyEvent.of("i"))
    controller.handle_key(KeyEvent.ctrl_key("c"))
    assert ctx.should_quit


def test_help_toggle_and_q_quit(ctx):
    controller = ModeController(ctx)
    controller.handle_key(KeyEvent.of("?"))
    assert ctx.help_visible
    controller.handle_key(KeyEvent.of("?"))
    assert not ctx.help_visible
    controller.handle_key(KeyEvent.of("q"))
    assert ctx.should_quit


def test_unknown_command_sets_status_message(ctx):
    controller = ModeController(ctx)
    _keys(controller, ":bogus")
    controller.handle_key(ENTER)
    assert controller.mode == AppMode.GLOBAL
    assert "bogus" in ctx.current_status_message()
    assert not ctx.should_quit


def test_auto_save_runs_after_mutation():
    store = DummyStore()
    tasks = TaskStore()
    sync = SyncCoordinator(store, tasks, project=ProjectRef("inbox"))
    context = AppContext(tasks=tasks, sync=sync, config=ClientConfig(auto_save=True))
    controller = ModeController(context)
    _add(controller, "saved automatically")
    assert sync.join(timeout=5)
    assert b"saved automatically" in store.files["inbox"]
    sync.shutdown()


def test_controller_and_actions_take_an_app_context():
    assert typing.get_type_hints(ModeController.__init__)["ctx"] is AppContext
    for name in tui_actions.__all__:
        assert typing.get_type_hints(getattr(tui_actions, name))["ctx"] is AppContext
