from interface import tui_navigation


class DummyContext:
    def __init__(self, rows, selected=0):
        self.rows = list(range(rows))
        self.selected_index = selected

    def view(self):
        return self.rows


def test_move_vertical_selection_wraps_both_ways():
    ctx = DummyContext(3, selected=2)
    tui_navigation.move_vertical_selection(ctx, 1)
    assert ctx.selected_index == 0
    tui_navigation.move_vertical_selection(ctx, -1)
    assert ctx.selected_index == 2


def test_move_vertical_selection_list_empty():
    ctx = DummyContext(0, selected=7)
    tui_navigation.move_vertical_selection(ctx, 1)
    assert ctx.selected_index == 0


def test_ensure_visible_scrolls_window():
    assert tui_navigation.ensure_visible(0, 0, 5) == 0
    assert tui_navigation.ensure_visible(7, 0, 5) == 3
    assert tui_navigation.ensure_visible(2, 4, 5) == 2
    assert tui_navigation.ensure_visible(5, 3, 5) == 3
    assert tui_navigation.ensure_visible(3, 1, 0) == 0
