from prompt_toolkit.key_binding import KeyPress
from prompt_toolkit.keys import Keys

from interface.keys import ENTER, ESC, TAB, KeyCode, KeyEvent, describe, key_event_from_press, key_events_from_presses


def test_named_keys_translate_before_control_range():
    assert key_event_from_press(KeyPress(Keys.ControlM, "\r")) == ENTER
    assert key_event_from_press(KeyPress(Keys.ControlI, "\t")) == TAB
    assert key_event_from_press(KeyPress(Keys.Escape, "\x1b")) == ESC
    assert key_event_from_press(KeyPress(Keys.ControlH, "\x08")).code == KeyCode.BACKSPACE


def test_control_and_plain_characters():
    assert key_event_from_press(KeyPress(Keys.ControlU, "\x15")) == KeyEvent.ctrl_key("u")
    assert key_event_from_press(KeyPress("x", "x")) == KeyEvent.of("x")
    assert key_event_from_press(KeyPress("中", "中")).is_char("中")


def test_paste_and_unknown_keys():
    assert key_event_from_press(KeyPress(Keys.BracketedPaste, "abc")) == KeyEvent.paste("abc")
    other = key_event_from_press(KeyPress(Keys.F5, ""))
    assert other.code == KeyCode.OTHER
    assert describe(other) == "other"


def test_batch_translation_and_describe():
    events = key_events_from_presses([KeyPress("a", "a"), KeyPress(Keys.ControlA, "\x01")])
    assert [describe(e) for e in events] == ["a", "c-a"]
