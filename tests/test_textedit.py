import pytest

from surfcad.textedit import Key, TextEditState
from surfcad.textedit_layout import StringBuffer


def type_text(state, buf, s):
    for ch in s:
        state.key(buf, ch)


def test_typing_inserts_and_moves_cursor():
    buf = StringBuffer()
    state = TextEditState()
    type_text(state, buf, "abc")
    assert buf.text == "abc"
    assert state.cursor == len("abc")


def test_undo_and_redo_round_trip():
    buf = StringBuffer()
    state = TextEditState()
    type_text(state, buf, "abc")
    state.key(buf, Key.UNDO)
    assert buf.text == "ab"
    assert state.cursor == len("ab")
    state.key(buf, Key.REDO)
    assert buf.text == "abc"
    assert state.cursor == len("abc")


def test_undo_without_history_keeps_text_and_cursor():
    buf = StringBuffer("abc")
    state = TextEditState()
    state.key(buf, Key.TEXTEND)
    state.key(buf, Key.UNDO)
    assert buf.text == "abc"
    assert state.cursor == len(buf)


def test_backspace_and_delete():
    buf = StringBuffer("abc")
    state = TextEditState()
    state.key(buf, Key.TEXTEND)
    state.key(buf, Key.BACKSPACE)
    assert buf.text == "ab"
    state.key(buf, Key.TEXTSTART)
    state.key(buf, Key.DELETE)
    assert buf.text == "b"
    assert state.cursor == 0


def test_insert_mode_replaces_and_undoes():
    buf = StringBuffer("abc")
    state = TextEditState()
    state.key(buf, Key.INSERT)
    assert state.insert_mode is True
    state.key(buf, "X")
    assert buf.text == "Xbc"
    state.key(buf, Key.UNDO)
    assert buf.text == "abc"


def test_shift_selection_cut_and_undo():
    buf = StringBuffer("hello")
    state = TextEditState()
    state.key(buf, Key.TEXTEND)
    state.key(buf, Key.LEFT | Key.SHIFT)
    state.key(buf, Key.LEFT | Key.SHIFT)
    assert state.has_selection()
    assert state.cut(buf) is True
    assert buf.text == "hel"
    assert state.cursor == len("hel")
    assert state.cut(buf) is False
    state.key(buf, Key.UNDO)
    assert buf.text == "hello"


def test_paste_replaces_selection():
    buf = StringBuffer("hello")
    state = TextEditState()
    state.key(buf, Key.TEXTEND)
    state.key(buf, Key.LEFT | Key.SHIFT)
    state.key(buf, Key.LEFT | Key.SHIFT)
    assert state.paste(buf, "p!") is True
    assert buf.text == "help!"
    assert state.cursor == len(buf)
    assert not state.has_selection()


def test_single_line_rejects_newline_and_up_moves_left():
    buf = StringBuffer("ab")
    state = TextEditState(single_line=True)
    state.key(buf, Key.TEXTEND)
    state.key(buf, "\n")
    assert buf.text == "ab"
    state.key(buf, Key.UP)
    assert state.cursor == len(buf) - 1


def test_down_and_up_keep_column():
    buf = StringBuffer("abc\ndef")
    state = TextEditState()
    state.key(buf, Key.RIGHT)
    state.key(buf, Key.RIGHT)
    start = state.cursor
    state.key(buf, Key.DOWN)
    assert state.cursor == buf.text.index("d") + start
    state.key(buf, Key.UP)
    assert state.cursor == start


def test_down_on_last_line_does_nothing():
    buf = StringBuffer("abc\ndef")
    state = TextEditState()
    state.key(buf, Key.TEXTEND)
    state.key(buf, Key.DOWN)
    assert state.cursor == len(buf)


def test_line_start_and_end():
    buf = StringBuffer("abc\ndef")
    state = TextEditState()
    state.key(buf, Key.LINEEND)
    assert state.cursor == buf.text.index("\n")
    state.key(buf, Key.TEXTEND)
    state.key(buf, Key.LINESTART)
    assert state.cursor == buf.text.index("d")


def test_click_and_drag_select():
    buf = StringBuffer("hello")
    state = TextEditState()
    state.click(buf, 2.2, 0.5)
    assert state.cursor == 2
    state.drag(buf, 4.2, 0.5)
    assert (state.select_start, state.select_end) == (2, 4)
    assert state.cursor == 4


def test_word_right_jumps_to_next_word():
    buf = StringBuffer("foo bar")
    state = TextEditState()
    state.key(buf, Key.WORDRIGHT)
    assert state.cursor == buf.text.index("b")
    state.key(buf, Key.WORDLEFT)
    assert state.cursor == 0


def test_clamp_limits_cursor():
    buf = StringBuffer("abc")
    state = TextEditState()
    state.cursor = 10
    state.clamp(buf)
    assert state.cursor == len(buf)


def test_multi_character_string_key_rejected():
    buf = StringBuffer()
    state = TextEditState()
    with pytest.raises(ValueError):
        state.key(buf, "ab")