import pytest

from surfcad.textedit_layout import (
    NEWLINE_WIDTH,
    FindState,
    StringBuffer,
    find_charpos,
    locate_coord,
    move_word_left,
    move_word_right,
)

W = 10.0
H = 20.0


def make(text):
    return StringBuffer(text, W, H)


def test_invalid_metrics_rejected():
    with pytest.raises(ValueError):
        StringBuffer("abc", 0, H)
    with pytest.raises(ValueError):
        StringBuffer("abc", W, -1)


def test_layout_row_includes_newline():
    buf = make("ab\ncd")
    first = buf.layout_row(0)
    assert first.num_chars == len("ab\n")
    assert first.x1 == 2 * W
    assert first.ymax - first.ymin == H
    second = buf.layout_row(len("ab\n"))
    assert second.num_chars == len("cd")
    assert buf.layout_row(len(buf)).num_chars == 0


def test_newline_width():
    buf = make("a\nb")
    assert buf.get_width(0, 1) == NEWLINE_WIDTH
    assert buf.get_width(0, 0) == W


def test_insert_delete_round_trip():
    buf = make("hello")
    assert buf.insert_chars(2, "XY") is True
    assert buf.text == "heXYllo"
    buf.delete_chars(2, 2)
    assert buf.text == "hello"
    assert buf.get_char(1) == "e"


def test_locate_above_text_and_below():
    buf = make("ab\ncd")
    assert locate_coord(buf, 5 * W, -1.0) == 0
    assert locate_coord(buf, 0.0, 10 * H) == len(buf)


def test_locate_rounds_to_nearest_boundary():
    buf = make("abcd")
    assert locate_coord(buf, 1 * W + 0.25 * W, H / 2) == 1
    assert locate_coord(buf, 1 * W + 0.75 * W, H / 2) == 2


def test_locate_past_line_end_stops_before_newline():
    buf = make("ab\ncd")
    assert locate_coord(buf, 50 * W, H / 2) == buf.text.index("\n")
    assert locate_coord(buf, 50 * W, H + H / 2) == len(buf)


@pytest.mark.parametrize("text", ["ab\ncd", "one\n\ntwo three", "ab\n", "x"])
def test_find_charpos_locate_round_trip(text):
    buf = make(text)
    for n in range(len(buf) + 1):
        fs = find_charpos(buf, n, False)
        assert fs.height == H
        assert locate_coord(buf, fs.x + 0.1 * W, fs.y + H / 2) == n


def test_find_charpos_previous_row():
    buf = make("ab\ncd")
    fs = find_charpos(buf, len("ab\nc"), False)
    assert fs.first_char == len("ab\n")
    assert fs.prev_first == 0
    assert fs.y == H


def test_find_charpos_single_line_end():
    buf = make("abc")
    fs = find_charpos(buf, len(buf), True)
    assert fs == FindState(x=3 * W, y=0.0, height=H, first_char=0, length=3, prev_first=0)


def test_move_word_right_and_left():
    text = "hello world"
    buf = make(text)
    world = text.index("world")
    assert move_word_right(buf, 0) == world
    assert move_word_right(buf, world) == len(text)
    assert move_word_left(buf, len(text)) == world
    assert move_word_left(buf, world) == 0
    assert move_word_left(buf, 0) == 0