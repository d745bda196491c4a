"""Keyboard and mouse editing of a text buffer with undo support.

The edited text is any object offering ``len()``, ``layout_row``,
``get_width``, ``get_char``, ``delete_chars`` and ``insert_chars``, such as
:class:`surfcad.textedit_layout.StringBuffer`.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Sequence

from surfcad.textedit_layout import (
    NEWLINE,
    NEWLINE_WIDTH,
    find_charpos,
    locate_coord,
    move_word_left,
    move_word_right,
)
from surfcad.textedit_undo import UndoState

_FIRST_CONTROL_KEY = 0x200000


class Key(IntEnum):
    """Control keys; combine a key with ``Key.SHIFT`` to extend the selection.

    Plain integers below ``Key.LEFT`` are treated as character codes.
    """

    LEFT = _FIRST_CONTROL_KEY
    RIGHT = _FIRST_CONTROL_KEY + 1
    UP = _FIRST_CONTROL_KEY + 2
    DOWN = _FIRST_CONTROL_KEY + 3
    PGUP = _FIRST_CONTROL_KEY + 4
    PGDOWN = _FIRST_CONTROL_KEY + 5
    LINESTART = _FIRST_CONTROL_KEY + 6
    LINEEND = _FIRST_CONTROL_KEY + 7
    TEXTSTART = _FIRST_CONTROL_KEY + 8
    TEXTEND = _FIRST_CONTROL_KEY + 9
    DELETE = _FIRST_CONTROL_KEY + 10
    BACKSPACE = _FIRST_CONTROL_KEY + 11
    UNDO = _FIRST_CONTROL_KEY + 12
    REDO = _FIRST_CONTROL_KEY + 13
    INSERT = _FIRST_CONTROL_KEY + 14
    WORDLEFT = _FIRST_CONTROL_KEY + 15
    WORDRIGHT = _FIRST_CONTROL_KEY + 16
    SHIFT = 0x400000


class TextEditState:
    """Cursor, selection, insert mode and undo history of one text field."""

    def __init__(self, single_line: bool = False) -> None:
        self.single_line = bool(single_line)
        self.cursor = 0
        self.select_start = 0
        self.select_end = 0
        self.insert_mode = False
        self.row_count_per_page = 0
        self.has_preferred_x = False
        self.preferred_x = 0.0
        self.undo_state = UndoState()

    # -- selection helpers -------------------------------------------------

    def has_selection(self) -> bool:
        """Whether some text is selected."""
        return self.select_start != self.select_end

    def clamp(self, text: Any) -> None:
        """Keep the cursor and selection within the text."""
        n = len(text)
        if self.has_selection():
            self.select_start = min(self.select_start, n)
            self.select_end = min(self.select_end, n)
            if self.select_start == self.select_end:
                self.cursor = self.select_start
        if self.cursor > n:
            self.cursor = n

    def _delete(self, text: Any, where: int, length: int) -> None:
        self.undo_state.make_delete(text, where, length)
        text.delete_chars(where, length)
        self.has_preferred_x = False

    def _delete_selection(self, text: Any) -> None:
        self.clamp(text)
        if not self.has_selection():
            return
        if self.select_start < self.select_end:
            self._delete(text, self.select_start, self.select_end - self.select_start)
            self.select_end = self.cursor = self.select_start
        else:
            self._delete(text, self.select_end, self.select_start - self.select_end)
            self.select_start = self.cursor = self.select_end
        self.has_preferred_x = False

    def _sort_selection(self) -> None:
        if self.select_end < self.select_start:
            self.select_start, self.select_end = self.select_end, self.select_start

    def _move_to_first(self) -> None:
        if self.has_selection():
            self._sort_selection()
            self.cursor = self.select_start
            self.select_end = self.select_start
            self.has_preferred_x = False

    def _move_to_last(self, text: Any) -> None:
        if self.has_selection():
            self._sort_selection()
            self.clamp(text)
            self.cursor = self.select_end
            self.select_start = self.select_end
            self.has_preferred_x = False

    def _prep_selection_at_cursor(self) -> None:
        if not self.has_selection():
            self.select_start = self.select_end = self.cursor
        else:
            self.cursor = self.select_end

    # -- mouse -------------------------------------------------------------

    def _row_y(self, text: Any, y: float) -> float:
        if self.single_line:
            return text.layout_row(0).ymin
        return y

    def click(self, text: Any, x: float, y: float) -> None:
        """Place the cursor at the clicked point and clear the selection."""
        y = self._row_y(text, y)
        self.cursor = locate_coord(text, x, y)
        self.select_start = self.select_end = self.cursor
        self.has_preferred_x = False

    def drag(self, text: Any, x: float, y: float) -> None:
        """Extend the selection to the dragged-to point."""
        y = self._row_y(text, y)
        if self.select_start == self.select_end:
            self.select_start = self.cursor
        p = locate_coord(text, x, y)
        self.cursor = self.select_end = p

    # -- clipboard ---------------------------------------------------------

    def cut(self, text: Any) -> bool:
        """Delete the selection; returns whether there was one."""
        if self.has_selection():
            self._delete_selection(text)
            self.has_preferred_x = False
            return True
        return False

    def paste(self, text: Any, chars: Sequence[Any]) -> bool:
        """Insert ``chars`` at the cursor, replacing any selection."""
        chars = list(chars)
        self.clamp(text)
        self._delete_selection(text)
        if text.insert_chars(self.cursor, chars):
            self.undo_state.make_insert(self.cursor, len(chars))
            self.cursor += len(chars)
            self.has_preferred_x = False
            return True
        return False

    # -- keyboard ----------------------------------------------------------

    @staticmethod
    def _key_to_char(key: int | str) -> str | None:
        if isinstance(key, str):
            if len(key) != 1:
                raise ValueError("a character key must be a single character")
            return key if ord(key) > 0 else None
        if 0 < key < _FIRST_CONTROL_KEY:
            return chr(key)
        return None

    def _insert_char(self, text: Any, ch: str) -> None:
        if ch == "\n" and self.single_line:
            return
        if self.insert_mode and not self.has_selection() and self.cursor < len(text):
            self.undo_state.make_replace(text, self.cursor, 1, 1)
            text.delete_chars(self.cursor, 1)
            if text.insert_chars(self.cursor, [ch]):
                self.cursor += 1
                self.has_preferred_x = False
        else:
            self._delete_selection(text)
            if text.insert_chars(self.cursor, [ch]):
                self.undo_state.make_insert(self.cursor, 1)
                self.cursor += 1
                self.has_preferred_x = False

    def key(self, text: Any, key: int | str) -> None:
        """Apply one key press: a character to insert or a :class:`Key`."""
        ch = self._key_to_char(key)
        if ch is not None:
            self._insert_char(text, ch)
            return
        if isinstance(key, str):
            return
        shift = bool(key & Key.SHIFT)
        base = key & ~Key.SHIFT

        if not shift and base == Key.INSERT:
            self.insert_mode = not self.insert_mode
        elif not shift and base == Key.UNDO:
            cursor = self.undo_state.undo(text)
            if cursor is not None:
                self.cursor = cursor
            self.has_preferred_x = False
        elif not shift and base == Key.REDO:
            cursor = self.undo_state.redo(text)
            if cursor is not None:
                self.cursor = cursor
            self.has_preferred_x = False
        elif base == Key.LEFT:
            self._key_left(text, shift)
        elif base == Key.RIGHT:
            self._key_right(text, shift)
        elif base == Key.WORDLEFT:
            self._key_word(text, shift, move_word_left, left=True)
        elif base == Key.WORDRIGHT:
            self._key_word(text, shift, move_word_right, left=False)
        elif base in (Key.DOWN, Key.PGDOWN):
            self._key_down(text, shift, base == Key.PGDOWN)
        elif base in (Key.UP, Key.PGUP):
            self._key_up(text, shift, base == Key.PGUP)
        elif base == Key.DELETE:
            if self.has_selection():
                self._delete_selection(text)
            elif self.cursor < len(text):
                self._delete(text, self.cursor, 1)
            self.has_preferred_x = False
        elif base == Key.BACKSPACE:
            if self.has_selection():
                self._delete_selection(text)
            else:
                self.clamp(text)
                if self.cursor > 0:
                    self._delete(text, self.cursor - 1, 1)
                    self.cursor -= 1
            self.has_preferred_x = False
        elif base == Key.TEXTSTART:
            if shift:
                self._prep_selection_at_cursor()
                self.cursor = self.select_end = 0
            else:
                self.cursor = self.select_start = self.select_end = 0
            self.has_preferred_x = False
        elif base == Key.TEXTEND:
            if shift:
                self._prep_selection_at_cursor()
                self.cursor = self.select_end = len(text)
            else:
                self.cursor = len(text)
                self.select_start = self.select_end = 0
            self.has_preferred_x = False
        elif base == Key.LINESTART:
            self.clamp(text)
            if shift:
                self._prep_selection_at_cursor()
            else:
                self._move_to_first()
            if self.single_line:
                self.cursor = 0
            else:
                while self.cursor > 0 and text.get_char(self.cursor - 1) != NEWLINE:
                    self.cursor -= 1
            if shift:
                self.select_end = self.cursor
            self.has_preferred_x = False
        elif base == Key.LINEEND:
            n = len(text)
            self.clamp(text)
            if shift:
                self._prep_selection_at_cursor()
            else:
                self._move_to_first()
            if self.single_line:
                self.cursor = n
            else:
                while self.cursor < n and text.get_char(self.cursor) != NEWLINE:
                    self.cursor += 1
            if shift:
                self.select_end = self.cursor
            self.has_preferred_x = False

    def _key_left(self, text: Any, shift: bool) -> None:
        if shift:
            self.clamp(text)
            self._prep_selection_at_cursor()
            if self.select_end > 0:
                self.select_end -= 1
            self.cursor = self.select_end
        else:
            if self.has_selection():
                self._move_to_first()
            elif self.cursor > 0:
                self.cursor -= 1
        self.has_preferred_x = False

    def _key_right(self, text: Any, shift: bool) -> None:
        if shift:
            self._prep_selection_at_cursor()
            self.select_end += 1
            self.clamp(text)
            self.cursor = self.select_end
        else:
            if self.has_selection():
                self._move_to_last(text)
            else:
                self.cursor += 1
            self.clamp(text)
        self.has_preferred_x = False

    def _key_word(self, text: Any, shift: bool, move, left: bool) -> None:
        if shift:
            if not self.has_selection():
                self._prep_selection_at_cursor()
            self.cursor = move(text, self.cursor)
            self.select_end = self.cursor
            self.clamp(text)
        elif self.has_selection():
            if left:
                self._move_to_first()
            else:
                self._move_to_last(text)
        else:
            self.cursor = move(text, self.cursor)
            self.clamp(text)

    def _scan_row(self, text: Any, row_start: int, goal_x: float) -> None:
        self.cursor = row_start
        row = text.layout_row(row_start)
        x = row.x0
        for i in range(row.num_chars):
            dx = text.get_width(row_start, i)
            if dx == NEWLINE_WIDTH:
                break
            x += dx
            if x > goal_x:
                break
            self.cursor += 1
        return row

    def _key_down(self, text: Any, shift: bool, is_page: bool) -> None:
        if not is_page and self.single_line:
            self.key(text, Key.RIGHT | (Key.SHIFT if shift else 0))
            return
        row_count = self.row_count_per_page if is_page else 1
        if shift:
            self._prep_selection_at_cursor()
        elif self.has_selection():
            self._move_to_last(text)

        self.clamp(text)
        find = find_charpos(text, self.cursor, self.single_line)

        for _ in range(row_count):
            goal_x = self.preferred_x if self.has_preferred_x else find.x
            start = find.first_char + find.length
            if find.length == 0:
                break
            if text.get_char(find.first_char + find.length - 1) != NEWLINE:
                break
            row = self._scan_row(text, start, goal_x)
            self.clamp(text)
            self.has_preferred_x = True
            self.preferred_x = goal_x
            if shift:
                self.select_end = self.cursor
            find.first_char = find.first_char + find.length
            find.length = row.num_chars

    def _key_up(self, text: Any, shift: bool, is_page: bool) -> None:
        if not is_page and self.single_line:
            self.key(text, Key.LEFT | (Key.SHIFT if shift else 0))
            return
        row_count = self.row_count_per_page if is_page else 1
        if shift:
            self._prep_selection_at_cursor()
        elif self.has_selection():
            self._move_to_first()

        self.clamp(text)
        find = find_charpos(text, self.cursor, self.single_line)

        for _ in range(row_count):
            goal_x = self.preferred_x if self.has_preferred_x else find.x
            if find.prev_first == find.first_char:
                break
            self._scan_row(text, find.prev_first, goal_x)
            self.clamp(text)
            self.has_preferred_x = True
            self.preferred_x = goal_x
            if shift:
                self.select_end = self.cursor
            prev_scan = find.prev_first - 1 if find.prev_first > 0 else 0
            while prev_scan > 0 and text.get_char(prev_scan - 1) != NEWLINE:
                prev_scan -= 1
            find.first_char = find.prev_first
            find.prev_first = prev_scan