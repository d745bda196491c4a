"""Text layout queries used by the text editing widget.

The editing logic works on any object that offers ``len()``,
``layout_row``, ``get_width``, ``get_char``, ``delete_chars`` and
``insert_chars``. ``StringBuffer`` is a simple monospaced implementation
that wraps lines only at newlines.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Protocol

NEWLINE = "\n"
NEWLINE_WIDTH = -1.0
"""Width reported for a newline character; it takes no room on screen."""


@dataclass
class Row:
    """Layout of one displayed row of characters."""

    x0: float = 0.0
    x1: float = 0.0
    baseline_y_delta: float = 0.0
    ymin: float = 0.0
    ymax: float = 0.0
    num_chars: int = 0


@dataclass
class FindState:
    """Position of a character and of the row holding it."""

    x: float = 0.0
    y: float = 0.0
    height: float = 0.0
    first_char: int = 0
    length: int = 0
    prev_first: int = 0


class _LaidOutText(Protocol):
    def __len__(self) -> int: ...

    def layout_row(self, start: int) -> Row: ...

    def get_width(self, line_start: int, index: int) -> float: ...

    def get_char(self, index: int) -> Any: ...


class StringBuffer:
    """Editable text in which every character is ``char_width`` wide and
    every line ``line_height`` high."""

    def __init__(self, text: str = "", char_width: float = 1.0, line_height: float = 1.0) -> None:
        if char_width <= 0 or line_height <= 0:
            raise ValueError("char_width and line_height must be positive")
        self.chars: list[str] = list(text)
        self.char_width = char_width
        self.line_height = line_height

    @property
    def text(self) -> str:
        return "".join(self.chars)

    def __len__(self) -> int:
        return len(self.chars)

    def layout_row(self, start: int) -> Row:
        """Layout of the row beginning at ``start``, up to and including its newline."""
        end = start
        while end < len(self.chars) and self.chars[end] != NEWLINE:
            end += 1
        visible = end - start
        if end < len(self.chars):
            end += 1
        return Row(
            x0=0.0,
            x1=visible * self.char_width,
            baseline_y_delta=self.line_height,
            ymin=0.0,
            ymax=self.line_height,
            num_chars=end - start,
        )

    def get_width(self, line_start: int, index: int) -> float:
        """Width of the ``index``-th character of the row at ``line_start``."""
        if self.chars[line_start + index] == NEWLINE:
            return NEWLINE_WIDTH
        return self.char_width

    def get_char(self, index: int) -> str:
        return self.chars[index]

    def delete_chars(self, index: int, count: int) -> None:
        del self.chars[index:index + count]

    def insert_chars(self, index: int, chars: Iterable[str]) -> bool:
        self.chars[index:index] = list(chars)
        return True


def locate_coord(text: _LaidOutText, x: float, y: float) -> int:
    """Index of the character position nearest to the display point (x, y)."""
    n = len(text)
    base_y = 0.0
    i = 0
    r = Row()

    while i < n:
        r = text.layout_row(i)
        if r.num_chars <= 0:
            return n
        if i == 0 and y < base_y + r.ymin:
            return 0
        if y < base_y + r.ymax:
            break
        i += r.num_chars
        base_y += r.baseline_y_delta

    if i >= n:
        return n

    if x < r.x0:
        return i

    if x < r.x1:
        prev_x = r.x0
        for k in range(r.num_chars):
            w = text.get_width(i, k)
            if x < prev_x + w:
                return k + i if x < prev_x + w / 2 else k + i + 1
            prev_x += w

    if text.get_char(i + r.num_chars - 1) == NEWLINE:
        return i + r.num_chars - 1
    return i + r.num_chars


def find_charpos(text: _LaidOutText, n: int, single_line: bool) -> FindState:
    """Display position of character ``n`` and the layout of its row."""
    z = len(text)
    find = FindState()

    if n == z and single_line:
        r = text.layout_row(0)
        find.y = 0.0
        find.first_char = 0
        find.length = z
        find.height = r.ymax - r.ymin
        find.x = r.x1
        return find

    prev_start = 0
    i = 0
    while True:
        r = text.layout_row(i)
        if n < i + r.num_chars:
            break
        if i + r.num_chars == z and z > 0 and text.get_char(z - 1) != NEWLINE:
            break
        prev_start = i
        i += r.num_chars
        find.y += r.baseline_y_delta
        if i == z:
            break

    first = i
    find.first_char = first
    find.length = r.num_chars
    find.height = r.ymax - r.ymin
    find.prev_first = prev_start

    find.x = r.x0
    k = 0
    while first + k < n:
        find.x += text.get_width(first, k)
        k += 1
    return find


def _is_space(ch: Any) -> bool:
    return isinstance(ch, str) and ch.isspace()


def _is_word_boundary(text: _LaidOutText, idx: int) -> bool:
    if idx <= 0:
        return True
    return _is_space(text.get_char(idx - 1)) and not _is_space(text.get_char(idx))


def move_word_left(text: _LaidOutText, c: int) -> int:
    """Start of the word before position ``c``."""
    c -= 1
    while c >= 0 and not _is_word_boundary(text, c):
        c -= 1
    return max(c, 0)


def move_word_right(text: _LaidOutText, c: int) -> int:
    """Start of the word after position ``c``, or the end of the text."""
    n = len(text)
    c += 1
    while c < n and not _is_word_boundary(text, c):
        c += 1
    return min(c, n)