"""Bounded undo/redo history for a text editing widget.

Undo records grow from the front of a fixed record table and redo records
from its back; the characters they need are kept in a shared fixed-size
character store, undo characters at the front and redo characters at the
back. When either runs out of room the oldest entries are discarded.
"""

from __future__ import annotations

from copy import copy
from dataclasses import dataclass
from typing import Any, Protocol, Sequence

DEFAULT_STATE_COUNT = 99
DEFAULT_CHAR_COUNT = 999


class _EditableText(Protocol):
    def get_char(self, index: int) -> Any: ...

    def delete_chars(self, index: int, count: int) -> None: ...

    def insert_chars(self, index: int, chars: Sequence[Any]) -> bool: ...


@dataclass
class UndoRecord:
    """One edit: at ``where`` remove ``delete_length`` characters and insert
    ``insert_length`` characters taken from ``char_storage`` (-1 when none)."""

    where: int = 0
    insert_length: int = 0
    delete_length: int = 0
    char_storage: int = -1


class UndoState:
    """Undo and redo history with ``state_count`` records and room for
    ``char_count`` stored characters."""

    def __init__(
        self,
        state_count: int = DEFAULT_STATE_COUNT,
        char_count: int = DEFAULT_CHAR_COUNT,
    ) -> None:
        if state_count < 1 or char_count < 1:
            raise ValueError("state_count and char_count must be positive")
        self.state_count = state_count
        self.char_count = char_count
        self.records = [UndoRecord() for _ in range(state_count)]
        self.chars: list[Any] = [None] * char_count
        self.clear()

    def clear(self) -> None:
        """Forget all undo and redo history."""
        self.undo_point = 0
        self.undo_char_point = 0
        self.redo_point = self.state_count
        self.redo_char_point = self.char_count

    def flush_redo(self) -> None:
        """Drop every redo record."""
        self.redo_point = self.state_count
        self.redo_char_point = self.char_count

    def discard_undo(self) -> None:
        """Drop the oldest undo record."""
        if self.undo_point <= 0:
            return
        first = self.records[0]
        if first.char_storage >= 0:
            n = first.insert_length
            self.undo_char_point -= n
            end = self.undo_char_point
            self.chars[0:end] = self.chars[n:n + end]
            for rec in self.records[: self.undo_point]:
                if rec.char_storage >= 0:
                    rec.char_storage -= n
        self.undo_point -= 1
        # Shift the remaining undo records down; the freed slot keeps a copy
        # of its former contents.
        stale = copy(self.records[self.undo_point])
        del self.records[0]
        self.records.insert(self.undo_point, stale)

    def discard_redo(self) -> None:
        """Drop the oldest redo record."""
        k = self.state_count - 1
        if self.redo_point > k:
            return
        last = self.records[k]
        if last.char_storage >= 0:
            n = last.insert_length
            self.redo_char_point += n
            rcp = self.redo_char_point
            self.chars[rcp:self.char_count] = self.chars[rcp - n:self.char_count - n]
            for rec in self.records[self.redo_point:k]:
                if rec.char_storage >= 0:
                    rec.char_storage += n
        # Shift the remaining redo records up; the freed slot keeps a copy
        # of its former contents.
        stale = copy(self.records[self.redo_point])
        del self.records[k]
        self.records.insert(self.redo_point, stale)
        self.redo_point += 1

    def _create_record(self, numchars: int) -> UndoRecord | None:
        self.flush_redo()
        if self.undo_point == self.state_count:
            self.discard_undo()
        if numchars > self.char_count:
            self.undo_point = 0
            self.undo_char_point = 0
            return None
        while self.undo_char_point + numchars > self.char_count:
            self.discard_undo()
        record = self.records[self.undo_point]
        self.undo_point += 1
        return record

    def create_undo(self, pos: int, insert_len: int, delete_len: int) -> int | None:
        """Add an undo record and return where its characters go in ``chars``.

        Returns ``None`` when no characters are to be stored or the record
        could not be kept.
        """
        record = self._create_record(insert_len)
        if record is None:
            return None
        record.where = pos
        record.insert_length = insert_len
        record.delete_length = delete_len
        if insert_len == 0:
            record.char_storage = -1
            return None
        record.char_storage = self.undo_char_point
        self.undo_char_point += insert_len
        return record.char_storage

    def _save(self, text: _EditableText, storage: int | None, where: int, length: int) -> None:
        if storage is None:
            return
        for i in range(length):
            self.chars[storage + i] = text.get_char(where + i)

    def make_insert(self, where: int, length: int) -> None:
        """Record that ``length`` characters were inserted at ``where``."""
        self.create_undo(where, 0, length)

    def make_delete(self, text: _EditableText, where: int, length: int) -> None:
        """Record a deletion; call before the characters are removed."""
        storage = self.create_undo(where, length, 0)
        self._save(text, storage, where, length)

    def make_replace(
        self, text: _EditableText, where: int, old_length: int, new_length: int
    ) -> None:
        """Record a replacement; call before the old characters are removed."""
        storage = self.create_undo(where, old_length, new_length)
        self._save(text, storage, where, old_length)

    def undo(self, text: _EditableText) -> int | None:
        """Revert the latest edit in ``text``; return the new cursor or ``None``."""
        if self.undo_point == 0:
            return None
        u = copy(self.records[self.undo_point - 1])
        r = self.records[self.redo_point - 1]
        r.char_storage = -1
        r.insert_length = u.delete_length
        r.delete_length = u.insert_length
        r.where = u.where

        if u.delete_length:
            if self.undo_char_point + u.delete_length >= self.char_count:
                # No room to keep the characters for redoing.
                r.insert_length = 0
            else:
                while self.undo_char_point + u.delete_length > self.redo_char_point:
                    if self.redo_point == self.state_count:
                        return None
                    self.discard_redo()
                r = self.records[self.redo_point - 1]
                r.char_storage = self.redo_char_point - u.delete_length
                self.redo_char_point -= u.delete_length
                self._save(text, r.char_storage, u.where, u.delete_length)
            text.delete_chars(u.where, u.delete_length)

        if u.insert_length:
            start = u.char_storage
            text.insert_chars(u.where, self.chars[start:start + u.insert_length])
            self.undo_char_point -= u.insert_length

        self.undo_point -= 1
        self.redo_point -= 1
        return u.where + u.insert_length

    def redo(self, text: _EditableText) -> int | None:
        """Reapply the latest undone edit; return the new cursor or ``None``."""
        if self.redo_point == self.state_count:
            return None
        u = self.records[self.undo_point]
        r = copy(self.records[self.redo_point])

        u.delete_length = r.insert_length
        u.insert_length = r.delete_length
        u.where = r.where
        u.char_storage = -1

        if r.delete_length:
            if self.undo_char_point + u.insert_length > self.redo_char_point:
                u.insert_length = 0
                u.delete_length = 0
            else:
                u.char_storage = self.undo_char_point
                self.undo_char_point += u.insert_length
                self._save(text, u.char_storage, u.where, u.insert_length)
            text.delete_chars(r.where, r.delete_length)

        if r.insert_length:
            start = r.char_storage
            text.insert_chars(r.where, self.chars[start:start + r.insert_length])
            self.redo_char_point += r.insert_length

        self.undo_point += 1
        self.redo_point += 1
        return r.where + r.insert_length