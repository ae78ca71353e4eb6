"""Intrusive doubly and singly linked lists with O(1) insertion and removal."""

from __future__ import annotations

from typing import Any, Iterator, Optional


class ListEntry:
    """A node that can be linked into one list at a time."""

    __slots__ = ("value", "_next", "_prev", "_owner")

    def __init__(self, value: Any = None) -> None:
        self.value = value
        self._next: Optional[ListEntry] = None
        self._prev: Optional[ListEntry] = None
        self._owner: object = None

    @property
    def linked(self) -> bool:
        """True while the entry belongs to a list."""
        return self._owner is not None

    def __repr__(self) -> str:
        return f"ListEntry({self.value!r})"


def _claim(owner: object, entry: ListEntry) -> None:
    if entry._owner is not None:
        raise ValueError("entry is already linked into a list")
    entry._owner = owner


class LinkedList:
    """A circular doubly linked list anchored on a sentinel head."""

    def __init__(self) -> None:
        head = ListEntry()
        head._next = head
        head._prev = head
        self._head = head
        self._count = 0

    def is_empty(self) -> bool:
        return self._head._next is self._head

    def insert_head(self, entry: ListEntry) -> None:
        _claim(self, entry)
        head = self._head
        first = head._next
        entry._next = first
        entry._prev = head
        first._prev = entry
        head._next = entry
        self._count += 1

    def insert_tail(self, entry: ListEntry) -> None:
        _claim(self, entry)
        head = self._head
        last = head._prev
        entry._next = head
        entry._prev = last
        last._next = entry
        head._prev = entry
        self._count += 1

    def _unlink(self, entry: ListEntry) -> None:
        prev, nxt = entry._prev, entry._next
        prev._next = nxt
        nxt._prev = prev
        entry._next = entry._prev = None
        entry._owner = None
        self._count -= 1

    def remove_head(self) -> ListEntry:
        """Unlink and return the first entry; IndexError if the list is empty."""
        if self.is_empty():
            raise IndexError("remove from an empty list")
        entry = self._head._next
        self._unlink(entry)
        return entry

    def remove_tail(self) -> ListEntry:
        """Unlink and return the last entry; IndexError if the list is empty."""
        if self.is_empty():
            raise IndexError("remove from an empty list")
        entry = self._head._prev
        self._unlink(entry)
        return entry

    def remove(self, entry: ListEntry) -> bool:
        """Unlink ``entry``; return True if the list is empty afterwards."""
        if entry._owner is not self:
            raise ValueError("entry is not in this list")
        self._unlink(entry)
        return self.is_empty()

    def append_list(self, other: LinkedList) -> None:
        """Move every entry of ``other`` onto the tail of this list."""
        if other is self:
            raise ValueError("cannot append a list to itself")
        if other.is_empty():
            return
        moved = list(other)
        for entry in moved:
            entry._owner = self
        first = other._head._next
        last = other._head._prev
        tail = self._head._prev
        tail._next = first
        first._prev = tail
        last._next = self._head
        self._head._prev = last
        self._count += other._count
        other._head._next = other._head
        other._head._prev = other._head
        other._count = 0

    def __iter__(self) -> Iterator[ListEntry]:
        head = self._head
        entry = head._next
        while entry is not head:
            nxt = entry._next
            yield entry
            entry = nxt

    def __len__(self) -> int:
        return self._count


class SingleList:
    """A singly linked push-down list."""

    def __init__(self) -> None:
        self._first: Optional[ListEntry] = None

    def push(self, entry: ListEntry) -> None:
        _claim(self, entry)
        entry._next = self._first
        self._first = entry

    def pop(self) -> Optional[ListEntry]:
        """Unlink and return the first entry, or None when the list is empty."""
        entry = self._first
        if entry is not None:
            self._first = entry._next
            entry._next = None
            entry._owner = None
        return entry

    def __iter__(self) -> Iterator[ListEntry]:
        entry = self._first
        while entry is not None:
            nxt = entry._next
            yield entry
            entry = nxt