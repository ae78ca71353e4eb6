"""A fixed-size circular trace log of entries."""

from __future__ import annotations

import threading
from typing import Any, List

_ALLOCATION_LIMIT = 0x7FFFFFFF
_LONG_MAX = 0x7FFFFFFF
_LONG_MIN = -0x80000000


class TraceLog:
    """Circular log holding ``log_size`` entries of ``entry_size`` bytes each.

    Bytes-like entries are stored zero-padded to ``entry_size``; any other
    object is stored as given.
    """

    def __init__(self, log_size: int, extra_bytes_in_header: int, entry_size: int) -> None:
        if log_size <= 0:
            raise ValueError("log_size must be positive")
        if entry_size <= 0:
            raise ValueError("entry_size must be positive")
        if extra_bytes_in_header < 0:
            raise ValueError("extra_bytes_in_header must not be negative")
        total = log_size * entry_size
        if total > _ALLOCATION_LIMIT:
            raise OverflowError("trace log is too large")
        total += extra_bytes_in_header
        if total > _ALLOCATION_LIMIT:
            raise OverflowError("trace log is too large")

        self.log_size = log_size
        self.entry_size = entry_size
        self.header = bytearray(extra_bytes_in_header)
        self._entries: List[Any] = [None] * log_size
        self._next_entry = -1
        self._closed = False
        self._lock = threading.Lock()

    @property
    def next_entry(self) -> int:
        """Counter of the most recent write; -1 when nothing has been written."""
        return self._next_entry

    @property
    def closed(self) -> bool:
        return self._closed

    def _check_open(self) -> None:
        if self._closed:
            raise ValueError("trace log is closed")

    def write(self, entry: Any) -> int:
        """Store ``entry`` in the next slot and return the slot index."""
        self._check_open()
        if isinstance(entry, (bytes, bytearray, memoryview)):
            data = bytes(entry)
            if len(data) > self.entry_size:
                raise ValueError("entry is larger than entry_size")
            entry = data.ljust(self.entry_size, b"\0")
        with self._lock:
            counter = self._next_entry + 1
            if counter > _LONG_MAX:
                counter = _LONG_MIN
            self._next_entry = counter
            index = (counter & 0xFFFFFFFF) % self.log_size
            self._entries[index] = entry
        return index

    def reset(self) -> None:
        """Clear every entry and the header bytes, and restart the counter."""
        self._check_open()
        with self._lock:
            self._entries = [None] * self.log_size
            self.header[:] = bytes(len(self.header))
            self._next_entry = -1

    def close(self) -> None:
        """Release the entries; the log accepts no further use."""
        with self._lock:
            self._closed = True
            self._entries = []

    def __getitem__(self, index: int) -> Any:
        self._check_open()
        return self._entries[index]

    def __len__(self) -> int:
        return self.log_size