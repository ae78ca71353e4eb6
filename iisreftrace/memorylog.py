"""A fixed-size circular in-memory log of NUL-terminated messages."""

from __future__ import annotations

import threading
from typing import List, Union

_MAX_DWORD = 0xFFFFFFFF


class MemoryLog:
    """Circular byte buffer; messages that do not fit start over at offset 0."""

    def __init__(self, max_byte_size: int) -> None:
        if max_byte_size < 0:
            raise ValueError("max_byte_size must not be negative")
        self._buffer = bytearray(max_byte_size)
        self._last_end = 0
        self._lock = threading.Lock()

    @property
    def size(self) -> int:
        return len(self._buffer)

    def append(self, data: Union[bytes, bytearray, memoryview, str]) -> None:
        """Write ``data`` followed by a NUL terminator into the buffer."""
        if isinstance(data, str):
            data = data.encode("utf-8")
        data = bytes(data)
        length = len(data)
        if length + 1 > _MAX_DWORD:
            raise OverflowError("message is too long")
        if length + 1 > len(self._buffer):
            raise ValueError("message does not fit into the memory log")

        with self._lock:
            end = len(self._buffer)
            if self._last_end + length + 1 < end:
                where = self._last_end
            else:
                where = 0
                self._buffer[self._last_end:] = bytes(end - self._last_end)
            self._last_end = where + length + 1
            self._buffer[where:where + length] = data
            self._buffer[where + length] = 0

    def snapshot(self) -> bytes:
        """Return a copy of the raw buffer."""
        with self._lock:
            return bytes(self._buffer)

    def messages(self) -> List[bytes]:
        """Return the non-empty NUL-separated messages, oldest region first."""
        with self._lock:
            ordered = bytes(self._buffer[self._last_end:] + self._buffer[:self._last_end])
        return [message for message in ordered.split(b"\0") if message]