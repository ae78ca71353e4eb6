"""A debug output object that sends formatted messages to several sinks."""

from __future__ import annotations

import logging
import os
import sys
from typing import Any, BinaryIO, Optional, TextIO

from iisreftrace.debugflags import DEFAULT_OUTPUT_FLAGS, MAX_LABEL_LENGTH, OutputFlags
from iisreftrace.memorylog import MemoryLog
from iisreftrace.msgformat import format_message

MAX_PATH = 260
MEMORY_LOG_SIZE = 1024 * 512

debugger = logging.getLogger("iisreftrace.debugger")

_SEPARATORS = ("\\", "/", os.sep)


def _send_to_debugger(message: str) -> None:
    debugger.debug("%s", message)


class DebugPrints:
    """Sends messages to stderr, a log file, a memory log and the debugger stream.

    Debugger output goes to the ``iisreftrace.debugger`` logger at DEBUG level.
    """

    def __init__(
        self,
        label: str,
        output_flags: int = DEFAULT_OUTPUT_FLAGS,
        stderr: Optional[TextIO] = None,
    ) -> None:
        self.label = label[: MAX_LABEL_LENGTH - 1]
        self.output_flags = OutputFlags(output_flags)
        self.stderr: Optional[TextIO] = stderr if stderr is not None else sys.stderr
        self.log_file_path = ""
        self.log_file_name = ""
        self.break_on_assert = True
        self.initialized = True
        self._log_file: Optional[BinaryIO] = None
        self._memory_log: Optional[MemoryLog] = None

    @property
    def memory_log(self) -> Optional[MemoryLog]:
        return self._memory_log

    @property
    def file_open(self) -> bool:
        return self._log_file is not None

    def _open_local(self) -> None:
        if self._log_file is not None:
            return
        if not self.log_file_name:
            raise ValueError("no log file name has been set")
        # Open without truncating: writing starts at the beginning of the file.
        fd = os.open(self.log_file_name, os.O_WRONLY | os.O_CREAT, 0o666)
        self._log_file = os.fdopen(fd, "wb")

    def open_file(self, file_name: str, path: Optional[str] = None) -> None:
        """Set the log file location and open it for writing."""
        if file_name is None:
            raise ValueError("file_name is required")
        if path is not None:
            if len(path) >= MAX_PATH:
                raise ValueError("log file path is too long")
            self.log_file_path = path
        elif not self.log_file_path:
            self.log_file_path = "."

        if len(file_name) + len(self.log_file_path) >= MAX_PATH:
            raise ValueError("log file name is too long")

        full = self.log_file_path
        if not full.endswith(_SEPARATORS):
            full += os.sep
        self.log_file_name = full + file_name
        self._open_local()

    def reopen_file(self) -> None:
        """Close any open log file and open it again."""
        self.close_file()
        if self.output_flags & OutputFlags.BACKUP:
            _send_to_debugger(" Error: MakeBkupCopy() Not Yet Implemented\n")
        self._open_local()

    def close_file(self) -> None:
        """Flush and close the log file if one is open."""
        log_file, self._log_file = self._log_file, None
        if log_file is not None:
            try:
                log_file.flush()
            finally:
                log_file.close()

    def open_memory_log(self) -> None:
        """Create the memory log if needed and route output to it."""
        if self._memory_log is not None:
            return
        self._memory_log = MemoryLog(MEMORY_LOG_SIZE)
        self.output_flags |= OutputFlags.MEMORY

    def close_memory_log(self) -> None:
        self._memory_log = None

    def output(self, message: str) -> None:
        """Send an already formatted message to every enabled destination."""
        flags = self.output_flags
        if flags & OutputFlags.STDERR and self.stderr is not None:
            try:
                self.stderr.write(message)
            except (OSError, ValueError):
                pass

        if flags & OutputFlags.LOG_FILE and self._log_file is not None:
            try:
                self._log_file.write(message.encode("utf-8", "replace"))
            except (OSError, ValueError):
                pass

        if flags & OutputFlags.MEMORY and self._memory_log is not None:
            try:
                self._memory_log.append(message)
            except (OverflowError, ValueError):
                pass

        if flags & OutputFlags.KDB:
            _send_to_debugger(message)

    def printf(
        self,
        file_path: str,
        line_number: int,
        function_name: str,
        fmt: str,
        *args: Any,
    ) -> None:
        """Format a message behind the standard prologue and output it."""
        self.output(format_message(self.label, file_path, line_number, function_name, fmt, *args))

    def close(self) -> None:
        """Release the memory log and close the log file."""
        self.close_memory_log()
        self.close_file()

    def __enter__(self) -> DebugPrints:
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        self.close()