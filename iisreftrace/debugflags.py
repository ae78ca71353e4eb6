"""Debug output flags, print reasons and the process-wide debug flag word."""

from __future__ import annotations

import enum
import threading

MAX_LABEL_LENGTH = 100

# Internal tracing level bit: output goes to the debugger stream.
DEBUG_FLAG_ODS = 0x00000001


class OutputFlags(enum.IntFlag):
    """Destinations a debug message can be sent to."""

    NONE = 0x0
    KDB = 0x1
    LOG_FILE = 0x2
    TRUNCATE = 0x4
    STDERR = 0x8
    BACKUP = 0x10
    MEMORY = 0x20
    ALL = 0xFFFFFFFF


DEFAULT_OUTPUT_FLAGS = OutputFlags.KDB


class PrintReason(enum.IntEnum):
    """Why a message is being printed."""

    NONE = 0x0
    ERROR = 0x1
    WARNING = 0x2
    LOG = 0x3
    MSG = 0x4
    CRITICAL = 0x5
    ASSERTION = 0x6


class DebugFlag(enum.IntFlag):
    """Bits of the debug flag word that switch categories of tracing on."""

    API_ENTRY = 0x00000001
    API_EXIT = 0x00000002
    INIT_CLEAN = 0x00000004
    ERROR = 0x00000008
    RESERVED = 0x00000FFF
    ALLOC_CACHE = 0x01000000
    SCHED = 0x02000000
    RESOURCE = 0x04000000
    INET_MONITOR = 0x08000000
    PIPEDATA = 0x10000000


_lock = threading.Lock()
_debug_flags = 0


def set_debug_flags(flags: int) -> None:
    """Replace the process-wide debug flag word."""
    global _debug_flags
    value = int(flags)
    if value < 0 or value > 0xFFFFFFFF:
        raise ValueError("debug flags must fit in 32 unsigned bits")
    with _lock:
        _debug_flags = value


def get_debug_flags() -> int:
    """Return the process-wide debug flag word."""
    with _lock:
        return _debug_flags


def debug_enabled(flag: int) -> bool:
    """True if any bit of ``flag`` is set in the debug flag word."""
    return bool(int(flag) & get_debug_flags())