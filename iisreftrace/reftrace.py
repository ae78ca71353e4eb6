"""Reference-count trace log: records counts, contexts and call stacks."""

from __future__ import annotations

import inspect
import struct
import threading
import traceback
from dataclasses import dataclass
from typing import Any, Tuple

from iisreftrace.tracelog import TraceLog

_STACK_DEPTH = 16
_ENTRY_SIZE = struct.calcsize(f"lPL3P{_STACK_DEPTH}P")

StackFrame = Tuple[str, int, str]


@dataclass(frozen=True)
class RefTraceEntry:
    """One recorded reference-count change."""

    new_ref_count: int
    context: Any
    thread: int
    context1: Any = None
    context2: Any = None
    context3: Any = None
    stack: Tuple[StackFrame, ...] = ()


class RefTraceLog(TraceLog):
    """Circular log of :class:`RefTraceEntry` records."""

    stack_depth = _STACK_DEPTH

    def __init__(self, log_size: int, extra_bytes_in_header: int = 0) -> None:
        super().__init__(log_size, extra_bytes_in_header, _ENTRY_SIZE)

    def write(  # type: ignore[override]
        self,
        new_ref_count: int,
        context: Any,
        context1: Any = None,
        context2: Any = None,
        context3: Any = None,
    ) -> int:
        """Record a count change with the caller's stack; return the slot index."""
        frame = inspect.currentframe()
        caller = frame.f_back if frame is not None else None
        try:
            summary = traceback.extract_stack(caller, limit=self.stack_depth)
        finally:
            del frame, caller
        stack = tuple(
            (item.filename, item.lineno or 0, item.name) for item in reversed(summary)
        )
        entry = RefTraceEntry(
            new_ref_count=new_ref_count,
            context=context,
            thread=threading.get_ident(),
            context1=context1,
            context2=context2,
            context3=context3,
            stack=stack,
        )
        return super().write(entry)