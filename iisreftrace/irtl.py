"""Trace output and small runtime helpers."""

from __future__ import annotations

import functools
import inspect
import os
import re
from typing import Any, Optional

from iisreftrace.debugprints import DebugPrints
from iisreftrace.diagnostics import dump
from iisreftrace.msgformat import format_message

_TRACE_BUFFER = 2048


def irtl_trace(debug_prints: Optional[DebugPrints], fmt: str, *args: Any) -> None:
    """Format a trace message and send it with the caller's location."""
    text = (fmt % args)[: _TRACE_BUFFER - 1]
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    try:
        if caller is not None:
            file_path = caller.f_code.co_filename
            line_number = caller.f_lineno
            function_name = caller.f_code.co_name
        else:
            file_path, line_number, function_name = "", 0, ""
    finally:
        del frame, caller
    label = debug_prints.label if debug_prints is not None else None
    message = format_message(label, file_path, line_number, function_name, "%s", text)
    dump(debug_prints, file_path, line_number, function_name, message)


def stristr(string: str, substring: str) -> Optional[str]:
    """Return ``string`` from the first case-insensitive match of ``substring``."""
    match = re.search(re.escape(substring), string, re.IGNORECASE)
    if match is None:
        return None
    return string[match.start():]


@functools.lru_cache(maxsize=None)
def num_processors() -> int:
    """Number of processors on this machine."""
    return os.cpu_count() or 1