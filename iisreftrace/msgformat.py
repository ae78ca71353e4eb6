"""Formatting of debug messages with a thread, label, function and location prologue."""

from __future__ import annotations

import threading
from typing import Any, Optional

MAX_PRINTF_OUTPUT = 10240

_UNKNOWN_LABEL = "??"


def strip_directory(file_path: str) -> str:
    """Return the part of ``file_path`` after its last backslash."""
    _, sep, tail = file_path.rpartition("\\")
    return tail if sep else file_path


def format_prologue(
    thread_id: int,
    label: Optional[str],
    function_name: str,
    file_path: str,
    line_number: int,
) -> str:
    """Build the header ``tid label!function [file @ line]:``."""
    shown = label if label is not None else _UNKNOWN_LABEL
    return f"{thread_id} {shown}!{function_name} [{strip_directory(file_path)} @ {line_number}]:"


def format_message(
    label: Optional[str],
    file_path: str,
    line_number: int,
    function_name: str,
    fmt: str,
    *args: Any,
) -> str:
    """Format ``fmt % args`` behind a prologue, truncated to the output limit."""
    prologue = format_prologue(
        threading.get_native_id(), label, function_name, file_path, line_number
    )
    body = fmt % args
    return (prologue + body)[: MAX_PRINTF_OUTPUT - 1]