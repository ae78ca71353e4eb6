"""Error, dump, assertion and timing messages sent through a debug output object."""

from __future__ import annotations

import time
from typing import Any, Optional

from iisreftrace.debugprints import DebugPrints, debugger
from iisreftrace.msgformat import format_message

# When true, a failed assertion is reported but does not break into the caller.
avoid_shutdown_asserts = False

_ERROR_PREFIX_LIMIT = 63


class AssertionBreak(AssertionError):
    """Raised where a failed debug assertion breaks into the debugger."""

    def __init__(self, expression: str, message: str) -> None:
        super().__init__(f"Assertion ({expression}) Failed: {message}")
        self.expression = expression
        self.message = message


def _output(debug_prints: Optional[DebugPrints], message: str) -> None:
    if debug_prints is None:
        debugger.debug("%s", message)
    else:
        debug_prints.output(message)


def _format(
    debug_prints: Optional[DebugPrints],
    file_path: str,
    line_number: int,
    function_name: str,
    fmt: str,
    *args: Any,
) -> str:
    label = debug_prints.label if debug_prints is not None else None
    return format_message(label, file_path, line_number, function_name, fmt, *args)


def _error_text(error: int) -> Optional[str]:
    try:
        return __import_strerror()(error)
    except (ValueError, OverflowError):
        return None


def __import_strerror():
    import os

    return os.strerror


def print_error(
    debug_prints: Optional[DebugPrints],
    file_path: str,
    line_number: int,
    function_name: str,
    error: int,
    fmt: str,
    *args: Any,
) -> None:
    """Print a formatted message followed by the text of ``error``."""
    message = _format(debug_prints, file_path, line_number, function_name, fmt, *args)
    text = _error_text(error)
    if text is not None:
        prefix = ("\tError(%x): " % error)[:_ERROR_PREFIX_LIMIT]
        message = f"{message}{prefix}{text}\n"
    _output(debug_prints, message)


def dump(
    debug_prints: Optional[DebugPrints],
    file_path: str,
    line_number: int,
    function_name: str,
    text: str,
) -> None:
    """Send ``text`` unchanged, without a message header."""
    _output(debug_prints, text)


def print_assert_failed(
    debug_prints: Optional[DebugPrints],
    file_path: str,
    line_number: int,
    function_name: str,
    expression: str,
    message: str,
) -> None:
    """Record a failed assertion."""
    _output(
        debug_prints,
        _format(
            debug_prints,
            file_path,
            line_number,
            function_name,
            " Assertion (%s) Failed: %s\n",
            expression,
            message,
        ),
    )


def assert_failed(
    debug_prints: Optional[DebugPrints],
    file_path: str,
    line_number: int,
    function_name: str,
    expression: str,
    message: str,
) -> None:
    """Record a failed assertion and raise :class:`AssertionBreak`.

    Nothing is raised while ``avoid_shutdown_asserts`` is true.
    """
    print_assert_failed(
        debug_prints, file_path, line_number, function_name, expression, message
    )
    if not avoid_shutdown_asserts:
        raise AssertionBreak(expression, message)


def print_current_time(
    debug_prints: Optional[DebugPrints],
    file_path: str,
    line_number: int,
    function_name: str,
) -> None:
    """Print the millisecond tick count of the monotonic clock."""
    ticks = int(time.monotonic() * 1000) & 0xFFFFFFFF
    _output(
        debug_prints,
        _format(
            debug_prints,
            file_path,
            line_number,
            function_name,
            " TickCount = %d\n",
            ticks,
        ),
    )