import io
import logging
import os

import pytest

from iisreftrace import diagnostics
from iisreftrace.debugflags import OutputFlags
from iisreftrace.debugprints import DebugPrints
from iisreftrace.diagnostics import (
    AssertionBreak,
    assert_failed,
    dump,
    print_assert_failed,
    print_current_time,
    print_error,
)


@pytest.fixture
def sink():
    stream = io.StringIO()
    prints = DebugPrints("unit", OutputFlags.STDERR, stderr=stream)
    yield prints, stream
    prints.close()


def test_print_assert_failed_text(sink):
    prints, stream = sink
    print_assert_failed(prints, "C:\\src\\file.c", 12, "func", "x > 0", "boom")
    out = stream.getvalue()
    assert "unit!func [file.c @ 12]:" in out
    assert out.endswith(" Assertion (x > 0) Failed: boom\n")


def test_assert_failed_raises(sink):
    prints, stream = sink
    with pytest.raises(AssertionBreak) as info:
        assert_failed(prints, "a.c", 1, "f", "ok", "broken")
    assert info.value.expression == "ok"
    assert info.value.message == "broken"
    assert "Assertion (ok) Failed: broken" in stream.getvalue()


def test_assert_failed_can_be_quiet(sink, monkeypatch):
    prints, stream = sink
    monkeypatch.setattr(diagnostics, "avoid_shutdown_asserts", True)
    assert_failed(prints, "a.c", 1, "f", "ok", "broken")
    assert "Assertion (ok) Failed: broken" in stream.getvalue()


def test_print_error_appends_error_text(sink):
    prints, stream = sink
    print_error(prints, "a.c", 3, "open", 2, "open %s failed", "x.txt")
    out = stream.getvalue()
    assert "open x.txt failed\tError(2): " in out
    assert out.endswith(os.strerror(2) + "\n")


def test_print_error_hex_code(sink):
    prints, stream = sink
    print_error(prints, "a.c", 3, "f", 31, "msg")
    assert "\tError(1f): " in stream.getvalue()


def test_dump_has_no_header(sink):
    prints, stream = sink
    dump(prints, "a.c", 9, "f", "raw text\n")
    assert stream.getvalue() == "raw text\n"


def test_dump_to_memory_log():
    prints = DebugPrints("mem", OutputFlags.NONE)
    prints.open_memory_log()
    dump(prints, "a.c", 9, "f", "stored")
    assert prints.memory_log.messages() == [b"stored"]


def test_print_current_time(sink):
    prints, stream = sink
    print_current_time(prints, "a.c", 4, "tick")
    out = stream.getvalue()
    assert "unit!tick [a.c @ 4]:" in out
    assert out.endswith("\n")
    head, _, tick = out.rpartition(" TickCount = ")
    assert head.endswith(":")
    assert tick.rstrip("\n").isdigit()


def test_without_debug_prints_goes_to_debugger(caplog):
    with caplog.at_level(logging.DEBUG, logger="iisreftrace.debugger"):
        print_assert_failed(None, "a.c", 5, "f", "e", "m")
    assert any("??!f [a.c @ 5]:" in r.getMessage() for r in caplog.records)