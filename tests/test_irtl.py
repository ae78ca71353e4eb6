import io
import os

from iisreftrace.debugflags import OutputFlags
from iisreftrace.debugprints import DebugPrints
from iisreftrace.irtl import irtl_trace, num_processors, stristr


def _prints():
    stream = io.StringIO()
    return DebugPrints("irtl", OutputFlags.STDERR, stderr=stream), stream


def test_stristr_found():
    assert stristr("Hello World", "WORLD") == "World"


def test_stristr_middle():
    assert stristr("abcDEFghi", "def") == "DEFghi"


def test_stristr_missing():
    assert stristr("Hello", "xyz") is None


def test_stristr_empty_substring():
    assert stristr("Hello", "") == "Hello"


def test_stristr_special_characters():
    assert stristr("a.b*c", ".B*") == ".b*c"


def test_num_processors():
    assert num_processors() == (os.cpu_count() or 1)
    assert num_processors() >= 1


def test_irtl_trace_output():
    prints, stream = _prints()
    irtl_trace(prints, "value=%d", 5)
    out = stream.getvalue()
    assert out.endswith("value=5")
    assert "irtl!test_irtl_trace_output [" in out


def test_irtl_trace_truncates():
    prints, stream = _prints()
    irtl_trace(prints, "%s", "x" * 5000)
    assert stream.getvalue().count("x") == 2047


def test_irtl_trace_memory_log():
    prints = DebugPrints("mem", OutputFlags.NONE)
    prints.open_memory_log()
    irtl_trace(prints, "hello %s", "there")
    messages = prints.memory_log.messages()
    assert len(messages) == 1
    assert messages[0].endswith(b"hello there")