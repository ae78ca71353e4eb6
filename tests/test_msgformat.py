import threading

import pytest

from iisreftrace.msgformat import (
    MAX_PRINTF_OUTPUT,
    format_message,
    format_prologue,
    strip_directory,
)


def test_strip_directory_keeps_file_name():
    assert strip_directory("C:\\src\\reftrace\\file.cxx") == "file.cxx"


def test_strip_directory_without_separator_returns_whole():
    assert strip_directory("file.cxx") == "file.cxx"


def test_strip_directory_ignores_forward_slash():
    assert strip_directory("src/file.cxx") == "src/file.cxx"


def test_prologue_layout():
    assert format_prologue(12, "w3svc", "Func", "C:\\a\\b.c", 42) == "12 w3svc!Func [b.c @ 42]:"


def test_prologue_without_label():
    text = format_prologue(7, None, "Run", "x.c", 3)
    assert text.startswith("7 ??!Run")


def test_message_has_prologue_and_body():
    text = format_message("lbl", "d:\\x\\y.cxx", 10, "Fn", "value=%d name=%s\n", 5, "abc")
    prologue = format_prologue(threading.get_native_id(), "lbl", "Fn", "d:\\x\\y.cxx", 10)
    assert text.startswith(prologue)
    assert text[len(prologue):] == "value=5 name=abc\n"


def test_message_accepts_c_length_modifiers():
    text = format_message("lbl", "f.c", 1, "Fn", "%lu|%hs", 9, "q")
    assert text.endswith("9|q")


def test_message_is_truncated_to_limit():
    text = format_message("lbl", "f.c", 1, "Fn", "%s", "x" * (MAX_PRINTF_OUTPUT * 2))
    assert len(text) == MAX_PRINTF_OUTPUT - 1
    assert text.endswith("x")


def test_missing_arguments_raise():
    with pytest.raises(TypeError):
        format_message("lbl", "f.c", 1, "Fn", "%s %s", "only")