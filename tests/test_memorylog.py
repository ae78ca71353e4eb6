import pytest

from iisreftrace.memorylog import MemoryLog


def test_new_log_is_zeroed():
    log = MemoryLog(16)
    assert log.size == 16
    assert log.snapshot() == bytes(16)
    assert log.messages() == []


def test_append_writes_nul_terminated_message():
    log = MemoryLog(16)
    log.append(b"abc")
    assert log.snapshot()[:4] == b"abc\0"
    assert log.messages() == [b"abc"]


def test_messages_are_kept_in_order():
    log = MemoryLog(64)
    for message in (b"one", b"two", b"three"):
        log.append(message)
    assert log.messages() == [b"one", b"two", b"three"]


def test_str_is_encoded_as_utf8():
    log = MemoryLog(32)
    log.append("héllo")
    assert log.messages() == ["héllo".encode("utf-8")]


def test_message_reaching_the_end_wraps_and_clears_tail():
    log = MemoryLog(8)
    log.append(b"abc")
    log.append(b"xyz")
    snap = log.snapshot()
    assert snap[:4] == b"xyz\0"
    assert snap[4:] == bytes(4)
    assert log.messages() == [b"xyz"]


def test_newest_message_is_last_after_wrap():
    log = MemoryLog(8)
    log.append(b"abcd")
    log.append(b"xy")
    assert log.messages()[-1] == b"xy"
    assert len(log.snapshot()) == 8


def test_message_too_large_raises():
    log = MemoryLog(4)
    with pytest.raises(ValueError):
        log.append(b"abcd")
    log.append(b"abc")
    assert log.messages() == [b"abc"]


def test_zero_sized_log_rejects_everything():
    log = MemoryLog(0)
    with pytest.raises(ValueError):
        log.append(b"")


def test_negative_size_raises():
    with pytest.raises(ValueError):
        MemoryLog(-1)


def test_buffer_size_never_changes():
    log = MemoryLog(10)
    for index in range(20):
        log.append(b"m%d" % index)
        assert len(log.snapshot()) == 10