"""Platform detection and synchronisation objects named after where they were made."""

from __future__ import annotations

import enum
import os
import sys
import threading
from typing import Optional

MAX_OBJECT_NAME = 256

# Room for the fixed parts of a name, terminator included.
_NAME_OVERHEAD = len(":1234567890 :12345678 PID:1234567890") + 1

_VER_NT_WORKSTATION = 1


class PlatformType(enum.IntEnum):
    """Kind of operating system product this process runs on."""

    INVALID = 0
    NT_WORKSTATION = 1
    NT_SERVER = 2

    @property
    def is_server(self) -> bool:
        return self is PlatformType.NT_SERVER

    @property
    def is_workstation(self) -> bool:
        return self is PlatformType.NT_WORKSTATION

    @property
    def is_valid(self) -> bool:
        return self is not PlatformType.INVALID


def get_platform_type() -> PlatformType:
    """Return workstation or server; INVALID where the product type is unknown."""
    version_info = getattr(sys, "getwindowsversion", None)
    if version_info is None:
        return PlatformType.INVALID
    try:
        product_type = version_info().product_type
    except (OSError, AttributeError):
        return PlatformType.INVALID
    if product_type == _VER_NT_WORKSTATION:
        return PlatformType.NT_WORKSTATION
    return PlatformType.NT_SERVER


def _file_name_part(file_name: str) -> str:
    for separator in ("\\", "/", ":"):
        _, sep, tail = file_name.rpartition(separator)
        if sep:
            return tail
    return file_name


def build_object_name(
    file_name: str,
    line_number: int,
    member_name: str,
    address: int,
    process_id: Optional[int] = None,
) -> str:
    """Build ``file:line member:address PID:pid``; ValueError if it is too long."""
    part = _file_name_part(file_name)
    if _NAME_OVERHEAD + len(part) + len(member_name) >= MAX_OBJECT_NAME:
        raise ValueError("object name is too long")
    pid = os.getpid() if process_id is None else process_id
    return f"{part}:{line_number} {member_name}:{address:08X} PID:{pid}"


class Event:
    """An event that is either manual-reset or resets itself after one wait."""

    def __init__(self, manual_reset: bool, initial_state: bool, name: Optional[str] = None) -> None:
        self.name = name
        self.manual_reset = bool(manual_reset)
        self._signalled = bool(initial_state)
        self._cond = threading.Condition()

    def is_set(self) -> bool:
        with self._cond:
            return self._signalled

    def set(self) -> None:
        with self._cond:
            self._signalled = True
            if self.manual_reset:
                self._cond.notify_all()
            else:
                self._cond.notify()

    def clear(self) -> None:
        with self._cond:
            self._signalled = False

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Wait until signalled; an auto-reset event is cleared by a successful wait."""
        with self._cond:
            if not self._cond.wait_for(lambda: self._signalled, timeout):
                return False
            if not self.manual_reset:
                self._signalled = False
            return True


class Semaphore:
    """A counting semaphore bounded by a maximum count."""

    def __init__(self, initial_count: int, maximum_count: int, name: Optional[str] = None) -> None:
        if maximum_count <= 0:
            raise ValueError("maximum_count must be positive")
        if initial_count < 0 or initial_count > maximum_count:
            raise ValueError("initial_count must lie between 0 and maximum_count")
        self.name = name
        self.maximum_count = maximum_count
        self._count = initial_count
        self._cond = threading.Condition()

    @property
    def count(self) -> int:
        with self._cond:
            return self._count

    def acquire(self, blocking: bool = True, timeout: Optional[float] = None) -> bool:
        with self._cond:
            if not blocking:
                if self._count == 0:
                    return False
            elif not self._cond.wait_for(lambda: self._count > 0, timeout):
                return False
            self._count -= 1
            return True

    def release(self, count: int = 1) -> int:
        """Raise the count by ``count`` and return the previous count."""
        if count <= 0:
            raise ValueError("release count must be positive")
        with self._cond:
            if self._count + count > self.maximum_count:
                raise ValueError("semaphore released beyond its maximum count")
            previous = self._count
            self._count += count
            self._cond.notify(count)
            return previous


class Mutex:
    """A recursive lock, optionally owned by the creating thread."""

    def __init__(self, initial_owner: bool, name: Optional[str] = None) -> None:
        self.name = name
        self._lock = threading.RLock()
        if initial_owner:
            self._lock.acquire()

    def acquire(self, blocking: bool = True, timeout: float = -1) -> bool:
        return self._lock.acquire(blocking, timeout)

    def release(self) -> None:
        self._lock.release()

    def __enter__(self) -> Mutex:
        self._lock.acquire()
        return self

    def __exit__(self, exc_type: object, exc: object, tb: object) -> None:
        self._lock.release()


class ObjectFactory:
    """Creates synchronisation objects and counts how many of each it made."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.events_created = 0
        self.semaphores_created = 0
        self.mutexes_created = 0

    def create_event(
        self,
        file_name: str,
        line_number: int,
        member_name: str,
        address: int,
        manual_reset: bool,
        initial_state: bool,
    ) -> Event:
        """Create an unnamed event; the location arguments are not used."""
        event = Event(manual_reset, initial_state)
        with self._lock:
            self.events_created += 1
        return event

    def create_semaphore(
        self,
        file_name: str,
        line_number: int,
        member_name: str,
        address: int,
        initial_count: int,
        maximum_count: int,
    ) -> Semaphore:
        """Create a semaphore named after its creation site."""
        name = build_object_name(file_name, line_number, member_name, address)
        semaphore = Semaphore(initial_count, maximum_count, name)
        with self._lock:
            self.semaphores_created += 1
        return semaphore

    def create_mutex(
        self,
        file_name: str,
        line_number: int,
        member_name: str,
        address: int,
        initial_owner: bool,
    ) -> Mutex:
        """Create a mutex named after its creation site."""
        name = build_object_name(file_name, line_number, member_name, address)
        mutex = Mutex(initial_owner, name)
        with self._lock:
            self.mutexes_created += 1
        return mutex