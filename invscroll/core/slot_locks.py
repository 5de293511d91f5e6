"""Slot lock bookkeeping shared between the UI thread and queue workers."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from threading import Condition, Lock


class ReadWriteLock:
    """Readers-writer lock: concurrent readers, exclusive writers."""

    def __init__(self) -> None:
        self._condition = Condition(Lock())
        self._readers = 0
        self._writer_active = False
        self._writers_waiting = 0

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._condition:
            # Waiting writers block new readers.
            while self._writer_active or self._writers_waiting:
                self._condition.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._condition:
                self._readers -= 1
                if self._readers == 0:
                    self._condition.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._condition:
            self._writers_waiting += 1
            try:
                while self._writer_active or self._readers:
                    self._condition.wait()
            finally:
                self._writers_waiting -= 1
            self._writer_active = True
        try:
            yield
        finally:
            with self._condition:
                self._writer_active = False
                self._condition.notify_all()


class SlotLockRegistry:
    """Set of slot ids temporarily locked against new interactions."""

    def __init__(self) -> None:
        self._locked: set[int] = set()
        self._rw_lock = ReadWriteLock()

    def __len__(self) -> int:
        with self._rw_lock.read():
            return len(self._locked)

    def is_locked(self, slot_id: int) -> bool:
        with self._rw_lock.read():
            return slot_id in self._locked

    def lock(self, slot_id: int) -> None:
        """Lock slot id. Locking an already locked id has no effect."""
        with self._rw_lock.write():
            self._locked.add(slot_id)

    def unlock(self, slot_id: int) -> None:
        """Unlock slot id. Unlocking an unlocked id has no effect."""
        with self._rw_lock.write():
            self._locked.discard(slot_id)

    def locked_ids(self) -> tuple[int, ...]:
        """Return sorted snapshot of locked slot ids."""
        with self._rw_lock.read():
            return tuple(sorted(self._locked))
