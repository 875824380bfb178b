"""
Read/write lock with poisoning.

Many threads may hold the lock in shared mode at the same time; a
single thread may hold it in exclusive mode, and then nobody else
holds it at all.  Writers that are waiting block newly arriving
readers so a steady stream of readers cannot starve them.

If an exception escapes a ``write()`` block the protected data may
have been left half updated.  The lock is then marked poisoned and
every later acquisition, in either mode, raises ``LockError`` instead
of handing out access.  The flag is never cleared.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Iterator

from .errors import LockError, LockMode

logger = logging.getLogger(__name__)


class ReadWriteLock:
    """Multiple readers OR one writer, built on a single condition."""

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0
        self._poisoned = False

    @property
    def poisoned(self) -> bool:
        with self._cond:
            return self._poisoned

    def acquire_read(self) -> None:
        with self._cond:
            while self._writer or self._waiting_writers:
                self._cond.wait()
            if self._poisoned:
                raise LockError(LockMode.READ)
            self._readers += 1

    def release_read(self) -> None:
        with self._cond:
            if self._readers <= 0:
                raise RuntimeError("release_read called without a matching acquire_read")
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self) -> None:
        with self._cond:
            self._waiting_writers += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._waiting_writers -= 1
                # Readers queued behind this writer re-check their condition.
                self._cond.notify_all()
            if self._poisoned:
                raise LockError(LockMode.WRITE)
            self._writer = True

    def release_write(self) -> None:
        with self._cond:
            if not self._writer:
                raise RuntimeError("release_write called without a matching acquire_write")
            self._writer = False
            self._cond.notify_all()

    def _poison(self) -> None:
        with self._cond:
            self._poisoned = True

    @contextmanager
    def read(self) -> Iterator[None]:
        """Hold the lock in shared mode for the duration of the block."""
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write(self) -> Iterator[None]:
        """Hold the lock in exclusive mode for the duration of the block.

        Any exception leaving the block poisons the lock before it is
        re‑raised.
        """
        self.acquire_write()
        try:
            yield
        except BaseException:
            logger.error("Exclusive holder failed, marking lock as poisoned")
            self._poison()
            raise
        finally:
            self.release_write()
