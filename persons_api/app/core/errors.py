"""
Errors raised by the person store.

The set is closed: a duplicate ``id`` on insert, a missing ``id`` on
lookup/update/delete, and a poisoned lock.  None of these classes knows
about HTTP; the mapping to status codes lives in ``api.errors``.
"""

from enum import Enum


class LockMode(str, Enum):
    """Mode in which the shared lock was being acquired."""

    READ = "read"
    WRITE = "write"


class StoreError(Exception):
    """Base class for all store errors."""

    message = "Store error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class ConflictError(StoreError):
    message = "An element with the same ID already exists"


class NotFoundError(StoreError):
    message = "Not found"


class LockError(StoreError):
    """The lock was poisoned by a writer that failed while holding it."""

    def __init__(self, mode: LockMode) -> None:
        self.mode = LockMode(mode)
        super().__init__(f"Poison error {self.mode.value.capitalize()} Lock was poisoned")
