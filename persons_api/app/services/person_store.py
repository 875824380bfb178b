"""
In‑memory store for person records.

The store owns a plain list of ``Person`` models guarded by one
``ReadWriteLock``.  Listing and lookups take the lock in shared mode;
inserts, updates and deletes take it exclusively, so each of them is
atomic with respect to the whole collection.  Records going in and
coming out are copied, callers never hold references into the list.

Lookups are linear scans by ``id``.  The collection is a small demo
data set and lives only as long as the process.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from persons_api.app.core.errors import ConflictError, NotFoundError
from persons_api.app.core.rwlock import ReadWriteLock
from persons_api.app.schemas.person import Person

logger = logging.getLogger(__name__)


def create_person_collection() -> List[Person]:
    """Return the records the service starts with."""
    return [
        Person(id=1, name="Alice", age=30, date="2023-01-01"),
        Person(id=2, name="Bob", age=25, date="2023-01-02"),
    ]


class PersonStore:
    """Thread‑safe collection of ``Person`` records unique by ``id``.

    Store errors (``ConflictError``, ``NotFoundError``) are raised only
    after the exclusive lock has been released; an exception escaping
    while the lock is held means the collection may be inconsistent
    and poisons the lock.
    """

    def __init__(self, persons: Optional[Iterable[Person]] = None) -> None:
        self._persons: List[Person] = []
        self._lock = ReadWriteLock()
        for person in persons or ():
            if self._find_index(person.id) is not None:
                raise ConflictError()
            self._persons.append(person.model_copy())

    @classmethod
    def with_sample_data(cls) -> "PersonStore":
        return cls(create_person_collection())

    @property
    def lock(self) -> ReadWriteLock:
        return self._lock

    def _find_index(self, person_id: int) -> Optional[int]:
        # First match wins; ids are unique so there is at most one.
        for index, person in enumerate(self._persons):
            if person.id == person_id:
                return index
        return None

    def list_persons(self) -> List[Person]:
        """Return copies of all records."""
        with self._lock.read():
            return [person.model_copy() for person in self._persons]

    def get_person(self, person_id: int) -> Person:
        """Return a copy of the record with ``person_id``.

        Raises ``NotFoundError`` when no such record exists.
        """
        with self._lock.read():
            index = self._find_index(person_id)
            found = self._persons[index].model_copy() if index is not None else None
        if found is None:
            raise NotFoundError()
        return found

    def insert_person(self, person: Person) -> None:
        """Add ``person`` unless a record with the same ``id`` exists.

        Raises ``ConflictError`` on a duplicate ``id``; the collection
        is left untouched in that case.
        """
        with self._lock.write():
            exists = self._find_index(person.id) is not None
            if not exists:
                self._persons.append(person.model_copy())
        if exists:
            raise ConflictError()
        logger.info("Created person %s", person.id)

    def update_person(self, person: Person) -> None:
        """Overwrite ``name``, ``age`` and ``date`` of an existing record.

        The record is located by ``person.id``, which itself never
        changes.  Raises ``NotFoundError`` if it does not exist.
        """
        with self._lock.write():
            index = self._find_index(person.id)
            if index is not None:
                current = self._persons[index]
                current.name = person.name
                current.age = person.age
                current.date = person.date
        if index is None:
            raise NotFoundError()
        logger.info("Updated person %s", person.id)

    def delete_person(self, person_id: int) -> None:
        """Remove the record with ``person_id``.

        Raises ``NotFoundError`` if it does not exist.  Remaining
        records keep their relative order.
        """
        with self._lock.write():
            index = self._find_index(person_id)
            if index is not None:
                del self._persons[index]
        if index is None:
            raise NotFoundError()
        logger.info("Deleted person %s", person_id)

