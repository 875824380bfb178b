"""
Tests for the in-memory person store.
"""
from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from persons_api.app.core.errors import ConflictError, LockError, LockMode, NotFoundError
from persons_api.app.schemas.person import Person
from persons_api.app.services.person_store import PersonStore

from .conftest import poison


def make_person(person_id: int, name: str = "Cara", age: int = 40, day: int = 3) -> Person:
    return Person(id=person_id, name=name, age=age, date=f"2023-01-{day:02d}")


def test_sample_scenario(store):
    alice = store.get_person(1)
    assert alice == Person(id=1, name="Alice", age=30, date="2023-01-01")

    with pytest.raises(NotFoundError):
        store.get_person(99)

    with pytest.raises(ConflictError):
        store.insert_person(make_person(1))
    assert len(store.list_persons()) == 2

    store.insert_person(make_person(3))
    assert len(store.list_persons()) == 3

    store.update_person(Person(id=2, name="Bobby", age=26, date="2023-01-09"))
    assert store.get_person(2).name == "Bobby"

    store.delete_person(1)
    with pytest.raises(NotFoundError):
        store.get_person(1)
    assert {p.id for p in store.list_persons()} == {2, 3}


def test_insert_then_get_round_trip():
    store = PersonStore()
    person = make_person(7)
    store.insert_person(person)
    assert store.get_person(7) == person


def test_conflicting_insert_leaves_record_untouched(store):
    before = store.list_persons()
    with pytest.raises(ConflictError) as exc:
        store.insert_person(Person(id=2, name="Impostor", age=99, date="2020-01-01"))
    assert str(exc.value) == "An element with the same ID already exists"
    assert store.list_persons() == before
    assert not store.lock.poisoned


def test_update_overwrites_all_fields(store):
    store.insert_person(make_person(3))
    store.update_person(Person(id=3, name="Caroline", age=41, date="2024-05-06"))
    assert store.get_person(3) == Person(id=3, name="Caroline", age=41, date="2024-05-06")


def test_update_missing_raises_not_found(store):
    with pytest.raises(NotFoundError):
        store.update_person(make_person(42))
    assert len(store.list_persons()) == 2


def test_delete_missing_raises_not_found(store):
    with pytest.raises(NotFoundError):
        store.delete_person(42)
    assert not store.lock.poisoned


def test_returned_records_are_snapshots(store):
    alice = store.get_person(1)
    alice.name = "Mallory"
    listed = store.list_persons()
    listed[1].age = 0
    listed.clear()

    assert store.get_person(1).name == "Alice"
    assert store.get_person(2).age == 25
    assert len(store.list_persons()) == 2


def test_inserted_record_is_copied():
    store = PersonStore()
    person = make_person(5)
    store.insert_person(person)
    person.name = "Changed later"
    assert store.get_person(5).name == "Cara"


def test_duplicate_ids_rejected_at_construction():
    with pytest.raises(ConflictError):
        PersonStore([make_person(1), make_person(1, name="Other")])


def test_concurrent_inserts_of_same_id_admit_one():
    store = PersonStore()
    barrier = threading.Barrier(8)

    def attempt(n: int) -> bool:
        barrier.wait(5)
        try:
            store.insert_person(make_person(10, name=f"writer-{n}"))
        except ConflictError:
            return False
        return True

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(attempt, range(8)))

    assert results.count(True) == 1
    assert [p.id for p in store.list_persons()] == [10]


def test_concurrent_mixed_operations_keep_ids_unique():
    store = PersonStore()

    def worker(n: int) -> None:
        for i in range(50):
            person_id = (n * 7 + i) % 20
            try:
                store.insert_person(make_person(person_id))
            except ConflictError:
                pass
            try:
                store.update_person(make_person(person_id, age=i))
            except NotFoundError:
                pass
            if i % 3 == 0:
                try:
                    store.delete_person(person_id)
                except NotFoundError:
                    pass
            ids = [p.id for p in store.list_persons()]
            assert len(ids) == len(set(ids))

    with ThreadPoolExecutor(max_workers=6) as pool:
        for future in [pool.submit(worker, n) for n in range(6)]:
            future.result()

    ids = [p.id for p in store.list_persons()]
    assert len(ids) == len(set(ids))


def test_readers_proceed_while_another_reader_holds_lock(store):
    entered, release = threading.Event(), threading.Event()

    def hold_read() -> None:
        with store.lock.read():
            entered.set()
            release.wait(5)

    holder = threading.Thread(target=hold_read)
    holder.start()
    assert entered.wait(5)
    try:
        with ThreadPoolExecutor(max_workers=4) as pool:
            futures = [pool.submit(store.list_persons) for _ in range(4)]
            futures.append(pool.submit(store.get_person, 1))
            for future in futures:
                future.result(timeout=5)
    finally:
        release.set()
        holder.join(5)


def test_poisoned_store_fails_every_operation(store):
    poison(store)

    with pytest.raises(LockError) as exc:
        store.list_persons()
    assert exc.value.mode is LockMode.READ
    with pytest.raises(LockError):
        store.get_person(1)

    for operation in (
        lambda: store.insert_person(make_person(3)),
        lambda: store.update_person(make_person(1)),
        lambda: store.delete_person(1),
    ):
        with pytest.raises(LockError) as exc:
            operation()
        assert exc.value.mode is LockMode.WRITE
