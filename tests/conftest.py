"""
Shared fixtures: a freshly seeded store and an application wired to it.
"""
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from persons_api.app.core.config import Settings
from persons_api.app.main import create_app
from persons_api.app.services.person_store import PersonStore


@pytest.fixture()
def store() -> PersonStore:
    return PersonStore.with_sample_data()


@pytest.fixture()
def settings() -> Settings:
    return Settings(project_name="Persons API", greeting_text="Hello there")


@pytest.fixture()
def client(store, settings):
    app = create_app(settings=settings, store=store)
    with TestClient(app) as test_client:
        yield test_client


def poison(store: PersonStore) -> None:
    """Make a writer fail while holding the store's lock."""
    with pytest.raises(RuntimeError):
        with store.lock.write():
            raise RuntimeError("writer crashed")
