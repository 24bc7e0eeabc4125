"""Shared test fixtures."""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from wanderlist.catalog.store import seed_cities
from wanderlist.database import EntityStore, get_store
from wanderlist.main import app
from wanderlist.people.engine import create_person
from wanderlist.people.models import Person, PersonData


@pytest.fixture
def store() -> EntityStore:
    """Fresh in-memory store with tables created and the catalog seeded."""
    s = EntityStore()
    s.init_db()
    seed_cities(s)
    return s


@pytest.fixture
def john(store: EntityStore) -> Person:
    return create_person(
        store,
        PersonData(first_name="John", last_name="Doe", email="john@example.com", age=30),
    )


@pytest.fixture
def client(store: EntityStore) -> Generator[TestClient, None, None]:
    """FastAPI TestClient bound to the test store."""
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
