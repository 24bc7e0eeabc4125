"""In-memory entity store and session management."""

import threading
from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import Request
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from wanderlist.people.models import Person


class EntityStore:
    """Holds persons, cities and their links in a private in-memory database.

    StaticPool keeps a single connection alive, so every session sees the
    same data for the lifetime of the store. That connection is shared, so
    every session holds ``lock`` from open to close, reads included.
    """

    def __init__(self) -> None:
        self.engine = create_engine(
            "sqlite://",
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        self.lock = threading.RLock()
        self._next_person_id = 1

    def init_db(self) -> None:
        """Create all tables."""
        # Import models to register them with SQLModel before create_all()
        import wanderlist.catalog.models  # noqa: F401
        import wanderlist.travel.models  # noqa: F401

        SQLModel.metadata.create_all(self.engine)

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Open a session with the store lock held until it closes."""
        with self.lock:
            # Entities stay readable after commit and close
            with Session(self.engine, expire_on_commit=False) as session:
                yield session

    def add_person(self, session: Session, person: Person) -> Person:
        """Assign the next person id and stage the insert.

        Ids come from a counter owned by this store, never from the
        current rows, so a deleted id is never handed out again.
        """
        with self.lock:
            person.id = self._next_person_id
            self._next_person_id += 1
            session.add(person)
        return person


def get_store(request: Request) -> EntityStore:
    """Return the application store for FastAPI Depends()."""
    return request.app.state.store
