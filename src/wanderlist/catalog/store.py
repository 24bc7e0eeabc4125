"""City catalog: seeding and read-only lookups."""

import logging

from sqlmodel import select

from wanderlist.catalog.models import City
from wanderlist.database import EntityStore

logger = logging.getLogger(__name__)

# (id, name, country) in catalog order
SEED_CITIES: list[tuple[int, str, str]] = [
    (1, "Paris", "France"),
    (2, "Tokyo", "Japan"),
    (3, "New York", "USA"),
    (4, "Barcelona", "Spain"),
    (5, "Dubai", "UAE"),
    (6, "London", "UK"),
    (7, "Rome", "Italy"),
    (8, "Sydney", "Australia"),
    (9, "Istanbul", "Turkey"),
    (10, "Amsterdam", "Netherlands"),
]


def seed_cities(store: EntityStore) -> int:
    """Insert any missing catalog cities. Returns how many were added."""
    added = 0
    with store.session() as session:
        for city_id, name, country in SEED_CITIES:
            if session.get(City, city_id) is None:
                session.add(City(id=city_id, name=name, country=country))
                added += 1
        session.commit()
    if added:
        logger.info("Seeded %d cities", added)
    return added


def list_cities(store: EntityStore) -> list[City]:
    """All catalog cities in id order."""
    with store.session() as session:
        return list(session.exec(select(City).order_by(City.id)).all())


def get_city(store: EntityStore, city_id: int) -> City | None:
    """Get a single city by ID."""
    with store.session() as session:
        return session.get(City, city_id)
