"""Travel manager: the cities on each person's list and their visited state.

Every row read or written here is returned as a PersonCityView, the link
joined with its catalog city. Missing persons, cities or links come back as
None (or RemoveOutcome.not_found) rather than raising, so callers can branch
on the outcome directly.
"""

import logging
from datetime import UTC, datetime

from sqlmodel import Session, select

from wanderlist.catalog.models import City
from wanderlist.database import EntityStore
from wanderlist.people.models import Person
from wanderlist.travel.models import PersonCity, PersonCityView, RemoveOutcome

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    # Naive UTC for SQLite compatibility (SQLite strips tzinfo)
    return datetime.now(UTC).replace(tzinfo=None)


def _as_naive_utc(value: datetime) -> datetime:
    # Naive input is taken to be UTC already
    if value.tzinfo is None:
        return value
    return value.astimezone(UTC).replace(tzinfo=None)


def _as_aware_utc(value: datetime | None) -> datetime | None:
    if value is None:
        return None
    return value.replace(tzinfo=UTC)


def _view(link: PersonCity, city: City) -> PersonCityView:
    return PersonCityView(
        person_id=link.person_id,
        city_id=link.city_id,
        city_name=city.name,
        country=city.country,
        is_visited=link.is_visited,
        visited_date=_as_aware_utc(link.visited_date),
    )


def _get_link(session: Session, person_id: int, city_id: int) -> PersonCity | None:
    return session.get(PersonCity, (person_id, city_id))


def list_person_cities(store: EntityStore, person_id: int) -> list[PersonCityView] | None:
    """Get every city on a person's list, ordered by city id.

    Returns None if the person does not exist, and an empty list if they
    exist but have not added any cities.
    """
    with store.session() as session:
        if session.get(Person, person_id) is None:
            return None
        stmt = (
            select(PersonCity, City)
            .join(City, PersonCity.city_id == City.id)  # type: ignore[arg-type]
            .where(PersonCity.person_id == person_id)
            .order_by(City.id)
        )
        return [_view(link, city) for link, city in session.exec(stmt).all()]


def add_city(store: EntityStore, person_id: int, city_id: int) -> PersonCityView | None:
    """Put a city on a person's list (get-or-create).

    Returns None if either the person or the city does not exist. Adding a
    city that is already on the list returns the existing link unchanged.
    """
    with store.session() as session:
        if session.get(Person, person_id) is None:
            return None
        city = session.get(City, city_id)
        if city is None:
            return None

        # Already on the list (idempotent)
        link = _get_link(session, person_id, city_id)
        if link is not None:
            logger.debug("City %s already on list of person %s", city_id, person_id)
            return _view(link, city)

        link = PersonCity(person_id=person_id, city_id=city_id)
        session.add(link)
        session.commit()
        session.refresh(link)
        logger.debug("Added city %s to person %s", city_id, person_id)
        return _view(link, city)


def mark_visited(
    store: EntityStore,
    person_id: int,
    city_id: int,
    is_visited: bool,
    visited_date: datetime | None = None,
) -> PersonCityView | None:
    """Set the visited state of a city already on a person's list.

    Marking visited stamps ``visited_date`` (now, if no date is given);
    unmarking always clears it. Naive dates are read as UTC and the
    returned date is always timezone-aware UTC. Returns None if the city is not on the
    person's list; this never creates a link.
    """
    with store.session() as session:
        link = _get_link(session, person_id, city_id)
        if link is None:
            return None

        link.is_visited = is_visited
        if is_visited:
            link.visited_date = (
                _as_naive_utc(visited_date) if visited_date is not None else _utcnow()
            )
        else:
            link.visited_date = None

        session.commit()
        session.refresh(link)
        city = session.get(City, city_id)
        logger.debug(
            "Person %s city %s visited=%s date=%s",
            person_id,
            city_id,
            link.is_visited,
            link.visited_date,
        )
        return _view(link, city)


def remove_city(store: EntityStore, person_id: int, city_id: int) -> RemoveOutcome:
    """Take a city off a person's list.

    A visited city is left in place and reported as RemoveOutcome.visited;
    it has to be unmarked first.
    """
    with store.session() as session:
        link = _get_link(session, person_id, city_id)
        if link is None:
            return RemoveOutcome.not_found
        if link.is_visited:
            logger.debug("Refusing to remove visited city %s from person %s", city_id, person_id)
            return RemoveOutcome.visited

        session.delete(link)
        session.commit()
    logger.debug("Removed city %s from person %s", city_id, person_id)
    return RemoveOutcome.removed
