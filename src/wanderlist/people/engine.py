"""Person engine: CRUD operations for persons."""

import logging

from sqlmodel import select

from wanderlist.database import EntityStore
from wanderlist.people.models import Person, PersonData
from wanderlist.travel.models import PersonCity

logger = logging.getLogger(__name__)


def list_persons(store: EntityStore) -> list[Person]:
    """List all persons in creation order."""
    with store.session() as session:
        return list(session.exec(select(Person).order_by(Person.id)).all())


def get_person(store: EntityStore, person_id: int) -> Person | None:
    """Get a person by ID."""
    if person_id <= 0:
        return None
    with store.session() as session:
        return session.get(Person, person_id)


def create_person(store: EntityStore, data: PersonData) -> Person:
    """Create a new person with a freshly assigned id."""
    person = Person.model_validate(data.model_dump())
    with store.session() as session:
        store.add_person(session, person)
        session.commit()
        session.refresh(person)
    logger.debug("Created person id=%s", person.id)
    return person


def update_person(store: EntityStore, person_id: int, data: PersonData) -> Person | None:
    """Replace a person's fields. Return None if not found."""
    with store.session() as session:
        person = session.get(Person, person_id)
        if person is None:
            return None

        person.first_name = data.first_name
        person.last_name = data.last_name
        person.email = data.email
        person.age = data.age

        session.commit()
        session.refresh(person)
        return person


def delete_person(store: EntityStore, person_id: int) -> bool:
    """Delete a person and their city links.

    Returns True if the person was deleted, False if not found.
    Catalog cities are never touched.
    """
    with store.session() as session:
        person = session.get(Person, person_id)
        if person is None:
            return False

        # Delete city links first
        stmt = select(PersonCity).where(PersonCity.person_id == person_id)
        links = session.exec(stmt).all()
        for link in links:
            session.delete(link)

        session.delete(person)
        session.commit()
    logger.debug("Deleted person id=%s and %d city link(s)", person_id, len(links))
    return True
