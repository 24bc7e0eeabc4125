"""Person-city link models and outcomes."""

import enum
from datetime import datetime

from sqlmodel import Field, SQLModel

VISITED_CITY_MESSAGE = (
    "Cannot remove a city that has been visited. Please unmark it as visited first."
)


class PersonCity(SQLModel, table=True):
    """Link table: a city on a person's list, visited or not."""

    person_id: int = Field(foreign_key="person.id", primary_key=True)
    city_id: int = Field(foreign_key="city.id", primary_key=True, index=True)
    is_visited: bool = Field(default=False, index=True)
    visited_date: datetime | None = None  # set iff is_visited


class PersonCityView(SQLModel):
    """A person-city link joined with its city details."""

    person_id: int
    city_id: int
    city_name: str
    country: str
    is_visited: bool
    visited_date: datetime | None = None


class RemoveOutcome(enum.StrEnum):
    removed = "removed"
    not_found = "not_found"
    visited = "visited"
