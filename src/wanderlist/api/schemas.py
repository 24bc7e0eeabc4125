"""Request and response models for the REST API (camelCase on the wire)."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from wanderlist.people.models import PersonData

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class ApiModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# Request models
class PersonRequest(ApiModel):
    first_name: str = Field(min_length=1, max_length=50)
    last_name: str = Field(min_length=1, max_length=50)
    email: str = Field(max_length=100, pattern=EMAIL_PATTERN)
    age: int = Field(default=0, ge=0, le=150)

    @field_validator("first_name", "last_name")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    def to_data(self) -> PersonData:
        return PersonData(**self.model_dump())


class UpdatePersonCityRequest(ApiModel):
    is_visited: bool
    visited_date: datetime | None = None


# Response models
class PersonRead(ApiModel):
    id: int
    first_name: str
    last_name: str
    email: str
    age: int


class PersonCityRead(ApiModel):
    person_id: int
    city_id: int
    city_name: str
    country: str
    is_visited: bool
    visited_date: datetime | None = None


class PersonDetail(PersonRead):
    cities: list[PersonCityRead] = []


class CityRead(ApiModel):
    id: int
    name: str
    country: str


class ErrorResponse(BaseModel):
    error: str
