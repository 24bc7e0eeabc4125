"""Person models."""

from sqlmodel import Field, SQLModel


class PersonData(SQLModel):
    """Mutable person fields, replaced wholesale on update."""

    first_name: str
    last_name: str
    email: str
    age: int = 0


class Person(PersonData, table=True):
    """A person who keeps a list of cities to visit."""

    # Assigned by EntityStore.add_person, never by the database
    id: int | None = Field(default=None, primary_key=True)
