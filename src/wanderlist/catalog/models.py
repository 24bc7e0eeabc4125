"""City model."""

from sqlmodel import Field, SQLModel


class City(SQLModel, table=True):
    """A city from the fixed catalog."""

    id: int = Field(primary_key=True)
    name: str
    country: str
