"""Person model for database storage."""

from datetime import datetime

from sqlmodel import Field, SQLModel


class Person(SQLModel, table=True):
    """A contact captured by text message or the quick-add form.

    Only ``name`` is required, and only at the handler boundary.
    """

    __tablename__ = "person"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(index=True)
    phone: str | None = Field(default=None)
    email: str | None = Field(default=None)
    company: str | None = Field(default=None)
    role: str | None = Field(default=None)
    school: str | None = Field(default=None)
    location: str | None = Field(default=None)
    created_at: datetime = Field(default_factory=datetime.utcnow, index=True)
