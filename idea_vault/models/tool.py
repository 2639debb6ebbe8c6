"""Tool model for database storage."""

from datetime import datetime

from sqlalchemy import Text
from sqlmodel import Field, SQLModel


class Tool(SQLModel, table=True):
    """A tool, product or screenshot worth remembering."""

    __tablename__ = "tool"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(index=True)
    url: str | None = Field(default=None)
    category: str | None = Field(default=None)
    description: str | None = Field(default=None, sa_type=Text)
    created_at: datetime = Field(default_factory=datetime.utcnow, index=True)
