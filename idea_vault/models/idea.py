"""Idea and research models.

An Idea is the parent record; notes, sources and facts are append-only
research rows attached to it through ``idea_id``.
"""

from datetime import datetime

from sqlalchemy import Text
from sqlmodel import Field, SQLModel


class Idea(SQLModel, table=True):
    """
    Idea entity.

    Created by an ``idea:`` text message, by quick-add, or implicitly by
    research-add when no idea with the requested title exists yet. Titles
    are not unique; lookups take the most recently created match.

    Attributes:
        id: Unique identifier (auto-generated)
        title: Short title, first line of the captured text
        summary: Remaining text (optional)
        created_at: Timestamp when the idea was created
    """

    __tablename__ = "idea"

    id: int | None = Field(default=None, primary_key=True)
    title: str = Field(index=True)
    summary: str | None = Field(default=None, sa_type=Text)
    created_at: datetime = Field(default_factory=datetime.utcnow, index=True)


class IdeaNote(SQLModel, table=True):
    """Free-text research note on an idea."""

    __tablename__ = "idea_note"

    id: int | None = Field(default=None, primary_key=True)
    idea_id: int = Field(foreign_key="idea.id", index=True)
    note: str = Field(sa_type=Text)
    created_at: datetime = Field(default_factory=datetime.utcnow, index=True)


class IdeaSource(SQLModel, table=True):
    """Reference (link and/or title) backing an idea.

    At least one of ``source_url`` and ``source_title`` is set; the
    research-add handler enforces it.
    """

    __tablename__ = "idea_source"

    id: int | None = Field(default=None, primary_key=True)
    idea_id: int = Field(foreign_key="idea.id", index=True)
    source_url: str | None = Field(default=None)
    source_title: str | None = Field(default=None)
    created_at: datetime = Field(default_factory=datetime.utcnow, index=True)


class IdeaFact(SQLModel, table=True):
    """Fact statement about an idea with an optional confidence score."""

    __tablename__ = "idea_fact"

    id: int | None = Field(default=None, primary_key=True)
    idea_id: int = Field(foreign_key="idea.id", index=True)
    fact: str = Field(sa_type=Text)
    confidence: float | None = Field(default=None)
    created_at: datetime = Field(default_factory=datetime.utcnow, index=True)
