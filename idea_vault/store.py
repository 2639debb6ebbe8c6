"""Record store operations.

Thin async helpers over an SQLAlchemy ``AsyncSession``: insert one row,
list the newest rows of a table, find-or-create an idea by title and read
the research attached to an idea. Every insert commits on its own; there
are no multi-row transactions. Database failures surface as StoreError.
"""

import logging
from typing import TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel, select

from idea_vault.exceptions import StoreError
from idea_vault.models import Idea, IdeaFact, IdeaNote, IdeaSource, Person, Tool

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=SQLModel)

# Tables readable through /api/list
LISTABLE_MODELS: dict[str, type[SQLModel]] = {
    "idea": Idea,
    "person": Person,
    "tool": Tool,
}


async def insert_record(session: AsyncSession, record: RecordT) -> RecordT:
    """Insert and commit a single record.

    Args:
        session: Database session
        record: Unsaved model instance

    Returns:
        The same instance, refreshed with its generated id.

    Raises:
        StoreError: If the insert or commit fails (the session is rolled back)
    """
    table = record.__tablename__
    session.add(record)
    try:
        await session.commit()
        await session.refresh(record)
    except SQLAlchemyError as exc:
        await session.rollback()
        logger.error("Insert into %s failed: %s", table, exc, exc_info=True)
        raise StoreError(f"Insert into {table} failed", operation="insert", table=table) from exc

    logger.debug("Inserted %s row %s", table, record.id)
    return record


async def list_latest(
    session: AsyncSession,
    model: type[RecordT],
    limit: int,
) -> list[RecordT]:
    """Return up to ``limit`` rows of ``model``, newest first."""
    try:
        result = await session.execute(
            select(model).order_by(model.created_at.desc(), model.id.desc()).limit(limit)
        )
    except SQLAlchemyError as exc:
        logger.error("Select from %s failed: %s", model.__tablename__, exc, exc_info=True)
        raise StoreError(
            f"Select from {model.__tablename__} failed",
            operation="select",
            table=model.__tablename__,
        ) from exc
    return list(result.scalars().all())


async def find_idea_by_title(session: AsyncSession, title: str) -> Idea | None:
    """Most recently created idea whose title equals ``title`` exactly."""
    try:
        result = await session.execute(
            select(Idea)
            .where(Idea.title == title)
            .order_by(Idea.created_at.desc(), Idea.id.desc())
            .limit(1)
        )
    except SQLAlchemyError as exc:
        logger.error("Idea lookup failed: %s", exc, exc_info=True)
        raise StoreError("Idea lookup failed", operation="select", table="idea") from exc
    return result.scalars().first()


async def resolve_idea_id(session: AsyncSession, title: str) -> int:
    """Find an idea by exact title, creating one with only the title if absent.

    Two concurrent calls for the same new title can both miss the lookup and
    create two ideas; titles are not unique in the store.

    Returns:
        The id of the found or created idea.
    """
    idea = await find_idea_by_title(session, title)
    if idea is not None:
        return idea.id

    idea = await insert_record(session, Idea(title=title))
    logger.info("Created idea %d for research", idea.id, extra={"idea_id": idea.id})
    return idea.id


async def _children(
    session: AsyncSession,
    model: type[RecordT],
    idea_id: int,
) -> list[RecordT]:
    try:
        result = await session.execute(
            select(model)
            .where(model.idea_id == idea_id)
            .order_by(model.created_at.desc(), model.id.desc())
        )
    except SQLAlchemyError as exc:
        logger.error("Select from %s failed: %s", model.__tablename__, exc, exc_info=True)
        raise StoreError(
            f"Select from {model.__tablename__} failed",
            operation="select",
            table=model.__tablename__,
        ) from exc
    return list(result.scalars().all())


async def get_idea_research(session: AsyncSession, idea_id: int) -> dict[str, list[SQLModel]]:
    """All notes, sources and facts for an idea, newest first.

    An unknown idea id yields three empty lists.
    """
    return {
        "notes": await _children(session, IdeaNote, idea_id),
        "refs": await _children(session, IdeaSource, idea_id),
        "facts": await _children(session, IdeaFact, idea_id),
    }
