"""Read-only browse API backing the /app page."""

import logging

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from idea_vault.api.database import get_session
from idea_vault.api.dependencies import get_app_settings, require_api_key
from idea_vault.config import Settings
from idea_vault.exceptions import ValidationError
from idea_vault.store import LISTABLE_MODELS, get_idea_research, list_latest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["browse"], dependencies=[Depends(require_api_key)])


@router.get("/list")
async def list_records(
    record_type: str | None = Query(default=None, alias="type"),
    session: AsyncSession = Depends(get_session),
    settings: Settings = Depends(get_app_settings),
) -> list:
    """List the newest ideas, people or tools.

    Args:
        record_type: ``?type=`` one of idea, person, tool
        session: Database session (injected)
        settings: Application settings (injected)

    Returns:
        Up to ``settings.list_limit`` rows, newest first

    Raises:
        ValidationError: Type missing or not in the allow-list (400)

    Example:
        GET /api/list?type=person
        Response: [{"id": 3, "name": "Jane Doe", ...}, ...]
    """
    model = LISTABLE_MODELS.get(record_type or "")
    if model is None:
        raise ValidationError("bad type", field="type")

    return await list_latest(session, model, settings.list_limit)


@router.get("/idea/{idea_id}/research")
async def idea_research(
    idea_id: int,
    session: AsyncSession = Depends(get_session),
) -> dict:
    """Notes, references and facts attached to an idea.

    Example:
        GET /api/idea/7/research
        Response: {"notes": [...], "refs": [...], "facts": [...]}
    """
    return await get_idea_research(session, idea_id)
