"""Capture API: structured quick-add and research-add.

Both endpoints insert records directly, without classification. The API key
is checked by a route dependency before the body is read.
"""

import json
import logging
from typing import Any

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

from idea_vault.api.database import get_session
from idea_vault.api.dependencies import require_api_key
from idea_vault.api.schemas import (
    IdeaPayload,
    PersonPayload,
    QuickAddRequest,
    QuickAddResponse,
    ResearchAddRequest,
    ResearchAddResponse,
    ToolPayload,
)
from idea_vault.exceptions import ValidationError
from idea_vault.models import Idea, IdeaFact, IdeaNote, IdeaSource, Person, Tool
from idea_vault.store import insert_record, resolve_idea_id

logger = logging.getLogger(__name__)

router = APIRouter(tags=["capture"], dependencies=[Depends(require_api_key)])

# type -> (payload schema, table model, required field)
QUICK_ADD_TYPES: dict[str, tuple[type[BaseModel], type[SQLModel], str]] = {
    "idea": (IdeaPayload, Idea, "title"),
    "person": (PersonPayload, Person, "name"),
    "tool": (ToolPayload, Tool, "name"),
}

RESEARCH_TYPES = ("note", "ref", "fact")


async def read_json_object(request: Request) -> dict[str, Any]:
    """Request body as a JSON object; empty, non-JSON or non-object bodies give {}.

    The raw body is read rather than declared as a FastAPI body parameter so
    that a missing or malformed body reaches the handler and gets the same
    per-field error messages ("missing type", "note required") as a body
    with absent keys.
    """
    raw = await request.body()
    if not raw:
        return {}
    try:
        data = json.loads(raw)
    except ValueError:
        logger.info("Ignoring non-JSON body on %s", request.url.path)
        return {}
    return data if isinstance(data, dict) else {}


def parse_body(schema: type[BaseModel], data: dict[str, Any]) -> Any:
    """Validate ``data`` against ``schema``.

    Raises:
        ValidationError: If a field has the wrong shape
    """
    try:
        return schema.model_validate(data)
    except PydanticValidationError as exc:
        logger.info("Invalid payload: %s", exc.errors())
        raise ValidationError("invalid payload") from exc


@router.post("/quick-add", response_model=QuickAddResponse)
async def quick_add(
    request: Request,
    session: AsyncSession = Depends(get_session),
) -> QuickAddResponse:
    """Insert one idea, person or tool.

    Args:
        request: JSON body ``{"type": ..., "payload": {...}}``
        session: Database session (injected)

    Returns:
        QuickAddResponse: ``{"ok": true, "type": ...}``

    Raises:
        ValidationError: Missing/unknown type or missing required field (400)

    Example:
        POST /api/quick-add
        Body: {"type": "idea", "payload": {"title": "Solar kettle"}}
        Response: {"ok": true, "type": "idea"}
    """
    body = parse_body(QuickAddRequest, await read_json_object(request))
    if not body.type:
        raise ValidationError("missing type", field="type")

    if body.type not in QUICK_ADD_TYPES:
        raise ValidationError("unknown type", field="type")
    payload_schema, model, required = QUICK_ADD_TYPES[body.type]

    payload = parse_body(payload_schema, body.payload or {})
    if not getattr(payload, required):
        raise ValidationError(f"{required} required", field=required)

    record = await insert_record(session, model(**payload.model_dump()))
    logger.info("Quick-added %s %d", body.type, record.id, extra={"record_type": body.type})

    return QuickAddResponse(type=body.type)


def _research_record(body: ResearchAddRequest, idea_id: int) -> SQLModel:
    if body.rtype == "note":
        return IdeaNote(idea_id=idea_id, note=body.note)
    if body.rtype == "ref":
        return IdeaSource(idea_id=idea_id, source_url=body.source_url, source_title=body.source_title)
    return IdeaFact(idea_id=idea_id, fact=body.fact, confidence=body.confidence)


def _validate_research(body: ResearchAddRequest) -> None:
    if not body.rtype:
        raise ValidationError("missing rtype", field="rtype")
    if body.rtype not in RESEARCH_TYPES:
        raise ValidationError("unknown rtype", field="rtype")
    if not body.idea_title:
        raise ValidationError("idea_title required", field="idea_title")
    if body.rtype == "note" and not body.note:
        raise ValidationError("note required", field="note")
    if body.rtype == "ref" and not (body.source_url or body.source_title):
        raise ValidationError("source_url or source_title required", field="source_url")
    if body.rtype == "fact" and not body.fact:
        raise ValidationError("fact required", field="fact")


@router.post("/research-add", response_model=ResearchAddResponse)
async def research_add(
    request: Request,
    session: AsyncSession = Depends(get_session),
) -> ResearchAddResponse:
    """Attach a note, reference or fact to an idea, creating the idea if needed.

    The whole body is validated before the idea is resolved, so a rejected
    request never creates an idea.

    Args:
        request: JSON body ``{"rtype", "idea_title", "note"?, "source_url"?,
            "source_title"?, "fact"?, "confidence"?}``
        session: Database session (injected)

    Returns:
        ResearchAddResponse: ``{"ok": true, "rtype": ..., "idea_id": ...}``

    Example:
        POST /api/research-add
        Body: {"rtype": "fact", "idea_title": "Solar kettle", "fact": "Boils in 9 min"}
        Response: {"ok": true, "rtype": "fact", "idea_id": 7}
    """
    body = parse_body(ResearchAddRequest, await read_json_object(request))
    _validate_research(body)

    idea_id = await resolve_idea_id(session, body.idea_title)
    await insert_record(session, _research_record(body, idea_id))
    logger.info("Research %s added to idea %d", body.rtype, idea_id, extra={"idea_id": idea_id})

    return ResearchAddResponse(rtype=body.rtype, idea_id=idea_id)
