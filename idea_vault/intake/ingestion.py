"""Inbound message ingestion.

Turns one Twilio SMS/MMS webhook payload into stored records:

    form fields → InboundMessage → IngestionEvent (always)
                                 → classify → extract → Idea | Person | Tool

The raw event is written first so nothing the sender texted is lost even
when it cannot be classified. The typed insert is best-effort: a store
failure there is logged and reported in the result, never raised.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

from idea_vault.exceptions import StoreError
from idea_vault.intake.classifier import RecordType, classify
from idea_vault.intake.extractor import (
    ExtractedFields,
    IdeaFields,
    PersonFields,
    ToolFields,
    extract,
)
from idea_vault.models import Idea, IngestionEvent, Person, Tool
from idea_vault.store import insert_record

logger = logging.getLogger(__name__)

# Twilio delivers at most 10 attachments per message
MAX_MEDIA = 10


@dataclass
class MediaItem:
    """One MMS attachment."""

    url: str | None
    content_type: str | None

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON shape stored on IngestionEvent.media."""
        return {"url": self.url, "content_type": self.content_type}


@dataclass
class InboundMessage:
    """An inbound text message as delivered by the webhook."""

    from_number: str = ""
    body: str = ""
    media: list[MediaItem] = field(default_factory=list)

    @property
    def has_media(self) -> bool:
        return bool(self.media)

    @classmethod
    def from_form(cls, form: Mapping[str, Any]) -> "InboundMessage":
        """Build a message from Twilio's form fields.

        Reads ``From``, ``Body``, ``NumMedia`` and the numbered
        ``MediaUrl{i}`` / ``MediaContentType{i}`` pairs. ``NumMedia``
        attachments (at most MAX_MEDIA) are collected, in order; a missing
        numbered field becomes None.

        Args:
            form: Parsed form body (any mapping with ``get``)

        Returns:
            InboundMessage
        """
        count = parse_media_count(form.get("NumMedia"))
        media = [
            MediaItem(
                url=form.get(f"MediaUrl{i}"),
                content_type=form.get(f"MediaContentType{i}"),
            )
            for i in range(count)
        ]
        return cls(
            from_number=form.get("From") or "",
            body=form.get("Body") or "",
            media=media,
        )


def parse_media_count(raw: Any) -> int:
    """Parse ``NumMedia``; missing, non-integer or negative values count as 0.

    Counts above MAX_MEDIA are clamped to MAX_MEDIA.
    """
    if raw is None:
        return 0
    try:
        count = int(str(raw).strip())
    except ValueError:
        return 0
    return min(max(count, 0), MAX_MEDIA)


def build_record(fields: ExtractedFields) -> SQLModel:
    """Map extracted fields onto the model for their table."""
    if isinstance(fields, IdeaFields):
        return Idea(title=fields.title, summary=fields.summary)
    if isinstance(fields, PersonFields):
        return Person(
            name=fields.name,
            phone=fields.phone,
            email=fields.email,
            company=fields.company,
            role=fields.role,
            location=fields.location,
        )
    if isinstance(fields, ToolFields):
        return Tool(name=fields.name, url=fields.url, description=fields.description)
    raise TypeError(f"Unsupported fields type: {type(fields).__name__}")


@dataclass
class IngestionResult:
    """Outcome of ingesting one message."""

    event_id: int
    record_type: RecordType
    record_id: int | None = None
    stored: bool = False


async def ingest_message(session: AsyncSession, message: InboundMessage) -> IngestionResult:
    """Log, classify and store one inbound message.

    Args:
        session: Database session
        message: Parsed inbound message

    Returns:
        IngestionResult describing what was written

    Raises:
        StoreError: Only if the raw ingestion event cannot be written
    """
    event = await insert_record(
        session,
        IngestionEvent(
            from_number=message.from_number,
            body=message.body,
            media=[item.to_dict() for item in message.media],
        ),
    )

    record_type = classify(message.body, message.has_media)
    result = IngestionResult(event_id=event.id, record_type=record_type)
    logger.info(
        "Classified inbound message %d as %s",
        event.id,
        record_type.value,
        extra={"record_type": record_type.value, "from_number": message.from_number},
    )

    fields = extract(record_type, message.body)
    if fields is None:
        return result

    try:
        record = await insert_record(session, build_record(fields))
    except StoreError as exc:
        logger.warning(
            "Ingestion event %d kept without a %s record: %s",
            event.id,
            record_type.value,
            exc.message,
            extra={"record_type": record_type.value},
        )
        return result

    result.record_id = record.id
    result.stored = True
    return result
