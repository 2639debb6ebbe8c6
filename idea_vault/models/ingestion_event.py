"""
IngestionEvent model for database storage.

Raw, append-only log of every inbound webhook message, written before the
message is classified.
"""

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, Column, Text
from sqlmodel import Field, SQLModel


class IngestionEvent(SQLModel, table=True):
    """
    One inbound SMS/MMS webhook call, exactly as received.

    Attributes:
        id: Unique identifier (auto-generated)
        from_number: Sender phone number (``From`` form field)
        body: Message text (``Body`` form field)
        media: Ordered list of ``{"url", "content_type"}`` attachments
        created_at: Timestamp when the event was received
    """

    __tablename__ = "ingestion_event"

    id: int | None = Field(default=None, primary_key=True)
    from_number: str = Field(default="", index=True)
    body: str = Field(default="", sa_type=Text)
    media: list[dict[str, Any]] = Field(default_factory=list, sa_column=Column(JSON))
    created_at: datetime = Field(default_factory=datetime.utcnow, index=True)
