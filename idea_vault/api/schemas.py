"""Request and response models for the capture API.

Request bodies are parsed inside the handlers (after the API key check) and
validated with these models. Every field is optional at the schema level;
required fields are enforced by the handlers so each missing field gets its
own error message.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class _Payload(BaseModel):
    """Base for loosely typed JSON bodies: unknown keys are ignored and JSON
    numbers are accepted for string fields."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    @field_validator("*", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class QuickAddRequest(_Payload):
    """``POST /api/quick-add`` body."""

    type: str | None = None
    payload: dict[str, Any] | None = None


class IdeaPayload(_Payload):
    title: str | None = None
    summary: str | None = None


class PersonPayload(_Payload):
    name: str | None = None
    phone: str | None = None
    email: str | None = None
    company: str | None = None
    role: str | None = None
    school: str | None = None
    location: str | None = None


class ToolPayload(_Payload):
    name: str | None = None
    url: str | None = None
    category: str | None = None
    description: str | None = None


class ResearchAddRequest(_Payload):
    """``POST /api/research-add`` body."""

    rtype: str | None = None
    idea_title: str | None = None
    note: str | None = None
    source_url: str | None = None
    source_title: str | None = None
    fact: str | None = None
    confidence: float | None = None


class QuickAddResponse(BaseModel):
    ok: bool = True
    type: str


class ResearchAddResponse(BaseModel):
    ok: bool = True
    rtype: str
    idea_id: int


class HealthResponse(BaseModel):
    """Health check response model.

    Attributes:
        status: Current health status (healthy/degraded)
        timestamp: Current server timestamp
        version: API version
        database: Database connection status
    """

    status: str
    timestamp: datetime
    version: str
    database: str = "disconnected"
