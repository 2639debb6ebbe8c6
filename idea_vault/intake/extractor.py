"""Field extraction for classified messages.

Each record type has a fixed text layout after its prefix:

- idea: first line is the title, the rest is the summary
- person: comma separated ``name, phone, email, company, role, location``
- tool: pipe separated ``name|url|description``

Company, role and location are read by position. A message that skips a
field (``person: Jane, jane@x.com, Acme``) shifts the rest, so Acme is not
stored as the company.
"""

import re
from dataclasses import dataclass

from idea_vault.intake.classifier import RecordType

DEFAULT_IDEA_TITLE = "Untitled Idea"
DEFAULT_PERSON_NAME = "Unknown"
DEFAULT_TOOL_NAME = "Unknown Tool"

# Everything up to and including the first prefix token and its separator
PREFIX_STRIP_PATTERNS: dict[RecordType, re.Pattern[str]] = {
    RecordType.IDEA: re.compile(r"^.*?idea[:\-]\s*", re.IGNORECASE),
    RecordType.PERSON: re.compile(r"^.*?(contact|person)[:\-]\s*", re.IGNORECASE),
    RecordType.TOOL: re.compile(r"^.*?tool[:\-]\s*", re.IGNORECASE),
}

# Three digits, anything, four digits
PHONE_PATTERN = re.compile(r"\d{3}.*\d{4}")

# Person parts read by position
COMPANY_INDEX = 3
ROLE_INDEX = 4
LOCATION_INDEX = 5


@dataclass
class IdeaFields:
    """Fields extracted from an ``idea:`` message."""

    title: str
    summary: str | None = None


@dataclass
class PersonFields:
    """Fields extracted from a ``person:`` / ``contact:`` message."""

    name: str
    phone: str | None = None
    email: str | None = None
    company: str | None = None
    role: str | None = None
    location: str | None = None


@dataclass
class ToolFields:
    """Fields extracted from a ``tool:`` message or a media-only message."""

    name: str
    url: str | None = None
    description: str | None = None


ExtractedFields = IdeaFields | PersonFields | ToolFields


def strip_prefix(record_type: RecordType, text: str) -> str:
    """Remove the type prefix (and anything before it) from ``text``."""
    pattern = PREFIX_STRIP_PATTERNS.get(record_type)
    if pattern is None:
        return text
    return pattern.sub("", text, count=1)


def _part(parts: list[str], index: int) -> str | None:
    if index < len(parts) and parts[index]:
        return parts[index]
    return None


def extract_idea(text: str) -> IdeaFields:
    """Split an idea message into title and summary.

    Example:
        >>> extract_idea("idea: Build a widget\\nMakes widgets")
        IdeaFields(title='Build a widget', summary='Makes widgets')
    """
    first_line, *rest = strip_prefix(RecordType.IDEA, text).split("\n")
    return IdeaFields(
        title=first_line.strip() or DEFAULT_IDEA_TITLE,
        summary="\n".join(rest).strip() or None,
    )


def extract_person(text: str) -> PersonFields:
    """Split a person message on commas.

    Phone and email are found anywhere in the list; company, role and
    location are taken from fixed positions 3, 4 and 5.
    """
    parts = [part.strip() for part in strip_prefix(RecordType.PERSON, text).split(",")]
    return PersonFields(
        name=parts[0] or DEFAULT_PERSON_NAME,
        phone=next((part for part in parts if PHONE_PATTERN.search(part)), None),
        email=next((part for part in parts if "@" in part), None),
        company=_part(parts, COMPANY_INDEX),
        role=_part(parts, ROLE_INDEX),
        location=_part(parts, LOCATION_INDEX),
    )


def extract_tool(text: str) -> ToolFields:
    """Split a tool message on ``|`` into name, url and description."""
    parts = [part.strip() for part in strip_prefix(RecordType.TOOL, text).split("|")]
    return ToolFields(
        name=parts[0] or DEFAULT_TOOL_NAME,
        url=_part(parts, 1),
        description=_part(parts, 2),
    )


def extract(record_type: RecordType, text: str | None) -> ExtractedFields | None:
    """Extract structured fields for a classified message.

    Args:
        record_type: Result of ``classify`` for the same text
        text: Raw message body

    Returns:
        Typed fields, or None for RecordType.UNKNOWN.
    """
    text = text or ""
    if record_type is RecordType.IDEA:
        return extract_idea(text)
    if record_type is RecordType.PERSON:
        return extract_person(text)
    if record_type is RecordType.TOOL:
        return extract_tool(text)
    return None
