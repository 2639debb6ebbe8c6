"""Record type classifier for inbound text messages.

Messages are sorted by a leading ``type:`` (or ``type-``) prefix:

    idea: Build a widget
    person: Jane Doe, 555-123-4567, jane@x.com
    tool: Figma|https://figma.com|design tool

A message with no recognised prefix but with attachments is filed as a tool
(screenshots of apps are the common case). Everything else is unknown and is
only kept in the ingestion log.
"""

import re
from enum import Enum


class RecordType(str, Enum):
    """Record types a message can be classified into.

    Values match the table the record is written to.
    """

    IDEA = "idea"
    PERSON = "person"
    TOOL = "tool"
    UNKNOWN = "unknown"


# Checked in order, first match wins
PREFIX_PATTERNS: list[tuple[RecordType, re.Pattern[str]]] = [
    (RecordType.IDEA, re.compile(r"^\s*idea[:\-]", re.IGNORECASE)),
    (RecordType.PERSON, re.compile(r"^\s*(contact|person)[:\-]", re.IGNORECASE)),
    (RecordType.TOOL, re.compile(r"^\s*tool[:\-]", re.IGNORECASE)),
]


def classify(text: str | None, has_media: bool = False) -> RecordType:
    """Classify a message by its prefix.

    Args:
        text: Raw message body (``None`` is treated as empty)
        has_media: Whether the message carried attachments

    Returns:
        The matching RecordType; never raises.

    Example:
        >>> classify("Idea- solar kettle")
        <RecordType.IDEA: 'idea'>
        >>> classify("", has_media=True)
        <RecordType.TOOL: 'tool'>
    """
    text = text or ""
    for record_type, pattern in PREFIX_PATTERNS:
        if pattern.match(text):
            return record_type
    if has_media:
        return RecordType.TOOL
    return RecordType.UNKNOWN
