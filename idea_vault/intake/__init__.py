"""Intake layer for inbound text messages.

Components:
- classifier.py: prefix-based record type classification
- extractor.py: per-type field extraction
- ingestion.py: webhook payload → ingestion log → typed record

Architecture:
    Webhook form → InboundMessage → IngestionEvent
                                  → classify → extract → Idea | Person | Tool
"""

from idea_vault.intake.classifier import RecordType, classify
from idea_vault.intake.extractor import (
    IdeaFields,
    PersonFields,
    ToolFields,
    extract,
)
from idea_vault.intake.ingestion import (
    InboundMessage,
    IngestionResult,
    MediaItem,
    ingest_message,
)

__all__ = [
    # Classification
    "RecordType",
    "classify",
    # Extraction
    "IdeaFields",
    "PersonFields",
    "ToolFields",
    "extract",
    # Ingestion
    "InboundMessage",
    "IngestionResult",
    "MediaItem",
    "ingest_message",
]
