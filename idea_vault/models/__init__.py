"""Database models for Idea Vault.

This module contains SQLModel schemas for every persisted record.
"""

from idea_vault.models.idea import Idea, IdeaFact, IdeaNote, IdeaSource
from idea_vault.models.ingestion_event import IngestionEvent
from idea_vault.models.person import Person
from idea_vault.models.tool import Tool

__all__ = [
    "IngestionEvent",
    "Idea",
    "IdeaNote",
    "IdeaSource",
    "IdeaFact",
    "Person",
    "Tool",
]
