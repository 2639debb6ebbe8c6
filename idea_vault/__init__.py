"""Idea Vault: SMS and quick-add capture service for ideas, people and tools."""

__version__ = "0.1.0"
