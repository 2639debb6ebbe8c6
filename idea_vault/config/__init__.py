"""
Configuration module.

Provides the immutable application settings.

Usage:
    from idea_vault.config import Settings, get_settings

    settings = get_settings()
    if settings.api_key:
        ...
"""

from idea_vault.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
