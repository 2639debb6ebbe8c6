"""
Unified exception hierarchy for Idea Vault.

Every error raised by the request handlers and the store derives from
IdeaVaultError, which carries the HTTP status code the API layer renders it
with. The API exception handlers turn these into ``{"error": message}``
JSON bodies; 5xx errors are logged and rendered with a generic message.

Usage:
    from idea_vault.exceptions import AuthError, StoreError, ValidationError

    if not payload.get("title"):
        raise ValidationError("title required", field="title")

    try:
        await session.commit()
    except SQLAlchemyError as exc:
        raise StoreError("insert failed", operation="insert", table="idea") from exc
"""

from typing import Any


class IdeaVaultError(Exception):
    """Base exception for all Idea Vault errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dict with additional error context.
        status_code: HTTP status code the API responds with.
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        *,
        details: dict[str, Any] | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}
        if status_code is not None:
            self.status_code = status_code

    def __str__(self) -> str:
        return f"{self.message} (HTTP {self.status_code})"


class AuthError(IdeaVaultError):
    """API key missing or wrong.

    Raised by the API key dependency before any request body is read, so a
    bad key always wins over a bad payload.
    """

    status_code = 401

    def __init__(self, message: str = "bad key", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class ValidationError(IdeaVaultError):
    """Request failed validation at the handler boundary.

    Raised when:
    - The ``type`` / ``rtype`` discriminator is missing or unknown
    - A type-specific required field is absent
    - A payload field has the wrong JSON shape

    Attributes:
        field: Name of the field that failed validation.
    """

    status_code = 400

    def __init__(
        self,
        message: str = "Validation failed",
        *,
        field: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.field = field


class StoreError(IdeaVaultError):
    """A database insert or select failed.

    Attributes:
        operation: Store operation that failed (insert, select, ...).
        table: Table the operation targeted.
    """

    def __init__(
        self,
        message: str = "Store operation failed",
        *,
        operation: str | None = None,
        table: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.operation = operation
        self.table = table


class ConfigurationError(IdeaVaultError):
    """Configuration is invalid or missing.

    Raised when:
    - DATABASE_URL cannot be turned into an async engine
    - A setting holds a value the service cannot run with
    """


__all__ = [
    "IdeaVaultError",
    "AuthError",
    "ValidationError",
    "StoreError",
    "ConfigurationError",
]
