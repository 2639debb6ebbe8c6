"""Shared FastAPI dependencies: settings access and API key check."""

import logging

from fastapi import Depends, Header, Query, Request

from idea_vault.config import Settings
from idea_vault.exceptions import AuthError

logger = logging.getLogger(__name__)


def get_app_settings(request: Request) -> Settings:
    """Settings the running application was created with."""
    return request.app.state.settings


async def require_api_key(
    x_api_key: str | None = Header(default=None),
    key: str | None = Query(default=None),
    settings: Settings = Depends(get_app_settings),
) -> None:
    """Verify the API key from the ``x-api-key`` header or ``?key=``.

    The header wins when both are present. With no key configured every
    request is rejected.

    Raises:
        AuthError: Missing or wrong key (401)
    """
    supplied = x_api_key or key
    if not supplied or not settings.api_key or supplied != settings.api_key:
        logger.warning("Rejected request with %s API key", "missing" if not supplied else "invalid")
        raise AuthError()
