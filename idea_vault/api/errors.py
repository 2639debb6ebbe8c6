"""Exception handlers rendering errors as ``{"error": message}`` JSON."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from idea_vault.exceptions import IdeaVaultError

logger = logging.getLogger(__name__)

GENERIC_ERROR = "server error"


async def idea_vault_error_handler(request: Request, exc: IdeaVaultError) -> JSONResponse:
    """Render an IdeaVaultError; 5xx details stay in the logs."""
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=exc.status_code, content={"error": GENERIC_ERROR})
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed path or query parameters are client errors, not 422s."""
    logger.info("Invalid request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "invalid request"},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler for anything not mapped to an IdeaVaultError."""
    logger.error(
        "Unhandled error on %s %s: %s",
        request.method,
        request.url.path,
        exc,
        exc_info=(type(exc), exc, exc.__traceback__),
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": GENERIC_ERROR},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all handlers to ``app``."""
    app.add_exception_handler(IdeaVaultError, idea_vault_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
