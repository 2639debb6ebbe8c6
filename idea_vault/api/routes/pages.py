"""Static pages and health check."""

import logging
from datetime import UTC, datetime
from functools import lru_cache
from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import HTMLResponse, RedirectResponse

from idea_vault import __version__
from idea_vault.api.database import check_database_connection
from idea_vault.api.schemas import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter()

STATIC_DIR = Path(__file__).resolve().parent.parent / "static"


@lru_cache
def load_page(name: str) -> str:
    """Read a bundled HTML page."""
    return (STATIC_DIR / name).read_text(encoding="utf-8")


@router.get("/", include_in_schema=False)
async def root() -> RedirectResponse:
    """Send browsers to the browse UI."""
    return RedirectResponse(url="/app")


@router.get("/app", response_class=HTMLResponse, tags=["pages"])
async def browse_page() -> HTMLResponse:
    """Single-page browse UI for ideas, people, tools and idea research."""
    return HTMLResponse(load_page("app.html"))


@router.get("/add", response_class=HTMLResponse, tags=["pages"])
async def quick_add_page() -> HTMLResponse:
    """Quick-add and research forms."""
    return HTMLResponse(load_page("add.html"))


@router.get("/api/health", response_model=HealthResponse, tags=["health"])
async def health_check() -> HealthResponse:
    """Health check endpoint.

    Returns current system health status including database connectivity.

    Returns:
        HealthResponse: System health information
    """
    db_status = "connected" if await check_database_connection() else "disconnected"

    return HealthResponse(
        status="healthy" if db_status == "connected" else "degraded",
        timestamp=datetime.now(UTC),
        version=__version__,
        database=db_status,
    )
