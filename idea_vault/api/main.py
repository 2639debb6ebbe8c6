"""FastAPI application entry point for Idea Vault.

This module builds the FastAPI application around one immutable Settings
object and registers all route handlers.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from idea_vault import __version__
from idea_vault.api.errors import register_exception_handlers
from idea_vault.api.routes import browse, capture, pages, webhook
from idea_vault.config import Settings, get_settings
from idea_vault.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan events.

    Creates the database engine and tables on startup and disposes of the
    connection pool on shutdown.
    """
    from idea_vault.api.database import close_db_connection, create_db_and_tables, init_engine

    settings: Settings = app.state.settings

    # Startup: Initialize database engine and tables
    try:
        init_engine(settings.async_database_url, echo=settings.debug)
        await create_db_and_tables()
        logger.info("Database tables initialized successfully")
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        raise

    yield

    # Shutdown: Close database connection pool
    try:
        await close_db_connection()
        logger.info("Database connections closed")
    except Exception as e:
        logger.error(f"Failed to close database connections: {e}")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application.

    Args:
        settings: Settings to run with; defaults to get_settings()

    Returns:
        FastAPI: Configured application with all routers registered
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="SMS and quick-add capture for ideas, people and tools",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.settings = settings

    if not settings.api_key:
        logger.warning("API_KEY not set - authenticated endpoints will reject every request")

    if settings.cors_origins:
        logger.info(f"CORS allowed origins: {settings.cors_origins}")
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=False,
            allow_methods=["GET", "POST", "OPTIONS"],
            allow_headers=["Content-Type", "x-api-key", "Accept"],
        )

    register_exception_handlers(app)

    # Register route handlers
    app.include_router(pages.router)
    app.include_router(webhook.router)
    app.include_router(capture.router, prefix="/api")
    app.include_router(browse.router, prefix="/api")

    return app


# Initialize structured logging on module import
setup_logging(level=get_settings().log_level)

app = create_app()


def run() -> None:
    """Serve the application with uvicorn."""
    import uvicorn

    settings = get_settings()
    logger.info("Starting Idea Vault", extra={"port": settings.port})

    uvicorn.run(
        "idea_vault.api.main:app",
        host="0.0.0.0",
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
