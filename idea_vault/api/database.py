"""
Database connection management for Idea Vault.

This module owns the process-wide async engine and hands out one
``AsyncSession`` per request. Production runs on Postgres through asyncpg
(including hosted Postgres such as Supabase); tests and local runs use
SQLite through aiosqlite.
"""

import logging
from collections.abc import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import ArgumentError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

from idea_vault import models  # noqa: F401 - registers tables on SQLModel.metadata
from idea_vault.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Global engine and session maker, set by init_engine()
_engine: AsyncEngine | None = None
_async_session_maker: async_sessionmaker[AsyncSession] | None = None


def _engine_options(database_url: str) -> dict:
    if database_url.startswith("sqlite"):
        options: dict = {"connect_args": {"check_same_thread": False}}
        # In-memory databases live in a single connection
        if ":memory:" in database_url or database_url.rstrip("/").endswith("sqlite+aiosqlite:"):
            options["poolclass"] = StaticPool
        return options
    return {
        "pool_size": 10,
        "max_overflow": 5,
        "pool_pre_ping": True,  # Verify connections before using
    }


def init_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """Create the global engine and session maker.

    Args:
        database_url: Async SQLAlchemy URL (``postgresql+asyncpg://...`` or
            ``sqlite+aiosqlite://...``)
        echo: Log every SQL statement

    Returns:
        AsyncEngine: The new engine

    Raises:
        ConfigurationError: If the URL cannot be used to build an engine
    """
    global _engine, _async_session_maker

    try:
        _engine = create_async_engine(
            database_url,
            echo=echo,
            future=True,
            **_engine_options(database_url),
        )
    except (ArgumentError, ImportError, ValueError) as exc:
        raise ConfigurationError(f"Unusable DATABASE_URL: {exc}") from exc

    _async_session_maker = async_sessionmaker(_engine, class_=AsyncSession, expire_on_commit=False)
    logger.info("Database engine created (%s)", _engine.url.get_backend_name())
    return _engine


def get_engine() -> AsyncEngine:
    """Return the global engine.

    Raises:
        ConfigurationError: If init_engine() has not been called
    """
    if _engine is None:
        raise ConfigurationError("Database engine not initialized")
    return _engine


async def create_db_and_tables() -> None:
    """
    Create database tables if they don't exist.

    Should be called on application startup.
    """
    async with get_engine().begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info("Database tables created/verified")


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency for FastAPI to get database session.

    Yields:
        AsyncSession: Database session

    Example:
        >>> from fastapi import Depends
        >>> @router.get("/ideas")
        >>> async def get_ideas(session: AsyncSession = Depends(get_session)):
        >>>     result = await session.execute(select(Idea))
        >>>     return result.scalars().all()
    """
    if _async_session_maker is None:
        raise ConfigurationError("Database engine not initialized")

    async with _async_session_maker() as session:
        yield session


async def close_db_connection() -> None:
    """
    Close database connection pool.

    Should be called on application shutdown.
    """
    global _engine, _async_session_maker

    if _engine is not None:
        await _engine.dispose()
        _engine = None
        _async_session_maker = None
        logger.info("Database connection pool closed")


async def check_database_connection() -> bool:
    """
    Check if database connection is alive.

    Returns:
        bool: True if database is reachable, False otherwise

    Example:
        >>> is_healthy = await check_database_connection()
        >>> print(f"Database: {'healthy' if is_healthy else 'unhealthy'}")
    """
    if _async_session_maker is None:
        return False

    try:
        async with _async_session_maker() as session:
            await session.execute(text("SELECT 1"))
            return True
    except Exception as e:  # noqa: BLE001
        logger.error(f"Database health check failed: {e}")
        return False
