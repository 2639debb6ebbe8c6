"""
Pytest configuration and shared fixtures.

API tests run the real application against an in-memory SQLite database
created by the app lifespan; store tests get their own in-memory engine.
"""

from collections.abc import AsyncGenerator, Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

from idea_vault import models  # noqa: F401 - registers tables
from idea_vault.config import Settings

TEST_API_KEY = "test-key"
TEST_DATABASE_URL = "sqlite+aiosqlite://"


def make_settings(**overrides) -> Settings:
    """Settings for tests; explicit values win over the environment."""
    values = {
        "api_key": TEST_API_KEY,
        "database_url": TEST_DATABASE_URL,
        "list_limit": 200,
        "allowed_origins": "",
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def settings() -> Settings:
    """Default test settings."""
    return make_settings()


@pytest.fixture
def app(settings) -> FastAPI:
    """Application built around the test settings."""
    from idea_vault.api.main import create_app

    return create_app(settings)


@pytest.fixture
def test_client(app) -> Generator[TestClient, None, None]:
    """Test client with the lifespan running (engine + tables)."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def auth_headers() -> dict[str, str]:
    """Headers carrying the valid API key."""
    return {"x-api-key": TEST_API_KEY}


@pytest.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Create a database session for testing.

    This fixture creates tables in a fresh in-memory database, provides a
    session, and disposes of the engine after the test.
    """
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_maker() as session:
        yield session

    await engine.dispose()


@pytest.fixture
def sample_quick_add_data():
    """Return sample quick-add bodies, one per record type."""
    return {
        "idea": {"type": "idea", "payload": {"title": "Solar kettle", "summary": "Boils water"}},
        "person": {
            "type": "person",
            "payload": {
                "name": "Jane Doe",
                "phone": "555-123-4567",
                "email": "jane@x.com",
                "company": "Acme",
                "role": "CTO",
                "school": "MIT",
                "location": "Boston",
            },
        },
        "tool": {
            "type": "tool",
            "payload": {
                "name": "Figma",
                "url": "https://figma.com",
                "category": "Design",
                "description": "design tool",
            },
        },
    }
