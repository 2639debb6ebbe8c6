"""Application settings.

Settings are read once from environment variables (and an optional .env
file) and are immutable afterwards. The FastAPI application keeps the
instance on ``app.state.settings`` and hands it to handlers explicitly.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings

DEFAULT_DATABASE_URL = "sqlite+aiosqlite:///./idea_vault.db"


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Attributes:
        app_name: Application name shown in the API docs
        api_key: Shared secret for the authenticated API (empty rejects all)
        database_url: SQLAlchemy URL of the record store
        port: HTTP port for uvicorn
        log_level: Root log level
        list_limit: Maximum rows returned by /api/list
        allowed_origins: Comma separated CORS origins
        debug: Echo SQL statements
    """

    # Application
    app_name: str = "Idea Vault"
    debug: bool = False
    port: int = 8080
    log_level: str = "INFO"

    # Auth
    api_key: str = ""

    # Database (hosted Postgres URLs are accepted as-is, see async_database_url)
    database_url: str = DEFAULT_DATABASE_URL

    # API behaviour
    list_limit: int = 200
    allowed_origins: str = ""

    class Config:
        """Pydantic configuration."""

        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"
        frozen = True

    @property
    def async_database_url(self) -> str:
        """Database URL rewritten for an async SQLAlchemy driver.

        Hosted Postgres providers hand out ``postgres://`` or
        ``postgresql://`` URLs; SQLAlchemy async requires
        ``postgresql+asyncpg://``.
        """
        url = self.database_url
        if url.startswith("postgres://"):
            return url.replace("postgres://", "postgresql+asyncpg://", 1)
        if url.startswith("postgresql://"):
            return url.replace("postgresql://", "postgresql+asyncpg://", 1)
        return url

    @property
    def cors_origins(self) -> list[str]:
        """Parsed ALLOWED_ORIGINS."""
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings: Application settings

    Example:
        >>> settings = get_settings()
        >>> print(settings.list_limit)
        200
    """
    return Settings()
