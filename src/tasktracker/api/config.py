"""API configuration settings.

Provides settings for the HTTP server, CORS, database access and logging.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class APISettings(BaseSettings):
    """General API settings."""

    title: str = Field(
        default="Task Tracker API",
        description="API title",
    )
    description: str = Field(
        default="Create, list, edit, complete and delete tasks",
        description="API description",
    )
    version: str = Field(
        default="1.0.0",
        description="API version",
    )
    log_level: str = Field(default="INFO", description="Minimum log level")
    json_logs: bool = Field(
        default=False,
        description="Render logs as JSON lines instead of console output",
    )

    model_config = SettingsConfigDict(
        env_prefix="API_",
        env_file=".env",
        extra="ignore",
    )


class ServerSettings(BaseSettings):
    """Listening address and cross-origin policy."""

    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=3001, description="Listening port")
    frontend_urls: str = Field(
        default="http://localhost:5173,http://localhost:4173",
        description="Comma-separated list of allowed CORS origins",
    )
    allow_localhost_origins: bool = Field(
        default=True,
        description="Also allow any http(s)://localhost or 127.0.0.1 origin",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    @property
    def allowed_origins(self) -> list[str]:
        """Parsed origin list with blanks dropped."""
        return [origin.strip() for origin in self.frontend_urls.split(",") if origin.strip()]


class DatabaseSettings(BaseSettings):
    """Relational storage settings."""

    url: str = Field(
        default="sqlite+aiosqlite:///./tasks.db",
        description="Async SQLAlchemy connection URL",
    )
    pool_size: int = Field(default=10, description="Persistent connections in the pool")
    max_overflow: int = Field(default=20, description="Extra connections beyond pool_size")
    echo: bool = Field(default=False, description="Log emitted SQL")
    auto_create_schema: bool = Field(
        default=True,
        description="Create missing tables on startup",
    )

    model_config = SettingsConfigDict(
        env_prefix="DATABASE_",
        env_file=".env",
        extra="ignore",
    )


@lru_cache
def get_api_settings() -> APISettings:
    """Get cached API settings."""
    return APISettings()


@lru_cache
def get_server_settings() -> ServerSettings:
    """Get cached server settings."""
    return ServerSettings()


@lru_cache
def get_database_settings() -> DatabaseSettings:
    """Get cached database settings."""
    return DatabaseSettings()
