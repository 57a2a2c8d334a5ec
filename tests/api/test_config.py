"""Configuration tests."""

from __future__ import annotations

import pytest

from tasktracker.api.config import (
    APISettings,
    DatabaseSettings,
    ServerSettings,
    get_api_settings,
    get_database_settings,
    get_server_settings,
)


class TestAPISettings:
    """API settings tests."""

    def test_custom_values(self) -> None:
        """Custom values can be set."""
        settings = APISettings(
            title="Custom API",
            log_level="DEBUG",
            json_logs=True,
            _env_file=None,
        )

        assert settings.title == "Custom API"
        assert settings.log_level == "DEBUG"
        assert settings.json_logs is True

    def test_reads_prefixed_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """API_ prefixed variables are applied."""
        monkeypatch.setenv("API_LOG_LEVEL", "WARNING")

        assert APISettings(_env_file=None).log_level == "WARNING"

    def test_documented_fields(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """There is no debug switch; API_DEBUG is ignored."""
        monkeypatch.setenv("API_DEBUG", "true")

        settings = APISettings(_env_file=None)

        assert set(APISettings.model_fields) == {
            "title",
            "description",
            "version",
            "log_level",
            "json_logs",
        }
        assert "debug" not in settings.model_dump()


class TestServerSettings:
    """Server settings tests."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Defaults match the local development setup."""
        monkeypatch.delenv("PORT", raising=False)
        monkeypatch.delenv("FRONTEND_URLS", raising=False)

        settings = ServerSettings(_env_file=None)

        assert settings.port == 3001
        assert settings.allowed_origins == ["http://localhost:5173", "http://localhost:4173"]

    def test_reads_port_and_origins_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """PORT and FRONTEND_URLS are read without prefix."""
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("FRONTEND_URLS", " https://a.example.com, ,https://b.example.com ")

        settings = ServerSettings(_env_file=None)

        assert settings.port == 8080
        assert settings.allowed_origins == ["https://a.example.com", "https://b.example.com"]


class TestDatabaseSettings:
    """Database settings tests."""

    def test_reads_database_url(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """DATABASE_URL selects the storage."""
        monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://u:p@db:5432/tasks")

        settings = DatabaseSettings(_env_file=None)

        assert settings.url == "postgresql+asyncpg://u:p@db:5432/tasks"
        assert settings.auto_create_schema is True


class TestSettingsCaching:
    """Cached getter tests."""

    def test_getters_are_cached(self) -> None:
        """Getters return the same instance until the cache is cleared."""
        assert get_api_settings() is get_api_settings()
        assert get_server_settings() is get_server_settings()
        assert get_database_settings() is get_database_settings()
