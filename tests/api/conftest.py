"""API test fixtures."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from datetime import UTC, datetime
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from tasktracker.api.config import (
    get_api_settings,
    get_database_settings,
    get_server_settings,
)
from tasktracker.db.models import Task

IN_MEMORY_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def app(monkeypatch: pytest.MonkeyPatch) -> FastAPI:
    """Create test FastAPI app backed by an in-memory database."""
    monkeypatch.setenv("DATABASE_URL", IN_MEMORY_URL)
    monkeypatch.setenv("DATABASE_AUTO_CREATE_SCHEMA", "true")
    monkeypatch.setenv("FRONTEND_URLS", "http://frontend.example.com")

    from tasktracker.api.main import create_app

    # Importing the module builds the default app and fills the caches
    get_api_settings.cache_clear()
    get_server_settings.cache_clear()
    get_database_settings.cache_clear()

    return create_app()


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    """Create test client; the context manager runs the app lifespan."""
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def mock_task_repo() -> MagicMock:
    """Create mock task repository."""
    repo = MagicMock()
    repo.get_all = AsyncMock()
    repo.create = AsyncMock()
    repo.update = AsyncMock()
    repo.delete = AsyncMock()
    return repo


@pytest.fixture
def make_task() -> Callable[..., Task]:
    """Factory for detached Task instances with sensible defaults."""

    def factory(**overrides: Any) -> Task:
        fields: dict[str, Any] = {
            "id": 1,
            "title": "Task test",
            "description": "Description test",
            "done": False,
            "created_at": datetime(2026, 1, 1, 12, 0, tzinfo=UTC),
        }
        fields.update(overrides)
        return Task(**fields)

    return factory
