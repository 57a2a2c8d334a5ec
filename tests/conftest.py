"""
Pytest configuration and fixtures
"""

from __future__ import annotations

from collections.abc import AsyncGenerator, Iterator

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from tasktracker.api.config import (
    get_api_settings,
    get_database_settings,
    get_server_settings,
)
from tasktracker.db.session import DatabaseSessionManager

IN_MEMORY_URL = "sqlite+aiosqlite:///:memory:"


def _clear_settings_cache() -> None:
    get_api_settings.cache_clear()
    get_server_settings.cache_clear()
    get_database_settings.cache_clear()


@pytest.fixture(autouse=True)
def fresh_settings() -> Iterator[None]:
    """Drop cached settings around each test so env changes apply."""
    _clear_settings_cache()
    yield
    _clear_settings_cache()


@pytest.fixture
async def session_manager() -> AsyncGenerator[DatabaseSessionManager, None]:
    """Session manager over an empty in-memory database."""
    manager = DatabaseSessionManager(IN_MEMORY_URL)
    await manager.create_all()
    yield manager
    await manager.close()


@pytest.fixture
async def db_session(
    session_manager: DatabaseSessionManager,
) -> AsyncGenerator[AsyncSession, None]:
    """Database session for one test."""
    async with session_manager.session() as session:
        yield session
