"""FastAPI dependencies for dependency injection."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from tasktracker.db.repository import TaskRepository
from tasktracker.db.session import DatabaseSessionManager

from .services import TaskService


def get_session_manager(request: Request) -> DatabaseSessionManager:
    """Session manager built at startup and kept on the application state."""
    return request.app.state.db


async def get_db(
    manager: DatabaseSessionManager = Depends(get_session_manager),
) -> AsyncGenerator[AsyncSession, None]:
    """Database session dependency.

    Repository writes commit themselves; anything left uncommitted is
    rolled back if the handler raises.

    Yields:
        AsyncSession for database operations
    """
    async with manager.session() as session:
        yield session


def get_task_service(db: AsyncSession = Depends(get_db)) -> TaskService:
    """Task service bound to the request's session.

    Args:
        db: Database session from DI

    Returns:
        TaskService instance
    """
    return TaskService(TaskRepository(db))


# Type aliases for cleaner route signatures
SessionManager = Annotated[DatabaseSessionManager, Depends(get_session_manager)]
AppTaskService = Annotated[TaskService, Depends(get_task_service)]
