"""Task repository for task-specific operations."""

from __future__ import annotations

from typing import Any, Protocol

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.task import Task
from .base import BaseRepository


class TaskStore(Protocol):
    """Persistence port consumed by the task service."""

    async def get_all(self) -> list[Task]: ...

    async def create(self, **kwargs: Any) -> Task: ...

    async def update(self, id: int, **kwargs: Any) -> Task | None: ...

    async def delete(self, id: int) -> bool: ...


class TaskRepository(BaseRepository[Task]):
    """Repository for Task model operations.

    Every write is committed before the method returns, so a caller that
    got a result back holds a durable row.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize task repository.

        Args:
            session: Database session
        """
        super().__init__(Task, session)

    async def get_all(self) -> list[Task]:
        """Get every task, newest first.

        Rows created within the same clock tick are ordered by id so the
        listing stays stable.

        Returns:
            List of tasks ordered by creation time descending
        """
        stmt = select(Task).order_by(Task.created_at.desc(), Task.id.desc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, **kwargs: Any) -> Task:
        """Insert a task and commit it.

        Args:
            **kwargs: Task attributes

        Returns:
            Created task with id and created_at assigned
        """
        task = await super().create(**kwargs)
        await self.session.commit()
        return task

    async def update(self, id: int, **kwargs: Any) -> Task | None:
        """Apply the given fields in a single UPDATE ... RETURNING.

        Args:
            id: Task id
            **kwargs: Columns to change

        Returns:
            Updated task, or None if no row has this id
        """
        stmt = (
            update(Task)
            .where(Task.id == id)
            .values(**kwargs)
            .returning(Task)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        task = result.scalar_one_or_none()
        await self.session.commit()
        return task

    async def delete(self, id: int) -> bool:
        """Delete a task in a single statement.

        Args:
            id: Task id

        Returns:
            True if a row was removed, False if none matched
        """
        result = await self.session.execute(delete(Task).where(Task.id == id))
        await self.session.commit()
        return result.rowcount > 0
