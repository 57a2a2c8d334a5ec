"""Async database session factory and utilities."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from .models.base import Base


class DatabaseSessionManager:
    """Manages database engine and session creation.

    One instance is built at application startup and kept on the
    application state for the lifetime of the process.

    Attributes:
        engine: SQLAlchemy async engine instance
        session_factory: Factory for creating async sessions
    """

    def __init__(
        self,
        database_url: str,
        pool_size: int = 10,
        max_overflow: int = 20,
        **engine_kwargs: Any,
    ) -> None:
        """Initialize database session manager.

        Args:
            database_url: Async SQLAlchemy URL (postgresql+asyncpg:// or sqlite+aiosqlite://)
            pool_size: Number of persistent connections in the pool
            max_overflow: Max additional connections beyond pool_size
            **engine_kwargs: Additional arguments passed to create_async_engine
        """
        if database_url.startswith("sqlite"):
            # SQLite has no server-side pool; an in-memory database must
            # reuse a single connection or every session sees an empty db.
            if ":memory:" in database_url or database_url.endswith("://"):
                engine_kwargs.setdefault("poolclass", StaticPool)
        else:
            engine_kwargs.setdefault("pool_size", pool_size)
            engine_kwargs.setdefault("max_overflow", max_overflow)
            engine_kwargs.setdefault("pool_recycle", 3600)

        self.engine: AsyncEngine = create_async_engine(
            database_url,
            pool_pre_ping=True,
            **engine_kwargs,
        )
        self.session_factory: async_sessionmaker[AsyncSession] = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
            autocommit=False,
        )

    async def close(self) -> None:
        """Close database engine and all connections."""
        await self.engine.dispose()

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Open a session scoped to one unit of work.

        The session is committed when the block exits normally and rolled
        back when it raises.

        Yields:
            AsyncSession: Database session instance

        Example:
            async with session_manager.session() as session:
                result = await session.execute(select(Task))
        """
        async with self.session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def ping(self) -> None:
        """Run a trivial query to check connectivity.

        Raises:
            sqlalchemy.exc.SQLAlchemyError: If the database is unreachable
        """
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def create_all(self) -> None:
        """Create all tables defined in Base metadata that do not exist yet.

        Used as the startup schema bootstrap and in tests. Alembic
        migrations are the managed alternative.
        """
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def drop_all(self) -> None:
        """Drop all tables defined in Base metadata.

        WARNING: This will delete all data. Only use for testing.
        """
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
