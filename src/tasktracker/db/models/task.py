"""Task model."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import TEXT, VARCHAR, Boolean, DateTime, Integer, false, func
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base

TITLE_MAX_LENGTH = 120
DESCRIPTION_MAX_LENGTH = 1000


class Task(Base):
    """A to-do item.

    Attributes:
        id: Primary key, assigned by the database
        title: Short title (1..120 chars once trimmed)
        description: Free text body (1..1000 chars once trimmed)
        done: Completion flag
        created_at: Creation timestamp, assigned by the database
    """

    __tablename__ = "tasks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(VARCHAR(TITLE_MAX_LENGTH))
    description: Mapped[str] = mapped_column(TEXT, server_default="")
    done: Mapped[bool] = mapped_column(Boolean, default=False, server_default=false())
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), index=True
    )

    def __repr__(self) -> str:
        return f"<Task(id={self.id}, done={self.done})>"
