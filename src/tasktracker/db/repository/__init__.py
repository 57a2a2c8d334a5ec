"""Repository layer for data access."""

from .base import BaseRepository
from .task_repo import TaskRepository, TaskStore

__all__ = [
    "BaseRepository",
    "TaskRepository",
    "TaskStore",
]
