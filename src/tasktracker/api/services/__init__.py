"""API service layer for business logic."""

from .task_service import TaskService

__all__ = [
    "TaskService",
]
