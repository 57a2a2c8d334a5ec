"""Database models for the task tracker."""

from .base import Base
from .task import Task

__all__ = [
    "Base",
    "Task",
]
