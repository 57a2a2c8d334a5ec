"""Database package for the task tracker."""

from .models.base import Base
from .session import DatabaseSessionManager

__all__ = [
    "Base",
    "DatabaseSessionManager",
]
