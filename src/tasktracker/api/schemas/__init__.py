"""Pydantic schemas for API request/response validation."""

from .requests import UPDATABLE_FIELDS, TaskCreate, TaskUpdate
from .responses import ErrorResponse, HealthResponse, TaskResponse

__all__ = [
    # Requests
    "TaskCreate",
    "TaskUpdate",
    "UPDATABLE_FIELDS",
    # Responses
    "TaskResponse",
    "HealthResponse",
    "ErrorResponse",
]
