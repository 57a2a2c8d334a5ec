"""Response schemas for API endpoints."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TaskResponse(BaseModel):
    """Response schema for task data."""

    id: int
    title: str
    description: str
    done: bool
    created_at: datetime = Field(serialization_alias="createdAt")

    model_config = ConfigDict(from_attributes=True)

    @field_validator("created_at")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        """SQLite returns naive timestamps; the database clock is UTC."""
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value


class HealthResponse(BaseModel):
    """Health check response."""

    status: str


class ErrorResponse(BaseModel):
    """Error body returned by every failing request."""

    error: str = Field(description="Error message")
