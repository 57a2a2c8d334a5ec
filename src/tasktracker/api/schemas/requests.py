"""Request schemas for API endpoints.

Fields are typed ``Any`` on purpose: bodies are accepted as sent and the
task service is the only place that validates them, so clients get the
service's messages rather than pydantic's.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

UPDATABLE_FIELDS = ("title", "description", "done")


class TaskCreate(BaseModel):
    """Request body for creating a task."""

    title: Any = None
    description: Any = None

    model_config = ConfigDict(extra="ignore")


class TaskUpdate(BaseModel):
    """Request body for a partial task update.

    Only keys present in the body count as supplied; ``model_fields_set``
    tells an omitted field apart from an explicit ``null``.
    """

    title: Any = None
    description: Any = None
    done: Any = None

    model_config = ConfigDict(extra="ignore")

    def supplied(self) -> dict[str, Any]:
        """Return the recognized fields the client actually sent."""
        return {
            name: getattr(self, name) for name in UPDATABLE_FIELDS if name in self.model_fields_set
        }
