"""Task validation and persistence service."""

from __future__ import annotations

import math
import re
from typing import TYPE_CHECKING, Any

import structlog

from tasktracker.db.models.task import DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH

from ..exceptions import NotFoundError, ValidationError

if TYPE_CHECKING:
    from tasktracker.db.models import Task
    from tasktracker.db.repository import TaskStore

    from ..schemas import TaskUpdate

logger = structlog.get_logger()

# Optional sign, ASCII digits, optional fraction
_ID_PATTERN = re.compile(r"\s*[+-]?[0-9]+(\.[0-9]*)?\s*", re.ASCII)


def _coerce_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _within(value: str, max_length: int) -> bool:
    return 0 < len(value) <= max_length


def _parse_id(value: Any) -> int | None:
    """Interpret ``value`` as an integer id.

    Accepts ints, integral finite floats and decimal strings such as
    ``"7"`` or ``" 7.0 "``. Exponents, digit separators and non-ASCII
    digits are rejected.

    Returns:
        The integer, or None if ``value`` is not integral
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        match = _ID_PATTERN.fullmatch(value)
        if match is None:
            return None
        if match.group(1) is None:
            return int(value)
        value = float(value)
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return int(value)
    return None


class TaskService:
    """Validates task input and delegates persistence to a store.

    The service owns every business rule; the store only persists.
    """

    def __init__(self, repository: TaskStore) -> None:
        """Initialize task service.

        Args:
            repository: Task store the service delegates to
        """
        self.task_repo = repository

    async def list_tasks(self) -> list[Task]:
        """List all tasks, newest first.

        Returns:
            Tasks as returned by the store
        """
        return await self.task_repo.get_all()

    async def create_task(self, title: Any, description: Any) -> Task:
        """Create a task.

        Args:
            title: Raw title; coerced to text and trimmed
            description: Raw description; coerced to text and trimmed

        Returns:
            Created task

        Raises:
            ValidationError: If title or description is empty or too long
        """
        title = _coerce_text(title).strip()
        description = _coerce_text(description).strip()

        if not title or len(title) > TITLE_MAX_LENGTH:
            raise ValidationError(f"title is required and must be <= {TITLE_MAX_LENGTH} chars")
        if not description:
            raise ValidationError("description is required")
        if len(description) > DESCRIPTION_MAX_LENGTH:
            raise ValidationError(f"description must be <= {DESCRIPTION_MAX_LENGTH} chars")

        task = await self.task_repo.create(title=title, description=description)

        logger.info("task_created", task_id=task.id)

        return task

    async def update_task(self, task_id: Any, changes: TaskUpdate) -> Task:
        """Apply a partial update to a task.

        Only fields present in ``changes`` are validated and forwarded.
        Field errors are reported before the empty-payload error.

        Args:
            task_id: Raw task identifier
            changes: Fields supplied by the client

        Returns:
            Updated task

        Raises:
            ValidationError: If the id or any supplied field is invalid,
                or no recognized field was supplied
            NotFoundError: If no task has this id
        """
        parsed_id = _parse_id(task_id)
        if parsed_id is None:
            raise ValidationError("invalid payload")

        supplied = changes.supplied()
        payload: dict[str, Any] = {}

        if "title" in supplied:
            title = supplied["title"]
            if not isinstance(title, str) or not _within(title.strip(), TITLE_MAX_LENGTH):
                raise ValidationError(f"title must be 1..{TITLE_MAX_LENGTH} chars")
            payload["title"] = title.strip()

        if "description" in supplied:
            description = supplied["description"]
            if not isinstance(description, str) or not _within(
                description.strip(), DESCRIPTION_MAX_LENGTH
            ):
                raise ValidationError(f"description must be 1..{DESCRIPTION_MAX_LENGTH} chars")
            payload["description"] = description.strip()

        if "done" in supplied:
            done = supplied["done"]
            if not isinstance(done, bool):
                raise ValidationError("done must be boolean")
            payload["done"] = done

        if not payload:
            raise ValidationError("at least one field is required: title, description, done")

        task = await self.task_repo.update(parsed_id, **payload)
        if task is None:
            raise NotFoundError("task not found")

        logger.info("task_updated", task_id=parsed_id, fields=sorted(payload))

        return task

    async def delete_task(self, task_id: Any) -> None:
        """Delete a task.

        Args:
            task_id: Raw task identifier

        Raises:
            ValidationError: If the id is not an integer
            NotFoundError: If no task has this id
        """
        parsed_id = _parse_id(task_id)
        if parsed_id is None:
            raise ValidationError("invalid id")

        if not await self.task_repo.delete(parsed_id):
            raise NotFoundError("task not found")

        logger.info("task_deleted", task_id=parsed_id)
