"""Error kinds raised by the service layer.

Each error carries a kind; the HTTP boundary maps kinds to status codes
through :func:`status_code_for` instead of inspecting exception classes.
"""

from enum import Enum
from typing import assert_never


class ErrorKind(str, Enum):
    """Reportable failure categories."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"


def status_code_for(kind: ErrorKind) -> int:
    """Map an error kind to its HTTP status code.

    Args:
        kind: Error kind

    Returns:
        HTTP status code
    """
    match kind:
        case ErrorKind.VALIDATION:
            return 400
        case ErrorKind.NOT_FOUND:
            return 404
        case _:
            assert_never(kind)


class APIError(Exception):
    """Base exception for reportable errors."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        """Initialize API error.

        Args:
            message: Human-readable message returned to the client as-is
        """
        super().__init__(message)
        self.message = message

    @property
    def status_code(self) -> int:
        return status_code_for(self.kind)


class ValidationError(APIError):
    """Malformed or out-of-range input, detected before any storage access."""

    kind = ErrorKind.VALIDATION


class NotFoundError(APIError):
    """Targeted task does not exist."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, message: str = "task not found") -> None:
        super().__init__(message)
