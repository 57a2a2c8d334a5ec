"""Global exception handlers for FastAPI."""

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from .exceptions import APIError, status_code_for
from .schemas import ErrorResponse

logger = structlog.get_logger()


def _error(status_code: int, message: str, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
        headers=headers,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register global exception handlers.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(APIError)
    async def api_error_handler(
        request: Request,
        exc: APIError,
    ) -> JSONResponse:
        """Handle errors raised by the service layer.

        The status code is derived from the error kind.
        """
        request_id = getattr(request.state, "request_id", "unknown")

        logger.warning(
            "api_error",
            request_id=request_id,
            kind=exc.kind.value,
            message=exc.message,
        )

        return _error(status_code_for(exc.kind), exc.message)

    @app.exception_handler(HTTPException)
    async def http_exception_handler(
        request: Request,
        exc: HTTPException,
    ) -> JSONResponse:
        """Handle framework HTTP exceptions (unknown route, bad method)."""
        request_id = getattr(request.state, "request_id", "unknown")

        logger.warning(
            "http_error",
            request_id=request_id,
            status_code=exc.status_code,
            detail=exc.detail,
        )

        return _error(exc.status_code, str(exc.detail), headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Handle bodies that are not a JSON object."""
        request_id = getattr(request.state, "request_id", "unknown")

        logger.warning(
            "validation_error",
            request_id=request_id,
            errors=exc.errors(),
        )

        return _error(400, "invalid payload")

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unhandled exceptions without exposing internal details."""
        request_id = getattr(request.state, "request_id", "unknown")

        logger.exception(
            "unhandled_error",
            request_id=request_id,
            error_type=type(exc).__name__,
            error=str(exc),
        )

        return _error(500, "internal server error")
