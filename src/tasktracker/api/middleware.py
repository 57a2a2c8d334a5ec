"""FastAPI middleware components."""

from __future__ import annotations

import time
import uuid

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

logger = structlog.get_logger()


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Middleware to add request ID to each request.

    The ID is stored in request.state.request_id and returned in
    the X-Request-ID response header.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Process request and add request ID.

        Args:
            request: Incoming request
            call_next: Next middleware/handler

        Returns:
            Response with X-Request-ID header
        """
        request_id = request.headers.get("X-Request-ID")
        if not request_id:
            request_id = str(uuid.uuid4())

        request.state.request_id = request_id

        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id

        return response


class LoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for request/response logging with timing information."""

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        start_time = time.perf_counter()

        # Set by RequestIDMiddleware
        request_id = getattr(request.state, "request_id", "unknown")

        logger.info(
            "request_started",
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000

        logger.info(
            "request_completed",
            request_id=request_id,
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=round(duration_ms, 2),
        )

        response.headers["X-Response-Time"] = f"{duration_ms:.2f}ms"

        return response


LOCALHOST_ORIGIN_REGEX = r"^https?://(localhost|127\.0\.0\.1)(:\d+)?$"


def cors_config(origins: list[str], allow_localhost: bool = True) -> dict[str, object]:
    """Build keyword arguments for Starlette's CORSMiddleware.

    Args:
        origins: Explicitly allowed origins
        allow_localhost: Also accept any localhost / 127.0.0.1 origin

    Returns:
        CORS configuration dict
    """
    return {
        "allow_origins": origins,
        "allow_origin_regex": LOCALHOST_ORIGIN_REGEX if allow_localhost else None,
        "allow_methods": ["*"],
        "allow_headers": ["*"],
    }
