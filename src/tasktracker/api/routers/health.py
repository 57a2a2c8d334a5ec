"""Health check endpoints."""

import structlog
from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from ..dependencies import SessionManager
from ..schemas import ErrorResponse, HealthResponse

router = APIRouter(tags=["health"])

logger = structlog.get_logger()


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Check API health status.

    Returns:
        Health status response
    """
    return HealthResponse(status="ok")


@router.get(
    "/ready",
    response_model=HealthResponse,
    responses={503: {"model": ErrorResponse}},
)
async def readiness_check(manager: SessionManager) -> HealthResponse | JSONResponse:
    """Check that the database answers queries.

    Returns:
        Readiness status response, or 503 when the database is unreachable
    """
    try:
        await manager.ping()
    except (SQLAlchemyError, OSError) as exc:
        logger.warning("database_unavailable", error=str(exc))
        return JSONResponse(
            status_code=503,
            content=ErrorResponse(error="database unavailable").model_dump(),
        )
    return HealthResponse(status="ready")
