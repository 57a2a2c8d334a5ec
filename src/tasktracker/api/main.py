"""FastAPI application factory and configuration."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tasktracker.db.session import DatabaseSessionManager
from tasktracker.utils.logger import configure_logging

from .config import get_api_settings, get_database_settings, get_server_settings
from .handlers import register_exception_handlers
from .middleware import LoggingMiddleware, RequestIDMiddleware, cors_config
from .routers import health_router, tasks_router

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Builds the database session manager, bootstraps the schema when
    enabled and disposes of the engine on shutdown.

    Args:
        app: FastAPI application

    Yields:
        None
    """
    settings = get_database_settings()

    # Startup
    logger.info("starting_application")
    manager = DatabaseSessionManager(
        settings.url,
        pool_size=settings.pool_size,
        max_overflow=settings.max_overflow,
        echo=settings.echo,
    )
    if settings.auto_create_schema:
        await manager.create_all()
        logger.info("database_schema_ready")
    app.state.db = manager

    yield

    # Shutdown
    logger.info("shutting_down_application")
    await manager.close()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application
    """
    settings = get_api_settings()
    server = get_server_settings()

    configure_logging(settings.log_level, settings.json_logs)

    app = FastAPI(
        title=settings.title,
        description=settings.description,
        version=settings.version,
        lifespan=lifespan,
        openapi_tags=[
            {"name": "health", "description": "Health check endpoints"},
            {"name": "tasks", "description": "Task management"},
        ],
    )

    # Register middleware (order matters - first added = last executed)
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        **cors_config(server.allowed_origins, server.allow_localhost_origins),
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(tasks_router)

    logger.info(
        "application_configured",
        title=settings.title,
        version=settings.version,
        allowed_origins=server.allowed_origins,
    )

    return app


# Application instance
app = create_app()
