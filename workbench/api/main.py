"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, workbench.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from workbench.api.deps.dependencies import get_service_cache
from workbench.boundary.db.connection import get_async_engine
from workbench.boundary.db.create_tables import create_all_tables
from workbench.configs import get_settings
from workbench.observability import configure_logging
from workbench.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

from .routers import (
    ai_router,
    auth_router,
    diagrams_router,
    health_router,
    reminders_router,
    workspaces_router,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(
        "Starting workbench API",
        extra={"environment": settings.environment, "debug": settings.debug},
    )

    # Startup
    if settings.database.create_tables_on_startup:
        logger.info("Creating database tables")
        await create_all_tables()

    yield

    # Shutdown
    get_service_cache().clear()
    await get_async_engine().dispose()
    logger.info("Service cache cleared, database engine disposed")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = get_settings()

    app = FastAPI(
        title="Workbench API",
        description="Coding workspace with Coder, Tutor and Artist panels",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    # Add CORS middleware; credentials require explicit origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Correlation wraps request logging so log lines carry the request id
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(auth_router, prefix="/api/v1")
    app.include_router(workspaces_router, prefix="/api/v1")
    app.include_router(ai_router, prefix="/api/v1")
    app.include_router(diagrams_router, prefix="/api/v1")
    app.include_router(reminders_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "workbench.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
