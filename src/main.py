"""
Main FastAPI application entry point.

Wires settings, middleware, exception handlers and routers into the
application instance served by uvicorn:

    uvicorn src.main:app --host 0.0.0.0 --port 8000
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.application.cqrs import validate_registry_consistency
from src.core.config import settings
from src.core.container import get_database, get_logger
from src.presentation.routers import api_router, system_router
from src.presentation.routers.api.errors import register_exception_handlers
from src.presentation.routers.api.middleware import TraceMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Startup:
    - Refuse to start when the CQRS registry is inconsistent
    - Create missing tables (no migrations are shipped)

    Shutdown:
    - Dispose of the database engine

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.

    Raises:
        RuntimeError: If the CQRS registry has errors.
    """
    logger = get_logger()

    registry_errors = validate_registry_consistency()
    if registry_errors:
        for error in registry_errors:
            logger.critical("cqrs_registry_invalid", reason=error)
        raise RuntimeError(
            f"CQRS registry is inconsistent: {'; '.join(registry_errors)}"
        )

    database = get_database()
    await database.create_all()
    logger.info(
        "application_started",
        environment=settings.environment.value,
        version=settings.app_version,
        email_enabled=settings.email_enabled,
    )

    yield

    await database.close()
    logger.info("application_stopped")


app = FastAPI(
    title=settings.app_name,
    description="Ticket management API: events, categories and CSV export",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

# Request correlation
app.add_middleware(TraceMiddleware)

if settings.cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Trace-Id", "Content-Disposition"],
    )

# RFC 9457 error responses
register_exception_handlers(app)

app.include_router(system_router)
app.include_router(api_router)
