"""System router for non-API application endpoints.

Provides the root and health endpoints, outside the API prefix. They are
lightweight and side-effect free to support health checks and basic
diagnostics.
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from src.core.config import settings
from src.core.container import get_database


system_router = APIRouter(tags=["System"])


@system_router.get("/")
async def root() -> dict[str, str]:
    """Root endpoint - basic status check.

    Returns:
        dict[str, str]: Application name, status and version.
    """
    return {
        "message": settings.app_name,
        "status": "operational",
        "version": settings.app_version,
    }


@system_router.get("/health")
async def health() -> JSONResponse:
    """Health check endpoint for monitoring and load balancers.

    Returns:
        JSONResponse: 200 when the database answers, 503 otherwise.
    """
    if await get_database().check_connection():
        return JSONResponse(content={"status": "healthy", "database": "ok"})

    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "unhealthy", "database": "unavailable"},
    )
