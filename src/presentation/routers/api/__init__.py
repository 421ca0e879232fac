"""API routers.

All routes are generated from the Route Metadata Registry at import time.
See routes/registry.py for the complete route catalog.

Resources:
    /api/events       - Event management and CSV export
    /api/categories   - Category management
"""

from fastapi import APIRouter

from src.core.config import settings
from src.presentation.routers.api.routes.generator import register_routes_from_registry
from src.presentation.routers.api.routes.registry import ROUTE_REGISTRY

api_router = APIRouter(prefix=settings.api_prefix)
register_routes_from_registry(api_router, ROUTE_REGISTRY)

__all__ = ["api_router"]
