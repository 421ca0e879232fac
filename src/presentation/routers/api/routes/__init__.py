"""API Route Registry package.

Modules:
    metadata: Core types (RouteMetadata, HTTPMethod, ErrorSpec, IdempotencyLevel)
    registry: ROUTE_REGISTRY - List of all route specifications
    generator: register_routes_from_registry() - Generate FastAPI routes
"""

from src.presentation.routers.api.routes.metadata import (
    ErrorSpec,
    HTTPMethod,
    IdempotencyLevel,
    RouteMetadata,
)

__all__ = [
    "RouteMetadata",
    "HTTPMethod",
    "ErrorSpec",
    "IdempotencyLevel",
]
