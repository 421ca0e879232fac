"""Route metadata types for the API Route Registry.

The registry is the single source of truth for the API routes: the
generator turns each RouteMetadata into a FastAPI route with its OpenAPI
documentation.

Core types:
    RouteMetadata: Complete route specification (method, path, handler, docs)
    HTTPMethod: HTTP method enum (GET, POST, PUT, DELETE)
    ErrorSpec: Error response specification for OpenAPI
    IdempotencyLevel: HTTP idempotency classification

Usage:
    from src.presentation.routers.api.routes.metadata import RouteMetadata, HTTPMethod

    metadata = RouteMetadata(
        method=HTTPMethod.POST,
        path="/events",
        handler=create_event,
        resource="events",
        tags=["Events"],
        summary="Create event",
        response_model=UUID,
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
    )
"""

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel


class HTTPMethod(str, Enum):
    """HTTP methods for API routes."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class IdempotencyLevel(str, Enum):
    """HTTP idempotency classification.

    Attributes:
        SAFE: No side effects (GET)
        IDEMPOTENT: Side effects, but repeatable (PUT, DELETE)
        NON_IDEMPOTENT: Side effects, not repeatable (POST)

    Reference:
        - RFC 9110 Section 9.2 (Method Properties)
    """

    SAFE = "safe"
    IDEMPOTENT = "idempotent"
    NON_IDEMPOTENT = "non_idempotent"


_EXPECTED_IDEMPOTENCY: dict[HTTPMethod, IdempotencyLevel] = {
    HTTPMethod.GET: IdempotencyLevel.SAFE,
    HTTPMethod.PUT: IdempotencyLevel.IDEMPOTENT,
    HTTPMethod.DELETE: IdempotencyLevel.IDEMPOTENT,
    HTTPMethod.POST: IdempotencyLevel.NON_IDEMPOTENT,
}


@dataclass(frozen=True, kw_only=True)
class ErrorSpec:
    """Error response specification for OpenAPI documentation.

    Attributes:
        status: HTTP status code (e.g., 400, 404)
        description: Human-readable error description
        model: Optional Pydantic model for response (defaults to ProblemDetails)

    Examples:
        >>> ErrorSpec(status=400, description="Validation error")
        >>> ErrorSpec(status=404, description="Event not found")
    """

    status: int
    description: str
    model: type[BaseModel] | None = None


@dataclass(frozen=True, kw_only=True)
class RouteMetadata:
    """Complete specification for an API route (Single Source of Truth).

    Identity fields:
        method: HTTP method (GET, POST, etc.)
        path: URL path relative to the API prefix (e.g., "/events/{event_id}")
        handler: Async function that implements the endpoint

    Grouping fields:
        resource: Resource category ("events", "categories")
        tags: OpenAPI tags (e.g., ["Events"])

    OpenAPI documentation:
        summary: Short endpoint description
        description: Detailed endpoint description (markdown supported)
        operation_id: Stable operation ID for client generation

    Request/Response:
        response_model: Response type for success (None for raw responses)
        status_code: Expected success status (200 or 204)
        errors: List of possible error responses for OpenAPI

    Behavior:
        idempotency: HTTP idempotency level, must agree with the method
    """

    # Identity
    method: HTTPMethod
    path: str
    handler: Callable[..., Awaitable[Any]]

    # Grouping
    resource: str
    tags: Sequence[str]

    # OpenAPI documentation
    summary: str
    description: str | None = None
    operation_id: str | None = None

    # Request/Response
    response_model: Any = None
    status_code: int = 200
    errors: list[ErrorSpec] | None = None

    # Behavior
    idempotency: IdempotencyLevel

    deprecated: bool = False

    def __post_init__(self) -> None:
        """Reject entries whose idempotency contradicts the HTTP method."""
        expected = _EXPECTED_IDEMPOTENCY[self.method]
        if self.idempotency != expected:
            raise ValueError(
                f"{self.method.value} {self.path}: idempotency must be "
                f"{expected.value}, got {self.idempotency.value}"
            )
        if not self.path.startswith("/"):
            raise ValueError(f"Route path must start with '/': {self.path!r}")
