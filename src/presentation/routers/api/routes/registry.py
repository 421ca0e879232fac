"""API Route Registry - Single Source of Truth for all routes.

ROUTE_REGISTRY is the authoritative list of API endpoints. Paths are
relative to the API prefix (settings.api_prefix, "/api" by default).

Registry structure:
    - 9 endpoints across 2 resources (events, categories)
    - Each entry is a RouteMetadata instance with complete specification
    - Handlers reference actual functions from router modules
    - Entries are registered in list order: "/events/export" precedes
      "/events/{event_id}"

Usage:
    from src.presentation.routers.api.routes.registry import ROUTE_REGISTRY
    from src.presentation.routers.api.routes.generator import register_routes_from_registry

    router = APIRouter(prefix="/api")
    register_routes_from_registry(router, ROUTE_REGISTRY)
"""

from uuid import UUID

from src.presentation.routers.api.categories import (
    create_category,
    list_categories,
    list_categories_with_events,
)
from src.presentation.routers.api.events import (
    create_event,
    delete_event,
    export_events,
    get_event,
    list_events,
    update_event,
)
from src.presentation.routers.api.routes.metadata import (
    ErrorSpec,
    HTTPMethod,
    IdempotencyLevel,
    RouteMetadata,
)
from src.schemas.category_schemas import (
    CategoryListResponse,
    CategoryWithEventsResponse,
    CreateCategoryResponse,
)
from src.schemas.event_schemas import EventDetailResponse, EventListResponse

_BAD_REQUEST = ErrorSpec(status=400, description="Malformed request")
_EVENT_NOT_FOUND = ErrorSpec(status=404, description="Event not found")
_EVENT_INVALID = ErrorSpec(
    status=400, description="Event validation failed (one entry per violation)"
)


ROUTE_REGISTRY: list[RouteMetadata] = [
    # =========================================================================
    # Events
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/events",
        handler=list_events,
        resource="events",
        tags=["Events"],
        summary="List events",
        description="All events ordered by date, earliest first.",
        operation_id="list_events",
        response_model=list[EventListResponse],
        idempotency=IdempotencyLevel.SAFE,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/events/export",
        handler=export_events,
        resource="events",
        tags=["Events"],
        summary="Export events as CSV",
        description="CSV attachment with one header row and one row per event.",
        operation_id="export_events",
        idempotency=IdempotencyLevel.SAFE,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/events/{event_id}",
        handler=get_event,
        resource="events",
        tags=["Events"],
        summary="Get event",
        description="Event details with the embedded category.",
        operation_id="get_event",
        response_model=EventDetailResponse,
        errors=[_BAD_REQUEST, _EVENT_NOT_FOUND],
        idempotency=IdempotencyLevel.SAFE,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/events",
        handler=create_event,
        resource="events",
        tags=["Events"],
        summary="Create event",
        description="Create an event and notify by email. Answers with the new id.",
        operation_id="create_event",
        response_model=UUID,
        errors=[_EVENT_INVALID],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/events",
        handler=update_event,
        resource="events",
        tags=["Events"],
        summary="Update event",
        description="Overwrite the event identified by `eventId` in the body.",
        operation_id="update_event",
        status_code=204,
        errors=[_EVENT_INVALID, _EVENT_NOT_FOUND],
        idempotency=IdempotencyLevel.IDEMPOTENT,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/events/{event_id}",
        handler=delete_event,
        resource="events",
        tags=["Events"],
        summary="Delete event",
        operation_id="delete_event",
        status_code=204,
        errors=[_BAD_REQUEST, _EVENT_NOT_FOUND],
        idempotency=IdempotencyLevel.IDEMPOTENT,
    ),
    # =========================================================================
    # Categories
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/categories/all",
        handler=list_categories,
        resource="categories",
        tags=["Categories"],
        summary="List categories",
        operation_id="list_categories",
        response_model=list[CategoryListResponse],
        idempotency=IdempotencyLevel.SAFE,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/categories/allwithevents",
        handler=list_categories_with_events,
        resource="categories",
        tags=["Categories"],
        summary="List categories with events",
        description=(
            "Every category with its events. Past events are included only "
            "when `includeHistory=true`."
        ),
        operation_id="list_categories_with_events",
        response_model=list[CategoryWithEventsResponse],
        errors=[_BAD_REQUEST],
        idempotency=IdempotencyLevel.SAFE,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/categories",
        handler=create_category,
        resource="categories",
        tags=["Categories"],
        summary="Create category",
        description="Always 200: validation problems are reported in the envelope.",
        operation_id="create_category",
        response_model=CreateCategoryResponse,
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
    ),
]
