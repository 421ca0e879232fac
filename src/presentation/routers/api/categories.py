"""Categories resource handlers.

Handlers:
    list_categories              - List categories ordered by name
    list_categories_with_events  - Categories with their events
    create_category              - Create a category (envelope response)
"""

from typing import Annotated

from fastapi import Depends, Query, Request
from fastapi.responses import JSONResponse

from src.application.cqrs import Dispatcher
from src.application.queries import GetCategoriesList, GetCategoriesListWithEvents
from src.core.container import get_dispatcher
from src.core.result import Failure
from src.presentation.routers.api.errors import ErrorResponseBuilder
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.schemas.category_schemas import (
    CategoryListResponse,
    CategoryWithEventsResponse,
    CreateCategoryRequest,
    CreateCategoryResponse,
)


async def list_categories(
    request: Request,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> list[CategoryListResponse] | JSONResponse:
    """List all categories.

    GET /api/categories/all → 200 OK
    """
    result = await dispatcher.send(GetCategoriesList())

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return [CategoryListResponse.from_dto(item) for item in result.value]


async def list_categories_with_events(
    request: Request,
    include_history: Annotated[
        bool,
        Query(
            alias="includeHistory",
            description="Include events dated before today",
        ),
    ] = False,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> list[CategoryWithEventsResponse] | JSONResponse:
    """List every category with its events.

    GET /api/categories/allwithevents?includeHistory=false → 200 OK

    Without history, each category only carries events dated on or after
    the start of the current UTC day. Categories with no such events are
    still listed.

    Args:
        request: FastAPI request object.
        include_history: Include past events as well.
        dispatcher: Request-scoped dispatcher (injected).
    """
    result = await dispatcher.send(
        GetCategoriesListWithEvents(include_history=include_history)
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return [CategoryWithEventsResponse.from_dto(item) for item in result.value]


async def create_category(
    data: CreateCategoryRequest,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> CreateCategoryResponse:
    """Create a category.

    POST /api/categories → 200 OK

    Validation problems are reported inside the envelope (success=false,
    validationErrors), never as an error status.
    """
    result = await dispatcher.send(data.to_command())
    return CreateCategoryResponse.from_dto(result.value)
