"""Events resource handlers.

Handler functions for the event endpoints. Routes are registered via
ROUTE_REGISTRY in routes/registry.py.

Handlers:
    list_events    - List events ordered by date
    get_event      - Get one event with its category
    create_event   - Create an event, answers with its id
    update_event   - Overwrite an event (id in the body)
    delete_event   - Delete an event
    export_events  - Download all events as CSV
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Path, Request, Response, status
from fastapi.responses import JSONResponse

from src.application.commands import DeleteEvent
from src.application.cqrs import Dispatcher
from src.application.queries import GetEventDetail, GetEventsExport, GetEventsList
from src.core.container import get_dispatcher
from src.core.result import Failure
from src.presentation.routers.api.errors import ErrorResponseBuilder
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.schemas.event_schemas import (
    CreateEventRequest,
    EventDetailResponse,
    EventListResponse,
    UpdateEventRequest,
)


def _failure_response(result: Failure, request: Request) -> JSONResponse:
    return ErrorResponseBuilder.from_application_error(
        error=result.error,
        request=request,
        trace_id=get_trace_id() or "",
    )


async def list_events(
    request: Request,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> list[EventListResponse] | JSONResponse:
    """List all events, earliest date first.

    GET /api/events → 200 OK
    """
    result = await dispatcher.send(GetEventsList())

    if isinstance(result, Failure):
        return _failure_response(result, request)

    return [EventListResponse.from_dto(item) for item in result.value]


async def get_event(
    request: Request,
    event_id: Annotated[UUID, Path(description="Event UUID")],
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> EventDetailResponse | JSONResponse:
    """Get a specific event with its embedded category.

    GET /api/events/{event_id} → 200 OK

    Args:
        request: FastAPI request object.
        event_id: Event UUID.
        dispatcher: Request-scoped dispatcher (injected).

    Returns:
        EventDetailResponse with event details.
        JSONResponse with RFC 9457 error (404) when the event does not exist.
    """
    result = await dispatcher.send(GetEventDetail(event_id=event_id))

    if isinstance(result, Failure):
        return _failure_response(result, request)

    return EventDetailResponse.from_dto(result.value)


async def create_event(
    request: Request,
    data: CreateEventRequest,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> UUID | JSONResponse:
    """Create an event.

    POST /api/events → 200 OK with the new event id as a JSON string

    Args:
        request: FastAPI request object.
        data: Event fields.
        dispatcher: Request-scoped dispatcher (injected).

    Returns:
        UUID of the created event.
        JSONResponse with RFC 9457 error (400) listing every rule violation.
    """
    result = await dispatcher.send(data.to_command())

    if isinstance(result, Failure):
        return _failure_response(result, request)

    return result.value


async def update_event(
    request: Request,
    data: UpdateEventRequest,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> Response:
    """Overwrite an event's editable fields.

    PUT /api/events → 204 No Content

    Returns:
        Empty 204 response, or RFC 9457 error (400 validation, 404 unknown id).
    """
    result = await dispatcher.send(data.to_command())

    if isinstance(result, Failure):
        return _failure_response(result, request)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


async def delete_event(
    request: Request,
    event_id: Annotated[UUID, Path(description="Event UUID")],
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> Response:
    """Delete an event.

    DELETE /api/events/{event_id} → 204 No Content
    """
    result = await dispatcher.send(DeleteEvent(event_id=event_id))

    if isinstance(result, Failure):
        return _failure_response(result, request)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


async def export_events(
    request: Request,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> Response:
    """Download every event as a CSV attachment.

    GET /api/events/export → 200 OK, text/csv
    """
    result = await dispatcher.send(GetEventsExport())

    if isinstance(result, Failure):
        return _failure_response(result, request)

    export_file = result.value
    return Response(
        content=export_file.data,
        media_type=export_file.content_type,
        headers={
            "Content-Disposition": f'attachment; filename="{export_file.file_name}"'
        },
    )
