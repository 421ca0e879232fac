"""Handler factories and the request-scoped dispatcher.

Each get_<request>_handler builds one handler bound to a session. The
dispatcher wires all of them for the current request; routers only ever
depend on get_dispatcher.

Usage:
    @router.get("/events/{event_id}")
    async def get_event(
        event_id: UUID,
        dispatcher: Dispatcher = Depends(get_dispatcher),
    ):
        result = await dispatcher.send(GetEventDetail(event_id=event_id))
"""

from functools import partial

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.commands.category_commands import CreateCategory
from src.application.commands.event_commands import (
    CreateEvent,
    DeleteEvent,
    UpdateEvent,
)
from src.application.commands.handlers import (
    CreateCategoryHandler,
    CreateEventHandler,
    DeleteEventHandler,
    UpdateEventHandler,
)
from src.application.cqrs.dispatcher import Dispatcher, build_dispatcher
from src.application.queries.category_queries import (
    GetCategoriesList,
    GetCategoriesListWithEvents,
)
from src.application.queries.event_queries import (
    GetEventDetail,
    GetEventsExport,
    GetEventsList,
)
from src.application.queries.handlers import (
    GetCategoriesListHandler,
    GetCategoriesListWithEventsHandler,
    GetEventDetailHandler,
    GetEventsExportHandler,
    GetEventsListHandler,
)
from src.core.config import settings
from src.core.container.infrastructure import (
    get_csv_exporter,
    get_db_session,
    get_email_service,
    get_logger,
)
from src.core.container.repositories import (
    get_category_repository,
    get_event_repository,
)

# ============================================================================
# Event Handlers
# ============================================================================


def get_get_events_list_handler(session: AsyncSession) -> GetEventsListHandler:
    return GetEventsListHandler(event_repo=get_event_repository(session))


def get_get_event_detail_handler(session: AsyncSession) -> GetEventDetailHandler:
    return GetEventDetailHandler(
        event_repo=get_event_repository(session),
        category_repo=get_category_repository(session),
    )


def get_create_event_handler(session: AsyncSession) -> CreateEventHandler:
    return CreateEventHandler(
        event_repo=get_event_repository(session),
        category_repo=get_category_repository(session),
        email_service=get_email_service(),
        logger=get_logger(),
        notification_recipient=settings.event_notification_recipient,
    )


def get_update_event_handler(session: AsyncSession) -> UpdateEventHandler:
    return UpdateEventHandler(
        event_repo=get_event_repository(session),
        category_repo=get_category_repository(session),
        logger=get_logger(),
    )


def get_delete_event_handler(session: AsyncSession) -> DeleteEventHandler:
    return DeleteEventHandler(
        event_repo=get_event_repository(session),
        logger=get_logger(),
    )


def get_get_events_export_handler(session: AsyncSession) -> GetEventsExportHandler:
    return GetEventsExportHandler(
        event_repo=get_event_repository(session),
        csv_exporter=get_csv_exporter(),
        logger=get_logger(),
    )


# ============================================================================
# Category Handlers
# ============================================================================


def get_get_categories_list_handler(
    session: AsyncSession,
) -> GetCategoriesListHandler:
    return GetCategoriesListHandler(category_repo=get_category_repository(session))


def get_get_categories_list_with_events_handler(
    session: AsyncSession,
) -> GetCategoriesListWithEventsHandler:
    return GetCategoriesListWithEventsHandler(
        category_repo=get_category_repository(session)
    )


def get_create_category_handler(session: AsyncSession) -> CreateCategoryHandler:
    return CreateCategoryHandler(
        category_repo=get_category_repository(session),
        logger=get_logger(),
    )


# ============================================================================
# Dispatcher (Request-Scoped)
# ============================================================================


async def get_dispatcher(
    session: AsyncSession = Depends(get_db_session),
) -> Dispatcher:
    """Build the dispatcher for one request.

    Every handler it creates shares the request's session, so all writes
    of a request commit or roll back together.
    """
    return build_dispatcher(
        {
            GetEventsList: partial(get_get_events_list_handler, session),
            GetEventDetail: partial(get_get_event_detail_handler, session),
            CreateEvent: partial(get_create_event_handler, session),
            UpdateEvent: partial(get_update_event_handler, session),
            DeleteEvent: partial(get_delete_event_handler, session),
            GetEventsExport: partial(get_get_events_export_handler, session),
            GetCategoriesList: partial(get_get_categories_list_handler, session),
            GetCategoriesListWithEvents: partial(
                get_get_categories_list_with_events_handler, session
            ),
            CreateCategory: partial(get_create_category_handler, session),
        }
    )
