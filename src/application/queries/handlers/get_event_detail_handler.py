"""GetEventDetail query handler.

Fetches an event and embeds its resolved category in the detail view.
"""

from src.application.dtos.event_dtos import EventDetail
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.application.mappers.event_mapper import event_to_detail
from src.application.queries.event_queries import GetEventDetail
from src.core.enums import ErrorCode
from src.core.errors import NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.protocols.category_repository import CategoryRepository
from src.domain.protocols.event_repository import EventRepository


class GetEventDetailError:
    """GetEventDetail-specific errors."""

    EVENT_NOT_FOUND = "Event not found"


class GetEventDetailHandler:
    """Handler for GetEventDetail query.

    Dependencies (injected via constructor):
        - EventRepository: event lookup
        - CategoryRepository: category resolution
    """

    def __init__(
        self, event_repo: EventRepository, category_repo: CategoryRepository
    ) -> None:
        self._event_repo = event_repo
        self._category_repo = category_repo

    async def handle(
        self, query: GetEventDetail
    ) -> Result[EventDetail, ApplicationError]:
        """Handle GetEventDetail query.

        Returns:
            Success(EventDetail): Event with its category embedded.
            Failure(ApplicationError): NOT_FOUND when the event does not exist.
        """
        event = await self._event_repo.get_by_id(query.event_id)
        if event is None:
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.NOT_FOUND,
                    message=GetEventDetailError.EVENT_NOT_FOUND,
                    domain_error=NotFoundError(
                        code=ErrorCode.EVENT_NOT_FOUND,
                        message=f"Event {query.event_id} not found",
                        resource_type="Event",
                        resource_id=str(query.event_id),
                    ),
                )
            )

        category = await self._category_repo.get_by_id(event.category_id)
        return Success(value=event_to_detail(event, category))
