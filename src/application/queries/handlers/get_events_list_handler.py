"""GetEventsList query handler."""

from src.application.dtos.event_dtos import EventListItem
from src.application.errors import ApplicationError
from src.application.mappers import event_to_list_item, map_all
from src.application.queries.event_queries import GetEventsList
from src.core.result import Result, Success
from src.domain.protocols.event_repository import EventRepository


class GetEventsListHandler:
    """Lists every event, ordered by date ascending."""

    def __init__(self, event_repo: EventRepository) -> None:
        self._event_repo = event_repo

    async def handle(
        self, query: GetEventsList
    ) -> Result[list[EventListItem], ApplicationError]:
        events = await self._event_repo.list_all()
        ordered = sorted(events, key=lambda e: e.date)
        return Success(value=map_all(event_to_list_item, ordered))
