"""DeleteEvent command handler."""

from src.application.commands.event_commands import DeleteEvent
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.enums import ErrorCode
from src.core.errors import NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.protocols.event_repository import EventRepository
from src.domain.protocols.logger_protocol import LoggerProtocol


class DeleteEventError:
    """DeleteEvent-specific errors."""

    EVENT_NOT_FOUND = "Event not found"


class DeleteEventHandler:
    """Handler for DeleteEvent command: fetch by id, then delete."""

    def __init__(self, event_repo: EventRepository, logger: LoggerProtocol) -> None:
        self._event_repo = event_repo
        self._logger = logger

    async def handle(self, cmd: DeleteEvent) -> Result[None, ApplicationError]:
        """Handle DeleteEvent command.

        Returns:
            Success(None): Event deleted.
            Failure(ApplicationError): NOT_FOUND when the event does not exist.
        """
        event = await self._event_repo.get_by_id(cmd.event_id)
        if event is None:
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.NOT_FOUND,
                    message=DeleteEventError.EVENT_NOT_FOUND,
                    domain_error=NotFoundError(
                        code=ErrorCode.EVENT_NOT_FOUND,
                        message=f"Event {cmd.event_id} not found",
                        resource_type="Event",
                        resource_id=str(cmd.event_id),
                    ),
                )
            )

        await self._event_repo.delete(event)
        self._logger.info("event_deleted", event_id=str(event.id))

        return Success(value=None)
