"""UpdateEvent command handler.

Fetches the event, validates the command, overwrites the mapped fields
and persists the result. A missing event or an invalid command aborts
with no mutation.
"""

from src.application.commands.event_commands import UpdateEvent
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.application.mappers.event_mapper import apply_update_event_command
from src.application.validators.event_validators import UpdateEventValidator
from src.core.enums import ErrorCode
from src.core.errors import NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.protocols.category_repository import CategoryRepository
from src.domain.protocols.event_repository import EventRepository
from src.domain.protocols.logger_protocol import LoggerProtocol


class UpdateEventError:
    """UpdateEvent-specific errors."""

    EVENT_NOT_FOUND = "Event not found"
    VALIDATION_FAILED = "Event validation failed"


class UpdateEventHandler:
    """Handler for UpdateEvent command."""

    def __init__(
        self,
        event_repo: EventRepository,
        category_repo: CategoryRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._event_repo = event_repo
        self._logger = logger
        self._validator = UpdateEventValidator(category_repo)

    async def handle(self, cmd: UpdateEvent) -> Result[None, ApplicationError]:
        """Handle UpdateEvent command.

        Returns:
            Success(None): Event updated.
            Failure(ApplicationError): NOT_FOUND or COMMAND_VALIDATION_FAILED.
        """
        event = await self._event_repo.get_by_id(cmd.event_id)
        if event is None:
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.NOT_FOUND,
                    message=UpdateEventError.EVENT_NOT_FOUND,
                    domain_error=NotFoundError(
                        code=ErrorCode.EVENT_NOT_FOUND,
                        message=f"Event {cmd.event_id} not found",
                        resource_type="Event",
                        resource_id=str(cmd.event_id),
                    ),
                )
            )

        errors = await self._validator.validate(cmd, event)
        if errors:
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
                    message=UpdateEventError.VALIDATION_FAILED,
                    validation_errors=tuple(errors),
                )
            )

        await self._event_repo.update(apply_update_event_command(cmd, event))
        self._logger.info("event_updated", event_id=str(event.id))

        return Success(value=None)
