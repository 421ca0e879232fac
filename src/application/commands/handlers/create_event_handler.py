"""CreateEvent command handler.

Validates the command, inserts and commits the event, then sends a
best-effort notification email. Validation failure aborts before anything is written.
Notification failure never changes the outcome.
"""

from uuid import UUID

from src.application.commands.event_commands import CreateEvent
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.application.mappers.event_mapper import create_event_command_to_entity
from src.application.validators.event_validators import CreateEventValidator
from src.core.result import Failure, Result, Success
from src.domain.entities.event import Event
from src.domain.protocols.category_repository import CategoryRepository
from src.domain.protocols.email_protocol import EmailProtocol
from src.domain.protocols.event_repository import EventRepository
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.value_objects.email_message import EmailMessage

NOTIFICATION_SUBJECT = "A new event was created"


class CreateEventError:
    """CreateEvent-specific errors."""

    VALIDATION_FAILED = "Event validation failed"


class CreateEventHandler:
    """Handler for CreateEvent command.

    Dependencies (injected via constructor):
        - EventRepository: persistence and uniqueness check
        - CategoryRepository: category existence check
        - EmailProtocol: notification delivery
        - LoggerProtocol: structured logging
    """

    def __init__(
        self,
        event_repo: EventRepository,
        category_repo: CategoryRepository,
        email_service: EmailProtocol,
        logger: LoggerProtocol,
        notification_recipient: str,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            event_repo: Event repository.
            category_repo: Category repository.
            email_service: Email adapter used for the creation notice.
            logger: Structured logger.
            notification_recipient: Address that receives the notice.
        """
        self._event_repo = event_repo
        self._email_service = email_service
        self._logger = logger
        self._notification_recipient = notification_recipient
        self._validator = CreateEventValidator(event_repo, category_repo)

    async def handle(self, cmd: CreateEvent) -> Result[UUID, ApplicationError]:
        """Handle CreateEvent command.

        Returns:
            Success(UUID): Identifier of the new event.
            Failure(ApplicationError): COMMAND_VALIDATION_FAILED with every
                rule violation. Nothing is persisted.

        Side Effects:
            - One insert, committed before the email is sent
            - Zero or one notification email
        """
        errors = await self._validator.validate(cmd)
        if errors:
            self._logger.info(
                "event_create_rejected",
                error_count=len(errors),
                fields=sorted({e.field or "" for e in errors}),
            )
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
                    message=CreateEventError.VALIDATION_FAILED,
                    validation_errors=tuple(errors),
                )
            )

        event = await self._event_repo.add(create_event_command_to_entity(cmd))
        await self._event_repo.commit()
        self._logger.info(
            "event_created",
            event_id=str(event.id),
            category_id=str(event.category_id),
        )

        await self._notify(event)

        return Success(value=event.id)

    async def _notify(self, event: Event) -> None:
        """Send the creation notice; log and discard any failure."""
        try:
            message = EmailMessage(
                to=self._notification_recipient,
                subject=NOTIFICATION_SUBJECT,
                body=f"A new event was created: {event}",
            )
            result = await self._email_service.send_email(message)
        except Exception as e:
            self._logger.warning(
                "event_notification_failed",
                event_id=str(event.id),
                error_type=type(e).__name__,
                error=str(e),
            )
            return

        if isinstance(result, Failure):
            self._logger.warning(
                "event_notification_failed",
                event_id=str(event.id),
                error=result.error.message,
            )
