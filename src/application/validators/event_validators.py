"""Event command validators.

Rules:
    - name: required, max 50 characters
    - date: required, strictly in the future (on update, only when changed)
    - price: greater than 0
    - ticket_quantity: greater than 0
    - category_id: required, must reference a stored category
    - name + date: unique among stored events (creation only)
"""

from datetime import datetime
from uuid import UUID

from src.application.commands.event_commands import CreateEvent, UpdateEvent
from src.core.datetime_utils import ensure_utc
from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Result
from src.core.validation import (
    validate_future_date,
    validate_max_length,
    validate_positive,
    validate_required,
)
from src.domain.entities.event import Event
from src.domain.protocols.category_repository import CategoryRepository
from src.domain.protocols.event_repository import EventRepository

NAME_MAX_LENGTH = 50
DUPLICATE_EVENT_MESSAGE = "An event with the same name and date already exists."
UNKNOWN_CATEGORY_MESSAGE = "Category does not exist."


def _field_errors(
    command: CreateEvent | UpdateEvent, *, require_future_date: bool = True
) -> list[ValidationError]:
    results: list[Result] = [
        validate_required(command.name, "name", "Name"),
        validate_max_length(command.name, NAME_MAX_LENGTH, "name", "Name"),
        validate_required(command.date, "date", "Date"),
    ]
    if require_future_date:
        results.append(validate_future_date(command.date, "date", "Date"))
    results += [
        validate_positive(command.price, "price", "Price"),
        validate_positive(command.ticket_quantity, "ticket_quantity", "Ticket quantity"),
        validate_required(command.category_id, "category_id", "Category"),
    ]
    return [r.error for r in results if isinstance(r, Failure)]


async def _category_error(
    category_repository: CategoryRepository, category_id: UUID | None
) -> ValidationError | None:
    if category_id is None:
        return None
    if await category_repository.get_by_id(category_id) is not None:
        return None
    return ValidationError(
        code=ErrorCode.CATEGORY_NOT_FOUND,
        message=UNKNOWN_CATEGORY_MESSAGE,
        field="category_id",
    )


def _date_changed(new: datetime | None, current: datetime) -> bool:
    return new is None or ensure_utc(new) != ensure_utc(current)


class CreateEventValidator:
    """Validates CreateEvent, including the name+date uniqueness check.

    Args:
        event_repository: Used for the uniqueness query only.
        category_repository: Resolves category_id.
    """

    def __init__(
        self,
        event_repository: EventRepository,
        category_repository: CategoryRepository,
    ) -> None:
        self._event_repository = event_repository
        self._category_repository = category_repository

    async def validate(self, command: CreateEvent) -> list[ValidationError]:
        """Return every violation for the command.

        The uniqueness query only runs once name and date are valid on
        their own.
        """
        errors = _field_errors(command)
        category_error = await _category_error(
            self._category_repository, command.category_id
        )
        if category_error is not None:
            errors.append(category_error)

        if command.name is None or command.date is None:
            return errors
        if any(e.field in ("name", "date") for e in errors):
            return errors

        unique = await self._event_repository.is_name_and_date_unique(
            command.name, ensure_utc(command.date)
        )
        if not unique:
            errors.append(
                ValidationError(
                    code=ErrorCode.EVENT_ALREADY_EXISTS,
                    message=DUPLICATE_EVENT_MESSAGE,
                    field="name",
                )
            )
        return errors


class UpdateEventValidator:
    """Validates UpdateEvent against the stored event.

    No uniqueness check. The future-date rule only applies when the
    command moves the event to a new date, so past events stay editable.

    Args:
        category_repository: Resolves category_id.
    """

    def __init__(self, category_repository: CategoryRepository) -> None:
        self._category_repository = category_repository

    async def validate(
        self, command: UpdateEvent, current: Event
    ) -> list[ValidationError]:
        """Return every violation for the command."""
        errors = _field_errors(
            command, require_future_date=_date_changed(command.date, current.date)
        )
        category_error = await _category_error(
            self._category_repository, command.category_id
        )
        if category_error is not None:
            errors.append(category_error)
        return errors
