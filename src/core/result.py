"""Result types for railway-oriented programming.

Handlers return a Result instead of raising for expected failures
(validation, not found). Routers inspect the Result and translate a
Failure into an HTTP problem response.

Usage:
    async def handle(self, query: GetEventDetail) -> Result[EventDetail, ApplicationError]:
        event = await self._event_repo.get_by_id(query.event_id)
        if event is None:
            return Failure(error=ApplicationError(...))
        return Success(value=event_to_detail(event, category))

    match await handler.handle(query):
        case Success(value=detail):
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful outcome carrying a value."""

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed outcome carrying an error."""

    error: E


Result: TypeAlias = Success[T] | Failure[E]
