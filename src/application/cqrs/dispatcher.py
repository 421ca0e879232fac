"""Request dispatcher.

Routes a command or query to the single handler registered for its exact
type. Handlers are built lazily from factories, one per send(), so each
request gets a fresh handler bound to its own session.

Usage:
    dispatcher = Dispatcher()
    dispatcher.register(GetEventDetail, lambda: GetEventDetailHandler(...))

    result = await dispatcher.send(GetEventDetail(event_id=event_id))
"""

from collections.abc import Callable, Mapping
from typing import Any, Protocol

from src.application.cqrs.registry import get_all_request_classes


class RequestHandler(Protocol):
    """Anything with an async handle(request) method."""

    async def handle(self, request: Any) -> Any: ...


HandlerFactory = Callable[[], RequestHandler]


class DispatcherConfigurationError(Exception):
    """Base class for wiring mistakes detected by the dispatcher."""


class DuplicateHandlerError(DispatcherConfigurationError):
    """A second handler was registered for the same request type."""

    def __init__(self, request_type: type) -> None:
        super().__init__(f"Handler already registered for {request_type.__name__}")
        self.request_type = request_type


class HandlerNotRegisteredError(DispatcherConfigurationError):
    """No handler is registered for the request type."""

    def __init__(self, request_type: type) -> None:
        super().__init__(f"No handler registered for {request_type.__name__}")
        self.request_type = request_type


class Dispatcher:
    """Explicit type-keyed registry of handler factories."""

    def __init__(self) -> None:
        self._factories: dict[type, HandlerFactory] = {}

    def register(self, request_type: type, factory: HandlerFactory) -> None:
        """Register the handler factory for a request type.

        Raises:
            DuplicateHandlerError: If request_type already has a handler.
        """
        if request_type in self._factories:
            raise DuplicateHandlerError(request_type)
        self._factories[request_type] = factory

    def is_registered(self, request_type: type) -> bool:
        return request_type in self._factories

    @property
    def registered_types(self) -> frozenset[type]:
        return frozenset(self._factories)

    async def send(self, request: Any) -> Any:
        """Build the handler for type(request) and await its result.

        Raises:
            HandlerNotRegisteredError: If nothing is registered for the type.
        """
        factory = self._factories.get(type(request))
        if factory is None:
            raise HandlerNotRegisteredError(type(request))
        handler = factory()
        return await handler.handle(request)


def build_dispatcher(factories: Mapping[type, HandlerFactory]) -> Dispatcher:
    """Build a dispatcher covering exactly the CQRS registry.

    Args:
        factories: Handler factory per command/query class.

    Returns:
        Dispatcher with every registry entry wired.

    Raises:
        DispatcherConfigurationError: If a registry entry has no factory or
            a factory is given for a type the registry does not list.
    """
    expected = get_all_request_classes()
    missing = [t.__name__ for t in expected if t not in factories]
    unknown = [t.__name__ for t in factories if t not in expected]
    if missing:
        raise DispatcherConfigurationError(
            f"No handler factory for: {', '.join(sorted(missing))}"
        )
    if unknown:
        raise DispatcherConfigurationError(
            f"Handler factory for unregistered request: {', '.join(sorted(unknown))}"
        )

    dispatcher = Dispatcher()
    for request_type in expected:
        dispatcher.register(request_type, factories[request_type])
    return dispatcher
