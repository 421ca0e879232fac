"""CQRS Metadata Types.

Dataclasses and enums describing registry entries. Entries are immutable
(frozen=True) and built with explicit keywords (kw_only=True).
"""

from dataclasses import dataclass
from enum import Enum


class CQRSCategory(str, Enum):
    """Functional area of a command or query."""

    EVENT = "event"  # Events: list, detail, create, update, delete, export
    CATEGORY = "category"  # Categories: list, list with events, create


@dataclass(frozen=True, kw_only=True)
class CommandMetadata:
    """Metadata for a command in the CQRS registry.

    Attributes:
        command_class: The command dataclass (e.g., CreateEvent).
        handler_class: The handler class (e.g., CreateEventHandler).
        category: Functional category.
        has_result_dto: Whether the handler returns a DTO (vs UUID/None).
        result_dto_class: The DTO class if has_result_dto is True.
        sends_notification: Whether the handler sends an email.
        description: Human-readable description for documentation.

    Example:
        >>> CommandMetadata(
        ...     command_class=CreateEvent,
        ...     handler_class=CreateEventHandler,
        ...     category=CQRSCategory.EVENT,
        ...     sends_notification=True,
        ...     description="Create event and notify by email",
        ... )
    """

    command_class: type
    handler_class: type
    category: CQRSCategory
    has_result_dto: bool = False
    result_dto_class: type | None = None
    sends_notification: bool = False
    description: str = ""

    def __post_init__(self) -> None:
        """Validate metadata consistency."""
        if self.has_result_dto and self.result_dto_class is None:
            raise ValueError(
                f"Command {self.command_class.__name__} has has_result_dto=True "
                f"but no result_dto_class specified"
            )
        if not self.has_result_dto and self.result_dto_class is not None:
            raise ValueError(
                f"Command {self.command_class.__name__} has result_dto_class "
                f"but has_result_dto=False"
            )


@dataclass(frozen=True, kw_only=True)
class QueryMetadata:
    """Metadata for a query in the CQRS registry.

    Attributes:
        query_class: The query dataclass (e.g., GetEventDetail).
        handler_class: The handler class (e.g., GetEventDetailHandler).
        category: Functional category.
        result_dto_class: DTO returned (element type for list results).
        returns_list: Whether the handler returns a list of result_dto_class.
        description: Human-readable description for documentation.
    """

    query_class: type
    handler_class: type
    category: CQRSCategory
    result_dto_class: type
    returns_list: bool = False
    description: str = ""


def get_request_class(metadata: CommandMetadata | QueryMetadata) -> type:
    """Return the command or query class of a registry entry."""
    if isinstance(metadata, CommandMetadata):
        return metadata.command_class
    return metadata.query_class


def get_handler_factory_name(metadata: CommandMetadata | QueryMetadata) -> str:
    """Compute the expected container factory function name for a handler.

    Convention: get_{snake_case_request}_handler

    Example:
        >>> get_handler_factory_name(create_event_metadata)
        'get_create_event_handler'
    """
    class_name = get_request_class(metadata).__name__

    snake_case = ""
    for i, char in enumerate(class_name):
        if char.isupper() and i > 0:
            snake_case += "_"
        snake_case += char.lower()

    return f"get_{snake_case}_handler"
