"""CQRS registry and dispatcher.

Usage:
    from src.application.cqrs import Dispatcher, COMMAND_REGISTRY
"""

from src.application.cqrs.dispatcher import (
    Dispatcher,
    DispatcherConfigurationError,
    DuplicateHandlerError,
    HandlerNotRegisteredError,
    build_dispatcher,
)
from src.application.cqrs.metadata import (
    CommandMetadata,
    CQRSCategory,
    QueryMetadata,
)
from src.application.cqrs.registry import (
    COMMAND_REGISTRY,
    QUERY_REGISTRY,
    get_all_request_classes,
    get_commands_by_category,
    get_metadata,
    get_queries_by_category,
    validate_registry_consistency,
)

__all__ = [
    "COMMAND_REGISTRY",
    "QUERY_REGISTRY",
    "CommandMetadata",
    "CQRSCategory",
    "Dispatcher",
    "DispatcherConfigurationError",
    "DuplicateHandlerError",
    "HandlerNotRegisteredError",
    "QueryMetadata",
    "build_dispatcher",
    "get_all_request_classes",
    "get_commands_by_category",
    "get_metadata",
    "get_queries_by_category",
    "validate_registry_consistency",
]
