"""Container module - Centralized dependency injection.

    from src.core.container import get_dispatcher, get_logger

Organization:
- infrastructure: database, session, logging, email, CSV exporter
- repositories: repository factories
- handlers: handler factories and the request-scoped dispatcher
"""

from src.core.container.handlers import (
    get_create_category_handler,
    get_create_event_handler,
    get_delete_event_handler,
    get_dispatcher,
    get_get_categories_list_handler,
    get_get_categories_list_with_events_handler,
    get_get_event_detail_handler,
    get_get_events_export_handler,
    get_get_events_list_handler,
    get_update_event_handler,
)
from src.core.container.infrastructure import (
    get_csv_exporter,
    get_database,
    get_db_session,
    get_email_service,
    get_logger,
)
from src.core.container.repositories import (
    get_category_repository,
    get_event_repository,
)

__all__ = [
    # Infrastructure
    "get_csv_exporter",
    "get_database",
    "get_db_session",
    "get_email_service",
    "get_logger",
    # Repositories
    "get_category_repository",
    "get_event_repository",
    # Handlers
    "get_create_category_handler",
    "get_create_event_handler",
    "get_delete_event_handler",
    "get_dispatcher",
    "get_get_categories_list_handler",
    "get_get_categories_list_with_events_handler",
    "get_get_event_detail_handler",
    "get_get_events_export_handler",
    "get_get_events_list_handler",
    "get_update_event_handler",
]
