"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols structurally, without
inheritance.

Usage:
    from src.domain.protocols import EventRepository, EmailProtocol
"""

from src.domain.protocols.async_repository import AsyncRepository
from src.domain.protocols.category_repository import CategoryRepository
from src.domain.protocols.csv_exporter_protocol import CsvExporterProtocol
from src.domain.protocols.email_protocol import EmailProtocol
from src.domain.protocols.event_repository import EventRepository
from src.domain.protocols.logger_protocol import LoggerProtocol

__all__ = [
    "AsyncRepository",
    "CategoryRepository",
    "CsvExporterProtocol",
    "EmailProtocol",
    "EventRepository",
    "LoggerProtocol",
]
