"""GetEventsExport query handler.

Serializes every event (ordered by date) to CSV. The file is returned to
the caller, never stored.
"""

from uuid_extensions import uuid7

from src.application.dtos.event_dtos import EventExportFile
from src.application.errors import ApplicationError
from src.application.mappers import event_to_export_row, map_all
from src.application.queries.event_queries import GetEventsExport
from src.core.result import Result, Success
from src.domain.protocols.csv_exporter_protocol import CsvExporterProtocol
from src.domain.protocols.event_repository import EventRepository
from src.domain.protocols.logger_protocol import LoggerProtocol

EXPORT_CONTENT_TYPE = "text/csv"


class GetEventsExportHandler:
    """Handler for GetEventsExport query."""

    def __init__(
        self,
        event_repo: EventRepository,
        csv_exporter: CsvExporterProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._event_repo = event_repo
        self._csv_exporter = csv_exporter
        self._logger = logger

    async def handle(
        self, query: GetEventsExport
    ) -> Result[EventExportFile, ApplicationError]:
        """Handle GetEventsExport query.

        Returns:
            Success(EventExportFile): CSV bytes under a random `<uuid>.csv` name.
        """
        events = sorted(await self._event_repo.list_all(), key=lambda e: e.date)
        rows = map_all(event_to_export_row, events)
        data = self._csv_exporter.export_events_to_csv(rows)

        export = EventExportFile(
            file_name=f"{uuid7()}.csv",
            content_type=EXPORT_CONTENT_TYPE,
            data=data,
        )
        self._logger.info(
            "events_exported", row_count=len(rows), file_name=export.file_name
        )
        return Success(value=export)
