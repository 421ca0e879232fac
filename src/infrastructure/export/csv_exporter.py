"""CSV exporter.

Renders event export rows with the stdlib csv writer. The header row is
EventExportRow's field names in declaration order; datetimes are written
as ISO-8601 and UUIDs as their canonical string.
"""

import csv
import dataclasses
import io
from collections.abc import Sequence
from datetime import datetime
from typing import Any

from src.application.dtos.event_dtos import EventExportRow

EVENT_EXPORT_COLUMNS: tuple[str, ...] = tuple(
    f.name for f in dataclasses.fields(EventExportRow)
)


class CsvExporter:
    """CsvExporterProtocol implementation."""

    def export_events_to_csv(
        self, rows: Sequence[EventExportRow], encoding: str = "utf-8"
    ) -> bytes:
        """Render export rows as a CSV document.

        Args:
            rows: Rows in output order.
            encoding: Encoding of the returned bytes.

        Returns:
            Encoded CSV document: header row plus one line per row. An empty
            input still yields the header.
        """
        buffer = io.StringIO(newline="")
        writer = csv.writer(buffer)
        writer.writerow(EVENT_EXPORT_COLUMNS)
        for row in rows:
            writer.writerow(
                [_format_cell(getattr(row, name)) for name in EVENT_EXPORT_COLUMNS]
            )
        return buffer.getvalue().encode(encoding)


def _format_cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)
