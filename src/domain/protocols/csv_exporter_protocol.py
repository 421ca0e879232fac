"""CSV exporter protocol (port)."""

from collections.abc import Sequence
from typing import Any, Protocol


class CsvExporterProtocol(Protocol):
    """Serializes event export rows to delimited text.

    Column order is fixed by the export row's declared field order.
    """

    def export_events_to_csv(
        self, rows: Sequence[Any], encoding: str = "utf-8"
    ) -> bytes:
        """Render rows as CSV.

        Args:
            rows: Ordered export rows.
            encoding: Target text encoding of the returned buffer.

        Returns:
            CSV document: one header row plus one row per record.
        """
        ...
