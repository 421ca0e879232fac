"""File export adapters."""

from src.infrastructure.export.csv_exporter import CsvExporter

__all__ = ["CsvExporter"]
