"""Unit tests for ConsoleAdapter (structured console logging).

structlog is patched; no output is produced.
"""

from unittest.mock import MagicMock, patch

import pytest

from src.infrastructure.logging.console_adapter import ConsoleAdapter

STRUCTLOG = "src.infrastructure.logging.console_adapter.structlog"


@pytest.fixture
def mock_logger():
    with patch(STRUCTLOG) as mock_structlog:
        logger = MagicMock()
        mock_structlog.get_logger.return_value = logger
        yield logger


@pytest.mark.unit
class TestConsoleAdapterLogging:
    """LoggerProtocol methods forward to structlog."""

    @pytest.mark.parametrize("level", ["debug", "info", "warning", "error", "critical"])
    def test_forwards_message_and_context(self, mock_logger, level):
        adapter = ConsoleAdapter()

        getattr(adapter, level)("event_created", event_id="123")

        getattr(mock_logger, level).assert_called_once_with(
            "event_created", event_id="123"
        )

    def test_error_includes_exception_details(self, mock_logger):
        adapter = ConsoleAdapter()

        adapter.error("export_failed", error=ValueError("bad row"), row=3)

        mock_logger.error.assert_called_once_with(
            "export_failed", row=3, error_type="ValueError", error_message="bad row"
        )

    def test_critical_includes_exception_details(self, mock_logger):
        adapter = ConsoleAdapter()

        adapter.critical("startup_failed", error=RuntimeError("no db"))

        mock_logger.critical.assert_called_once_with(
            "startup_failed", error_type="RuntimeError", error_message="no db"
        )


@pytest.mark.unit
class TestConsoleAdapterConfiguration:
    """structlog configuration."""

    def test_json_renderer(self):
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter(use_json=True)

            processors = mock_structlog.configure.call_args.kwargs["processors"]
            assert processors[-1] is mock_structlog.processors.JSONRenderer.return_value

    def test_console_renderer(self):
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter(use_json=False)

            processors = mock_structlog.configure.call_args.kwargs["processors"]
            assert processors[-1] is mock_structlog.dev.ConsoleRenderer.return_value

    def test_level_filter(self):
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter(level="warning")

            mock_structlog.make_filtering_bound_logger.assert_called_once_with(30)


@pytest.mark.unit
class TestConsoleAdapterBinding:
    """bind() / with_context()"""

    def test_bind_returns_new_adapter(self, mock_logger):
        bound_backend = MagicMock()
        mock_logger.bind.return_value = bound_backend
        adapter = ConsoleAdapter()

        bound = adapter.bind(trace_id="abc")
        bound.info("event_updated")

        assert bound is not adapter
        mock_logger.bind.assert_called_once_with(trace_id="abc")
        bound_backend.info.assert_called_once_with("event_updated")

    def test_with_context_alias(self, mock_logger):
        adapter = ConsoleAdapter()

        adapter.with_context(request_id="r1")

        mock_logger.bind.assert_called_once_with(request_id="r1")
