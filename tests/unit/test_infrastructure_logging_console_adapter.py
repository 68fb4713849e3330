"""Unit tests for ConsoleAdapter (structured console logging).

Tests cover:
- LoggerProtocol methods (debug, info, warning, error, critical)
- Exception details on error/critical
- Context binding
- Renderer and level configuration

Architecture:
- Unit tests with mocked structlog
"""

import logging
from unittest.mock import MagicMock, patch

import pytest

from emailvo.infrastructure.logging.console_adapter import ConsoleAdapter

STRUCTLOG = "emailvo.infrastructure.logging.console_adapter.structlog"


@pytest.mark.unit
class TestConsoleAdapterLogging:
    """Test ConsoleAdapter logging methods."""

    @pytest.mark.parametrize("level", ["debug", "info", "warning"])
    def test_logs_message_with_context(self, level):
        """Test level methods forward message and structured context."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            getattr(adapter, level)("Email rejected", reason="no @-sign")

            getattr(mock_logger, level).assert_called_once_with(
                "Email rejected", reason="no @-sign"
            )

    def test_error_adds_exception_details(self):
        """Test error() flattens the exception into context."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.error("Lookup failed", error=ValueError("boom"), field="email")

            mock_logger.error.assert_called_once_with(
                "Lookup failed",
                field="email",
                error_type="ValueError",
                error_message="boom",
            )

    def test_critical_without_exception(self):
        """Test critical() with no error keeps context unchanged."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.critical("Settings unreadable")

            mock_logger.critical.assert_called_once_with("Settings unreadable")


@pytest.mark.unit
class TestConsoleAdapterContextBinding:
    """Test ConsoleAdapter context binding methods."""

    def test_bind_returns_new_adapter_with_bound_context(self):
        """Test bind() returns new adapter wrapping the bound logger."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_bound_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger
            mock_logger.bind.return_value = mock_bound_logger

            adapter = ConsoleAdapter()
            bound_adapter = adapter.bind(component="email")

            mock_logger.bind.assert_called_once_with(component="email")
            assert bound_adapter is not adapter
            assert bound_adapter._logger == mock_bound_logger

            bound_adapter.info("First message")
            mock_bound_logger.info.assert_called_once_with("First message")

    def test_with_context_is_alias_for_bind(self):
        """Test with_context() binds like bind()."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.with_context(trace_id="trace-789")

            mock_logger.bind.assert_called_once_with(trace_id="trace-789")


@pytest.mark.unit
class TestConsoleAdapterInitialization:
    """Test ConsoleAdapter configuration."""

    def test_json_renderer_when_requested(self):
        """Test use_json=True appends JSONRenderer."""
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter(use_json=True)

            mock_structlog.processors.JSONRenderer.assert_called_once()
            mock_structlog.dev.ConsoleRenderer.assert_not_called()

    def test_console_renderer_by_default(self):
        """Test human-readable renderer by default."""
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter()

            mock_structlog.dev.ConsoleRenderer.assert_called_once_with(colors=True)
            mock_structlog.processors.JSONRenderer.assert_not_called()

    @pytest.mark.parametrize(
        ("level", "expected"),
        [
            ("DEBUG", logging.DEBUG),
            ("warning", logging.WARNING),
            ("nonsense", logging.INFO),
        ],
    )
    def test_level_filtering(self, level, expected):
        """Test level name maps to the filtering bound logger."""
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter(level=level)

            mock_structlog.make_filtering_bound_logger.assert_called_once_with(expected)
