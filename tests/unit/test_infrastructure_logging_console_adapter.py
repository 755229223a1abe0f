"""Unit tests for ConsoleAdapter (structured console logging).

Tests cover:
- All LoggerProtocol methods (debug, info, warning, error, critical)
- Exception details on error/critical
- Context binding
- Renderer and level configuration

Architecture:
- Unit tests with mocked structlog
"""

import logging
from unittest.mock import MagicMock, patch

import pytest

from zoo_keeper.infrastructure.logging.console_adapter import ConsoleAdapter

STRUCTLOG = "zoo_keeper.infrastructure.logging.console_adapter.structlog"


@pytest.mark.unit
class TestConsoleAdapterLogging:
    """Test ConsoleAdapter logging methods."""

    @pytest.mark.parametrize("level", ["debug", "info", "warning"])
    def test_logs_message_with_context(self, level):
        """Test plain levels pass message and context through."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            getattr(adapter, level)("income_added", amount="3000", budget="6000")

            getattr(mock_logger, level).assert_called_once_with(
                "income_added", amount="3000", budget="6000"
            )

    @pytest.mark.parametrize("level", ["error", "critical"])
    def test_includes_exception_details(self, level):
        """Test error() and critical() flatten the exception into context."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            getattr(adapter, level)(
                "handler_crashed", error=ValueError("bad amount"), handler="AddIncome"
            )

            getattr(mock_logger, level).assert_called_once_with(
                "handler_crashed",
                handler="AddIncome",
                error_type="ValueError",
                error_message="bad amount",
            )

    def test_error_without_exception(self):
        """Test error() works without an exception."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            ConsoleAdapter().error("salaries_not_paid", budget="0")

            mock_logger.error.assert_called_once_with("salaries_not_paid", budget="0")


@pytest.mark.unit
class TestConsoleAdapterBinding:
    """Test bind() and with_context()."""

    def test_bind_returns_new_adapter(self):
        """Test bind wraps the bound structlog logger."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            bound_logger = MagicMock()
            mock_logger.bind.return_value = bound_logger
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            bound = adapter.bind(sitter_name="Ogun")
            bound.info("sitter_appointed", animal_name="Karabas")

            assert bound is not adapter
            mock_logger.bind.assert_called_once_with(sitter_name="Ogun")
            bound_logger.info.assert_called_once_with(
                "sitter_appointed", animal_name="Karabas"
            )

    def test_with_context_is_bind_alias(self):
        """Test with_context delegates to bind."""
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            ConsoleAdapter().with_context(handler="HireSitter")

            mock_logger.bind.assert_called_once_with(handler="HireSitter")


@pytest.mark.unit
class TestConsoleAdapterConfiguration:
    """Test structlog configuration."""

    def test_json_renderer_when_requested(self):
        """Test use_json selects the JSON renderer."""
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter(use_json=True)

            mock_structlog.processors.JSONRenderer.assert_called_once()
            mock_structlog.dev.ConsoleRenderer.assert_not_called()

    def test_console_renderer_by_default(self):
        """Test human-readable output by default."""
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter()

            mock_structlog.dev.ConsoleRenderer.assert_called_once_with(colors=True)

    def test_level_is_applied(self):
        """Test the filtering level follows the requested name."""
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter(level="warning")

            mock_structlog.make_filtering_bound_logger.assert_called_once_with(
                logging.WARNING
            )
