"""LoggerProtocol definition for structured logging.

Standardizes structured logging across the application layer while
remaining backend-agnostic. Logs are a message plus key-value context.

Log Levels:
    - DEBUG: Detailed diagnostic info (dev only)
    - INFO: Normal operational events (income booked, animal admitted)
    - WARNING: Rejected operations (not enough budget, duplicate sitter)
    - ERROR: Operation failed unexpectedly, system continues
    - CRITICAL: System-wide failure

Usage:
    from zoo_keeper.core.container import get_logger

    logger = get_logger()
    logger.info("income_added", amount="3000", budget="5750")

    handler_logger = logger.bind(handler="AddIncomeHandler")
    handler_logger.info("income_added")  # handler auto-included
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    All logging calls MUST be structured: message + key-value context.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message.

        Args:
            message: Event name or short message (avoid f-strings; use context).
            **context: Structured key-value context fields.
        """
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Event name or short message.
            error: Optional exception instance; implementation may include
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message for catastrophic failures."""
        ...

    def bind(self, **context: Any) -> "LoggerProtocol":
        """Return new logger with permanently bound context.

        Original logger instance remains unchanged (immutable pattern).

        Args:
            **context: Context to bind to all future logs.

        Returns:
            New logger instance with bound context.
        """
        ...

    def with_context(self, **context: Any) -> "LoggerProtocol":
        """Alias for bind()."""
        ...
