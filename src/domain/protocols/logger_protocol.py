"""Structured logging port.

Handlers and adapters log events as a short message plus key-value
context, never as formatted strings. Bound loggers carry request-scoped
fields such as ``trace_id`` into every call.

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    logger.info("operation_created", operation_id=op.id, api_id=op.api_id)

    request_logger = logger.bind(trace_id=trace_id)
    request_logger.warning("access_denied", resource="apis", action="delete")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    Implementations:
        - ConsoleAdapter: structlog, JSON or pretty console output
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level event."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level event."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level event."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level event.

        Args:
            message: Event name or short message.
            error: Optional exception; adapters add error_type and
                error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a new logger with permanently bound context.

        The original logger is unchanged.

        Example:
            request_logger = logger.bind(trace_id=trace_id)
            request_logger.info("request_started")
        """
        ...
