"""LoggerProtocol definition for structured logging.

Backend-agnostic structured logging: message + key-value context.

Log Levels:
    - DEBUG: Detailed diagnostic info (dev only)
    - INFO: Normal operational events
    - WARNING: Degraded service
    - ERROR: Operation failed, system continues
    - CRITICAL: System-wide failure

Usage:
    from streetcode.core.container import get_logger

    logger: LoggerProtocol = get_logger()
    logger.error(
        "Cannot find an art with corresponding id: 5",
        request="GetArtById",
        art_id=5,
    )

    request_logger = logger.bind(request="ReorderFacts", streetcode_id=7)
    request_logger.info("Facts reordered")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    All logging calls MUST be structured: message + key-value context.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
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
            message: Human-readable message.
            error: Optional exception instance; implementation may include
                error_type and error_message fields.
            **context: Structured key-value context fields (the request
                name and its identifiers for handler failures).
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message for catastrophic failures."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        Original logger instance remains unchanged.
        """
        ...

    def with_context(self, **context: Any) -> LoggerProtocol:
        """Alias for bind()."""
        ...
