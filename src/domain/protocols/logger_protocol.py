"""LoggerProtocol definition for structured logging.

Backend-agnostic structured logging port. Messages are constant strings;
everything variable goes into key-value context.

Security:
    - NEVER log the routes feed secret or any header carrying it
    - Truncate caller-supplied paths before logging them

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    logger.warning("Redirect lookup failed", path=path, error_type="KeyError")

    request_logger = logger.bind(trace_id=trace_id)
    request_logger.debug("Routes page served", count=50, has_next=True)
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message.

        Args:
            message: Human-readable message (avoid f-strings; use context).
            **context: Structured key-value context fields.
        """
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message (degraded but serving)."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Human-readable message.
            error: Optional exception; adapters add error_type and
                error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a new logger with permanently bound context.

        Args:
            **context: Context included in every later call.

        Returns:
            New logger instance; the original is unchanged.
        """
        ...
