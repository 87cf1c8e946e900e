"""LoggerProtocol definition for structured logging.

Backend-agnostic port for event-style logging. Every call is a short event
name plus key-value context.

Security:
    - NEVER log passwords, password hashes, tokens or the signing key
    - Identify users by id or identifier only

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    logger.info("permissions_updated", granter_id=1, target_id=2)

    request_logger = logger.bind(trace_id=trace_id)
    request_logger.warning("delegation_denied", code="self_modification")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level event."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level event."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level event (expected but refused operations)."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level event.

        Args:
            message: Event name.
            error: Optional exception; adapters add error_type and
                error_message fields for it.
            **context: Structured key-value context fields.
        """
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a new logger with context included in every later call.

        The original logger is left unchanged.
        """
        ...
