"""LoggerProtocol definition for structured logging.

Backend-agnostic port for structured logging. Implementations MUST emit
structured logs (event name + key-value context) and MUST NOT log tokens or
signing keys.

Log Levels:
    - DEBUG: Detailed diagnostic info (individual allow decisions)
    - INFO: Normal operational events (claims issued, subject revoked)
    - WARNING: Degraded or suspicious (unknown role fallback, access denied)
    - ERROR: Operation failed (role store unavailable)
    - CRITICAL: System-wide failure

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    logger.info("claims_issued", subject_id=subject_id, claims_version=3)

    gate_logger = logger.bind(adapter="route_guard")
    gate_logger.warning("access_denied", reason="stale_claims")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    Calls are structured: message + key-value context. Supports context
    binding for adapter- or request-scoped loggers.
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
            message: Event name.
            error: Optional exception; implementations add error_type and
                error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message with optional exception details."""
        ...

    def bind(self, **context: Any) -> "LoggerProtocol":
        """Return new logger with permanently bound context.

        The original logger instance remains unchanged.

        Args:
            **context: Context to bind to all future logs.

        Returns:
            New logger instance with bound context.
        """
        ...
