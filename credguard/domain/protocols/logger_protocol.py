"""LoggerProtocol definition for structured logging.

Standardizes structured logging while staying backend-agnostic.
Implementations MUST keep logs structured (key-value context) and safe.

Security:
    - NEVER log plaintext passwords or password hashes
    - Log error codes and rule names instead

Usage:
    from credguard.core.container import get_logger

    logger = get_logger()
    logger.info("Password rejected", error_code=error.code.value)
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    Supports the 5 standard log levels and context binding.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a warning-level message with optional exception details."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Human-readable message (avoid f-strings; use context).
            error: Optional exception instance; implementation may include
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message with optional exception details."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        Original logger instance remains unchanged.

        Example:
            service_logger = logger.bind(component="credential_service")
            service_logger.info("Password registered")
        """
        ...

    def with_context(self, **context: Any) -> LoggerProtocol:
        """Alias for bind()."""
        ...
