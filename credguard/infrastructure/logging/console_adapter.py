"""Console logging adapter.

Structured logs to stdout through structlog:
- development: coloured console renderer
- every other environment: JSON, one event per line

Credential material must never reach a log line. Callers are expected to log
error codes and rule names only; as a backstop, the ``redact_secrets``
processor masks any event key that names a plaintext or a hash before
rendering.

Implementation does NOT inherit from LoggerProtocol (PEP 544 structural
subtyping).
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from credguard.domain.value_objects.password import REDACTED

SECRET_KEYS = frozenset(
    {
        "attempt",
        "hash",
        "hashed_value",
        "hashedValue",
        "password",
        "password_hash",
        "plaintext",
    }
)


def redact_secrets(
    _logger: Any, _method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """structlog processor: mask values logged under a secret-bearing key."""
    for key in SECRET_KEYS.intersection(event_dict):
        event_dict[key] = REDACTED
    return event_dict


class ConsoleAdapter:
    """Console logger implementing LoggerProtocol.

    Args:
        use_json: JSON output when True, human-readable when False.
        level: Minimum level name. Unknown names fall back to INFO.
    """

    def __init__(self, *, use_json: bool = False, level: str = "INFO") -> None:
        renderer = (
            structlog.processors.JSONRenderer()
            if use_json
            else structlog.dev.ConsoleRenderer(colors=True)
        )

        structlog.configure(
            processors=[
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso", utc=True),
                redact_secrets,
                renderer,
            ],
            wrapper_class=structlog.make_filtering_bound_logger(
                getattr(logging, level.upper(), logging.INFO)
            ),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
            cache_logger_on_first_use=True,
        )

        self._logger = structlog.get_logger()

    def _emit(
        self,
        method: str,
        message: str,
        error: Exception | None,
        context: dict[str, Any],
    ) -> None:
        if error is not None:
            # type and message only, no traceback
            context["error_type"] = type(error).__name__
            context["error_message"] = str(error)
        getattr(self._logger, method)(message, **context)

    def debug(self, message: str, /, **context: Any) -> None:
        self._emit("debug", message, None, context)

    def info(self, message: str, /, **context: Any) -> None:
        self._emit("info", message, None, context)

    def warning(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        self._emit("warning", message, error, context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error, flattening ``error`` into error_type/error_message."""
        self._emit("error", message, error, context)

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        self._emit("critical", message, error, context)

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return a new adapter whose events all carry ``context``."""
        bound_adapter = ConsoleAdapter.__new__(ConsoleAdapter)
        bound_adapter._logger = self._logger.bind(**context)
        return bound_adapter

    def with_context(self, **context: Any) -> ConsoleAdapter:
        """Alias for bind()."""
        return self.bind(**context)
