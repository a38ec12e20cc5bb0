"""Logging infrastructure adapters."""

from credguard.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
