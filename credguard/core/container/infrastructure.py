"""Infrastructure dependency factories.

Application-scoped singletons. Every object returned here is stateless or
immutable, so sharing one instance across threads needs no locking.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from credguard.core.config import get_settings

if TYPE_CHECKING:
    from credguard.domain.protocols.logger_protocol import LoggerProtocol
    from credguard.domain.protocols.password_hashing_protocol import (
        PasswordHashingProtocol,
    )
    from credguard.domain.validators.password_policy import PasswordPolicy


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from credguard.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
    )


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    """Get password hashing service singleton (app-scoped).

    Returns BcryptPasswordService with the configured cost factor
    (default 12, ~250ms per hash).

    Returns:
        Password hashing service implementing PasswordHashingProtocol.
    """
    from credguard.infrastructure.security import BcryptPasswordService

    return BcryptPasswordService(
        cost_factor=get_settings().bcrypt_rounds,
        logger=get_logger().bind(component="bcrypt_password_service"),
    )


@lru_cache()
def get_password_policy() -> "PasswordPolicy":
    """Get password policy singleton with the default deny-list."""
    from credguard.domain.validators.password_policy import PasswordPolicy

    return PasswordPolicy()
