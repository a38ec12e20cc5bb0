"""Container module - Centralized dependency injection.

Re-exports the factory functions of the submodules:

    from credguard.core.container import get_logger, get_password_service

- infrastructure: logging, password hashing, password policy
- services: application services
"""

from credguard.core.container.infrastructure import (
    get_logger,
    get_password_policy,
    get_password_service,
)
from credguard.core.container.services import get_credential_service

__all__ = [
    "get_credential_service",
    "get_logger",
    "get_password_policy",
    "get_password_service",
]
