"""Core errors package.

Usage:
    from credguard.core.errors import DomainError, ValidationError
"""

from credguard.core.errors.common_errors import ValidationError
from credguard.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
]
