"""Common error classes shared across domains.

Usage:
    from credguard.core.errors import ValidationError
    from credguard.core.enums import ErrorCode
    from credguard.core.result import Failure

    return Failure(error=ValidationError(
        code=ErrorCode.PASSWORD_TOO_SHORT,
        message="password must be at least 8 characters long",
        field="password",
    ))
"""

from dataclasses import dataclass

from credguard.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Field name that failed validation.
        details: Additional context.
    """

    field: str | None = None
