"""Validation functions for Pydantic Annotated types.

Validators are pure functions that raise ValueError on validation failure,
which is what Pydantic's AfterValidator expects. They reuse the password
policy so request models and the Password value object accept exactly the
same plaintexts.
"""

from credguard.core.result import Failure
from credguard.domain.validators.password_policy import validate_password


def validate_strong_password(v: str) -> str:
    """Validate password strength against the default policy.

    Args:
        v: Password to validate.

    Returns:
        Password unchanged (validation only).

    Raises:
        ValueError: With the failing rule's message (never the plaintext).

    Example:
        >>> validate_strong_password("SecurePass123!")
        'SecurePass123!'
        >>> validate_strong_password("weak")
        ValueError: password must be at least 8 characters long
    """
    match validate_password(v):
        case Failure(error=error):
            raise ValueError(error.message)
    return v
