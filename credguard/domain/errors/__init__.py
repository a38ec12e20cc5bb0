"""Domain errors package.

Usage:
    from credguard.domain.errors import PasswordPolicyError, PasswordErrorMessage
"""

from credguard.domain.errors.password_error import (
    CorruptCredentialError,
    MalformedPersistedFormError,
    PasswordError,
    PasswordErrorMessage,
    PasswordHashingError,
    PasswordPolicyError,
    PasswordVerificationError,
)

__all__ = [
    "CorruptCredentialError",
    "MalformedPersistedFormError",
    "PasswordError",
    "PasswordErrorMessage",
    "PasswordHashingError",
    "PasswordPolicyError",
    "PasswordVerificationError",
]
