"""Password domain errors.

Architecture:
    - Domain layer errors (no infrastructure dependencies)
    - Used in Result types (railway-oriented programming)
    - Never raised as exceptions (return Failure(error=...) instead)

Messages say which rule failed so the user can correct the input. They never
echo the rejected plaintext or the stored hash.

Usage:
    from credguard.core.enums import ErrorCode
    from credguard.core.result import Failure

    match Password.create(plaintext):
        case Failure(error=error) if error.is_kind(ErrorCode.PASSWORD_COMMON):
            ...
"""

from dataclasses import dataclass

from credguard.core.errors import DomainError, ValidationError


class PasswordErrorMessage:
    """Password error message constants."""

    # Policy
    TOO_SHORT = "password must be at least {min_length} characters long"
    TOO_LONG = "password cannot exceed {max_length} characters"
    INVALID_CHARS = "password contains invalid characters"
    TOO_WEAK = (
        "password must contain at least one uppercase letter,"
        " one lowercase letter, one number, and one special character"
    )
    COMMON = (
        "password is too common or weak. "
        'Try to not use common names or repeating characters like "123456" or "123456789".'
    )

    # Hashing / verification
    HASHING_FAILED = "failed to hash password"
    VERIFY_FAILED = "failed to verify password"
    CREDENTIAL_CORRUPT = "stored password hash is malformed"

    # Persistence
    MALFORMED_PERSISTED_FORM = (
        "failed to build password from persisted form: missing or empty hashedValue"
    )


@dataclass(frozen=True, slots=True, kw_only=True)
class PasswordPolicyError(ValidationError):
    """A plaintext was rejected by the password policy.

    Codes: PASSWORD_TOO_SHORT, PASSWORD_TOO_LONG, PASSWORD_INVALID_CHARS,
    PASSWORD_TOO_WEAK, PASSWORD_COMMON.
    """

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class PasswordHashingError(DomainError):
    """The hash primitive could not produce a hash (PASSWORD_HASHING_FAILED).

    The primitive's own exception is kept as ``cause``.
    """

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class CorruptCredentialError(DomainError):
    """The stored hash could not be parsed by the primitive (CREDENTIAL_CORRUPT)."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class PasswordVerificationError(DomainError):
    """A plaintext attempt did not verify (PASSWORD_VERIFY_FAILED).

    Covers both a wrong attempt and a malformed stored hash. In the second
    case ``cause`` holds the CorruptCredentialError.
    """

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class MalformedPersistedFormError(DomainError):
    """Persisted form lacks a usable hashedValue (MALFORMED_PERSISTED_FORM)."""

    pass


type PasswordError = (
    PasswordPolicyError
    | PasswordHashingError
    | PasswordVerificationError
    | MalformedPersistedFormError
)
