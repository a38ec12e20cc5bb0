"""Machine-readable error codes.

Error codes follow ENTITY_ACTION_REASON naming. Each code is one error kind;
callers match on the code and never need to inspect a nested cause.

Categories:
- Password policy (PASSWORD_TOO_*, PASSWORD_INVALID_CHARS, PASSWORD_COMMON)
- Hashing and verification (PASSWORD_HASHING_FAILED, PASSWORD_VERIFY_FAILED,
  CREDENTIAL_CORRUPT)
- Persistence (MALFORMED_PERSISTED_FORM)
"""

from enum import Enum


class ErrorCode(Enum):
    """Machine-readable error codes."""

    # Password policy
    PASSWORD_TOO_SHORT = "password_too_short"
    PASSWORD_TOO_LONG = "password_too_long"
    PASSWORD_INVALID_CHARS = "password_invalid_chars"
    PASSWORD_TOO_WEAK = "password_too_weak"
    PASSWORD_COMMON = "password_common"

    # Hashing and verification
    PASSWORD_HASHING_FAILED = "password_hashing_failed"
    PASSWORD_VERIFY_FAILED = "password_verify_failed"
    CREDENTIAL_CORRUPT = "credential_corrupt"

    # Persistence
    MALFORMED_PERSISTED_FORM = "malformed_persisted_form"
