"""Password value object.

Immutable value object holding only a bcrypt hash. Plaintext goes in through
``Password.create`` (policy check, then hash) and is never stored; stored
hashes come back through ``Password.reconstitute`` or the persisted-form
loaders without re-running the policy.

Equality is exact equality of the hash string. Two passwords built from the
same plaintext are NOT equal, because each hash has its own salt.

Persisted form:
    {"hashedValue": "$2b$12$..."}

Example:
    >>> result = Password.create("SecurePass123!")
    >>> password = result.value
    >>> str(password)
    '[PROTECTED]'
    >>> password.verify("SecurePass123!")
    Success(value=None)
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr
from pydantic import ValidationError as PydanticValidationError

from credguard.core.enums import ErrorCode
from credguard.core.result import Failure, Result, Success
from credguard.domain.errors import (
    MalformedPersistedFormError,
    PasswordErrorMessage,
    PasswordHashingError,
    PasswordPolicyError,
    PasswordVerificationError,
)

if TYPE_CHECKING:
    from credguard.domain.protocols import PasswordHashingProtocol
    from credguard.domain.validators import PasswordPolicy

REDACTED = "[PROTECTED]"


class PersistedPassword(BaseModel):
    """Structured persistence form of a Password."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        hide_input_in_errors=True,
        extra="ignore",
    )

    hashed_value: StrictStr = Field(alias="hashedValue", min_length=1)


def _default_policy() -> "PasswordPolicy":
    from credguard.core.container import get_password_policy

    return get_password_policy()


def _default_hasher() -> "PasswordHashingProtocol":
    from credguard.core.container import get_password_service

    return get_password_service()


def _verify_failed(cause: Any = None) -> Failure[PasswordVerificationError]:
    return Failure(
        error=PasswordVerificationError(
            code=ErrorCode.PASSWORD_VERIFY_FAILED,
            message=PasswordErrorMessage.VERIFY_FAILED,
            cause=cause,
        )
    )


def _malformed(cause: Any = None) -> Failure[MalformedPersistedFormError]:
    return Failure(
        error=MalformedPersistedFormError(
            code=ErrorCode.MALFORMED_PERSISTED_FORM,
            message=PasswordErrorMessage.MALFORMED_PERSISTED_FORM,
            cause=cause,
        )
    )


@dataclass(frozen=True, repr=False)
class Password:
    """Hashed password credential.

    Attributes:
        hashed_value: Self-describing bcrypt hash (algorithm, cost, salt,
            digest). Safe to persist.
    """

    hashed_value: str

    @classmethod
    def create(
        cls,
        plaintext: str,
        *,
        policy: "PasswordPolicy | None" = None,
        hasher: "PasswordHashingProtocol | None" = None,
    ) -> Result["Password", PasswordPolicyError | PasswordHashingError]:
        """Validate a plaintext against the policy and hash it.

        Args:
            plaintext: User-supplied password. Not retained.
            policy: Policy to apply (default: container policy).
            hasher: Hash primitive (default: container bcrypt service).

        Returns:
            Success(Password) or Failure with the first policy violation or a
            hashing failure.
        """
        policy = policy or _default_policy()
        match policy.validate(plaintext):
            case Failure() as failure:
                return failure

        hasher = hasher or _default_hasher()
        match hasher.hash_password(plaintext):
            case Success(value=hashed_value):
                return Success(value=cls(hashed_value=hashed_value))
            case Failure() as failure:
                return failure

    @classmethod
    def reconstitute(cls, hashed_value: str) -> "Password":
        """Rebuild a Password from a previously stored hash.

        No validation and no hashing. Only pass values produced by
        ``create`` and persisted by the caller; anything else fails later in
        ``verify``.
        """
        return cls(hashed_value=hashed_value)

    @classmethod
    def from_dict(
        cls, data: Mapping[str, Any]
    ) -> Result["Password", MalformedPersistedFormError]:
        """Load a Password from its persisted mapping form.

        Returns:
            Success(Password), or Failure(MalformedPersistedFormError) when
            ``hashedValue`` is missing, empty or not a string.
        """
        try:
            persisted = PersistedPassword.model_validate(data)
        except PydanticValidationError as e:
            return _malformed(e)
        return Success(value=cls.reconstitute(persisted.hashed_value))

    @classmethod
    def from_json(
        cls, data: str | bytes
    ) -> Result["Password", MalformedPersistedFormError]:
        """Load a Password from its persisted JSON form.

        Returns:
            Success(Password), or Failure(MalformedPersistedFormError) for
            invalid JSON or a missing/empty ``hashedValue``.
        """
        try:
            persisted = PersistedPassword.model_validate_json(data)
        except PydanticValidationError as e:
            return _malformed(e)
        return Success(value=cls.reconstitute(persisted.hashed_value))

    def verify(
        self,
        attempt: str,
        *,
        hasher: "PasswordHashingProtocol | None" = None,
    ) -> Result[None, PasswordVerificationError]:
        """Check a plaintext attempt against the stored hash.

        An empty attempt always fails. A malformed stored hash also fails
        with PASSWORD_VERIFY_FAILED; the hasher's CorruptCredentialError is
        then available as ``error.cause``.

        Returns:
            Success(value=None) on match, Failure(PasswordVerificationError)
            otherwise.
        """
        if not attempt:
            return _verify_failed()

        hasher = hasher or _default_hasher()
        match hasher.verify_password(attempt, self.hashed_value):
            case Success(value=True):
                return Success(value=None)
            case Success():
                return _verify_failed()
            case Failure(error=error):
                return _verify_failed(error)

    def equals(self, other: "Password") -> bool:
        """Exact equality of the stored hash strings."""
        return self.hashed_value == other.hashed_value

    def to_redacted_string(self) -> str:
        """Fixed sentinel, never derived from the hash."""
        return REDACTED

    def to_dict(self) -> dict[str, str]:
        """Persisted mapping form: {"hashedValue": ...}."""
        return self._persisted().model_dump(by_alias=True)

    def to_json(self) -> str:
        """Persisted JSON form: {"hashedValue": ...}."""
        return self._persisted().model_dump_json(by_alias=True)

    def _persisted(self) -> PersistedPassword:
        # model_construct: a reconstituted value is dumped as-is, never re-validated
        return PersistedPassword.model_construct(hashed_value=self.hashed_value)

    def __str__(self) -> str:
        return REDACTED

    def __repr__(self) -> str:
        return f"Password({REDACTED})"
