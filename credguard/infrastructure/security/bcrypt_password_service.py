"""Bcrypt password hashing service (adapter).

Implements PasswordHashingProtocol using bcrypt with cost factor 12.

Architecture:
    - Implements PasswordHashingProtocol (no inheritance required)
    - Structural typing via Protocol
    - Injected via the composition root (credguard.core.container)
    - Library exceptions are caught here and returned as Failure values

Security:
    - Bcrypt with cost factor 12 (~250ms per hash)
    - Fresh random salt generated by bcrypt on every hash
    - Constant-time comparison in bcrypt.checkpw

Performance:
    - Hash and verify are CPU-bound and block the calling thread.
      Event-loop callers should offload them (see CredentialService).
"""

import bcrypt

from credguard.core.enums import ErrorCode
from credguard.core.result import Failure, Result, Success
from credguard.domain.errors import (
    CorruptCredentialError,
    PasswordErrorMessage,
    PasswordHashingError,
)
from credguard.domain.protocols.logger_protocol import LoggerProtocol

# bcrypt only reads the first 72 bytes of input; bcrypt >= 5 rejects longer input.
BCRYPT_MAX_PASSWORD_BYTES = 72
RECOMMENDED_MIN_COST_FACTOR = 10


class BcryptPasswordService:
    """Bcrypt password hashing service.

    Usage:
        from credguard.core.container import get_password_service

        password_service = get_password_service()

        match password_service.hash_password("SecurePass123!"):
            case Success(value=password_hash):
                ...
    """

    def __init__(
        self, cost_factor: int = 12, *, logger: LoggerProtocol | None = None
    ) -> None:
        """Initialize bcrypt password service.

        Args:
            cost_factor: Bcrypt cost factor (default: 12).
                Logarithmic: each +1 doubles computation time.
                - 10 = ~60ms
                - 12 = ~250ms (current recommendation)
                - 14 = ~1000ms
            logger: Optional structured logger for primitive failures.

        Raises:
            ValueError: If cost_factor is outside bcrypt's range (4-31).
        """
        if not 4 <= cost_factor <= 31:
            msg = "Cost factor must be between 4 and 31"
            raise ValueError(msg)

        self._cost_factor = cost_factor
        self._logger = logger

        if logger is not None and cost_factor < RECOMMENDED_MIN_COST_FACTOR:
            logger.warning(
                "Bcrypt cost factor below recommended minimum",
                cost_factor=cost_factor,
                recommended_minimum=RECOMMENDED_MIN_COST_FACTOR,
            )

    @property
    def cost_factor(self) -> int:
        """Configured bcrypt cost factor."""
        return self._cost_factor

    def hash_password(self, password: str) -> Result[str, PasswordHashingError]:
        """Hash a plaintext password using bcrypt.

        Args:
            password: Plaintext password to hash.

        Returns:
            Success with the hash string (bcrypt format: $2b$<cost>$<salt><hash>,
            always 60 characters), or Failure(PasswordHashingError) when bcrypt
            refuses the input.

        Example:
            >>> service = BcryptPasswordService(cost_factor=12)
            >>> first = service.hash_password("SecurePass123!").value
            >>> second = service.hash_password("SecurePass123!").value
            >>> first != second  # Different salts
            True
        """
        encoded = password.encode("utf-8")
        if len(encoded) > BCRYPT_MAX_PASSWORD_BYTES:
            return self._hashing_failure(
                ValueError("password exceeds bcrypt's 72-byte input limit"),
                reason="input_too_long",
            )

        try:
            password_hash = bcrypt.hashpw(encoded, bcrypt.gensalt(rounds=self._cost_factor))
        except ValueError as e:
            return self._hashing_failure(e, reason="primitive_rejected_input")

        return Success(value=password_hash.decode("utf-8"))

    def verify_password(
        self, password: str, password_hash: str
    ) -> Result[bool, CorruptCredentialError]:
        """Verify a plaintext password against a bcrypt hash.

        Args:
            password: Plaintext password to verify.
            password_hash: Hashed password from storage.

        Returns:
            Success(True) on match, Success(False) on mismatch,
            Failure(CorruptCredentialError) if the hash is not a valid bcrypt
            string.

        Example:
            >>> service = BcryptPasswordService()
            >>> password_hash = service.hash_password("SecurePass123!").value
            >>> service.verify_password("SecurePass123!", password_hash)
            Success(value=True)
            >>> service.verify_password("WrongPassword", password_hash)
            Success(value=False)
        """
        encoded = password.encode("utf-8")
        hash_bytes = password_hash.encode("utf-8")
        try:
            if len(encoded) > BCRYPT_MAX_PASSWORD_BYTES:
                # Over-limit input cannot match; the hash is still parsed for corruption.
                bcrypt.checkpw(b"", hash_bytes)
                return Success(value=False)
            return Success(value=bcrypt.checkpw(encoded, hash_bytes))
        except ValueError as e:
            if self._logger is not None:
                self._logger.warning("Stored password hash is malformed", error=e)
            return Failure(
                error=CorruptCredentialError(
                    code=ErrorCode.CREDENTIAL_CORRUPT,
                    message=PasswordErrorMessage.CREDENTIAL_CORRUPT,
                    cause=e,
                )
            )

    def _hashing_failure(
        self, error: ValueError, *, reason: str
    ) -> Failure[PasswordHashingError]:
        if self._logger is not None:
            self._logger.error("Password hashing failed", error=error, reason=reason)
        return Failure(
            error=PasswordHashingError(
                code=ErrorCode.PASSWORD_HASHING_FAILED,
                message=PasswordErrorMessage.HASHING_FAILED,
                details={"reason": reason},
                cause=error,
            )
        )
