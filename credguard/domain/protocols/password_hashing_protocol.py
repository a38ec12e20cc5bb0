"""Password hashing protocol for domain layer.

Defines the contract of the one-way hash primitive. Infrastructure provides
the concrete implementation (BcryptPasswordService).

Architecture:
    - Domain defines protocol (port)
    - Infrastructure implements adapter
    - Outcomes are Result values: a mismatch and a malformed stored hash are
      different outcomes, never collapsed at this level
"""

from typing import Protocol

from credguard.core.result import Result
from credguard.domain.errors import CorruptCredentialError, PasswordHashingError


class PasswordHashingProtocol(Protocol):
    """Password hashing and verification interface.

    Usage:
        match hasher.hash_password(plaintext):
            case Success(value=password_hash):
                ...
            case Failure(error=error):
                ...

        match hasher.verify_password(attempt, password_hash):
            case Success(value=True):
                ...  # match
            case Success(value=False):
                ...  # wrong attempt
            case Failure(error=error):
                ...  # stored hash is corrupt
    """

    def hash_password(self, password: str) -> Result[str, PasswordHashingError]:
        """Hash a plaintext password.

        Args:
            password: Plaintext password to hash.

        Returns:
            Success with a self-describing hash string (algorithm, cost, salt,
            digest), or Failure(PasswordHashingError) if the primitive refused
            the input.

        Note:
            Same password produces a different hash on every call (random salt).
        """
        ...

    def verify_password(
        self, password: str, password_hash: str
    ) -> Result[bool, CorruptCredentialError]:
        """Verify a plaintext password against a stored hash.

        Args:
            password: Plaintext attempt.
            password_hash: Stored hash string.

        Returns:
            Success(True) on match, Success(False) on mismatch,
            Failure(CorruptCredentialError) if the hash cannot be parsed.

        Note:
            Comparison is constant-time.
        """
        ...
