"""Shared pytest fixtures.

- FakePasswordHasher: fast, deterministic stand-in for bcrypt in unit tests.
  Salted per call, so two hashes of one plaintext still differ.
- fast_bcrypt: real BcryptPasswordService at the minimum cost (4) for
  integration tests that do many hashes.
"""

import hashlib
import itertools
from unittest.mock import MagicMock

import pytest

from credguard.core.enums import ErrorCode
from credguard.core.result import Failure, Result, Success
from credguard.domain.errors import (
    CorruptCredentialError,
    PasswordErrorMessage,
    PasswordHashingError,
)
from credguard.domain.validators import PasswordPolicy
from credguard.infrastructure.security import BcryptPasswordService

VALID_PASSWORD = "SecurePass123!"


class FakePasswordHasher:
    """PasswordHashingProtocol implementation without bcrypt cost.

    Hash format: ``$fake$<salt>$<sha256 hex>``.
    """

    PREFIX = "$fake$"

    def __init__(self, *, fail_hashing: bool = False) -> None:
        self._salts = itertools.count(1)
        self._fail_hashing = fail_hashing
        self.hash_calls = 0
        self.verify_calls = 0

    @staticmethod
    def _digest(salt: str, password: str) -> str:
        return hashlib.sha256(f"{salt}:{password}".encode("utf-8")).hexdigest()

    def hash_password(self, password: str) -> Result[str, PasswordHashingError]:
        self.hash_calls += 1
        if self._fail_hashing:
            return Failure(
                error=PasswordHashingError(
                    code=ErrorCode.PASSWORD_HASHING_FAILED,
                    message=PasswordErrorMessage.HASHING_FAILED,
                    cause=ValueError("primitive refused input"),
                )
            )
        salt = f"{next(self._salts):08d}"
        return Success(value=f"{self.PREFIX}{salt}${self._digest(salt, password)}")

    def verify_password(
        self, password: str, password_hash: str
    ) -> Result[bool, CorruptCredentialError]:
        self.verify_calls += 1
        parts = password_hash.split("$")
        if not password_hash.startswith(self.PREFIX) or len(parts) != 4:
            return Failure(
                error=CorruptCredentialError(
                    code=ErrorCode.CREDENTIAL_CORRUPT,
                    message=PasswordErrorMessage.CREDENTIAL_CORRUPT,
                )
            )
        _, _, salt, digest = parts
        return Success(value=self._digest(salt, password) == digest)


@pytest.fixture
def fake_hasher() -> FakePasswordHasher:
    return FakePasswordHasher()


@pytest.fixture
def policy() -> PasswordPolicy:
    return PasswordPolicy()


@pytest.fixture
def fast_bcrypt() -> BcryptPasswordService:
    return BcryptPasswordService(cost_factor=4)


@pytest.fixture
def mock_logger() -> MagicMock:
    logger = MagicMock()
    logger.bind.return_value = logger
    logger.with_context.return_value = logger
    return logger
