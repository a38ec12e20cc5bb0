"""Credential service.

Orchestrates the Password value object for callers: registration (policy +
hash), authentication (verify) and restoring stored credentials, with
structured logging of every rejection. Only error codes and rule names are
logged, never the plaintext or the hash.

Architecture:
    - Application service (domain stays free of logging and I/O)
    - Collaborators injected via constructor (see core.container.services)
    - Async variants offload bcrypt's CPU-bound work with run_in_executor so
      event-loop callers are not blocked

Usage:
    service = get_credential_service()

    match service.register(plaintext):
        case Success(value=password):
            save(password.to_json())
        case Failure(error=error):
            show(error.message)

    result = await service.authenticate_async(password, attempt)
"""

import asyncio
from collections.abc import Mapping
from functools import partial
from typing import Any

from credguard.core.errors import DomainError
from credguard.core.result import Failure, Result, Success
from credguard.domain.errors import (
    MalformedPersistedFormError,
    PasswordHashingError,
    PasswordPolicyError,
    PasswordVerificationError,
)
from credguard.domain.protocols.logger_protocol import LoggerProtocol
from credguard.domain.protocols.password_hashing_protocol import (
    PasswordHashingProtocol,
)
from credguard.domain.validators.password_policy import PasswordPolicy
from credguard.domain.value_objects.password import Password


class CredentialService:
    """Registers, authenticates and restores password credentials.

    Dependencies (injected via constructor):
        - PasswordHashingProtocol: hash primitive
        - PasswordPolicy: rule pipeline and deny-list
        - LoggerProtocol: structured logging
    """

    def __init__(
        self,
        password_service: PasswordHashingProtocol,
        policy: PasswordPolicy,
        logger: LoggerProtocol,
    ) -> None:
        self._password_service = password_service
        self._policy = policy
        self._logger = logger

    def register(
        self, plaintext: str
    ) -> Result[Password, PasswordPolicyError | PasswordHashingError]:
        """Validate and hash a new plaintext password.

        Args:
            plaintext: User-supplied password.

        Returns:
            Success(Password) or Failure with the policy or hashing error.
        """
        result = Password.create(
            plaintext, policy=self._policy, hasher=self._password_service
        )
        match result:
            case Success():
                self._logger.info("Password registered")
            case Failure(error=PasswordPolicyError() as error):
                self._logger.info(
                    "Password rejected by policy",
                    error_code=error.code.value,
                    rule=(error.details or {}).get("rule"),
                )
            case Failure(error=error):
                self._logger.error(
                    "Password could not be hashed", error_code=error.code.value
                )
        return result

    def authenticate(
        self, password: Password, attempt: str
    ) -> Result[None, PasswordVerificationError]:
        """Verify a plaintext attempt against a stored password.

        Returns:
            Success(value=None) on match, Failure(PasswordVerificationError)
            otherwise (wrong attempt or corrupt stored hash).
        """
        result = password.verify(attempt, hasher=self._password_service)
        match result:
            case Failure(error=error) if isinstance(error.cause, DomainError):
                self._logger.warning(
                    "Password verification failed on corrupt credential",
                    error_code=error.code.value,
                    cause_code=error.cause.code.value,
                )
            case Failure(error=error):
                self._logger.info(
                    "Password verification failed", error_code=error.code.value
                )
        return result

    def restore(
        self, payload: str | bytes | Mapping[str, Any]
    ) -> Result[Password, MalformedPersistedFormError]:
        """Load a stored password from its persisted form (JSON or mapping).

        The policy is not re-run: stored values were validated when created.
        """
        if isinstance(payload, (str, bytes)):
            result = Password.from_json(payload)
        else:
            result = Password.from_dict(payload)

        match result:
            case Failure(error=error):
                self._logger.warning(
                    "Persisted password is malformed", error_code=error.code.value
                )
        return result

    async def register_async(
        self, plaintext: str
    ) -> Result[Password, PasswordPolicyError | PasswordHashingError]:
        """register() run in the default executor."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, partial(self.register, plaintext))

    async def authenticate_async(
        self, password: Password, attempt: str
    ) -> Result[None, PasswordVerificationError]:
        """authenticate() run in the default executor."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            None, partial(self.authenticate, password, attempt)
        )
