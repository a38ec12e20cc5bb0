"""Unit tests for CredentialService.

Tests cover:
- register/authenticate/restore results and their log events
- Logs never contain plaintext or hashes
- Async variants return the same results
"""

import pytest

from credguard.application.services import CredentialService
from credguard.core.enums import ErrorCode
from credguard.core.result import Failure, Success
from credguard.domain.validators import PasswordPolicy
from credguard.domain.value_objects import Password
from tests.conftest import VALID_PASSWORD, FakePasswordHasher


@pytest.fixture
def service(fake_hasher, mock_logger) -> CredentialService:
    return CredentialService(
        password_service=fake_hasher, policy=PasswordPolicy(), logger=mock_logger
    )


def _all_logged_values(mock_logger) -> list[str]:
    values: list[str] = []
    for method in ("debug", "info", "warning", "error", "critical"):
        for call in getattr(mock_logger, method).call_args_list:
            values.extend(str(arg) for arg in call.args)
            values.extend(str(value) for value in call.kwargs.values())
    return values


@pytest.mark.unit
class TestCredentialServiceRegister:
    """Test register()."""

    def test_register_success_logs_info(self, service, mock_logger):
        """Test a valid plaintext is hashed and the event logged."""
        result = service.register(VALID_PASSWORD)

        assert isinstance(result, Success)
        mock_logger.info.assert_called_once_with("Password registered")

    def test_register_policy_rejection_logs_rule(self, service, mock_logger):
        """Test a rejection logs the error code and rule, not the plaintext."""
        result = service.register("Test1234!")

        assert result.error.code == ErrorCode.PASSWORD_COMMON
        mock_logger.info.assert_called_once_with(
            "Password rejected by policy",
            error_code="password_common",
            rule="no_patterns",
        )
        assert all("Test1234!" not in value for value in _all_logged_values(mock_logger))

    def test_register_hashing_failure_logs_error(self, mock_logger):
        """Test a primitive failure is logged at error level."""
        service = CredentialService(
            password_service=FakePasswordHasher(fail_hashing=True),
            policy=PasswordPolicy(),
            logger=mock_logger,
        )

        result = service.register(VALID_PASSWORD)

        assert result.error.code == ErrorCode.PASSWORD_HASHING_FAILED
        mock_logger.error.assert_called_once_with(
            "Password could not be hashed", error_code="password_hashing_failed"
        )


@pytest.mark.unit
class TestCredentialServiceAuthenticate:
    """Test authenticate()."""

    def test_authenticate_success_logs_nothing(self, service, mock_logger):
        """Test a correct attempt returns Success without log noise."""
        password = service.register(VALID_PASSWORD).value
        mock_logger.reset_mock()

        assert service.authenticate(password, VALID_PASSWORD) == Success(value=None)
        mock_logger.info.assert_not_called()
        mock_logger.warning.assert_not_called()

    def test_authenticate_wrong_attempt_logs_info(self, service, mock_logger):
        """Test a wrong attempt is logged at info level."""
        password = service.register(VALID_PASSWORD).value
        mock_logger.reset_mock()

        result = service.authenticate(password, "WrongPass123!")

        assert result.error.code == ErrorCode.PASSWORD_VERIFY_FAILED
        mock_logger.info.assert_called_once_with(
            "Password verification failed", error_code="password_verify_failed"
        )

    def test_authenticate_corrupt_hash_logs_warning(self, service, mock_logger):
        """Test a corrupt stored hash is logged at warning level with its cause."""
        result = service.authenticate(Password.reconstitute("broken"), VALID_PASSWORD)

        assert result.error.code == ErrorCode.PASSWORD_VERIFY_FAILED
        mock_logger.warning.assert_called_once_with(
            "Password verification failed on corrupt credential",
            error_code="password_verify_failed",
            cause_code="credential_corrupt",
        )
        assert all("broken" not in value for value in _all_logged_values(mock_logger))


@pytest.mark.unit
class TestCredentialServiceRestore:
    """Test restore()."""

    @pytest.mark.parametrize(
        "payload",
        ['{"hashedValue": "$fake$x$y"}', b'{"hashedValue": "$fake$x$y"}', {"hashedValue": "$fake$x$y"}],
    )
    def test_restore_accepts_json_and_mappings(self, service, payload):
        """Test str, bytes and mapping payloads load."""
        result = service.restore(payload)

        assert result == Success(value=Password.reconstitute("$fake$x$y"))

    def test_restore_malformed_logs_warning(self, service, mock_logger):
        """Test a malformed payload is logged at warning level."""
        result = service.restore({"hashedValue": ""})

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.MALFORMED_PERSISTED_FORM
        mock_logger.warning.assert_called_once_with(
            "Persisted password is malformed", error_code="malformed_persisted_form"
        )


@pytest.mark.unit
class TestCredentialServiceAsync:
    """Test async variants."""

    @pytest.mark.asyncio
    async def test_register_and_authenticate_async(self, service):
        """Test async variants give the same results as the sync ones."""
        registered = await service.register_async(VALID_PASSWORD)
        assert isinstance(registered, Success)

        ok = await service.authenticate_async(registered.value, VALID_PASSWORD)
        wrong = await service.authenticate_async(registered.value, "WrongPass123!")

        assert ok == Success(value=None)
        assert wrong.error.code == ErrorCode.PASSWORD_VERIFY_FAILED

    @pytest.mark.asyncio
    async def test_register_async_policy_failure(self, service):
        """Test policy failures come back from the executor unchanged."""
        result = await service.register_async("short")

        assert result.error.code == ErrorCode.PASSWORD_TOO_SHORT
