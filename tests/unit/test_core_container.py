"""Unit tests for container factories.

Tests cover:
- Settings flow into the logger and bcrypt service
- Singleton pattern (lru_cache)
- Credential service wiring
"""

from unittest.mock import MagicMock, patch

import pytest

from credguard.application.services import CredentialService
from credguard.core.config import Settings
from credguard.core.container import (
    get_credential_service,
    get_logger,
    get_password_policy,
    get_password_service,
)
from credguard.core.enums import Environment
from credguard.domain.validators import PasswordPolicy
from credguard.infrastructure.security import BcryptPasswordService

GET_SETTINGS = "credguard.core.container.infrastructure.get_settings"


@pytest.fixture(autouse=True)
def clear_container_caches():
    factories = (get_logger, get_password_service, get_password_policy, get_credential_service)
    for factory in factories:
        factory.cache_clear()
    yield
    for factory in factories:
        factory.cache_clear()


@pytest.mark.unit
class TestGetLogger:
    """Test get_logger()."""

    @pytest.mark.parametrize(
        ("environment", "use_json"),
        [
            (Environment.DEVELOPMENT, False),
            (Environment.TESTING, True),
            (Environment.PRODUCTION, True),
        ],
    )
    def test_renderer_follows_environment(self, environment, use_json):
        """Test JSON output everywhere except development."""
        settings = Settings(_env_file=None, environment=environment, log_level="debug")
        with (
            patch(GET_SETTINGS, return_value=settings),
            patch(
                "credguard.infrastructure.logging.console_adapter.ConsoleAdapter"
            ) as mock_console,
        ):
            logger = get_logger()

            mock_console.assert_called_once_with(use_json=use_json, level="DEBUG")
            assert logger is mock_console.return_value

    def test_singleton(self):
        """Test the same instance is returned on repeated calls."""
        assert get_logger() is get_logger()


@pytest.mark.unit
class TestGetPasswordService:
    """Test get_password_service()."""

    def test_uses_configured_cost_factor(self):
        """Test bcrypt_rounds from settings becomes the cost factor."""
        settings = Settings(_env_file=None, bcrypt_rounds=10)
        with patch(GET_SETTINGS, return_value=settings):
            service = get_password_service()

        assert isinstance(service, BcryptPasswordService)
        assert service.cost_factor == 10

    def test_singleton(self):
        """Test the same instance is returned on repeated calls."""
        assert get_password_service() is get_password_service()


@pytest.mark.unit
class TestGetPasswordPolicyAndCredentialService:
    """Test get_password_policy() and get_credential_service()."""

    def test_password_policy_singleton(self):
        """Test the policy is shared and uses the default deny-list."""
        policy = get_password_policy()

        assert isinstance(policy, PasswordPolicy)
        assert policy is get_password_policy()
        assert "password123" in policy.common_passwords

    def test_credential_service_wiring(self):
        """Test the service is built from the container collaborators."""
        mock_logger = MagicMock()
        with patch(
            "credguard.core.container.services.get_logger", return_value=mock_logger
        ):
            service = get_credential_service()

        assert isinstance(service, CredentialService)
        mock_logger.bind.assert_called_once_with(component="credential_service")
        assert service is get_credential_service()
