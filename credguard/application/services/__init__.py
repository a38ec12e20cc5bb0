"""Application services."""

from credguard.application.services.credential_service import CredentialService

__all__ = ["CredentialService"]
