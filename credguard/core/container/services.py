"""Application service factories."""

from functools import lru_cache
from typing import TYPE_CHECKING

from credguard.core.container.infrastructure import (
    get_logger,
    get_password_policy,
    get_password_service,
)

if TYPE_CHECKING:
    from credguard.application.services.credential_service import CredentialService


@lru_cache()
def get_credential_service() -> "CredentialService":
    """Get credential service singleton wired with the default collaborators."""
    from credguard.application.services.credential_service import CredentialService

    return CredentialService(
        password_service=get_password_service(),
        policy=get_password_policy(),
        logger=get_logger().bind(component="credential_service"),
    )
