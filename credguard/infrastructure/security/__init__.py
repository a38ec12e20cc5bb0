"""Security infrastructure adapters.

- Password hashing (bcrypt)
"""

from credguard.infrastructure.security.bcrypt_password_service import (
    BcryptPasswordService,
)

__all__ = ["BcryptPasswordService"]
