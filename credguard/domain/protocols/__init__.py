"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols without inheritance.

Usage:
    from credguard.domain.protocols import LoggerProtocol, PasswordHashingProtocol
"""

from credguard.domain.protocols.logger_protocol import LoggerProtocol
from credguard.domain.protocols.password_hashing_protocol import (
    PasswordHashingProtocol,
)

__all__ = [
    "LoggerProtocol",
    "PasswordHashingProtocol",
]
