"""Domain value objects.

Immutable value objects that enforce business constraints.
"""

from credguard.domain.value_objects.password import REDACTED, Password, PersistedPassword

__all__ = [
    "Password",
    "PersistedPassword",
    "REDACTED",
]
