"""Annotated types with centralized validation.

Define validation once, use everywhere. Request models declare
``password: StrongPassword`` and get the same policy the Password value
object enforces.

Models carrying plaintext passwords should set
``ConfigDict(hide_input_in_errors=True)`` so Pydantic's ValidationError does
not echo the rejected input.
"""

from typing import Annotated

from pydantic import AfterValidator, Field

from credguard.domain.validators import validate_strong_password

StrongPassword = Annotated[
    str,
    Field(
        description="Password: 8-128 chars, mixed case, number, special char",
        examples=["SecurePass123!"],
    ),
    AfterValidator(validate_strong_password),
]
"""Plaintext password with policy validation.

Length limits are enforced by the policy itself (not Field constraints), so
a rejected input always reports the policy's first failing rule.

Examples:
    >>> from pydantic import BaseModel, ConfigDict
    >>> class RegisterRequest(BaseModel):
    ...     model_config = ConfigDict(hide_input_in_errors=True)
    ...     password: StrongPassword
    >>> RegisterRequest(password="SecurePass123!").password
    'SecurePass123!'
"""
