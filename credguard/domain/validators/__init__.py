"""Validators package exports.

Exports:
    - Pattern detectors (from patterns.py)
    - Password rules registry (from registry.py)
    - Password policy (from password_policy.py)
    - Pydantic validator functions (from functions.py)
"""

from credguard.domain.validators.functions import validate_strong_password
from credguard.domain.validators.password_policy import (
    DEFAULT_COMMON_PASSWORDS,
    PasswordPolicy,
    validate_password,
)
from credguard.domain.validators.patterns import (
    REPEAT_THRESHOLD,
    SEQUENCE_WINDOW,
    has_repeating_run,
    has_sequential_run,
)
from credguard.domain.validators.registry import (
    MAX_PASSWORD_LENGTH,
    MIN_PASSWORD_LENGTH,
    PASSWORD_RULES,
    PasswordRuleMetadata,
    get_all_password_rules,
    get_password_rule,
)

__all__ = [
    # Pattern detectors
    "REPEAT_THRESHOLD",
    "SEQUENCE_WINDOW",
    "has_repeating_run",
    "has_sequential_run",
    # Registry
    "MAX_PASSWORD_LENGTH",
    "MIN_PASSWORD_LENGTH",
    "PASSWORD_RULES",
    "PasswordRuleMetadata",
    "get_all_password_rules",
    "get_password_rule",
    # Policy
    "DEFAULT_COMMON_PASSWORDS",
    "PasswordPolicy",
    "validate_password",
    # Pydantic validators
    "validate_strong_password",
]
