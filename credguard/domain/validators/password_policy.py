"""Password policy validator.

Runs a candidate plaintext through the ordered rule pipeline declared in
``registry.PASSWORD_RULES`` and returns the first failure as a
PasswordPolicyError. Pure: no hashing, no logging, no state beyond the
injected deny-list.

Usage:
    policy = PasswordPolicy()
    match policy.validate("Abc123!@"):
        case Success():
            ...
        case Failure(error=error):
            print(error.code, error.message)

    # Larger deny-list, supplied by the caller
    strict = PasswordPolicy(common_passwords=DEFAULT_COMMON_PASSWORDS | extra)
"""

from collections.abc import Iterable

from credguard.core.result import Failure, Result, Success
from credguard.domain.errors import PasswordPolicyError
from credguard.domain.validators.registry import PASSWORD_RULES, PasswordRuleMetadata

DEFAULT_COMMON_PASSWORDS: frozenset[str] = frozenset(
    {
        "password",
        "123456",
        "123456789",
        "12345678",
        "12345",
        "1234567",
        "password123",
        "admin",
        "qwerty",
        "abc123",
        "letmein",
        "monkey",
        "1234567890",
        "dragon",
        "111111",
        "baseball",
        "iloveyou",
        "trustno1",
        "sunshine",
        "master",
        "welcome",
        "shadow",
        "ashley",
        "football",
        "jesus",
        "michael",
        "ninja",
        "mustang",
        "password1",
    }
)


class PasswordPolicy:
    """Ordered, short-circuiting password policy.

    Args:
        common_passwords: Deny-list matched case-insensitively against the
            whole plaintext. Frozen (lower-cased) at construction.
        rules: Rule pipeline, in evaluation order.
    """

    def __init__(
        self,
        common_passwords: Iterable[str] = DEFAULT_COMMON_PASSWORDS,
        *,
        rules: Iterable[PasswordRuleMetadata] = PASSWORD_RULES,
    ) -> None:
        self._common_passwords = frozenset(entry.lower() for entry in common_passwords)
        self._rules = tuple(rules)

    @property
    def common_passwords(self) -> frozenset[str]:
        """Lower-cased deny-list in use."""
        return self._common_passwords

    def validate(self, plaintext: str) -> Result[None, PasswordPolicyError]:
        """Validate a plaintext against every rule, stopping at the first failure.

        Args:
            plaintext: Candidate password.

        Returns:
            Success(value=None) if all rules pass, otherwise Failure with the
            PasswordPolicyError of the first failing rule. The error never
            contains the plaintext.
        """
        for rule in self._rules:
            if not rule.check(plaintext, self._common_passwords):
                return Failure(
                    error=PasswordPolicyError(
                        code=rule.error_code,
                        message=rule.message,
                        field="password",
                        details={"rule": rule.rule_name},
                    )
                )
        return Success(value=None)


_default_policy = PasswordPolicy()


def validate_password(plaintext: str) -> Result[None, PasswordPolicyError]:
    """Validate a plaintext with the default deny-list."""
    return _default_policy.validate(plaintext)
