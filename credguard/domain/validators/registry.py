"""Password Rules Registry.

Single source of truth for the password policy pipeline. The tuple order IS
the evaluation order: PasswordPolicy walks PASSWORD_RULES front to back and
reports the first rule that fails, so reordering entries changes which error
a caller sees.

Pipeline:
    1. min_length      -> PASSWORD_TOO_SHORT
    2. max_length      -> PASSWORD_TOO_LONG
    3. printable       -> PASSWORD_INVALID_CHARS
    4. complexity      -> PASSWORD_TOO_WEAK
    5. not_common      -> PASSWORD_COMMON
    6. no_patterns     -> PASSWORD_COMMON

Length and charset sanity come first. Complexity is checked before the
deny-list, so "password" reports PASSWORD_TOO_WEAK rather than PASSWORD_COMMON.

Compliance tests (tests/unit/test_password_rules_registry.py) pin the order.
"""

import unicodedata
from dataclasses import dataclass
from typing import Callable

from credguard.core.enums import ErrorCode
from credguard.domain.errors import PasswordErrorMessage
from credguard.domain.validators.patterns import has_repeating_run, has_sequential_run

MIN_PASSWORD_LENGTH = 8
MAX_PASSWORD_LENGTH = 128

# (plaintext, lower-cased deny-list) -> True when the rule passes
type RuleCheck = Callable[[str, frozenset[str]], bool]


@dataclass(frozen=True, kw_only=True)
class PasswordRuleMetadata:
    """Metadata for a single password rule.

    Attributes:
        rule_name: Unique identifier for the rule (e.g., 'min_length').
        error_code: Error code reported when the rule fails.
        message: User-facing message reported when the rule fails.
        description: Human-readable description of the requirement.
        check: Predicate returning True when the plaintext satisfies the rule.
    """

    rule_name: str
    error_code: ErrorCode
    message: str
    description: str
    check: RuleCheck


def _meets_min_length(plaintext: str, _common: frozenset[str]) -> bool:
    return len(plaintext) >= MIN_PASSWORD_LENGTH


def _meets_max_length(plaintext: str, _common: frozenset[str]) -> bool:
    return len(plaintext) <= MAX_PASSWORD_LENGTH


def _is_printable(plaintext: str, _common: frozenset[str]) -> bool:
    return plaintext.isprintable()


def _is_complex(plaintext: str, _common: frozenset[str]) -> bool:
    has_upper = has_lower = has_number = has_special = False
    for char in plaintext:
        category = unicodedata.category(char)
        if category == "Lu":
            has_upper = True
        elif category == "Ll":
            has_lower = True
        elif category[0] == "N":
            has_number = True
        elif category[0] in ("P", "S"):
            has_special = True
    return has_upper and has_lower and has_number and has_special


def _is_not_common(plaintext: str, common: frozenset[str]) -> bool:
    return plaintext.lower() not in common


def _has_no_patterns(plaintext: str, _common: frozenset[str]) -> bool:
    return not (has_sequential_run(plaintext) or has_repeating_run(plaintext))


# =============================================================================
# Password Rules Registry (ordered)
# =============================================================================

PASSWORD_RULES: tuple[PasswordRuleMetadata, ...] = (
    PasswordRuleMetadata(
        rule_name="min_length",
        error_code=ErrorCode.PASSWORD_TOO_SHORT,
        message=PasswordErrorMessage.TOO_SHORT.format(min_length=MIN_PASSWORD_LENGTH),
        description=f"At least {MIN_PASSWORD_LENGTH} characters (code points)",
        check=_meets_min_length,
    ),
    PasswordRuleMetadata(
        rule_name="max_length",
        error_code=ErrorCode.PASSWORD_TOO_LONG,
        message=PasswordErrorMessage.TOO_LONG.format(max_length=MAX_PASSWORD_LENGTH),
        description=f"At most {MAX_PASSWORD_LENGTH} characters (code points)",
        check=_meets_max_length,
    ),
    PasswordRuleMetadata(
        rule_name="printable",
        error_code=ErrorCode.PASSWORD_INVALID_CHARS,
        message=PasswordErrorMessage.INVALID_CHARS,
        description="Printable characters only (no control or format characters)",
        check=_is_printable,
    ),
    PasswordRuleMetadata(
        rule_name="complexity",
        error_code=ErrorCode.PASSWORD_TOO_WEAK,
        message=PasswordErrorMessage.TOO_WEAK,
        description="Uppercase, lowercase, digit and punctuation/symbol characters",
        check=_is_complex,
    ),
    PasswordRuleMetadata(
        rule_name="not_common",
        error_code=ErrorCode.PASSWORD_COMMON,
        message=PasswordErrorMessage.COMMON,
        description="Not on the deny-list of common passwords (case-insensitive)",
        check=_is_not_common,
    ),
    PasswordRuleMetadata(
        rule_name="no_patterns",
        error_code=ErrorCode.PASSWORD_COMMON,
        message=PasswordErrorMessage.COMMON,
        description="No 4-character sequential run and no 4-fold repeated character",
        check=_has_no_patterns,
    ),
)


# =============================================================================
# Helper Functions
# =============================================================================


def get_password_rule(rule_name: str) -> PasswordRuleMetadata | None:
    """Get password rule metadata by name.

    Example:
        >>> rule = get_password_rule("complexity")
        >>> rule.error_code
        <ErrorCode.PASSWORD_TOO_WEAK: 'password_too_weak'>
    """
    for rule in PASSWORD_RULES:
        if rule.rule_name == rule_name:
            return rule
    return None


def get_all_password_rules() -> list[PasswordRuleMetadata]:
    """Get all password rules in evaluation order."""
    return list(PASSWORD_RULES)
