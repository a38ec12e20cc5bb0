"""Password rules registry compliance tests.

Self-enforcing tests that pin the registry contents. These tests fail if:
- Rules are reordered (changes which error callers see)
- Rules lose required metadata
- Rule names collide
"""

import pytest

from credguard.core.enums import ErrorCode
from credguard.domain.validators import (
    DEFAULT_COMMON_PASSWORDS,
    PASSWORD_RULES,
    PasswordPolicy,
    get_all_password_rules,
    get_password_rule,
)
from credguard.domain.validators.registry import PasswordRuleMetadata


@pytest.mark.unit
class TestPasswordRulesRegistryCompleteness:
    """Verify every rule has complete metadata."""

    def test_evaluation_order_is_fixed(self):
        """The pipeline order is part of the public behavior."""
        assert [rule.rule_name for rule in PASSWORD_RULES] == [
            "min_length",
            "max_length",
            "printable",
            "complexity",
            "not_common",
            "no_patterns",
        ]

    def test_error_codes_follow_the_pipeline(self):
        """Deny-list and pattern rules share PASSWORD_COMMON."""
        assert [rule.error_code for rule in PASSWORD_RULES] == [
            ErrorCode.PASSWORD_TOO_SHORT,
            ErrorCode.PASSWORD_TOO_LONG,
            ErrorCode.PASSWORD_INVALID_CHARS,
            ErrorCode.PASSWORD_TOO_WEAK,
            ErrorCode.PASSWORD_COMMON,
            ErrorCode.PASSWORD_COMMON,
        ]

    def test_all_rules_have_callable_checks(self):
        """Every rule must have a callable check."""
        for rule in PASSWORD_RULES:
            assert callable(rule.check), f"Rule '{rule.rule_name}' check not callable"

    def test_all_rules_have_messages_and_descriptions(self):
        """Every rule must have a non-empty message and description."""
        for rule in PASSWORD_RULES:
            assert rule.message.strip(), f"Rule '{rule.rule_name}' has empty message"
            assert rule.description.strip(), (
                f"Rule '{rule.rule_name}' has empty description"
            )

    def test_rule_names_are_unique(self):
        """Rule names must be unique."""
        names = [rule.rule_name for rule in PASSWORD_RULES]
        assert len(names) == len(set(names))

    def test_all_rules_accept_a_valid_password(self):
        """Every check passes for a known-good password."""
        for rule in PASSWORD_RULES:
            assert rule.check("Abc123!@", DEFAULT_COMMON_PASSWORDS), rule.rule_name


@pytest.mark.unit
class TestPasswordRulesRegistryHelpers:
    """Test registry helper functions."""

    def test_get_password_rule_returns_metadata(self):
        """Test lookup by name."""
        rule = get_password_rule("complexity")

        assert rule is not None
        assert rule.error_code == ErrorCode.PASSWORD_TOO_WEAK

    def test_get_password_rule_unknown_returns_none(self):
        """Test unknown names return None."""
        assert get_password_rule("does_not_exist") is None

    def test_get_all_password_rules_returns_copy_in_order(self):
        """Test the helper returns every rule in evaluation order."""
        rules = get_all_password_rules()

        assert rules == list(PASSWORD_RULES)
        rules.clear()
        assert len(PASSWORD_RULES) == 6

    def test_policy_accepts_a_custom_rule_pipeline(self):
        """Test PasswordPolicy walks whatever rules it is given."""
        always_fails = PasswordRuleMetadata(
            rule_name="never",
            error_code=ErrorCode.PASSWORD_TOO_WEAK,
            message="never accepted",
            description="Rejects everything",
            check=lambda _plaintext, _common: False,
        )
        policy = PasswordPolicy(rules=[always_fails])

        result = policy.validate("Abc123!@")

        assert result.error.message == "never accepted"
        assert result.error.details == {"rule": "never"}
