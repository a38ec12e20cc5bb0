"""Core enums package.

Usage:
    from credguard.core.enums import ErrorCode, Environment
"""

from credguard.core.enums.environment import Environment
from credguard.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
