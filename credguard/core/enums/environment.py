"""Runtime environments.

Used by Settings and the container to pick the log renderer:
- DEVELOPMENT: human-readable console output
- TESTING / CI: JSON output for machine parsing
- PRODUCTION: JSON output
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
