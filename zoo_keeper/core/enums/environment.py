"""Application environment types.

Selects environment-specific behavior, mainly the log renderer:
- DEVELOPMENT: human-readable, colored console logs
- TESTING: automated test runs, JSON logs
- CI: continuous integration, JSON logs
- PRODUCTION: JSON logs
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
