"""Application environment types.

Used by Settings to pick environment-specific behavior (log renderer,
database echo).

Environments:
- DEVELOPMENT: Local development, human-readable logs
- TESTING: Automated test execution with an isolated database
- CI: Continuous integration
- PRODUCTION: Production deployment
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
