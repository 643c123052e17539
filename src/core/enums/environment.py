"""Application environment types.

Used by Settings to pick environment-specific behavior (log rendering,
availability of the /config debug endpoint).

Environments:
- DEVELOPMENT: Local development, colored console logs, /config enabled
- TESTING: Automated test execution, JSON logs
- CI: Continuous integration, JSON logs
- PRODUCTION: Deployed service
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
