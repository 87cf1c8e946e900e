"""Application environment types.

Used by Settings to switch environment-specific behavior (log rendering,
table creation on startup, the /config debug endpoint).
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
