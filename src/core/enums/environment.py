"""Runtime environments for the Ticket Management API.

Settings use the environment to pick the log renderer (console in
development, JSON elsewhere) and to expose convenience flags.
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
