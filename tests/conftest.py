"""Test configuration shared by the whole suite."""

import os

# Configuration is read once on first import of the runtime context, so the
# test database must be selected before any application module is imported.
os.environ.setdefault("APP_ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite://")

from tests.fixtures import *  # noqa: E402,F401,F403
