"""Root test fixtures shared across all test types.

This conftest contains fixtures that can be used by both unit and integration tests.
Database-specific fixtures are in tests/integration/conftest.py.
"""

import os
import tempfile

# Configure the app for tests before any app imports
os.environ.setdefault("APP_ENV", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("MEDIA_ROOT", tempfile.mkdtemp(prefix="portfolio-media-"))
os.environ["RESEND_API_KEY"] = ""

# ruff: noqa: E402 - Imports must be after env var setup
from pathlib import Path

import pytest

from src.portfolio.core.config import Settings, get_settings
from src.portfolio.core.storage import LocalBlobStorage

# Clear settings cache to ensure test environment variables are picked up
get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    """Fresh settings with the operator address pinned for assertions."""
    return Settings(notification_email="operator@example.com")


@pytest.fixture
def storage(tmp_path: Path) -> LocalBlobStorage:
    """Blob storage rooted in a per-test temporary directory."""
    return LocalBlobStorage(tmp_path / "media")
