"""Pytest configuration for schemaknobs tests."""

import sys
from pathlib import Path

import pytest

# Add the package source to path for testing
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from schemaknobs.settings import reset_settings  # noqa: E402


@pytest.fixture(autouse=True)
def default_settings():
    """Run every test against the default settings."""
    reset_settings()
    yield
    reset_settings()
