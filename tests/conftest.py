"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for catalog files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)
