"""
Pytest configuration and shared fixtures for textkit tests.
"""

import sys
from pathlib import Path

import pytest


# Add project paths to sys.path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "shared"))


TEXTKIT_ENV_VARS = (
    "TEXTKIT_CONFIG",
    "TEXTKIT_LOG_LEVEL",
    "TEXTKIT_LOG_JSON",
    "TEXTKIT_LOG_FILE",
    "TEXTKIT_ESCAPE_TEXT",
    "TEXTKIT_ESCAPE_ATTR",
    "TEXTKIT_CHUNK_SIZE",
    "TEXTKIT_CHUNK_FROM_BEGINNING",
    "TEXTKIT_PAD_CHARACTER",
)


@pytest.fixture
def mock_home(tmp_path, monkeypatch):
    """Point HOME at an empty directory and clear TEXTKIT_* variables."""
    monkeypatch.setenv("HOME", str(tmp_path))
    for name in TEXTKIT_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return tmp_path


@pytest.fixture
def config_dir(mock_home):
    """Return the (created) ~/.config/textkit directory."""
    path = mock_home / ".config" / "textkit"
    path.mkdir(parents=True)
    return path
