"""
Shared pytest configuration.
"""

import os

# Set offscreen platform to prevent display errors on headless systems
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest  # noqa: E402
from PySide6.QtCore import QStandardPaths  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def isolated_standard_paths():
    """Keep log files written during tests out of the user's real app data directory."""
    QStandardPaths.setTestModeEnabled(True)
    yield
    QStandardPaths.setTestModeEnabled(False)
