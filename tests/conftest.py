"""Shared fixtures for doomtype tests."""

from __future__ import annotations

import pytest
from PySide6.QtCore import QCoreApplication


@pytest.fixture(scope="session")
def qapp() -> QCoreApplication:
    """A QCoreApplication for tests that need timers and signals."""
    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    return app
