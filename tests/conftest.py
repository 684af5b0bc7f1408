"""
Pytest configuration and fixtures for the password generator tests.
"""

import os
import tempfile

# Must run before config / PySide6 are imported
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ["PASSGEN_DATA_DIR"] = tempfile.mkdtemp(prefix="passgen-tests-")

import random
import pytest
from PySide6.QtWidgets import QApplication, QMessageBox


@pytest.fixture(scope="session")
def qapp():
    """Single QApplication shared by every Qt test."""
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def seeded_rng():
    return random.Random(1234)


@pytest.fixture
def message_boxes(monkeypatch):
    """Record QMessageBox.warning / critical calls instead of blocking."""
    calls = []

    def fake(kind):
        def _show(parent, title, text, *args, **kwargs):
            calls.append((kind, title, text))
            return QMessageBox.Ok
        return _show

    monkeypatch.setattr(QMessageBox, "warning", fake("warning"))
    monkeypatch.setattr(QMessageBox, "critical", fake("critical"))
    return calls
