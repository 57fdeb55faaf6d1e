"""Shared pytest fixtures for FocusRing tests."""

import sys
import pytest

from PyQt6.QtCore import QCoreApplication

from focusring.timer.engine import TimerEngine


@pytest.fixture(scope="session")
def qapp():
    """A single QCoreApplication instance shared across the entire test run."""
    app = QCoreApplication.instance() or QCoreApplication(sys.argv)
    yield app


@pytest.fixture
def engine(qapp):
    """Fresh TimerEngine with auto-advance OFF."""
    e = TimerEngine(parent=None, auto_advance=False)
    yield e
    e.shutdown()


@pytest.fixture
def engine_auto(qapp):
    """Fresh TimerEngine with auto-advance ON (the default)."""
    e = TimerEngine(parent=None)
    yield e
    e.shutdown()
