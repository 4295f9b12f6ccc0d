"""Shared pytest fixtures for RingTimer tests."""

import os
import sys
import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from ringtimer.timer.engine import CountdownEngine

from helpers import ManualClock


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture
def clock(qapp):
    """Clock whose frames are driven by the test, not the event loop."""
    return ManualClock()


@pytest.fixture
def engine(clock):
    """Fresh CountdownEngine wired to a ManualClock."""
    return CountdownEngine(parent=None, clock=clock)
