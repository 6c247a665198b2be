"""Shared test fixtures for the clock test suite.

RecordingSurface stands in for the Qt painter so the face can be tested
headless. Qt tests themselves run on the offscreen platform.
"""

import os
from datetime import datetime

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class RecordingSurface:
    """Records every draw call as a tuple."""

    def __init__(self):
        self.calls = []

    def clear(self, color):
        self.calls.append(("clear", color))

    def fill_circle(self, x, y, radius, color):
        self.calls.append(("fill_circle", x, y, radius, color))

    def line(self, x1, y1, x2, y2, color, thickness):
        self.calls.append(("line", x1, y1, x2, y2, color, thickness))


class SteppingClock:
    """Fake `now` callable that returns a scripted sequence of times."""

    def __init__(self, *times):
        self.times = list(times)
        self.calls = 0

    def __call__(self):
        current = self.times[min(self.calls, len(self.times) - 1)]
        self.calls += 1
        return current


def at(hours, minutes, seconds):
    return lambda: datetime(2024, 1, 1, hours, minutes, seconds)


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture(scope="session")
def qapp():
    QtWidgets = pytest.importorskip("PySide6.QtWidgets")
    return QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
