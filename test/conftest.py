# !/usr/bin/python
# coding=utf-8
"""Shared Qt test setup for the EXPORTKIT test suite."""

import sys
import os
from pathlib import Path
from unittest import TestCase

# Add package root to path for imports
PACKAGE_ROOT = Path(__file__).parent.parent.absolute()
if str(PACKAGE_ROOT) not in sys.path:
    sys.path.insert(0, str(PACKAGE_ROOT))

# Headless by default; an explicit platform from the environment wins.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


def setup_qt_application():
    """Return the running QApplication, creating one if needed."""
    from qtpy import QtWidgets

    return QtWidgets.QApplication.instance() or QtWidgets.QApplication(sys.argv)


def wait(ms: int) -> None:
    """Run the event loop for the given time so pending timers can fire."""
    from qtpy import QtTest

    QtTest.QTest.qWait(ms)


class QtBaseTestCase(TestCase):
    """Test case that tears down the widgets it tracks.

    Widgets exposing ``teardown()`` (ie. ExportMenu) have it called before
    ``deleteLater()``; pending deletions are flushed after each test.
    """

    @classmethod
    def setUpClass(cls):
        cls.app = setup_qt_application()

    def setUp(self):
        self._widgets_to_cleanup = []

    def tearDown(self):
        for widget in reversed(self._widgets_to_cleanup):
            try:
                if hasattr(widget, "teardown"):
                    widget.teardown()
                widget.deleteLater()
            except RuntimeError:
                # Already deleted with its parent
                pass
        self._widgets_to_cleanup.clear()
        self.app.processEvents()

    def track_widget(self, widget):
        """Register a widget for cleanup after the test and return it."""
        self._widgets_to_cleanup.append(widget)
        return widget
