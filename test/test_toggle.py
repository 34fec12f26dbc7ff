# !/usr/bin/python
# coding=utf-8
"""Unit tests for the controlled Toggle widget.

Run standalone: python -m pytest test/test_toggle.py
"""

import unittest

from conftest import QtBaseTestCase, setup_qt_application

# Ensure QApplication exists before importing Qt widgets
app = setup_qt_application()

from qtpy import QtWidgets, QtCore, QtGui, QtTest

from exportkit.widgets.toggle import Toggle


class TestToggleRendering(QtBaseTestCase):
    """State-to-visual mapping."""

    def test_defaults_to_checked(self):
        toggle = self.track_widget(Toggle())
        self.assertTrue(toggle.isChecked())
        self.assertEqual(toggle.state, "checked")

    def test_checked_visuals(self):
        toggle = self.track_widget(Toggle(checked=True))
        self.assertEqual(toggle.track_color, QtGui.QColor("#16a34a"))
        self.assertEqual(toggle.thumb_offset, 19)
        self.assertEqual(toggle.property("state"), "checked")

    def test_unchecked_visuals(self):
        toggle = self.track_widget(Toggle(checked=False))
        self.assertEqual(toggle.track_color, QtGui.QColor("#e5e7eb"))
        self.assertEqual(toggle.thumb_offset, 2)
        self.assertEqual(toggle.property("state"), "unchecked")

    def test_set_checked_updates_visuals_without_emitting(self):
        toggle = self.track_widget(Toggle(checked=False))
        received = []
        toggle.checked_update.connect(received.append)
        toggle.setChecked(True)
        self.assertEqual(toggle.state, "checked")
        self.assertEqual(received, [])

    def test_label_widens_size_hint(self):
        bare = self.track_widget(Toggle())
        labelled = self.track_widget(Toggle(label="Export Metadata"))
        self.assertEqual(labelled.label(), "Export Metadata")
        self.assertGreater(labelled.sizeHint().width(), bare.sizeHint().width())

    def test_kwargs_connect_signal(self):
        received = []
        toggle = self.track_widget(Toggle(checked_update=received.append))
        toggle.resize(toggle.sizeHint())
        toggle.show()
        QtTest.QTest.mouseClick(toggle, QtCore.Qt.LeftButton)
        self.assertEqual(received, [False])


class TestToggleInteraction(QtBaseTestCase):
    """Callback emission rules."""

    def setUp(self):
        super().setUp()
        self.toggle = self.track_widget(Toggle(checked=True))
        self.toggle.resize(self.toggle.sizeHint())
        self.toggle.show()
        self.received = []
        self.toggle.checked_update.connect(self.received.append)

    def test_click_emits_negation_once(self):
        QtTest.QTest.mouseClick(self.toggle, QtCore.Qt.LeftButton)
        self.assertEqual(self.received, [False])

    def test_click_does_not_change_displayed_state(self):
        QtTest.QTest.mouseClick(self.toggle, QtCore.Qt.LeftButton)
        self.assertTrue(self.toggle.isChecked())
        self.assertEqual(self.toggle.state, "checked")

    def test_each_interaction_reflects_current_prop(self):
        QtTest.QTest.mouseClick(self.toggle, QtCore.Qt.LeftButton)
        self.toggle.setChecked(self.received[-1])
        QtTest.QTest.mouseClick(self.toggle, QtCore.Qt.LeftButton)
        self.assertEqual(self.received, [False, True])

    def test_keyboard_activation(self):
        QtTest.QTest.keyClick(self.toggle, QtCore.Qt.Key_Space)
        self.assertEqual(self.received, [False])

    def test_held_key_emits_once(self):
        for autorepeat in (False, True, True):
            event = QtGui.QKeyEvent(
                QtCore.QEvent.KeyPress,
                QtCore.Qt.Key_Space,
                QtCore.Qt.NoModifier,
                " ",
                autorepeat,
            )
            QtWidgets.QApplication.sendEvent(self.toggle, event)
        self.assertEqual(self.received, [False])

    def test_right_click_is_ignored(self):
        QtTest.QTest.mouseClick(self.toggle, QtCore.Qt.RightButton)
        self.assertEqual(self.received, [])

    def test_no_emission_without_interaction(self):
        self.toggle.setChecked(False)
        self.toggle.setChecked(True)
        self.toggle.repaint()
        self.assertEqual(self.received, [])


if __name__ == "__main__":
    unittest.main()
