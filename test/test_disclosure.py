# !/usr/bin/python
# coding=utf-8
"""Unit tests for the disclosure state machine.

This module tests:
- Immediate open on trigger activation
- Hover-intent close delay and cancellation on re-entry
- Synchronous dismissal
- Dialog visibility tracking and the derived force-mount flag
- Shutdown cancelling pending closes

Run standalone: python -m pytest test/test_disclosure.py
"""

import unittest

from conftest import QtBaseTestCase, setup_qt_application, wait

# Ensure QApplication exists before importing Qt widgets
app = setup_qt_application()

from exportkit.disclosure import (
    DisclosurePhase,
    DisclosureState,
    DisclosureStateMachine,
)


class Recorder:
    """Collects emitted values of the machine's signals."""

    def __init__(self, machine):
        self.open = []
        self.dialog_open = []
        self.force_mount = []
        machine.open_changed.connect(self.open.append)
        machine.dialog_open_changed.connect(self.dialog_open.append)
        machine.force_mount_changed.connect(self.force_mount.append)


class TestDisclosureState(unittest.TestCase):
    """Tests for the DisclosureState snapshot."""

    def test_defaults_closed(self):
        state = DisclosureState()
        self.assertFalse(state.open)
        self.assertFalse(state.dialog_open)
        self.assertFalse(state.force_mount)

    def test_force_mount_is_open_or_dialog_open(self):
        for open_, dialog, expected in [
            (False, False, False),
            (True, False, True),
            (False, True, True),
            (True, True, True),
        ]:
            with self.subTest(open=open_, dialog_open=dialog):
                state = DisclosureState(open=open_, dialog_open=dialog)
                self.assertEqual(state.force_mount, expected)


class TestDisclosureOpen(QtBaseTestCase):
    """Trigger activation and pointer entry."""

    def setUp(self):
        super().setUp()
        self.machine = DisclosureStateMachine()
        self.rec = Recorder(self.machine)

    def test_created_closed(self):
        self.assertEqual(self.machine.phase, DisclosurePhase.CLOSED)
        self.assertEqual(self.machine.state, DisclosureState(False, False))
        self.assertEqual(self.machine.close_delay, 200)

    def test_activate_opens_synchronously(self):
        """Should be open right after activation, without running the event loop."""
        self.machine.activate()
        self.assertTrue(self.machine.is_open)
        self.assertEqual(self.rec.open, [True])
        self.assertEqual(self.rec.force_mount, [True])

    def test_repeated_activation_emits_once(self):
        for _ in range(3):
            self.machine.activate()
            self.assertTrue(self.machine.is_open)
        self.assertEqual(self.rec.open, [True])

    def test_pointer_enter_on_trigger_opens(self):
        self.machine.pointer_enter()
        self.assertTrue(self.machine.is_open)

    def test_pointer_enter_on_unmounted_panel_does_not_open(self):
        self.machine.pointer_enter(open_panel=False)
        self.assertFalse(self.machine.is_open)

    def test_pointer_enter_on_panel_kept_by_dialog_reopens(self):
        self.machine.activate()
        self.machine.set_dialog_open(True, source="settings")
        self.machine.dismiss()
        self.assertTrue(self.machine.force_mount)
        self.machine.pointer_enter(open_panel=False)
        self.assertTrue(self.machine.is_open)
        self.machine.set_dialog_open(False, source="settings")
        self.assertTrue(self.machine.force_mount)

    def test_activation_cancels_pending_close(self):
        self.machine.activate()
        self.machine.pointer_leave()
        self.assertTrue(self.machine.close_pending)
        self.machine.activate()
        self.assertFalse(self.machine.close_pending)
        wait(300)
        self.assertTrue(self.machine.is_open)


class TestDisclosureHoverIntent(QtBaseTestCase):
    """Delayed close after the pointer leaves."""

    def setUp(self):
        super().setUp()
        self.machine = DisclosureStateMachine()
        self.rec = Recorder(self.machine)
        self.machine.activate()

    def test_leave_schedules_close(self):
        self.machine.pointer_leave()
        self.assertEqual(self.machine.phase, DisclosurePhase.PENDING_CLOSE)
        self.assertTrue(self.machine.is_open)
        self.assertTrue(self.machine.close_pending)

    def test_closes_exactly_once_after_delay(self):
        self.machine.pointer_leave()
        wait(350)
        self.assertFalse(self.machine.is_open)
        self.assertEqual(self.rec.open, [True, False])
        self.assertEqual(self.rec.force_mount, [True, False])

    def test_reentry_within_delay_keeps_open(self):
        self.machine.pointer_leave()
        wait(80)
        self.machine.pointer_enter(open_panel=False)
        self.assertEqual(self.machine.phase, DisclosurePhase.OPEN)
        wait(300)
        self.assertTrue(self.machine.is_open)
        self.assertEqual(self.rec.open, [True])

    def test_repeated_excursions_stay_open(self):
        for _ in range(4):
            self.machine.pointer_leave()
            wait(60)
            self.machine.pointer_enter()
        wait(300)
        self.assertTrue(self.machine.is_open)

    def test_second_leave_does_not_extend_deadline(self):
        self.machine.pointer_leave()
        wait(120)
        self.machine.pointer_leave()
        wait(150)
        self.assertFalse(self.machine.is_open)

    def test_leave_while_closed_is_ignored(self):
        self.machine.dismiss()
        self.machine.pointer_leave()
        self.assertFalse(self.machine.close_pending)
        self.assertEqual(self.machine.phase, DisclosurePhase.CLOSED)

    def test_custom_close_delay(self):
        machine = DisclosureStateMachine(close_delay=20)
        machine.activate()
        machine.pointer_leave()
        wait(100)
        self.assertFalse(machine.is_open)


class TestDisclosureDismiss(QtBaseTestCase):
    """Synchronous close paths."""

    def setUp(self):
        super().setUp()
        self.machine = DisclosureStateMachine()
        self.machine.activate()

    def test_dismiss_closes_immediately(self):
        self.machine.dismiss()
        self.assertFalse(self.machine.is_open)

    def test_dismiss_cancels_pending_close(self):
        rec = Recorder(self.machine)
        self.machine.pointer_leave()
        self.machine.dismiss()
        self.assertFalse(self.machine.close_pending)
        self.machine.activate()
        wait(300)
        self.assertTrue(self.machine.is_open)
        self.assertEqual(rec.open, [False, True])

    def test_set_open_is_controlled(self):
        self.machine.set_open(False)
        self.assertFalse(self.machine.is_open)
        self.machine.set_open(True)
        self.assertTrue(self.machine.is_open)


class TestDisclosureDialogs(QtBaseTestCase):
    """Child dialog reporting and force-mount."""

    def setUp(self):
        super().setUp()
        self.machine = DisclosureStateMachine()
        self.rec = Recorder(self.machine)

    def test_dialog_open_forces_mount_when_closed(self):
        self.machine.set_dialog_open(True)
        self.assertFalse(self.machine.is_open)
        self.assertTrue(self.machine.force_mount)

    def test_force_mount_survives_hover_close(self):
        self.machine.activate()
        self.machine.set_dialog_open(True, source="settings")
        self.machine.pointer_leave()
        wait(350)
        self.assertFalse(self.machine.is_open)
        self.assertTrue(self.machine.dialog_open)
        self.assertTrue(self.machine.force_mount)
        self.assertEqual(self.rec.force_mount, [True])

    def test_closing_dialog_never_opens(self):
        self.machine.set_dialog_open(True)
        self.machine.set_dialog_open(False)
        self.assertFalse(self.machine.is_open)
        self.assertFalse(self.machine.force_mount)
        self.assertEqual(self.rec.open, [])
        self.assertEqual(self.rec.force_mount, [True, False])

    def test_closing_dialog_keeps_open_panel(self):
        self.machine.activate()
        self.machine.set_dialog_open(True)
        self.machine.set_dialog_open(False)
        self.assertTrue(self.machine.is_open)
        self.assertEqual(self.rec.force_mount, [True])

    def test_tracks_multiple_sources(self):
        self.machine.set_dialog_open(True, source="settings")
        self.machine.set_dialog_open(True, source="export_all")
        self.machine.set_dialog_open(False, source="settings")
        self.assertTrue(self.machine.dialog_open)
        self.machine.set_dialog_open(False, source="export_all")
        self.assertFalse(self.machine.dialog_open)
        self.assertEqual(self.rec.dialog_open, [True, False])

    def test_duplicate_reports_are_idempotent(self):
        self.machine.set_dialog_open(True)
        self.machine.set_dialog_open(True)
        self.assertEqual(self.rec.dialog_open, [True])


class TestDisclosureShutdown(QtBaseTestCase):
    """Unmount behaviour."""

    def test_shutdown_cancels_pending_close(self):
        machine = DisclosureStateMachine()
        rec = Recorder(machine)
        machine.activate()
        machine.pointer_leave()
        machine.shutdown()
        self.assertFalse(machine.close_pending)
        wait(300)
        self.assertEqual(rec.open, [True])

    def test_events_after_shutdown_are_ignored(self):
        machine = DisclosureStateMachine()
        machine.shutdown()
        machine.activate()
        machine.set_dialog_open(True)
        self.assertTrue(machine.is_shut_down)
        self.assertFalse(machine.force_mount)


if __name__ == "__main__":
    unittest.main()
