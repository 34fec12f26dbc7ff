# !/usr/bin/python
# coding=utf-8
"""Open/close state machine for the export panel.

The panel follows the hover-intent pattern: it opens immediately on trigger
activation (or pointer entry), and closes only after the pointer has stayed
away for ``CLOSE_DELAY`` milliseconds. Child dialogs report their visibility
upward, and the derived ``force_mount`` flag keeps the panel content alive
while any of them is visible, independent of the hover-intent outcome.

Classes:
    DisclosurePhase: The three hover-intent phases.
    DisclosureState: Immutable snapshot of the machine.
    DisclosureStateMachine: QObject owning the state and the close timer.

Example:
    machine = DisclosureStateMachine()
    machine.force_mount_changed.connect(panel.setVisible)
    machine.activate()            # open now
    machine.pointer_leave()       # close in 200ms unless the pointer returns
"""
from dataclasses import dataclass
from enum import Enum
from typing import Hashable, Optional, Set, Union
from qtpy import QtCore
import pythontk as ptk


class DisclosurePhase(Enum):
    CLOSED = "closed"
    OPEN = "open"
    PENDING_CLOSE = "pending_close"


@dataclass(frozen=True)
class DisclosureState:
    """Snapshot of the disclosure state.

    Attributes:
        open (bool): Hover/tap intent. True while OPEN or PENDING_CLOSE.
        dialog_open (bool): True while any child dialog is visible.
    """

    open: bool = False
    dialog_open: bool = False

    @property
    def force_mount(self) -> bool:
        """Whether the panel content must stay mounted."""
        return self.open or self.dialog_open


class DisclosureStateMachine(QtCore.QObject, ptk.LoggingMixin):
    """Owns the ``open`` and ``dialog_open`` flags of a single export panel.

    All mutations are funneled through this object. The close delay is a
    single-shot QTimer that is stopped by every event that supersedes it
    (pointer re-entry, activation, dismissal, shutdown), so a stale close can
    never fire after the panel has been reopened.

    Attributes:
        open_changed (QtCore.Signal): Emitted with the new ``open`` value.
        dialog_open_changed (QtCore.Signal): Emitted with the new ``dialog_open`` value.
        force_mount_changed (QtCore.Signal): Emitted with the new ``force_mount`` value.
    """

    OPEN_DELAY = 0
    CLOSE_DELAY = 200

    open_changed = QtCore.Signal(bool)
    dialog_open_changed = QtCore.Signal(bool)
    force_mount_changed = QtCore.Signal(bool)

    def __init__(
        self,
        parent: Optional[QtCore.QObject] = None,
        close_delay: Optional[int] = None,
        log_level: Union[int, str] = "WARNING",
    ):
        """Create a closed state machine.

        Parameters:
            parent (QObject, optional): Owner; the timer dies with it.
            close_delay (int, optional): Close delay in ms. Defaults to CLOSE_DELAY.
            log_level (int, str): Logging level for transition messages.
        """
        super().__init__(parent)
        self.logger.setLevel(log_level)

        self._phase = DisclosurePhase.CLOSED
        self._dialog_sources: Set[Hashable] = set()
        self._shut_down = False

        self._close_timer = QtCore.QTimer(self)
        self._close_timer.setSingleShot(True)
        self._close_timer.setInterval(
            self.CLOSE_DELAY if close_delay is None else int(close_delay)
        )
        self._close_timer.timeout.connect(self._on_close_timeout)

    # ------------------------------------------------------------------
    # State accessors
    # ------------------------------------------------------------------

    @property
    def phase(self) -> DisclosurePhase:
        return self._phase

    @property
    def is_open(self) -> bool:
        return self._phase is not DisclosurePhase.CLOSED

    @property
    def dialog_open(self) -> bool:
        return bool(self._dialog_sources)

    @property
    def force_mount(self) -> bool:
        return self.is_open or self.dialog_open

    @property
    def close_pending(self) -> bool:
        return self._close_timer.isActive()

    @property
    def close_delay(self) -> int:
        return self._close_timer.interval()

    @property
    def state(self) -> DisclosureState:
        """Current snapshot."""
        return DisclosureState(open=self.is_open, dialog_open=self.dialog_open)

    @property
    def is_shut_down(self) -> bool:
        return self._shut_down

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def activate(self) -> None:
        """Trigger activation (click or tap): open with no delay."""
        self.logger.debug("[activate] Trigger activated")
        self._transition(DisclosurePhase.OPEN)

    def pointer_enter(self, open_panel: bool = True) -> None:
        """The pointer entered the trigger or the panel.

        Any scheduled close is cancelled. Entering the trigger opens the
        panel (OPEN_DELAY is zero). Entering the panel opens it only while the
        content is mounted, ie. kept alive by a child dialog after a close.

        Parameters:
            open_panel (bool): False when the entered region is the panel itself.
        """
        if self._shut_down:
            return

        if self._phase is DisclosurePhase.PENDING_CLOSE:
            self.logger.debug("[pointer_enter] Pointer returned, close cancelled")
            self._transition(DisclosurePhase.OPEN)
        elif self._phase is DisclosurePhase.CLOSED and (open_panel or self.force_mount):
            self._transition(DisclosurePhase.OPEN)

    def pointer_leave(self) -> None:
        """The pointer left the trigger/panel region: schedule a delayed close."""
        if self._shut_down or self._phase is not DisclosurePhase.OPEN:
            return
        self.logger.debug(
            f"[pointer_leave] Close scheduled in {self.close_delay}ms"
        )
        self._transition(DisclosurePhase.PENDING_CLOSE)

    def dismiss(self) -> None:
        """Close synchronously, bypassing the hover-intent delay."""
        self.logger.debug("[dismiss] Closing without delay")
        self._transition(DisclosurePhase.CLOSED)

    def set_open(self, value: bool) -> None:
        """Controlled setter for ``open``."""
        self._transition(DisclosurePhase.OPEN if value else DisclosurePhase.CLOSED)

    def set_dialog_open(self, value: bool, source: Hashable = "dialog") -> None:
        """Record a child dialog's visibility, taken verbatim from its callback.

        Never touches ``open``; closing the last dialog can only drop
        ``force_mount`` when the panel is already closed.

        Parameters:
            value (bool): The reported visibility.
            source (hashable): Identifies the reporting dialog.
        """
        if self._shut_down:
            return

        previous = self.force_mount, self.dialog_open
        if value:
            self._dialog_sources.add(source)
        else:
            self._dialog_sources.discard(source)

        self.logger.debug(f"[set_dialog_open] {source!r} -> {value}")
        self._emit_changes(self.is_open, *previous)

    def shutdown(self) -> None:
        """Cancel any pending close and ignore further events (unmount)."""
        self._close_timer.stop()
        self._shut_down = True
        self.logger.debug("[shutdown] State machine stopped")

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _on_close_timeout(self) -> None:
        if self._phase is DisclosurePhase.PENDING_CLOSE:
            self.logger.debug("[timeout] Close delay elapsed")
            self._transition(DisclosurePhase.CLOSED)

    def _transition(self, phase: DisclosurePhase) -> None:
        if self._shut_down:
            return

        if phase is DisclosurePhase.PENDING_CLOSE:
            self._close_timer.start()
        else:
            self._close_timer.stop()

        was_open = self.is_open
        previous = self.force_mount, self.dialog_open
        self._phase = phase
        self._emit_changes(was_open, *previous)

    def _emit_changes(
        self, was_open: bool, was_force_mount: bool, was_dialog_open: bool
    ) -> None:
        if self.is_open != was_open:
            self.open_changed.emit(self.is_open)
        if self.dialog_open != was_dialog_open:
            self.dialog_open_changed.emit(self.dialog_open)
        if self.force_mount != was_force_mount:
            self.logger.debug(f"[force_mount] -> {self.force_mount}")
            self.force_mount_changed.emit(self.force_mount)


# --------------------------------------------------------------------------------------------
# Notes
# --------------------------------------------------------------------------------------------
