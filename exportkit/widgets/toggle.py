# !/usr/bin/python
# coding=utf-8
from typing import Optional
from qtpy import QtWidgets, QtCore, QtGui
from exportkit.widgets.mixins.attributes import AttributesMixin


class Toggle(QtWidgets.QWidget, AttributesMixin):
    """Controlled on/off switch with an optional label.

    The displayed state is whatever the caller last passed to `setChecked`.
    User interaction never flips it; it only emits `checked_update` with the
    negated value and waits for the caller to render the new state.

    Attributes:
        checked_update (QtCore.Signal): Emitted with ``not checked`` once per interaction.

    Example:
        toggle = Toggle(label="Export Metadata", checked=False)
        toggle.checked_update.connect(toggle.setChecked)  # caller accepts the change
    """

    checked_update = QtCore.Signal(bool)

    TRACK_SIZE = QtCore.QSize(42, 24)
    THUMB_DIAMETER = 20
    TRACK_COLORS = {True: "#16a34a", False: "#e5e7eb"}
    THUMB_OFFSETS = {True: 19, False: 2}
    LABEL_SPACING = 12

    def __init__(
        self,
        parent: Optional[QtWidgets.QWidget] = None,
        label: str = "",
        checked: bool = True,
        **kwargs,
    ):
        """Initialize the Toggle.

        Parameters:
            parent (QWidget, optional): Parent widget.
            label (str): Text shown to the right of the switch. Hidden when empty.
            checked (bool): Initial state supplied by the caller. Defaults to True.
            **kwargs: Additional attributes to set via set_attributes().
        """
        super().__init__(parent)

        self._checked = bool(checked)
        self._label = label or ""

        self.setCursor(QtCore.Qt.PointingHandCursor)
        self.setFocusPolicy(QtCore.Qt.StrongFocus)
        self.setSizePolicy(QtWidgets.QSizePolicy.Fixed, QtWidgets.QSizePolicy.Fixed)
        self.setAttribute(QtCore.Qt.WA_Hover, True)

        self.setProperty("class", self.__class__.__name__)
        self._sync_state_property()
        self.set_attributes(**kwargs)

    # State supplied by the caller

    def isChecked(self) -> bool:
        return self._checked

    def setChecked(self, checked: bool) -> None:
        """Render the given state. Does not emit `checked_update`."""
        checked = bool(checked)
        if checked == self._checked:
            return
        self._checked = checked
        self._sync_state_property()
        self.update()

    def label(self) -> str:
        return self._label

    def setLabel(self, text: str) -> None:
        self._label = text or ""
        self.updateGeometry()
        self.update()

    # Visual mapping

    @property
    def state(self) -> str:
        """'checked' or 'unchecked'."""
        return "checked" if self._checked else "unchecked"

    @property
    def track_color(self) -> QtGui.QColor:
        return QtGui.QColor(self.TRACK_COLORS[self._checked])

    @property
    def thumb_offset(self) -> int:
        return self.THUMB_OFFSETS[self._checked]

    def _sync_state_property(self) -> None:
        # Exposed for style sheets: Toggle[state="checked"] { ... }
        self.setProperty("state", self.state)
        self.style().unpolish(self)
        self.style().polish(self)

    def sizeHint(self) -> QtCore.QSize:
        width = self.TRACK_SIZE.width()
        height = self.TRACK_SIZE.height()
        if self._label:
            metrics = self.fontMetrics()
            width += self.LABEL_SPACING + metrics.horizontalAdvance(self._label)
            height = max(height, metrics.height())
        return QtCore.QSize(width, height)

    def minimumSizeHint(self) -> QtCore.QSize:
        return self.sizeHint()

    def paintEvent(self, event) -> None:
        painter = QtGui.QPainter(self)
        painter.setRenderHint(QtGui.QPainter.Antialiasing)

        track_h = self.TRACK_SIZE.height()
        top = (self.height() - track_h) // 2
        track = QtCore.QRectF(0, top, self.TRACK_SIZE.width(), track_h)

        painter.setPen(QtCore.Qt.NoPen)
        painter.setBrush(self.track_color)
        painter.drawRoundedRect(track, track_h / 2, track_h / 2)

        d = self.THUMB_DIAMETER
        thumb = QtCore.QRectF(
            self.thumb_offset, top + (track_h - d) / 2, d, d
        )
        painter.setBrush(QtGui.QColor(0, 0, 0, 115))
        painter.drawEllipse(thumb.translated(0, 1))
        painter.setBrush(QtGui.QColor("white"))
        painter.drawEllipse(thumb)

        if self._label:
            painter.setPen(self.palette().color(QtGui.QPalette.WindowText))
            text_rect = QtCore.QRectF(
                self.TRACK_SIZE.width() + self.LABEL_SPACING,
                0,
                self.width() - self.TRACK_SIZE.width() - self.LABEL_SPACING,
                self.height(),
            )
            painter.drawText(
                text_rect, QtCore.Qt.AlignLeft | QtCore.Qt.AlignVCenter, self._label
            )
        painter.end()

    # Interaction

    def mouseReleaseEvent(self, event) -> None:
        """A left click inside the widget requests the opposite state."""
        if event.button() == QtCore.Qt.LeftButton and self.rect().contains(
            event.pos()
        ):
            self.checked_update.emit(not self._checked)
            event.accept()
            return
        super().mouseReleaseEvent(event)

    def keyPressEvent(self, event) -> None:
        if event.isAutoRepeat():  # one emission per press
            event.accept()
            return
        if event.key() in (QtCore.Qt.Key_Space, QtCore.Qt.Key_Return, QtCore.Qt.Key_Enter):
            self.checked_update.emit(not self._checked)
            event.accept()
            return
        super().keyPressEvent(event)


# -----------------------------------------------------------------------------

if __name__ == "__main__":
    import sys

    # Return the existing QApplication object, or create a new one if none exists.
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication(sys.argv)

    w = Toggle(label="Export Metadata", checked=False)
    w.checked_update.connect(w.setChecked)
    w.show()

    sys.exit(app.exec_())
