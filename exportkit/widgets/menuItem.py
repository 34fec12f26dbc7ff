# !/usr/bin/python
# coding=utf-8
from typing import Callable, Optional, Union
from qtpy import QtWidgets, QtCore, QtGui
from exportkit.widgets.mixins.attributes import AttributesMixin


class MenuItem(QtWidgets.QPushButton, AttributesMixin):
    """Flat menu button with an icon and optional transient success text.

    When `success_text` is set, a click whose callback returns without raising
    swaps the label for the success text and restores it after
    `FEEDBACK_DURATION` milliseconds. A callback that raises shows no feedback;
    the exception is left to the application.

    Attributes:
        activated (QtCore.Signal): Emitted after the callback has run.

    Example:
        item = MenuItem(text="Copy Text", success_text="Copied!", on_click=copy)
    """

    activated = QtCore.Signal()

    FEEDBACK_DURATION = 1800

    def __init__(
        self,
        parent: Optional[QtWidgets.QWidget] = None,
        text: str = "",
        icon: Union[QtGui.QIcon, str, None] = None,
        on_click: Optional[Callable] = None,
        success_text: Optional[str] = None,
        title: Optional[str] = None,
        disabled: bool = False,
        **kwargs,
    ):
        """Initialize the MenuItem.

        Parameters:
            parent (QWidget, optional): Parent widget.
            text (str): Label.
            icon (QIcon, str, optional): An icon, or the name of a QStyle standard pixmap (ie. 'SP_DialogSaveButton').
            on_click (callable, optional): Called with no arguments on click.
            success_text (str, optional): Label shown briefly after a successful click.
            title (str, optional): Tooltip.
            disabled (bool): Render as a static, non-clickable entry.
            **kwargs: Additional attributes to set via set_attributes().
        """
        super().__init__(parent)

        if on_click is not None and not callable(on_click):
            raise TypeError(f"Expected 'on_click' to be callable, got {type(on_click)}")

        self._text = text
        self.on_click = on_click
        self.success_text = success_text

        self._feedback_timer = QtCore.QTimer(self)
        self._feedback_timer.setSingleShot(True)
        self._feedback_timer.setInterval(self.FEEDBACK_DURATION)
        self._feedback_timer.timeout.connect(self._restore_text)

        QtWidgets.QPushButton.setText(self, text)
        if icon is not None:
            self.setIcon(self._resolve_icon(icon))
        if title:
            self.setToolTip(title)

        self.setFlat(True)
        self.setCursor(QtCore.Qt.PointingHandCursor)
        self.setSizePolicy(QtWidgets.QSizePolicy.Expanding, QtWidgets.QSizePolicy.Fixed)
        self.setEnabled(not disabled)

        self.clicked.connect(self._on_clicked)

        self.setProperty("class", self.__class__.__name__)
        self.set_attributes(**kwargs)

    def _resolve_icon(self, icon: Union[QtGui.QIcon, str]) -> QtGui.QIcon:
        if isinstance(icon, QtGui.QIcon):
            return icon
        pixmap = getattr(QtWidgets.QStyle, icon, None)
        if pixmap is None:  # scoped enums only
            pixmap = getattr(QtWidgets.QStyle.StandardPixmap, icon, None)
        if pixmap is None:
            raise ValueError(f"Unknown standard icon: '{icon}'")
        return self.style().standardIcon(pixmap)

    def text(self) -> str:
        """The label, ignoring any success text currently displayed."""
        return self._text

    def setText(self, text: str) -> None:
        self._text = text
        if not self.showing_feedback:
            QtWidgets.QPushButton.setText(self, text)

    def displayed_text(self) -> str:
        return QtWidgets.QPushButton.text(self)

    @property
    def showing_feedback(self) -> bool:
        return self._feedback_timer.isActive()

    def _on_clicked(self, checked: bool = False) -> None:
        if self.on_click is not None:
            self.on_click()
        if self.success_text:
            self._show_feedback()
        self.activated.emit()

    def _show_feedback(self) -> None:
        QtWidgets.QPushButton.setText(self, self.success_text)
        self._feedback_timer.start()

    def _restore_text(self) -> None:
        QtWidgets.QPushButton.setText(self, self._text)


# -----------------------------------------------------------------------------

if __name__ == "__main__":
    import sys

    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication(sys.argv)

    w = MenuItem(
        text="Copy Text",
        icon="SP_FileIcon",
        success_text="Copied!",
        on_click=lambda: print("copied"),
    )
    w.show()
    sys.exit(app.exec_())
