# !/usr/bin/python
# coding=utf-8
"""Child dialogs opened from inside the export panel.

Every dialog reports its own visibility upward through `open_changed`. The
signal is emitted synchronously from show/hide, on every transition, which is
what lets the export menu keep its panel mounted while a dialog is visible.
"""
from typing import Callable, Optional
from qtpy import QtWidgets, QtCore

# From this package:
from exportkit.providers import FormatProvider, MetaDataProvider
from exportkit.widgets.mixins.attributes import AttributesMixin
from exportkit.widgets.toggle import Toggle


class ChildDialog(QtWidgets.QDialog, AttributesMixin):
    """Dialog base implementing the open/onOpenChange contract.

    Attributes:
        open_changed (QtCore.Signal): Emitted with the new visibility on every transition.
    """

    open_changed = QtCore.Signal(bool)

    def __init__(self, parent: Optional[QtWidgets.QWidget] = None, title: str = "", **kwargs):
        super().__init__(parent)
        self._open = False

        self.setModal(True)
        if title:
            self.setWindowTitle(title)

        self.body = QtWidgets.QVBoxLayout(self)
        self.body.setContentsMargins(16, 16, 16, 16)
        self.body.setSpacing(8)

        self.setProperty("class", self.__class__.__name__)
        self.set_attributes(**kwargs)

    @property
    def is_open(self) -> bool:
        return self._open

    def set_open(self, value: bool) -> None:
        """Show or hide the dialog."""
        if value:
            self.show()
            self.raise_()
        else:
            self.hide()

    def showEvent(self, event) -> None:
        super().showEvent(event)
        self._report(True)

    def hideEvent(self, event) -> None:
        super().hideEvent(event)
        self._report(False)

    def _report(self, value: bool) -> None:
        if value == self._open:
            return
        self._open = value
        self.open_changed.emit(value)

    def add_button_row(self, *buttons: QtWidgets.QPushButton) -> QtWidgets.QHBoxLayout:
        row = QtWidgets.QHBoxLayout()
        row.addStretch(1)
        for button in buttons:
            row.addWidget(button)
        self.body.addLayout(row)
        return row


class SettingDialog(ChildDialog):
    """Edits the export file name format and the metadata switch."""

    def __init__(
        self,
        format_provider: FormatProvider,
        meta_provider: MetaDataProvider,
        parent: Optional[QtWidgets.QWidget] = None,
        **kwargs,
    ):
        super().__init__(parent, title="Exporter Settings", **kwargs)
        self.format_provider = format_provider
        self.meta_provider = meta_provider

        self.body.addWidget(QtWidgets.QLabel("File Name"))
        self.format_edit = QtWidgets.QLineEdit(format_provider.format)
        self.format_edit.setPlaceholderText("ChatGPT-{title}")
        self.format_edit.textEdited.connect(self._on_format_edited)
        self.body.addWidget(self.format_edit)

        self.meta_toggle = Toggle(
            label="Export Metadata", checked=meta_provider.enable_meta
        )
        # Controlled: the provider is the source of truth for the toggle.
        self.meta_toggle.checked_update.connect(self._on_meta_toggled)
        meta_provider.enable_meta_changed.connect(self.meta_toggle.setChecked)
        format_provider.format_changed.connect(self._on_format_changed)
        self.body.addWidget(self.meta_toggle)

        close = QtWidgets.QPushButton("Close")
        close.clicked.connect(lambda: self.set_open(False))
        self.add_button_row(close)

    def _on_format_edited(self, text: str) -> None:
        self.format_provider.format = text

    def _on_format_changed(self, text: str) -> None:
        if self.format_edit.text() != text:
            self.format_edit.setText(text)

    def _on_meta_toggled(self, checked: bool) -> None:
        self.meta_provider.enable_meta = checked


class ExportAllDialog(ChildDialog):
    """Exports every conversation in the current format through `export_all`."""

    def __init__(
        self,
        format_provider: FormatProvider,
        export_all: Optional[Callable] = None,
        parent: Optional[QtWidgets.QWidget] = None,
        **kwargs,
    ):
        super().__init__(parent, title="Export Conversations", **kwargs)
        self.format_provider = format_provider
        self.export_all = export_all

        self.format_label = QtWidgets.QLabel()
        self._on_format_changed(format_provider.format)
        format_provider.format_changed.connect(self._on_format_changed)
        self.body.addWidget(self.format_label)

        self.export_button = QtWidgets.QPushButton("Export")
        self.export_button.setEnabled(export_all is not None)
        self.export_button.clicked.connect(self._on_export)
        cancel = QtWidgets.QPushButton("Cancel")
        cancel.clicked.connect(lambda: self.set_open(False))
        self.add_button_row(cancel, self.export_button)

    def _on_format_changed(self, text: str) -> None:
        self.format_label.setText(f"File name format: {text}")

    def _on_export(self) -> None:
        if self.export_all is not None:
            self.export_all(self.format_provider.format)
