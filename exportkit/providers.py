# !/usr/bin/python
# coding=utf-8
"""Format and metadata selection providers.

Both providers are plain in-memory QObjects: they expose the current value and
emit a signal when it changes. The export menu only reads them at the moment an
action is invoked, so a change is picked up by the next export.
"""
from typing import Iterable, List, Optional
from qtpy import QtCore


DEFAULT_FORMAT = "ChatGPT-{title}"
DEFAULT_META_LIST = ("title", "source")


class FormatProvider(QtCore.QObject):
    """Holds the file name format used by the export actions.

    The value is opaque to the menu; it is passed unchanged to the
    screenshot, Markdown, HTML, JSON and export-all collaborators.
    """

    format_changed = QtCore.Signal(str)

    def __init__(self, format: str = DEFAULT_FORMAT, parent=None):
        super().__init__(parent)
        self._format = format

    @property
    def format(self) -> str:
        return self._format

    @format.setter
    def format(self, value: str) -> None:
        if value == self._format:
            return
        self._format = value
        self.format_changed.emit(value)

    def setFormat(self, value: str) -> None:
        self.format = value


class MetaDataProvider(QtCore.QObject):
    """Holds whether metadata is exported, and which fields in which order.

    Attributes:
        enable_meta_changed (QtCore.Signal): Emitted with the new enabled flag.
        meta_list_changed (QtCore.Signal): Emitted with a copy of the new field list.
    """

    enable_meta_changed = QtCore.Signal(bool)
    meta_list_changed = QtCore.Signal(list)

    def __init__(
        self,
        enable_meta: bool = False,
        export_meta_list: Optional[Iterable[str]] = None,
        parent=None,
    ):
        super().__init__(parent)
        self._enable_meta = bool(enable_meta)
        self._export_meta_list: List[str] = list(
            DEFAULT_META_LIST if export_meta_list is None else export_meta_list
        )

    @property
    def enable_meta(self) -> bool:
        return self._enable_meta

    @enable_meta.setter
    def enable_meta(self, value: bool) -> None:
        value = bool(value)
        if value == self._enable_meta:
            return
        self._enable_meta = value
        self.enable_meta_changed.emit(value)

    @property
    def export_meta_list(self) -> List[str]:
        return list(self._export_meta_list)

    @export_meta_list.setter
    def export_meta_list(self, fields: Iterable[str]) -> None:
        fields = list(fields)
        if fields == self._export_meta_list:
            return
        self._export_meta_list = fields
        self.meta_list_changed.emit(list(fields))

    def resolved_meta_list(self) -> List[str]:
        """The ordered field list when metadata is enabled, otherwise an empty list."""
        return self.export_meta_list if self._enable_meta else []
