# !/usr/bin/python
# coding=utf-8
from dataclasses import dataclass
from typing import Callable, Dict, Mapping, Optional, Sequence
from qtpy import QtWidgets, QtCore

# From this package:
from exportkit.widgets.menuItem import MenuItem
from exportkit.widgets.mixins.attributes import AttributesMixin


VARIANTS = ("full", "half")


@dataclass(frozen=True)
class MenuEntry:
    """One static entry of the export panel.

    Attributes:
        key (str): Identifier, also the handler name looked up by ActionGrid.
        label (str): Button text.
        icon (str): QStyle standard pixmap name.
        variant (str): 'full' spans both grid columns, 'half' takes one.
        success_text (str, optional): Transient feedback after a successful click.
        dialog (str, optional): Name of the child dialog the entry opens.
    """

    key: str
    label: str
    icon: str
    variant: str = "half"
    success_text: Optional[str] = None
    dialog: Optional[str] = None

    def __post_init__(self):
        if self.variant not in VARIANTS:
            raise ValueError(
                f"Invalid variant '{self.variant}' for '{self.key}'. Expected one of {VARIANTS}"
            )

    @property
    def column_span(self) -> int:
        return 2 if self.variant == "full" else 1


MENU_ENTRIES = (
    MenuEntry("settings", "Setting", "SP_FileDialogDetailedView", "full", dialog="settings"),
    MenuEntry("copy_text", "Copy Text", "SP_FileIcon", "full", success_text="Copied!"),
    MenuEntry("screenshot", "Screenshot", "SP_DesktopIcon"),
    MenuEntry("markdown", "Markdown", "SP_FileDialogContentsView"),
    MenuEntry("html", "HTML", "SP_FileDialogInfoView"),
    MenuEntry("json", "JSON", "SP_FileDialogListView"),
    MenuEntry("export_all", "Export All", "SP_DirIcon", "full", dialog="export_all"),
)


class ActionGrid(QtWidgets.QWidget, AttributesMixin):
    """Two-column grid of MenuItems built once from a MenuEntry catalog.

    Each entry's button calls ``handlers[entry.key]``. Invocation is
    fire-and-forget: the grid neither waits on the handler nor touches the
    panel's open state.

    Attributes:
        entry_invoked (QtCore.Signal): Emitted with the entry key after its handler ran.
    """

    entry_invoked = QtCore.Signal(str)

    def __init__(
        self,
        handlers: Mapping[str, Callable],
        entries: Sequence[MenuEntry] = MENU_ENTRIES,
        parent: Optional[QtWidgets.QWidget] = None,
        **kwargs,
    ):
        super().__init__(parent)
        self.entries = tuple(entries)
        self.handlers = dict(handlers)
        self.items: Dict[str, MenuItem] = {}

        self.grid = QtWidgets.QGridLayout(self)
        self.grid.setContentsMargins(6, 8, 6, 8)
        self.grid.setHorizontalSpacing(4)
        self.grid.setVerticalSpacing(4)

        self._build()

        self.setProperty("class", self.__class__.__name__)
        self.set_attributes(**kwargs)

    def _build(self) -> None:
        row, col = 0, 0
        for entry in self.entries:
            if entry.column_span == 2 and col:
                row, col = row + 1, 0

            item = MenuItem(
                self,
                text=entry.label,
                icon=entry.icon,
                success_text=entry.success_text,
                on_click=self._make_callback(entry.key),
            )
            item.setObjectName(f"menuItem_{entry.key}")
            item.setProperty("variant", entry.variant)
            self.items[entry.key] = item
            self.grid.addWidget(item, row, col, 1, entry.column_span)

            col += entry.column_span
            if col >= 2:
                row, col = row + 1, 0

    def _make_callback(self, key: str) -> Callable[[], None]:
        def callback():
            self.invoke(key)

        return callback

    def invoke(self, key: str) -> None:
        """Run the handler bound to an entry key."""
        handler = self.handlers.get(key)
        if handler is None:
            raise KeyError(f"No handler bound for menu entry '{key}'")
        handler()
        self.entry_invoked.emit(key)

    def item(self, key: str) -> MenuItem:
        return self.items[key]
