# !/usr/bin/python
# coding=utf-8
from functools import partial
from typing import Callable, Dict, Optional, Union
from qtpy import QtWidgets, QtCore
import pythontk as ptk

# From this package:
from exportkit.collaborators import DISABLED_TITLE, ExportCollaborators, HostPage
from exportkit.disclosure import DisclosureStateMachine
from exportkit.events import EventForwardFilter
from exportkit.providers import FormatProvider, MetaDataProvider
from exportkit.viewport import Presentation, ViewportMode, resolve_viewport_width
from exportkit.widgets.actionGrid import ActionGrid, MENU_ENTRIES
from exportkit.widgets.dialogs import ChildDialog, ExportAllDialog, SettingDialog
from exportkit.widgets.divider import Divider
from exportkit.widgets.menuItem import MenuItem
from exportkit.widgets.mixins.attributes import AttributesMixin


PANEL_STYLE = """
QFrame#exportPanel {
    background-color: #202123;
    border-radius: 6px;
}
QFrame#exportPanel QPushButton {
    color: #ececf1;
    text-align: left;
    padding: 8px;
    border-radius: 4px;
}
QFrame#exportPanel QPushButton:hover {
    background-color: #2a2b32;
}
"""


class Backdrop(QtWidgets.QWidget):
    """Translucent layer covering the host container while the mobile panel is open.

    Attributes:
        tapped (QtCore.Signal): Emitted on any mouse press.
    """

    tapped = QtCore.Signal()

    def __init__(self, parent: QtWidgets.QWidget):
        super().__init__(parent)
        self.setObjectName("exportBackdrop")
        self.setAttribute(QtCore.Qt.WA_StyledBackground, True)
        self.setStyleSheet("background-color: rgba(0, 0, 0, 102);")
        self.hide()

    def cover(self) -> None:
        """Resize to the parent's rect and show above its siblings."""
        self.setGeometry(self.parentWidget().rect())
        self.show()
        self.raise_()

    def mousePressEvent(self, event) -> None:
        event.accept()
        self.tapped.emit()


class ExportMenu(QtWidgets.QWidget, AttributesMixin, ptk.LoggingMixin):
    """Sidebar entry that discloses a floating grid of export actions.

    The entry opens on click (or hover on desktop) and closes after the pointer
    has stayed away for the close delay. Its content stays mounted while any
    child dialog opened from it is visible. The desktop/mobile presentation is
    decided once, here, from the viewport width.

    When the host reports the export feature disabled, only a static, disabled
    entry is built and no state machine exists for the lifetime of the widget.

    Attributes:
        mounted (QtCore.Signal): Emitted with True/False as the panel is mounted/unmounted.
    """

    mounted = QtCore.Signal(bool)

    def __init__(
        self,
        container: Optional[QtWidgets.QWidget] = None,
        collaborators: Optional[ExportCollaborators] = None,
        host: Optional[HostPage] = None,
        format_provider: Optional[FormatProvider] = None,
        meta_provider: Optional[MetaDataProvider] = None,
        viewport_width: Optional[int] = None,
        close_delay: Optional[int] = None,
        parent: Optional[QtWidgets.QWidget] = None,
        log_level: Union[int, str] = "WARNING",
        **kwargs,
    ):
        """Build the export entry.

        Parameters:
            container (QWidget, optional): Host container; mount anchor for the mobile panel.
            collaborators (ExportCollaborators, optional): Export routines.
            host (HostPage, optional): Host feature flags. Queried once here.
            format_provider (FormatProvider, optional): Defaults to a new provider owned by the menu.
            meta_provider (MetaDataProvider, optional): Defaults to a new provider owned by the menu.
            viewport_width (int, optional): Overrides the measured viewport width.
            close_delay (int, optional): Hover-intent close delay in ms.
            parent (QWidget, optional): Parent widget.
            log_level (int, str): Logging level.
            **kwargs: Additional attributes to set via set_attributes().
        """
        super().__init__(parent)
        self.logger.setLevel(log_level)

        self.container = container
        self.collaborators = collaborators or ExportCollaborators()
        self.host = host or HostPage()
        self.format_provider = format_provider or FormatProvider(parent=self)
        self.meta_provider = meta_provider or MetaDataProvider(parent=self)

        self.machine: Optional[DisclosureStateMachine] = None
        self.presentation: Optional[Presentation] = None
        self.panel: Optional[QtWidgets.QFrame] = None
        self.action_grid: Optional[ActionGrid] = None
        self.setting_dialog: Optional[SettingDialog] = None
        self.export_all_dialog: Optional[ExportAllDialog] = None
        self.backdrop: Optional[Backdrop] = None
        self._hover_filter: Optional[EventForwardFilter] = None

        layout = QtWidgets.QVBoxLayout(self)
        layout.setContentsMargins(0, 4, 0, 0)
        layout.setSpacing(0)

        self.disabled = self.host.is_export_feature_disabled()
        if self.disabled:
            self.logger.info("Export feature disabled by host; rendering static entry")
            self.trigger = MenuItem(
                self,
                text="Exporter unavailable",
                icon="SP_ArrowRight",
                title=DISABLED_TITLE,
                disabled=True,
            )
        else:
            self._init_interactive(viewport_width, close_delay, log_level)

        self.trigger.setObjectName("exportTrigger")
        layout.addWidget(self.trigger)
        layout.addWidget(Divider(self))

        self.setProperty("class", self.__class__.__name__)
        self.set_attributes(**kwargs)

    def _init_interactive(self, viewport_width, close_delay, log_level) -> None:
        width = (
            viewport_width
            if viewport_width is not None
            else resolve_viewport_width(self.container)
        )
        self.presentation = Presentation.for_width(width)
        self.logger.debug(
            f"[init] viewport width {width}px -> {self.presentation.mode.value}"
        )

        self.machine = DisclosureStateMachine(
            self, close_delay=close_delay, log_level=log_level
        )
        self.machine.force_mount_changed.connect(self._on_force_mount_changed)
        self.machine.open_changed.connect(self._on_open_changed)

        self.trigger = MenuItem(
            self, text="Export", icon="SP_ArrowRight", on_click=self.machine.activate
        )

        # Touch interaction has no hover; the backdrop is the mobile close path.
        if not self.presentation.is_mobile:
            self._hover_filter = EventForwardFilter(
                self,
                forward_events_to=self,
                event_name_prefix="hover_",
                event_types={"Enter", "Leave"},
                log_level=log_level,
            )
            self._hover_filter.install(self.trigger)

    # ------------------------------------------------------------------
    # State passthrough
    # ------------------------------------------------------------------

    @property
    def mode(self) -> Optional[ViewportMode]:
        return self.presentation.mode if self.presentation else None

    @property
    def is_open(self) -> bool:
        return bool(self.machine and self.machine.is_open)

    @property
    def dialog_open(self) -> bool:
        return bool(self.machine and self.machine.dialog_open)

    @property
    def force_mount(self) -> bool:
        return bool(self.machine and self.machine.force_mount)

    @property
    def is_mounted(self) -> bool:
        return self.panel is not None

    # ------------------------------------------------------------------
    # Hover routing (desktop)
    # ------------------------------------------------------------------

    def hover_enterEvent(self, widget, event) -> bool:
        self.machine.pointer_enter(open_panel=widget is self.trigger)
        return False

    def hover_leaveEvent(self, widget, event) -> bool:
        self.machine.pointer_leave()
        return False

    # ------------------------------------------------------------------
    # Mounting
    # ------------------------------------------------------------------

    def _on_force_mount_changed(self, force_mount: bool) -> None:
        if force_mount:
            self._mount_panel()
        else:
            self._unmount_panel()

    def _on_open_changed(self, is_open: bool) -> None:
        if self.backdrop is None:
            return
        if is_open:
            self.backdrop.cover()
            if self.panel is not None:
                self.panel.raise_()
        else:
            self.backdrop.hide()

    def _portal_parent(self) -> QtWidgets.QWidget:
        if self.presentation.is_mobile and self.container is not None:
            return self.container
        return self

    def _mount_panel(self) -> None:
        if self.panel is not None:
            return

        host = self._portal_parent()
        if self.presentation.is_mobile:
            if self.backdrop is None:
                self.backdrop = Backdrop(host)
                self.backdrop.tapped.connect(self.machine.dismiss)
            panel = QtWidgets.QFrame(host)
        else:
            panel = QtWidgets.QFrame(
                host, QtCore.Qt.Tool | QtCore.Qt.FramelessWindowHint
            )
            panel.setAttribute(QtCore.Qt.WA_ShowWithoutActivating, True)

        panel.setObjectName("exportPanel")
        panel.setProperty("mode", self.presentation.mode.value)
        panel.setStyleSheet(PANEL_STYLE)
        panel.setFixedWidth(self.presentation.panel_width)

        layout = QtWidgets.QVBoxLayout(panel)
        layout.setContentsMargins(0, 0, 0, 0)

        self.action_grid = ActionGrid(self._action_handlers(), MENU_ENTRIES, panel)
        layout.addWidget(self.action_grid)

        self.setting_dialog = SettingDialog(
            self.format_provider, self.meta_provider, parent=panel
        )
        self.export_all_dialog = ExportAllDialog(
            self.format_provider, self.collaborators.export_all, parent=panel
        )
        self._bind_dialog(self.setting_dialog, "settings")
        self._bind_dialog(self.export_all_dialog, "export_all")

        if self._hover_filter is not None:
            self._hover_filter.install(panel)

        self.panel = panel
        self._position_panel()
        panel.show()
        if self.backdrop is not None and self.is_open:
            self.backdrop.cover()
        panel.raise_()

        self.logger.debug(f"[mount] Panel mounted ({self.presentation.portal})")
        self.mounted.emit(True)

    def _unmount_panel(self) -> None:
        panel = self.panel
        if panel is None:
            return

        if self._hover_filter is not None:
            self._hover_filter.uninstall(panel)
        if self.backdrop is not None:
            self.backdrop.hide()

        panel.hide()
        panel.deleteLater()
        self.panel = None
        self.action_grid = None
        self.setting_dialog = None
        self.export_all_dialog = None

        self.logger.debug("[unmount] Panel unmounted")
        self.mounted.emit(False)

    def _bind_dialog(self, dialog: ChildDialog, source: str) -> None:
        machine = self.machine

        def report(value: bool) -> None:
            machine.set_dialog_open(value, source=source)

        dialog.open_changed.connect(report)

    def _position_panel(self) -> None:
        panel = self.panel
        p = self.presentation
        panel.adjustSize()

        if p.is_mobile:
            host = panel.parentWidget()
            width = p.panel_width
            if host.width() > 0:
                width = min(p.panel_width, host.width())
            panel.setFixedWidth(width)
            panel.adjustSize()
            panel.move(0, max(0, host.height() - panel.height()))
        else:
            anchor = self.trigger
            pos = anchor.mapToGlobal(
                QtCore.QPoint(anchor.width() + p.side_offset, p.align_offset)
            )
            panel.move(pos)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def _action_handlers(self) -> Dict[str, Callable[[], None]]:
        handlers = {
            "copy_text": self.export_text,
            "screenshot": self.export_png,
            "markdown": self.export_markdown,
            "html": self.export_html,
            "json": self.export_json,
        }
        for entry in MENU_ENTRIES:
            if entry.dialog:
                handlers[entry.key] = partial(self.open_dialog, entry.dialog)
        return handlers

    def open_dialog(self, name: str) -> None:
        """Open a child dialog of the mounted panel by name."""
        dialog = {
            "settings": self.setting_dialog,
            "export_all": self.export_all_dialog,
        }.get(name)
        if dialog is None:
            self.logger.warning(f"[open_dialog] No mounted dialog named '{name}'")
            return
        dialog.set_open(True)

    def _call(self, name: str, *args) -> None:
        routine = self.collaborators.get(name)
        if routine is None:
            self.logger.warning(f"[{name}] No export routine registered")
            return
        self.logger.debug(f"[{name}] Invoking with {args}")
        routine(*args)

    def export_text(self) -> None:
        self._call("export_to_text")

    def export_png(self) -> None:
        self._call("export_to_png", self.format_provider.format)

    def export_markdown(self) -> None:
        self._call(
            "export_to_markdown",
            self.format_provider.format,
            self.meta_provider.resolved_meta_list(),
        )

    def export_html(self) -> None:
        self._call(
            "export_to_html",
            self.format_provider.format,
            self.meta_provider.resolved_meta_list(),
        )

    def export_json(self) -> None:
        self._call("export_to_json", self.format_provider.format)

    # ------------------------------------------------------------------

    def teardown(self) -> None:
        """Stop the close timer and drop the panel (call before discarding the menu)."""
        if self.machine is not None:
            self.machine.shutdown()
        self._unmount_panel()


# -----------------------------------------------------------------------------

if __name__ == "__main__":
    import sys

    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication(sys.argv)

    window = QtWidgets.QWidget()
    window.resize(260, 480)
    sidebar = QtWidgets.QVBoxLayout(window)
    menu = ExportMenu(
        container=window,
        collaborators=ExportCollaborators(
            export_to_text=lambda: print("text"),
            export_to_markdown=lambda fmt, meta: print("markdown", fmt, meta),
        ),
        log_level="DEBUG",
    )
    sidebar.addWidget(menu)
    sidebar.addStretch(1)
    window.show()

    sys.exit(app.exec_())
