# !/usr/bin/python
# coding=utf-8
"""EXPORTKIT - Hover export menu and toggle widgets for Qt/PySide applications.

A small widget kit that embeds a floating export panel into a host window:
- Hover-intent disclosure state machine with a cancellable close delay
- Desktop/mobile presentation chosen once from the viewport width
- Action grid bound to external export collaborators
- Controlled toggle switch

Example:
    Embedding the menu in a sidebar::

        from exportkit import ExportMenu, ExportCollaborators

        menu = ExportMenu(
            container=sidebar,
            collaborators=ExportCollaborators(export_to_markdown=my_markdown),
        )
        sidebar.layout().addWidget(menu)

Key Modules:
    disclosure: Open/close state machine with hover-intent delay
    viewport: Responsive presentation decision
    providers: Format and metadata selection providers
    collaborators: Host page and export routine boundaries
    widgets: ExportMenu, ActionGrid, MenuItem, Toggle and dialogs

Attributes:
    __version__: Current package version string.
"""
from pythontk.core_utils.module_resolver import bootstrap_package

__package__ = "exportkit"
__version__ = "0.3.1"


DEFAULT_INCLUDE = {
    "collaborators": ["ExportCollaborators", "HostPage"],
    "disclosure": ["DisclosurePhase", "DisclosureState", "DisclosureStateMachine"],
    "events": "EventForwardFilter",
    "providers": ["FormatProvider", "MetaDataProvider"],
    "viewport": ["ViewportMode", "Presentation", "resolve_viewport_width"],
    # Widgets
    "widgets.actionGrid": ["ActionGrid", "MenuEntry", "MENU_ENTRIES"],
    "widgets.dialogs": ["ChildDialog", "SettingDialog", "ExportAllDialog"],
    "widgets.divider": "Divider",
    "widgets.exportMenu": ["ExportMenu", "Backdrop"],
    "widgets.menuItem": "MenuItem",
    "widgets.toggle": "Toggle",
    # Widget mixins
    "widgets.mixins.attributes": "AttributesMixin",
}


bootstrap_package(globals(), include=DEFAULT_INCLUDE)
