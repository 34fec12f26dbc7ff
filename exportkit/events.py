# !/usr/bin/python
# coding=utf-8
"""Event forwarding for hover regions.

Classes:
    EventForwardFilter: Event filter that forwards selected event types of the
        widgets it is installed on to named handler methods of another object.

Example:
    Forwarding hover events of a trigger button::

        class Handler:
            def trigger_enterEvent(self, widget, event):
                print("entered", widget.objectName())

        filter = EventForwardFilter(
            forward_events_to=Handler(),
            event_name_prefix="trigger_",
            event_types={"Enter", "Leave"},
        )
        filter.install(button)
"""
import weakref
from typing import Callable, Dict, Iterable, Optional, Set, Tuple, Union
from qtpy import QtCore
import pythontk as ptk


class EventForwardFilter(QtCore.QObject, ptk.LoggingMixin):
    """Forwards events to ``<prefix><eventName>Event(widget, event)`` handlers.

    Handlers are resolved lazily and cached per event type. A handler's truthy
    return value consumes the event.

    Parameters:
        parent (QObject): Optional parent object.
        forward_events_to (object): Object that defines the handler methods.
        event_name_prefix (str): Prefix of handler method names. 'panel_' -> 'panel_leaveEvent'.
        event_types (set[str | int]): Event types to watch, as QEvent.Type values or names.
        log_level (int, str): Logging level.
    """

    def __init__(
        self,
        parent: Optional[QtCore.QObject] = None,
        forward_events_to: object = None,
        event_name_prefix: str = "",
        event_types: Optional[Set[Union[str, int]]] = None,
        log_level: Union[int, str] = "WARNING",
    ):
        super().__init__(parent)
        self.logger.setLevel(log_level)

        self.forward_events_to = forward_events_to or self
        self.event_name_prefix = event_name_prefix
        self.event_types: Set[int] = {
            self._normalize_event_type(e) for e in (event_types or set())
        }
        self._handler_cache: Dict[Tuple[int, object], Optional[Callable]] = {}
        self._installed: "weakref.WeakSet[QtCore.QObject]" = weakref.WeakSet()

    def install(self, widgets: Union[QtCore.QObject, Iterable[QtCore.QObject]]):
        """Install this filter on one or more widgets."""
        for w in ptk.make_iterable(widgets):
            w.installEventFilter(self)
            self._installed.add(w)

    def uninstall(self, widgets: Union[QtCore.QObject, Iterable[QtCore.QObject]]):
        """Remove this filter from one or more widgets."""
        for w in ptk.make_iterable(widgets):
            try:
                w.removeEventFilter(self)
            except RuntimeError:
                pass
            self._installed.discard(w)

    def is_installed(self, widget: QtCore.QObject) -> bool:
        return widget in self._installed

    def eventFilter(self, widget: QtCore.QObject, event: QtCore.QEvent) -> bool:
        etype = event.type()
        if etype not in self.event_types or widget not in self._installed:
            return False

        key = (id(self.forward_events_to), etype)
        if key not in self._handler_cache:
            name = f"{self.event_name_prefix}{self._event_name(etype)}"
            self._handler_cache[key] = getattr(self.forward_events_to, name, None)
            self.logger.debug(f"[eventFilter] Resolved handler: {name}")

        handler = self._handler_cache[key]
        if handler is None:
            return False
        try:
            return bool(handler(widget, event))
        except RuntimeError:  # widget deleted mid-dispatch
            return False

    @staticmethod
    def _normalize_event_type(etype: Union[str, int]) -> int:
        if isinstance(etype, str):
            try:
                return getattr(QtCore.QEvent.Type, etype)
            except AttributeError:
                raise ValueError(f"Invalid QEvent type string: '{etype}'")
        return etype

    @staticmethod
    def _event_name(etype) -> str:
        """'MouseButtonPress' -> 'mouseButtonPressEvent'."""
        try:
            name = QtCore.QEvent.Type(etype).name
        except (AttributeError, ValueError):
            name = f"Type{int(etype)}"
        if isinstance(name, bytes):
            name = name.decode()
        return name[0].lower() + name[1:] + "Event"
