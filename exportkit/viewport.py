# !/usr/bin/python
# coding=utf-8
"""Responsive presentation decision for the export panel.

The mode is taken once from the viewport width when the menu is built and is
never re-evaluated; resizing the host window afterwards leaves the portal,
geometry and backdrop of an existing menu untouched.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional
from qtpy import QtWidgets


MOBILE_BREAKPOINT = 768


class ViewportMode(Enum):
    DESKTOP = "desktop"
    MOBILE = "mobile"

    @classmethod
    def for_width(cls, width: int) -> "ViewportMode":
        return cls.MOBILE if width < MOBILE_BREAKPOINT else cls.DESKTOP


@dataclass(frozen=True)
class Presentation:
    """Geometry and portal settings derived from a ViewportMode.

    Attributes:
        mode (ViewportMode): Desktop or mobile.
        portal (str): "inline" renders inside the host container,
            "overlay" renders as a top-level tool window.
        panel_width (int): Fixed panel width in pixels.
        side (str): Which side of the anchor the panel is placed on.
        side_offset (int): Gap between anchor and panel.
        align_offset (int): Shift along the anchor edge.
        backdrop (bool): Whether a dismissing backdrop is shown while open.
    """

    mode: ViewportMode
    portal: str
    panel_width: int
    side: str
    side_offset: int = 8
    align_offset: int = 0
    backdrop: bool = False

    @classmethod
    def for_mode(cls, mode: ViewportMode) -> "Presentation":
        if mode is ViewportMode.MOBILE:
            return cls(
                mode=mode,
                portal="inline",
                panel_width=316,
                side="bottom",
                align_offset=0,
                backdrop=True,
            )
        return cls(
            mode=mode,
            portal="overlay",
            panel_width=268,
            side="right",
            align_offset=-64,
            backdrop=False,
        )

    @classmethod
    def for_width(cls, width: int) -> "Presentation":
        """Single decision: ``width < 768`` selects the mobile presentation."""
        return cls.for_mode(ViewportMode.for_width(width))

    @property
    def is_mobile(self) -> bool:
        return self.mode is ViewportMode.MOBILE


def resolve_viewport_width(container: Optional[QtWidgets.QWidget] = None) -> int:
    """Return the current viewport width for the given host container.

    Uses the container's top-level window when it has been laid out, otherwise
    the available width of the primary screen.

    Parameters:
        container (QWidget, optional): The host container.

    Returns:
        int: Width in pixels.
    """
    if container is not None:
        window = container.window()
        if window is not None and window.isVisible() and window.width() > 0:
            return window.width()

    screen = QtWidgets.QApplication.primaryScreen()
    if screen is not None:
        return screen.availableGeometry().width()
    return MOBILE_BREAKPOINT
