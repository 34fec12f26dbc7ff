# !/usr/bin/python
# coding=utf-8
from typing import Optional
from qtpy import QtWidgets, QtCore

# From this package:
from exportkit.widgets.mixins.attributes import AttributesMixin


class Divider(QtWidgets.QFrame, AttributesMixin):
    """A thin horizontal rule placed below the export entry in the host sidebar."""

    def __init__(self, parent: Optional[QtWidgets.QWidget] = None, **kwargs):
        super().__init__(parent)

        self.setProperty("class", "divider")
        self.setFrameShape(QtWidgets.QFrame.HLine)
        self.setFrameShadow(QtWidgets.QFrame.Plain)
        self.setFixedHeight(9)
        self.setLineWidth(1)
        self.setSizePolicy(QtWidgets.QSizePolicy.Expanding, QtWidgets.QSizePolicy.Fixed)

        # Purely visual
        self.setAttribute(QtCore.Qt.WA_TransparentForMouseEvents, True)
        self.setFocusPolicy(QtCore.Qt.NoFocus)

        self.set_attributes(self, **kwargs)
