# !/usr/bin/python
# coding=utf-8
from qtpy import QtCore


class AttributesMixin:
    """Sets attributes on Qt widgets from keyword arguments.

    Each keyword is routed to one of:
    - a signal connection, when the name is a signal of the widget
    - a Qt.WidgetAttribute, when the name is one (ie. WA_Hover=True)
    - a method call, when the name is a callable (ie. setObjectName="menu")
    - a custom attribute handled by `_set_custom_attribute`

    Example:
    ```
    class MyWidget(QtWidgets.QWidget, AttributesMixin):
        def __init__(self, **kwargs):
            super().__init__()
            self.set_attributes(**kwargs)

    MyWidget(setObjectName="w", set_fixed_size=(120, 24), clicked=on_click)
    ```
    """

    def set_attributes(self, *objects, **attributes):
        """Apply the given attributes to each object (defaults to self)."""
        if not attributes:
            return

        if not objects:
            objects = (self,)

        for obj in objects:
            for attr, value in attributes.items():
                if self._is_signal(obj, attr):
                    self._connect_signal(obj, attr, value)
                else:
                    self._set_attribute_or_call_method(obj, attr, value)

    @staticmethod
    def _is_signal(obj, attr_name):
        """Check if an attribute is a bound or unbound signal."""
        attr = getattr(obj, attr_name, None)
        if isinstance(attr, QtCore.Signal):
            return True
        return hasattr(attr, "connect") and hasattr(attr, "emit")

    @staticmethod
    def _connect_signal(obj, signal_name, callback):
        """Connect a signal to a callback, or to each callback of a list."""
        signal = getattr(obj, signal_name)
        callbacks = callback if isinstance(callback, (list, tuple)) else (callback,)
        for cb in callbacks:
            signal.connect(cb)

    def _set_attribute_or_call_method(self, obj, attr, value):
        """Set a Qt widget attribute, call a setter, or fall back to a custom attribute."""
        if attr.startswith("WA_") and hasattr(QtCore.Qt, attr):
            obj.setAttribute(getattr(QtCore.Qt, attr), value)
            return

        method = getattr(obj, attr, None)
        if callable(method):
            method(value)
        else:
            self._set_custom_attribute(obj, attr, value)

    def _set_custom_attribute(self, w, attr, value):
        """Attributes that are not setters or signals are handled here.

        Parameters:
            w (obj): The widget to set the attribute on.
            attr (str): Custom keyword attribute.
            value: The value corresponding to the given attr.

        attributes:
            set_size (tuple): Resize to (width, height).
            set_fixed_size (tuple): Fix the size to (width, height).
            set_fixed_width (int): Fix the width.
            set_fixed_height (int): Fix the height.
            set_property (tuple): Set a dynamic property given as (name, value).
        """
        if attr == "set_size":
            x, y = value
            w.resize(QtCore.QSize(x, y))

        elif attr == "set_fixed_size":
            x, y = value
            w.setFixedSize(QtCore.QSize(x, y))

        elif attr == "set_fixed_width":
            w.setFixedWidth(value)

        elif attr == "set_fixed_height":
            w.setFixedHeight(value)

        elif attr == "set_property":
            name, prop = value
            w.setProperty(name, prop)

        # Fallback: directly set any custom attribute
        else:
            setattr(w, attr, value)
