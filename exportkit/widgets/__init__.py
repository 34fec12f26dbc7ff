# !/usr/bin/python
# coding=utf-8
"""Lazy exports for EXPORTKIT widgets with explicit include maps."""

from pythontk.core_utils.module_resolver import bootstrap_package


DEFAULT_INCLUDE = {
    "actionGrid": "*",
    "dialogs": "*",
    "divider": "*",
    "exportMenu": "*",
    "menuItem": "*",
    "toggle": "*",
    # Mixins subpackage (re-exposed here for convenience)
    "mixins.attributes": "*",
}


bootstrap_package(globals(), include=DEFAULT_INCLUDE)
