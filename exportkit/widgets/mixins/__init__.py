# !/usr/bin/python
# coding=utf-8
"""Lazy export facade for mixin helpers used by EXPORTKIT widgets."""

from pythontk.core_utils.module_resolver import bootstrap_package


DEFAULT_INCLUDE = {
    "attributes": "*",
}


bootstrap_package(globals(), include=DEFAULT_INCLUDE)
