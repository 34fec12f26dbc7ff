# !/usr/bin/python
# coding=utf-8
"""Boundaries to the host page and to the export routines.

Nothing here knows how conversations are turned into files; the host supplies
the callables and the export menu only passes the resolved parameters along.
"""
from dataclasses import dataclass, fields
from typing import Callable, Optional


DISABLED_TITLE = (
    "Exporter is relying on the History API.\n"
    "But History feature is disabled by OpenAI temporarily.\n"
    "We all have to wait for them to bring it back."
)


class HostPage:
    """Host page feature flags.

    Parameters:
        is_disabled (callable, optional): Returns True when the export feature
            is unavailable. Queried once per menu mount.
    """

    def __init__(self, is_disabled: Optional[Callable[[], bool]] = None):
        if is_disabled is not None and not callable(is_disabled):
            raise TypeError(
                f"Expected 'is_disabled' to be callable, got {type(is_disabled)}"
            )
        self._is_disabled = is_disabled

    @classmethod
    def from_flag(cls, disabled: bool) -> "HostPage":
        return cls(lambda: bool(disabled))

    def is_export_feature_disabled(self) -> bool:
        if self._is_disabled is None:
            return False
        return bool(self._is_disabled())


@dataclass
class ExportCollaborators:
    """One export routine per format.

    Signatures:
        export_to_text()
        export_to_png(format)
        export_to_markdown(format, meta_list)
        export_to_html(format, meta_list)
        export_to_json(format)
        export_all(format)

    Return values are ignored and nothing is awaited. Exceptions are the
    routine's own business and propagate to the application.
    """

    export_to_text: Optional[Callable] = None
    export_to_png: Optional[Callable] = None
    export_to_markdown: Optional[Callable] = None
    export_to_html: Optional[Callable] = None
    export_to_json: Optional[Callable] = None
    export_all: Optional[Callable] = None

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if value is not None and not callable(value):
                raise TypeError(
                    f"Expected '{f.name}' to be callable, got {type(value)}"
                )

    def get(self, name: str) -> Optional[Callable]:
        """Return the routine registered under ``name``, or None."""
        return getattr(self, name, None)
