"""Freedesktop icon theme lookup.

    >>> from iconlookup import get_icon
    >>> get_icon("firefox")
    PosixPath('/usr/share/icons/hicolor/48x48/apps/firefox.png')
"""

from __future__ import annotations

from pathlib import Path

from iconlookup.core.current_theme import current as current_theme
from iconlookup.core.errors import FallbackThemeMissingError, IconLookupError
from iconlookup.core.theme import IconTheme, theme_by_name

__all__ = [
    "FallbackThemeMissingError",
    "IconLookupError",
    "IconTheme",
    "current_theme",
    "get_icon",
    "get_icon_with_size",
    "theme_by_name",
]


def get_icon(icon_name: str) -> Path | None:
    """Find *icon_name* in the current icon theme."""
    return current_theme().get(icon_name)


def get_icon_with_size(icon_name: str, size: int) -> Path | None:
    """Find *icon_name* at *size* pixels in the current icon theme."""
    return current_theme().get_with_size(icon_name, size)
