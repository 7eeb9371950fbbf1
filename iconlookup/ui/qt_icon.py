"""QIcon adapter over the icon lookup chain.

Qt only receives the resolved file path; decoding is left to Qt when the
icon is painted.
"""

from __future__ import annotations

from PyQt6.QtGui import QIcon

from iconlookup.core.current_theme import current
from iconlookup.core.lookup import find_icon
from iconlookup.core.theme import IconTheme


def theme_icon(name: str, size: int | None = None, theme: IconTheme | None = None) -> QIcon:
    """Resolve *name* and wrap it in a QIcon. Returns a null QIcon when not found."""
    if theme is None:
        theme = current()
    path = find_icon(theme, name, size)
    if path is None:
        return QIcon()
    return QIcon(str(path))
