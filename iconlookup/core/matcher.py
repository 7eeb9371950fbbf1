"""Directory matching — which directories of a theme serve a (size, scale) request."""

from __future__ import annotations

from pathlib import Path

from iconlookup.core import config
from iconlookup.core.theme import IconTheme


def overlay_root(theme_name: str, data_home: Path | None = None) -> Path:
    """The user's personal overlay root for *theme_name*."""
    home = data_home if data_home is not None else config.data_home()
    return home / "icons" / theme_name


def directories_for(
    theme: IconTheme,
    size: int,
    scale: int = 1,
    data_home: Path | None = None,
) -> list[Path]:
    """Return candidate icon directories for an exact (size, scale) match.

    For each matching declared directory, the user's overlay copy (if present)
    comes before the theme's own directory.
    """
    overlay = overlay_root(theme.name, data_home)
    paths: list[Path] = []

    for entry in theme.directories:
        if entry.size != size or entry.scale != scale:
            continue

        system_dir = theme.path / entry.name
        user_dir = overlay / entry.name
        if user_dir != system_dir and user_dir.is_dir():
            paths.append(user_dir)
        paths.append(system_dir)

    return paths
