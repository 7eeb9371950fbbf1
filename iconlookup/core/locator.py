"""Find the canonical root directory of an installed icon theme.

Search order:
  1. $XDG_DATA_HOME/icons/{name}
  2. {dir}/icons/{name} for each dir of $XDG_DATA_DIRS, in order

The first directory that holds an index.theme is the theme's root.
"""

from __future__ import annotations

from pathlib import Path

from iconlookup.core import config
from iconlookup.core.logger import get_logger

_log = get_logger("locator")


def _valid_name(name: str) -> bool:
    return bool(name) and name not in (".", "..") and "/" not in name


def _is_theme_root(path: Path) -> bool:
    return path.is_dir() and (path / config.INDEX_FILE).is_file()


def candidate_roots(
    theme_name: str,
    data_home: Path | None = None,
    data_dirs: list[Path] | None = None,
) -> list[Path]:
    """Return every directory that could hold the theme, in search order."""
    home = data_home if data_home is not None else config.data_home()
    dirs = data_dirs if data_dirs is not None else config.data_dirs()
    return [Path(d) / "icons" / theme_name for d in [home, *dirs]]


def locate(
    theme_name: str,
    data_home: Path | None = None,
    data_dirs: list[Path] | None = None,
) -> Path | None:
    """Return the canonical root of *theme_name*, or None if it is not installed."""
    if not _valid_name(theme_name):
        return None

    for root in candidate_roots(theme_name, data_home, data_dirs):
        if _is_theme_root(root):
            _log.debug("Theme %s located at %s", theme_name, root)
            return root

    _log.debug("Theme %s not installed", theme_name)
    return None
