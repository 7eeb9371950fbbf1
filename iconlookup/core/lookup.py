"""Icon lookup chain.

Resolution order:
  1. Absolute paths are returned as-is when the file exists
  2. The theme's own directories for the requested size and scale
  3. Each inherited theme, in resolution order
  4. Legacy pixmap directories ({data dir}/pixmaps)

Within a directory SVG beats PNG, which beats XPM.
"""

from __future__ import annotations

from pathlib import Path

from iconlookup.core import config
from iconlookup.core.inheritance import resolution_order
from iconlookup.core.logger import get_logger
from iconlookup.core.matcher import directories_for
from iconlookup.core.theme import IconTheme

_log = get_logger("lookup")


def _probe(directory: Path, icon_name: str) -> Path | None:
    for ext in config.ICON_EXTENSIONS:
        candidate = directory / f"{icon_name}.{ext}"
        if candidate.is_file():
            return candidate
    return None


def find_pixmap(icon_name: str, base_dirs: list[Path] | None = None) -> Path | None:
    """Look for *icon_name* in the flat, unscaled pixmap directories."""
    if base_dirs is None:
        base_dirs = config.base_directories()

    for base in base_dirs:
        pixmaps = Path(base) / "pixmaps"
        if not pixmaps.is_dir():
            continue
        found = _probe(pixmaps, icon_name)
        if found:
            return found
    return None


def find_icon(
    theme: IconTheme,
    icon_name: str,
    size: int | None = None,
    scale: int = 1,
) -> Path | None:
    """Resolve *icon_name* through *theme*, its ancestors and the pixmap tier."""
    if not icon_name:
        return None

    if icon_name.startswith("/"):
        path = Path(icon_name)
        return path if path.is_file() else None

    if size is None:
        size = theme.default_size if theme.default_size is not None else config.DEFAULT_ICON_SIZE

    for t in resolution_order(theme):
        for directory in directories_for(t, size, scale):
            found = _probe(directory, icon_name)
            if found:
                return found

    found = find_pixmap(icon_name)
    if found:
        _log.debug("Icon %s resolved from pixmaps: %s", icon_name, found)
        return found

    _log.debug("Icon %s not found (theme %s, size %d@%d)", icon_name, theme.name, size, scale)
    return None
