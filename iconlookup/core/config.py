"""Environment-derived paths and fixed lookup constants for iconlookup.

XDG values are read at call time so a changed environment is picked up
without re-importing.
"""

from __future__ import annotations

import os
from pathlib import Path

INDEX_FILE = "index.theme"
FALLBACK_THEME = "hicolor"
DEFAULT_ICON_SIZE = 48
ICON_EXTENSIONS = ("svg", "png", "xpm")

DEFAULT_DATA_DIRS = [Path("/usr/local/share"), Path("/usr/share")]


def _env_path(var: str) -> Path | None:
    value = os.environ.get(var, "")
    if not value:
        return None
    path = Path(value)
    # Relative XDG paths are invalid and must be ignored.
    if not path.is_absolute():
        return None
    return path


def home_dir() -> Path:
    """Return $HOME, or the password-database home when it is unset."""
    return _env_path("HOME") or Path.home()


def data_home() -> Path:
    """Return $XDG_DATA_HOME (default ~/.local/share)."""
    return _env_path("XDG_DATA_HOME") or home_dir() / ".local" / "share"


def data_dirs() -> list[Path]:
    """Return the ordered system data directories from $XDG_DATA_DIRS."""
    raw = os.environ.get("XDG_DATA_DIRS", "")
    dirs = [Path(p) for p in raw.split(":") if p and Path(p).is_absolute()]
    return dirs or list(DEFAULT_DATA_DIRS)


def config_home() -> Path:
    """Return $XDG_CONFIG_HOME (default ~/.config)."""
    return _env_path("XDG_CONFIG_HOME") or home_dir() / ".config"


def cache_home() -> Path:
    """Return $XDG_CACHE_HOME (default ~/.cache)."""
    return _env_path("XDG_CACHE_HOME") or home_dir() / ".cache"


def base_directories() -> list[Path]:
    """Existing data directories, system ones first and data home last."""
    return [d for d in data_dirs() + [data_home()] if d.is_dir()]


def cache_dir() -> Path:
    """Directory for the CLI log file."""
    return cache_home() / "iconlookup"
