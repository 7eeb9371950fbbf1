"""Detect the desktop's active icon theme from GTK settings files.

The result is computed once per process and then reused; changes to the
settings files after the first call are not picked up.
"""

from __future__ import annotations

import configparser
import threading
from pathlib import Path

from iconlookup.core import config, locator
from iconlookup.core.errors import FallbackThemeMissingError
from iconlookup.core.logger import get_logger
from iconlookup.core.theme import IconTheme, theme_by_name

_log = get_logger("current_theme")

SETTINGS_SECTION = "Settings"
ICON_THEME_KEY = "gtk-icon-theme-name"

_CURRENT: IconTheme | None = None
_LOCK = threading.Lock()


def settings_paths() -> list[Path]:
    """GTK settings files to probe, highest priority first."""
    config_dir = config.config_home()
    home = config.home_dir()
    return [
        config_dir / "gtk-4.0" / "settings.ini",
        config_dir / "gtk-3.0" / "settings.ini",
        home / "gtk-4.0" / "settings.ini",
        home / "gtk-3.0" / "settings.ini",
    ]


def theme_name_from_settings(paths: list[Path] | None = None) -> str | None:
    """Return the icon theme named by the first settings file carrying the key.

    The first file with the key decides, even when its value is empty; an
    empty value returns None so the caller falls back.
    """
    for path in paths if paths is not None else settings_paths():
        if not path.is_file():
            continue
        parser = configparser.ConfigParser(interpolation=None, strict=False)
        try:
            with open(path, "r", encoding="utf-8-sig", errors="replace") as f:
                parser.read_file(f)
        except (configparser.Error, OSError) as exc:
            _log.debug("Skipping unreadable settings file %s: %s", path, exc)
            continue

        if not parser.has_option(SETTINGS_SECTION, ICON_THEME_KEY):
            continue
        name = parser.get(SETTINGS_SECTION, ICON_THEME_KEY).strip()
        _log.debug("Icon theme %r set in %s", name, path)
        return name or None
    return None


def _resolve() -> IconTheme:
    name = theme_name_from_settings()
    if name:
        theme = theme_by_name(name)
        if theme is not None:
            return theme
        _log.debug("Configured icon theme %s is not installed", name)

    fallback = theme_by_name(config.FALLBACK_THEME)
    if fallback is None:
        raise FallbackThemeMissingError(
            config.FALLBACK_THEME,
            locator.candidate_roots(config.FALLBACK_THEME),
        )
    return fallback


def current() -> IconTheme:
    """Return the active icon theme, resolving it on first use."""
    global _CURRENT
    if _CURRENT is None:
        with _LOCK:
            if _CURRENT is None:
                _CURRENT = _resolve()
    return _CURRENT
