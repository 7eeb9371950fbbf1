"""index.theme parser — extracts inheritance, directories and default size.

Any problem reading the descriptor yields an empty ``ThemeMetadata``; leaf
themes without ``Inherits`` or ``DesktopDefault`` are common and valid.
"""

from __future__ import annotations

import configparser
from dataclasses import dataclass, field
from pathlib import Path

from iconlookup.core.config import INDEX_FILE
from iconlookup.core.logger import get_logger

_log = get_logger("theme_index")

THEME_SECTION = "Icon Theme"


@dataclass(frozen=True)
class ThemeDirectory:
    """One entry of ``Directories=`` with its own size bucket."""
    name: str
    size: int = 0
    scale: int = 1


@dataclass(frozen=True)
class ThemeMetadata:
    """Parsed fields from an index.theme file."""
    inherits: tuple[str, ...] = ()
    directories: tuple[ThemeDirectory, ...] = ()
    default_size: int | None = None


def _split_list(value: str) -> tuple[str, ...]:
    return tuple(item.strip() for item in value.split(",") if item.strip())


def _parse_int(value: str | None, default: int | None, minimum: int) -> int | None:
    if value is None:
        return default
    try:
        n = int(value.strip())
    except ValueError:
        return default
    return n if n >= minimum else default


def _read_descriptor(path: Path) -> configparser.ConfigParser | None:
    parser = configparser.ConfigParser(interpolation=None, strict=False)
    parser.optionxform = str  # keys are case-sensitive in index.theme
    try:
        with open(path, "r", encoding="utf-8-sig", errors="replace") as f:
            parser.read_file(f)
    except (configparser.Error, OSError) as exc:
        _log.debug("Unreadable theme descriptor %s: %s", path, exc)
        return None
    return parser


def load(root_path: str | Path) -> ThemeMetadata:
    """Parse ``<root_path>/index.theme`` into a ThemeMetadata."""
    parser = _read_descriptor(Path(root_path) / INDEX_FILE)
    if parser is None or not parser.has_section(THEME_SECTION):
        return ThemeMetadata()

    section = parser[THEME_SECTION]
    inherits = _split_list(section.get("Inherits", ""))

    directories = []
    for name in _split_list(section.get("Directories", "")):
        size = scale = None
        if parser.has_section(name):
            size = parser[name].get("Size")
            scale = parser[name].get("Scale")
        directories.append(
            ThemeDirectory(
                name=name,
                size=_parse_int(size, 0, minimum=0),
                scale=_parse_int(scale, 1, minimum=1),
            )
        )

    default_size = _parse_int(section.get("DesktopDefault"), None, minimum=0)

    return ThemeMetadata(
        inherits=inherits,
        directories=tuple(directories),
        default_size=default_size,
    )
