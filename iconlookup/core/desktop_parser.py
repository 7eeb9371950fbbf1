""".desktop file parser — extracts launcher name, icon and visibility rules."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from iconlookup.core import config
from iconlookup.core.logger import get_logger

_log = get_logger("desktop_parser")


def applications_dirs() -> list[Path]:
    """Launcher directories, highest priority (data home) first."""
    return [d / "applications" for d in [config.data_home(), *config.data_dirs()]]


def current_desktops() -> list[str]:
    """Desktop names from $XDG_CURRENT_DESKTOP."""
    return [d for d in os.environ.get("XDG_CURRENT_DESKTOP", "").split(":") if d]


@dataclass
class DesktopEntry:
    """Parsed fields from a .desktop file."""
    file_path: str = ""
    name: str = ""
    icon: str = ""
    no_display: bool = False
    hidden: bool = False
    only_show_in: list[str] = field(default_factory=list)
    not_show_in: list[str] = field(default_factory=list)
    type: str = "Application"

    @property
    def id(self) -> str:
        return Path(self.file_path).stem

    def should_show(self, desktops: list[str] | None = None) -> bool:
        """Whether a launcher menu for *desktops* should list this entry."""
        if self.type != "Application" or self.no_display or self.hidden:
            return False
        if desktops is None:
            desktops = current_desktops()
        if self.only_show_in and not any(d in self.only_show_in for d in desktops):
            return False
        if any(d in self.not_show_in for d in desktops):
            return False
        return True


def _split_list(value: str) -> list[str]:
    return [v for v in value.split(";") if v]


def parse_desktop_file(path: str | Path) -> DesktopEntry | None:
    """Parse a single .desktop file and return a DesktopEntry, or None on failure."""
    entry = DesktopEntry(file_path=str(path))
    in_desktop_entry = False
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            for raw_line in f:
                line = raw_line.strip()
                if line == "[Desktop Entry]":
                    in_desktop_entry = True
                    continue
                if line.startswith("[") and line.endswith("]"):
                    if in_desktop_entry:
                        break
                    continue
                if not in_desktop_entry or "=" not in line or line.startswith("#"):
                    continue

                key, _, value = line.partition("=")
                key = key.strip()
                value = value.strip()

                if key == "Name":
                    entry.name = value
                elif key == "Icon":
                    entry.icon = value
                elif key == "NoDisplay":
                    entry.no_display = value.lower() == "true"
                elif key == "Hidden":
                    entry.hidden = value.lower() == "true"
                elif key == "OnlyShowIn":
                    entry.only_show_in = _split_list(value)
                elif key == "NotShowIn":
                    entry.not_show_in = _split_list(value)
                elif key == "Type":
                    entry.type = value
    except OSError as exc:
        _log.debug("Cannot read %s: %s", path, exc)
        return None

    if not entry.name:
        return None
    return entry


def get_all_desktop_entries(dirs: list[Path] | None = None) -> dict[str, DesktopEntry]:
    """Return a dict mapping desktop file id -> DesktopEntry.

    When the same id exists in several directories the earlier directory wins.
    """
    entries: dict[str, DesktopEntry] = {}
    for d in dirs if dirs is not None else applications_dirs():
        if not d.is_dir():
            continue
        for f in sorted(d.iterdir()):
            if f.suffix != ".desktop" or f.stem in entries:
                continue
            entry = parse_desktop_file(f)
            if entry:
                entries[f.stem] = entry
    return entries
