"""Exceptions raised by iconlookup.

Missing themes and icons are ordinary results (``None``), not errors. The
only failure that propagates is a missing fallback theme.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


class IconLookupError(Exception):
    """Base class for iconlookup errors."""


@dataclass
class FallbackThemeMissingError(IconLookupError):
    """The required fallback theme is not installed in any data directory."""

    theme_name: str
    searched: list[Path] = field(default_factory=list)

    def __str__(self) -> str:
        msg = (
            f"The {self.theme_name!r} icon theme is not present. This is a "
            "required fallback theme and must be installed."
        )
        if self.searched:
            msg += "\nSearched: " + ", ".join(str(p) for p in self.searched)
        return msg
