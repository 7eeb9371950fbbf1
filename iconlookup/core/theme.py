"""IconTheme value type and name-based construction."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from iconlookup.core import locator, theme_index
from iconlookup.core.theme_index import ThemeDirectory, ThemeMetadata


@dataclass(frozen=True)
class IconTheme:
    """An installed icon theme: its name, canonical root and parsed index.theme."""
    name: str
    path: Path
    metadata: ThemeMetadata = field(default_factory=ThemeMetadata, compare=False)

    @classmethod
    def from_name(
        cls,
        name: str,
        data_home: Path | None = None,
        data_dirs: list[Path] | None = None,
    ) -> IconTheme | None:
        """Locate and load a theme, or return None if it is not installed."""
        root = locator.locate(name, data_home, data_dirs)
        if root is None:
            return None
        return cls(name=name, path=root, metadata=theme_index.load(root))

    @property
    def inherits(self) -> tuple[str, ...]:
        return self.metadata.inherits

    @property
    def directories(self) -> tuple[ThemeDirectory, ...]:
        return self.metadata.directories

    @property
    def default_size(self) -> int | None:
        return self.metadata.default_size

    def inheritance_stack(self) -> list[IconTheme]:
        """This theme followed by its ancestors in lookup order."""
        from iconlookup.core.inheritance import resolution_order

        return resolution_order(self)

    def icon_dirs(self, size: int, scale: int = 1) -> list[Path]:
        """Directories of this theme that serve (size, scale), overlays first."""
        from iconlookup.core.matcher import directories_for

        return directories_for(self, size, scale)

    def get(self, icon_name: str) -> Path | None:
        """Find *icon_name* at the theme's default size."""
        from iconlookup.core.lookup import find_icon

        return find_icon(self, icon_name)

    def get_with_size(self, icon_name: str, size: int) -> Path | None:
        """Find *icon_name* at an explicit pixel size."""
        from iconlookup.core.lookup import find_icon

        return find_icon(self, icon_name, size)


def theme_by_name(name: str) -> IconTheme | None:
    """Return the installed theme called *name*, or None."""
    return IconTheme.from_name(name)
