"""Pytest fixtures: throwaway XDG directory trees for icon theme tests."""

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from iconlookup.core import current_theme


@pytest.fixture(autouse=True)
def fresh_current_theme(monkeypatch):
    """Every test starts without a memoized current theme."""
    monkeypatch.setattr(current_theme, "_CURRENT", None)


@pytest.fixture
def xdg(tmp_path, monkeypatch):
    """Point HOME and the XDG variables at an empty tree under tmp_path."""
    home = tmp_path / "home"
    data_home = home / ".local" / "share"
    config_home = home / ".config"
    usr_share = tmp_path / "usr" / "share"
    local_share = tmp_path / "usr" / "local" / "share"
    for d in (data_home, config_home, usr_share, local_share):
        d.mkdir(parents=True)

    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_DATA_HOME", str(data_home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.setenv("XDG_DATA_DIRS", f"{usr_share}:{local_share}")
    monkeypatch.delenv("XDG_CURRENT_DESKTOP", raising=False)

    return SimpleNamespace(
        home=home,
        data_home=data_home,
        config_home=config_home,
        usr_share=usr_share,
        local_share=local_share,
    )


def _write_index(root: Path, inherits, directories, default_size) -> None:
    lines = ["[Icon Theme]", f"Name={root.name}"]
    if inherits:
        lines.append("Inherits=" + ",".join(inherits))
    if directories:
        lines.append("Directories=" + ",".join(directories))
    if default_size is not None:
        lines.append(f"DesktopDefault={default_size}")
    lines.append("")
    for name, (size, scale) in (directories or {}).items():
        lines.append(f"[{name}]")
        lines.append(f"Size={size}")
        if scale is not None:
            lines.append(f"Scale={scale}")
        lines.append("Type=Fixed")
        lines.append("")
    root.mkdir(parents=True, exist_ok=True)
    (root / "index.theme").write_text("\n".join(lines))


@pytest.fixture
def make_theme():
    """Create ``<base>/icons/<name>/index.theme`` and return the theme root.

    *directories* maps directory name -> (size, scale); scale None omits the key.
    """
    def _make(base: Path, name: str, inherits=None, directories=None, default_size=None) -> Path:
        root = base / "icons" / name
        _write_index(root, inherits, directories, default_size)
        return root

    return _make


@pytest.fixture
def touch():
    """Create an empty file (and its parents) and return its path."""
    def _touch(path: Path) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"")
        return path

    return _touch


@pytest.fixture
def hicolor(xdg, make_theme):
    """A minimal hicolor theme in the first system data directory."""
    return make_theme(
        xdg.usr_share,
        "hicolor",
        directories={
            "48x48/apps": (48, None),
            "32x32/apps": (32, None),
            "scalable/apps": (64, None),
        },
    )
