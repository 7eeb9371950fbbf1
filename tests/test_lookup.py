"""Tests for the icon lookup chain (iconlookup/core/lookup.py)."""

from __future__ import annotations

import pytest

from iconlookup.core.lookup import find_icon, find_pixmap
from iconlookup.core.theme import IconTheme


def _load(name: str) -> IconTheme:
    theme = IconTheme.from_name(name)
    assert theme is not None
    return theme


@pytest.fixture
def custom(xdg, make_theme, hicolor):
    make_theme(xdg.usr_share, "Custom", inherits=["hicolor"], directories={
        "48x48/apps": (48, None),
        "24x24/apps": (24, None),
    })
    return _load("Custom")


# ---------------------------------------------------------------------------
# extension preference
# ---------------------------------------------------------------------------

def test_svg_beats_png_beats_xpm(custom, touch) -> None:
    d = custom.path / "48x48/apps"
    touch(d / "foo.xpm")
    assert custom.get("foo") == d / "foo.xpm"
    touch(d / "foo.png")
    assert custom.get("foo") == d / "foo.png"
    touch(d / "foo.svg")
    assert custom.get("foo") == d / "foo.svg"


def test_other_extensions_are_ignored(custom, touch) -> None:
    touch(custom.path / "48x48/apps" / "foo.jpg")
    assert custom.get("foo") is None


# ---------------------------------------------------------------------------
# size selection
# ---------------------------------------------------------------------------

def test_default_size_is_48(custom, touch) -> None:
    touch(custom.path / "24x24/apps" / "foo.png")
    assert custom.get("foo") is None
    path = touch(custom.path / "48x48/apps" / "foo.png")
    assert custom.get("foo") == path


def test_theme_desktop_default_size_is_used(xdg, make_theme, touch) -> None:
    root = make_theme(xdg.usr_share, "Small", directories={
        "24x24/apps": (24, None),
        "48x48/apps": (48, None),
    }, default_size=24)
    small = touch(root / "24x24/apps" / "foo.png")
    touch(root / "48x48/apps" / "foo.png")

    assert _load("Small").get("foo") == small


def test_explicit_size(custom, touch) -> None:
    path = touch(custom.path / "24x24/apps" / "foo.png")
    touch(custom.path / "48x48/apps" / "foo.png")
    assert custom.get_with_size("foo", 24) == path
    assert custom.get_with_size("foo", 16) is None


def test_scale_is_matched_exactly(xdg, make_theme, touch) -> None:
    root = make_theme(xdg.usr_share, "HiDPI", directories={
        "48x48/apps": (48, 1),
        "48x48@2/apps": (48, 2),
    })
    hidpi = touch(root / "48x48@2/apps" / "foo.png")
    theme = _load("HiDPI")

    assert find_icon(theme, "foo") is None
    assert find_icon(theme, "foo", 48, scale=2) == hidpi


# ---------------------------------------------------------------------------
# inheritance and overlays
# ---------------------------------------------------------------------------

def test_inherited_theme_provides_icon(custom, hicolor, touch) -> None:
    path = touch(hicolor / "48x48/apps" / "foo.png")
    assert custom.get("foo") == path


def test_own_theme_wins_over_parent(custom, hicolor, touch) -> None:
    touch(hicolor / "48x48/apps" / "foo.svg")
    own = touch(custom.path / "48x48/apps" / "foo.png")
    assert custom.get("foo") == own


def test_user_overlay_shadows_system_icon(xdg, custom, touch) -> None:
    touch(custom.path / "48x48/apps" / "foo.svg")
    user = touch(xdg.data_home / "icons" / "Custom" / "48x48/apps" / "foo.png")
    assert custom.get("foo") == user


def test_system_dir_still_probed_when_overlay_lacks_icon(xdg, custom, touch) -> None:
    (xdg.data_home / "icons" / "Custom" / "48x48/apps").mkdir(parents=True)
    system = touch(custom.path / "48x48/apps" / "foo.png")
    assert custom.get("foo") == system


def test_parent_size_follows_starting_theme_default(xdg, make_theme, hicolor, touch) -> None:
    make_theme(xdg.usr_share, "Small", inherits=["hicolor"], default_size=32)
    path = touch(hicolor / "32x32/apps" / "foo.png")
    touch(hicolor / "48x48/apps" / "foo.png")
    assert _load("Small").get("foo") == path


# ---------------------------------------------------------------------------
# pixmap fallback and misses
# ---------------------------------------------------------------------------

def test_pixmap_fallback(xdg, custom, touch) -> None:
    path = touch(xdg.local_share / "pixmaps" / "foo.png")
    assert custom.get("foo") == path


def test_theme_hit_beats_pixmap(xdg, custom, hicolor, touch) -> None:
    touch(xdg.usr_share / "pixmaps" / "foo.svg")
    path = touch(hicolor / "48x48/apps" / "foo.png")
    assert custom.get("foo") == path


def test_pixmap_fallback_ignores_size(xdg, custom, touch) -> None:
    path = touch(xdg.usr_share / "pixmaps" / "foo.xpm")
    assert custom.get_with_size("foo", 256) == path


def test_find_pixmap_respects_directory_order(xdg, touch) -> None:
    first = touch(xdg.usr_share / "pixmaps" / "foo.png")
    touch(xdg.local_share / "pixmaps" / "foo.svg")
    assert find_pixmap("foo") == first
    assert find_pixmap("foo", [xdg.local_share]) == xdg.local_share / "pixmaps" / "foo.svg"


def test_not_found_is_none(custom) -> None:
    assert custom.get("does-not-exist") is None
    assert custom.get("") is None


def test_absolute_icon_path(custom, tmp_path, touch) -> None:
    path = touch(tmp_path / "opt" / "app" / "icon.png")
    assert custom.get(str(path)) == path
    assert custom.get(str(tmp_path / "opt" / "missing.png")) is None


def test_custom_inherits_hicolor_scenario(xdg, make_theme, hicolor, touch) -> None:
    make_theme(xdg.usr_share, "Custom", inherits=["hicolor"], directories={"48x48/apps": (48, None)})
    expected = touch(xdg.usr_share / "icons" / "hicolor" / "48x48" / "apps" / "foo.png")

    assert _load("Custom").get("foo") == expected


def test_desktop_default_zero_is_kept(xdg, make_theme, touch) -> None:
    root = make_theme(xdg.usr_share, "Zero", directories={
        "scalable/apps": (0, None),
        "48x48/apps": (48, None),
    }, default_size=0)
    zero = touch(root / "scalable/apps" / "foo.png")
    touch(root / "48x48/apps" / "foo.png")

    assert _load("Zero").get("foo") == zero
