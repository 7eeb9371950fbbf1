"""Inheritance resolution — the ordered, de-duplicated theme search order.

Depth first over ``Inherits=``: a theme's parents are visited left to right,
each parent's own ancestors before the next sibling. Every name is visited
at most once, so diamonds and cycles terminate.
"""

from __future__ import annotations

from typing import Callable

from iconlookup.core.logger import get_logger
from iconlookup.core.theme import IconTheme

_log = get_logger("inheritance")

ThemeResolver = Callable[[str], IconTheme | None]


def resolution_order(
    theme: IconTheme,
    resolve: ThemeResolver | None = None,
) -> list[IconTheme]:
    """Return *theme* followed by every reachable ancestor, each exactly once.

    *resolve* maps a theme name to an IconTheme (default: IconTheme.from_name).
    Ancestors it cannot resolve are skipped.
    """
    if resolve is None:
        resolve = IconTheme.from_name

    seen: set[str] = {theme.name}
    order: list[IconTheme] = [theme]
    stack: list[str] = list(reversed(theme.inherits))

    while stack:
        name = stack.pop()
        if name in seen:
            continue
        seen.add(name)

        parent = resolve(name)
        if parent is None:
            _log.debug("Skipping inherited theme %s of %s: not installed", name, theme.name)
            continue

        order.append(parent)
        stack.extend(reversed(parent.inherits))

    return order


def resolution_names(theme: IconTheme, resolve: ThemeResolver | None = None) -> list[str]:
    """Names of resolution_order(theme)."""
    return [t.name for t in resolution_order(theme, resolve)]
