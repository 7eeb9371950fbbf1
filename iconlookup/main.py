"""Command line entry point for iconlookup."""

from __future__ import annotations

import typer

from iconlookup.core.current_theme import current
from iconlookup.core.desktop_parser import get_all_desktop_entries
from iconlookup.core.errors import FallbackThemeMissingError
from iconlookup.core.inheritance import resolution_names
from iconlookup.core.logger import get_log_path, setup_logging
from iconlookup.core.lookup import find_icon
from iconlookup.core.theme import IconTheme, theme_by_name

app = typer.Typer(help="Resolve freedesktop icon names to files.", no_args_is_help=True)


def _theme_or_exit(name: str | None) -> IconTheme:
    if name is None:
        try:
            return current()
        except FallbackThemeMissingError as exc:
            typer.echo(str(exc), err=True)
            raise typer.Exit(code=2)

    theme = theme_by_name(name)
    if theme is None:
        typer.echo(f"Icon theme {name!r} is not installed", err=True)
        raise typer.Exit(code=1)
    return theme


@app.callback()
def cli(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log lookup details to stderr"),
):
    setup_logging(verbose=verbose)
    if verbose:
        typer.echo(f"Logging to {get_log_path()}", err=True)


@app.command()
def lookup(
    name: str = typer.Argument(..., help="Icon name, e.g. firefox"),
    size: int | None = typer.Option(None, "--size", "-s", help="Pixel size (default: theme default or 48)"),
    scale: int = typer.Option(1, "--scale", help="HiDPI scale factor"),
    theme: str | None = typer.Option(None, "--theme", "-t", help="Theme to search instead of the current one"),
):
    """Print the file that provides an icon."""
    icon_theme = _theme_or_exit(theme)
    path = find_icon(icon_theme, name, size, scale)
    if path is None:
        typer.echo("Not found")
        raise typer.Exit(code=1)
    typer.echo(str(path))


@app.command("theme")
def theme_info(
    name: str | None = typer.Argument(None, help="Theme name (default: current theme)"),
):
    """Show where a theme lives and what it inherits."""
    icon_theme = _theme_or_exit(name)
    typer.echo(f"--- {icon_theme.name} ---")
    typer.echo(f"Path: {icon_theme.path}")
    default_size = icon_theme.default_size
    typer.echo(f"Default size: {default_size if default_size is not None else 'unset'}")
    for parent in icon_theme.inherits:
        typer.echo(f"Inherits: {parent}")
    typer.echo("Search order: " + " -> ".join(resolution_names(icon_theme)))


@app.command()
def apps(
    show_all: bool = typer.Option(False, "--all", "-a", help="Include hidden launchers"),
):
    """List installed applications and the icon each one resolves to."""
    icon_theme = _theme_or_exit(None)
    for entry in get_all_desktop_entries().values():
        if not show_all and not entry.should_show():
            continue
        typer.echo(entry.name)
        if entry.icon:
            typer.echo(entry.icon)
            path = find_icon(icon_theme, entry.icon)
            typer.echo(str(path) if path else "Not found")
        typer.echo("")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
