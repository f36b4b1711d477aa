"""
Canopy CLI: render tree documents and directory trees in the terminal.

- render: draw a YAML tree document
- files: draw the tree of a directory
- enumerators: list the enumerator and indenter names documents can use
"""

from __future__ import annotations

from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from canopy.cli.load_helpers import load_or_exit
from canopy.config import Settings, configure
from canopy.core import registry
from canopy.core.style import Style
from canopy.core.tree.enumerators import rounded_enumerator
from canopy.core.tree.models import Tree
from canopy.io.filesystem import tree_from_directory
from canopy.utils.logging import configure_logging

app = typer.Typer(help="Canopy CLI: render trees and lists as aligned terminal text.")
console = Console(soft_wrap=True)

COLOR_SYSTEM_HELP = "ANSI color system: standard, 256, truecolor or windows"


def _apply_settings(color_system: Optional[str], no_color: bool) -> None:
    if no_color:
        configure(Settings(color_system=None))
        return
    if color_system is None:
        configure()
        return
    try:
        configure(Settings(color_system=color_system))
    except ValidationError:
        console.print(f"[red]Unknown color system[/red]: {escape(color_system)}")
        raise typer.Exit(code=2)


def _print_tree(tree: Tree) -> None:
    rendered = tree.render()
    if rendered:
        console.print(Text.from_ansi(rendered))


@app.command()
def render(
    path: str = typer.Argument(..., help="YAML tree document"),
    enumerator: Optional[str] = typer.Option(None, "--enumerator", "-e", help="Override the root enumerator"),
    color_system: Optional[str] = typer.Option(None, "--color-system", help=COLOR_SYSTEM_HELP),
    no_color: bool = typer.Option(False, "--no-color", help="Emit plain text"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
    verbose_load: bool = typer.Option(False, "--verbose-load", help="Display full validation trace on loader errors"),
) -> None:
    """Render a YAML tree document."""
    configure_logging(verbose)
    _apply_settings(color_system, no_color)

    tree = load_or_exit(path, console=console, verbose_errors=verbose_load)

    if enumerator is not None:
        try:
            tree.enumerator(registry.enumerators.get(enumerator))
        except KeyError:
            known = ", ".join(registry.enumerators.names())
            console.print(f"[red]Unknown enumerator[/red]: {escape(enumerator)} (known: {known})")
            raise typer.Exit(code=2)

    _print_tree(tree)


@app.command()
def files(
    path: str = typer.Argument(".", help="Directory to draw"),
    show_all: bool = typer.Option(False, "--all", "-a", help="Include dot files and directories"),
    rounded: bool = typer.Option(False, "--rounded", help="Use rounded corners"),
    color_system: Optional[str] = typer.Option(None, "--color-system", help=COLOR_SYSTEM_HELP),
    no_color: bool = typer.Option(False, "--no-color", help="Emit plain text"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
) -> None:
    """Draw the tree of a directory."""
    configure_logging(verbose)
    _apply_settings(color_system, no_color)

    try:
        tree = tree_from_directory(path, show_hidden=show_all)
    except OSError as exc:
        console.print(f"[red]Cannot read directory[/red]: {escape(str(exc))}")
        raise typer.Exit(code=1)

    enumerator_style = Style().foreground("240").padding_right(1)
    item_style = Style().foreground("99").bold()
    tree.enumerator_style(enumerator_style).root_style(item_style).item_style(item_style)
    if rounded:
        tree.enumerator(rounded_enumerator)

    _print_tree(tree)


@app.command()
def enumerators() -> None:
    """List the enumerator and indenter names usable in tree documents."""
    table = Table(title="Registered names", show_header=True, header_style="bold blue")
    table.add_column("Kind", style="cyan")
    table.add_column("Name", style="green")

    for name in registry.enumerators.names():
        table.add_row("enumerator", name)
    for name in registry.indenters.names():
        table.add_row("indenter", name)

    console.print(table)


__all__ = ["app"]
