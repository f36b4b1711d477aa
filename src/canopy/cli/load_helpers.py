from __future__ import annotations

"""Shared helpers for loading tree documents with CLI-friendly errors."""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from canopy.core.tree.models import Tree
from canopy.io.loaders import LoaderError, load_tree


def load_or_exit(path: str, *, console: Console, verbose_errors: bool = False) -> Tree:
    if not Path(path).exists():
        console.print(f"[red]Path not found:[/red] {escape(path)}")
        raise typer.Exit(code=1)
    try:
        return load_tree(path)
    except LoaderError as err:
        if verbose_errors and err.cause:
            console.print(f"[red]Failed to load data:[/red] {escape(err.message)}\n{escape(str(err.cause))}")
        else:
            console.print(f"[red]Failed to load data:[/red] {escape(str(err))}")
        raise typer.Exit(code=1)


__all__ = ["load_or_exit"]
