"""Build trees from directory listings."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from canopy.core.tree.models import Tree, root
from canopy.utils.logging import log_calls

logger = logging.getLogger(__name__)


def _add_branches(tree: Tree, path: Path, show_hidden: bool) -> int:
    count = 0
    for entry in sorted(os.scandir(path), key=lambda e: e.name):
        if not show_hidden and entry.name.startswith("."):
            continue
        if entry.is_dir(follow_symlinks=False):
            branch = root(entry.name)
            tree.child(branch)
            count += 1 + _add_branches(branch, Path(entry.path), show_hidden)
        else:
            tree.child(entry.name)
            count += 1
    return count


@log_calls()
def tree_from_directory(path: str | os.PathLike, show_hidden: bool = False) -> Tree:
    """
    Build a tree mirroring a directory: subdirectories become subtrees and
    files become leaves, in name order.

    Args:
        path: Directory to walk
        show_hidden: Include entries whose name starts with a dot

    Returns:
        A Tree rooted at the directory's name

    Raises:
        OSError: If a directory cannot be listed
    """
    directory = Path(path)
    tree = root(directory.resolve().name or str(directory))
    count = _add_branches(tree, directory, show_hidden)
    logger.info("Built tree for %s with %d entries", directory, count)
    return tree


__all__ = ["tree_from_directory"]
