from __future__ import annotations

import logging
import os
from typing import Any, Dict

import yaml
from pydantic import ValidationError

from canopy.core.tree.file_spec import TreeFileSpec
from canopy.core.tree.models import Tree
from canopy.io.loaders.errors import LoaderError
from canopy.utils.logging import log_calls

logger = logging.getLogger(__name__)


def _read_yaml(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if isinstance(data, list):
        # A bare list is shorthand for a nameless tree of those items
        return {"items": data}
    if not isinstance(data, dict):
        return {"value": data}
    return data


@log_calls()
def load_tree_spec(path: str) -> TreeFileSpec:
    """Read and validate a tree document without building it."""
    if not os.path.exists(path):
        raise LoaderError(path, "Tree document not found")
    try:
        data = _read_yaml(path)
    except yaml.YAMLError as exc:
        raise LoaderError(path, "Invalid YAML", cause=exc) from exc
    except OSError as exc:
        raise LoaderError(path, "Unable to read tree document", cause=exc) from exc
    try:
        return TreeFileSpec.model_validate(data)
    except ValidationError as exc:
        raise LoaderError(path, "Invalid tree document", cause=exc) from exc


def load_tree(path: str) -> Tree:
    """
    Load a YAML tree document.

    Expected format:
    value: Makeup
    enumerator: rounded
    items:
      - Glossier
      - value: Claire's Boutique
        items: [Nyx, Mac]

    Args:
        path: Path to the YAML document

    Returns:
        The built Tree, ready to render

    Raises:
        LoaderError: If the file is missing, is not valid YAML or does not
            match the tree document schema
    """
    spec = load_tree_spec(path)
    tree = spec.build_tree()
    logger.info("Loaded tree '%s' with %d top-level item(s) from %s", tree.value, tree.children.length(), path)
    return tree


__all__ = ["load_tree", "load_tree_spec"]
