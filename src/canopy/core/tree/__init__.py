"""
Tree rendering module.

Provides the node model, sibling collections and the renderer that draws
nested trees as aligned terminal text.

Components:
- Leaf / Tree: the two node kinds
- NodeChildren / Filter: sibling collections (Filter is a live predicate view)
- Renderer: immutable rendering configuration and the layout algorithm
- default_enumerator / rounded_enumerator / default_indenter: branch markers

Example:
    from canopy.core.tree import root, rounded_enumerator

    t = root(".").child("README.md", root("src").child("main.py"))
    print(t.enumerator(rounded_enumerator))
"""

from canopy.core.tree.children import Children, Filter, NodeChildren, new_string_data
from canopy.core.tree.enumerators import (
    Enumerator,
    Indenter,
    default_enumerator,
    default_indenter,
    rounded_enumerator,
)
from canopy.core.tree.models import Leaf, Node, Tree, new, root
from canopy.core.tree.renderer import DEFAULT_RENDERER, Renderer, StyleFunc

__all__ = [
    "Children",
    "NodeChildren",
    "Filter",
    "new_string_data",
    "Enumerator",
    "Indenter",
    "default_enumerator",
    "rounded_enumerator",
    "default_indenter",
    "Leaf",
    "Node",
    "Tree",
    "new",
    "root",
    "Renderer",
    "StyleFunc",
    "DEFAULT_RENDERER",
]
