"""
Node factory for tree construction.

This module turns the loosely typed items accepted by Tree.child() into nodes
and implements the nameless-subtree merge policy that lets callers write
nested trees as flat argument lists.
"""

from __future__ import annotations

from typing import Any, Tuple

from canopy.core.tree.children import Children, Filter
from canopy.core.tree.models import Leaf, Tree, to_text


def append_item(children: Children, item: Any) -> None:
    """
    Append a single builder item to a sibling collection.

    Args:
        children: Collection receiving the item
        item: A Tree, Leaf, Children collection, list/tuple, string, None or
            any value with a useful str()
    """
    if item is None:
        return
    if isinstance(item, Tree):
        node, replaced = ensure_parent(children, item)
        if replaced < 0:
            children.append(node)
            return
        replace_at = getattr(children, "replace_at", None)
        if replace_at is not None:
            # Keeps the merged node in its sibling slot
            replace_at(replaced, node)
        else:
            children.remove_at(replaced)
            children.append(node)
        return
    if isinstance(item, Leaf):
        children.append(item)
        return
    if isinstance(item, (list, tuple)):
        for element in item:
            append_item(children, element)
        return
    if isinstance(item, Children):
        for i in range(item.length()):
            node = item.at(i)
            if node is not None:
                children.append(node)
        return
    # Lists from canopy.core.lists wrap a Tree
    inner = getattr(item, "tree", None)
    if isinstance(inner, Tree):
        append_item(children, inner)
        return
    children.append(Leaf(to_text(item)))


def ensure_parent(children: Children, item: Tree) -> Tuple[Tree, int]:
    """
    Decide where a Tree item lands among its future siblings.

    A named tree, or any tree appended to an empty collection, is kept as-is.
    A nameless tree is merged with the current last sibling:
    - last sibling is a Tree: the item's children move onto it
    - last sibling is a Leaf: the leaf's value becomes the item's name and the
      item takes the leaf's place

    So new("foo", new("bar", "zaz")) and new("foo", "bar", new("", "zaz"))
    build the same tree.

    Returns:
        (node to append, index of the sibling to remove first or -1). For a
        Filter the index is in the underlying collection, as remove_at expects.
    """
    if item.value != "" or children.length() == 0:
        return item, -1

    last_index = children.length() - 1
    parent = children.at(last_index)
    if isinstance(children, Filter):
        last_index = children.base_index(last_index)
    if isinstance(parent, Tree):
        item_children = item.children
        for i in range(item_children.length()):
            parent.child(item_children.at(i))
        return parent, last_index
    if isinstance(parent, Leaf):
        item.value = parent.value
        return item, last_index
    return item, -1


__all__ = ["append_item", "ensure_parent"]
