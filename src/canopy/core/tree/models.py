"""
Tree data models.

A tree is built from two kinds of node:
- Leaf: a value with no children
- Tree: a branch with a value (its root name), children and an optional
  Renderer of its own

Both carry an independent hidden flag. A hidden node disappears from the
output together with its whole subtree.

Example:
    from canopy.core.tree import new

    t = new(
        "Makeup",
        "Glossier",
        "Claire's Boutique",
        new("", "Nyx", "Mac"),
        "Sephora",
    )
    print(t)

    Makeup
    ├── Glossier
    ├── Claire's Boutique
    │   ├── Nyx
    │   └── Mac
    └── Sephora
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING, Any, Optional, Union

from canopy.core.style import Style
from canopy.core.tree.children import Children, NodeChildren

if TYPE_CHECKING:  # pragma: no cover - import for type hints only
    from canopy.core.tree.enumerators import Enumerator, Indenter
    from canopy.core.tree.renderer import Renderer, StyleFunc


def to_text(value: Any) -> str:
    """Coerce a node value to display text. None becomes an empty string."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


class Leaf:
    """A node without children."""

    def __init__(self, value: Any = "", hidden: bool = False) -> None:
        self.value = to_text(value)
        self.hidden = hidden

    @property
    def children(self) -> NodeChildren:
        return NodeChildren()

    def set_value(self, value: Any) -> None:
        self.value = to_text(value)

    def set_hidden(self, hidden: bool) -> None:
        self.hidden = hidden

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Leaf({self.value!r}, hidden={self.hidden})"


class Tree:
    """
    A branch node: a root value plus an ordered collection of children.

    All builder methods mutate the receiver and return it, so calls chain:

        root("Fruits").child("Apple", "Banana").enumerator(rounded_enumerator)

    Styling and enumerator customizations install a Renderer on this tree only.
    Subtrees without their own Renderer are drawn with their parent's.
    """

    def __init__(self) -> None:
        self.value = ""
        self.hidden = False
        self.renderer: Optional["Renderer"] = None
        self._children: Children = NodeChildren()
        self._offset = (0, 0)

    # ------------------------------------------------------------------
    # Node interface
    # ------------------------------------------------------------------

    @property
    def children(self) -> Children:
        """The visible window of children, honouring offset()."""
        start, end = self._offset
        if start == 0 and end == 0:
            return self._children
        window = NodeChildren()
        for i in range(start, self._children.length() - end):
            window.append(self._children.at(i))
        return window

    def set_value(self, value: Any) -> None:
        self.root(value)

    def set_hidden(self, hidden: bool) -> None:
        self.hide(hidden)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Tree({self.value!r}, children={self._children.length()}, hidden={self.hidden})"

    # ------------------------------------------------------------------
    # Builder
    # ------------------------------------------------------------------

    def root(self, value: Any) -> "Tree":
        """Set the root value. A Tree argument donates its value and children."""
        if isinstance(value, Tree):
            self.value = value.value
            return self.child(value.children)
        self.value = to_text(value)
        return self

    def child(self, *items: Any) -> "Tree":
        """
        Append children.

        Strings and other values become leaves, nodes are appended as-is,
        Children collections and Python lists are spliced element by element
        and None is skipped. A Tree without a root value is merged into the
        previous sibling (see node_factory.ensure_parent):

            root("Foo").child("Bar", new("", "Baz"), "Qux")

            Foo
            ├── Bar
            │   └── Baz
            └── Qux
        """
        from canopy.core.tree.node_factory import append_item

        for item in items:
            append_item(self._children, item)
        return self

    def with_children(self, children: Children) -> "Tree":
        """Adopt a Children collection (for example a live Filter) as this tree's children."""
        self._children = children
        return self

    def hide(self, hide: bool = True) -> "Tree":
        self.hidden = hide
        return self

    def offset(self, start: int, end: int) -> "Tree":
        """
        Only show children in [start, length - end).

        Arguments are swapped when start > end; start is clamped to zero and
        an end outside the collection is clamped to its length.
        """
        if start > end:
            start, end = end, start
        start = max(start, 0)
        length = self._children.length()
        if end < 0 or end > length:
            end = length
        self._offset = (start, end)
        return self

    # ------------------------------------------------------------------
    # Rendering configuration
    # ------------------------------------------------------------------

    def _customize(self, **changes: Any) -> "Tree":
        from canopy.core.tree.renderer import DEFAULT_RENDERER

        self.renderer = replace(self.renderer or DEFAULT_RENDERER, **changes)
        return self

    def enumerator(self, enumerator: "Enumerator") -> "Tree":
        """Set the function producing each sibling's marker ("├──", "II.", ...)."""
        return self._customize(enumerator=enumerator)

    def indenter(self, indenter: "Indenter") -> "Tree":
        """Set the function producing the text prepended to a sibling's descendants."""
        return self._customize(indenter=indenter)

    def enumerator_style(self, style: Style) -> "Tree":
        from canopy.core.tree.renderer import fixed_style

        return self._customize(enumerator_style=fixed_style(style))

    def enumerator_style_func(self, fn: Optional["StyleFunc"]) -> "Tree":
        """
        Style markers per sibling, e.g. to highlight a selected index:

            t.enumerator_style_func(
                lambda children, i: selected if i == cursor else dimmed
            )
        """
        from canopy.core.tree.renderer import null_style_func

        return self._customize(enumerator_style=fn or null_style_func)

    def item_style(self, style: Style) -> "Tree":
        from canopy.core.tree.renderer import fixed_style

        return self._customize(item_style=fixed_style(style))

    def item_style_func(self, fn: Optional["StyleFunc"]) -> "Tree":
        from canopy.core.tree.renderer import null_style_func

        return self._customize(item_style=fn or null_style_func)

    def root_style(self, style: Style) -> "Tree":
        return self._customize(root_style=style)

    def render(self) -> str:
        from canopy.core.tree.renderer import DEFAULT_RENDERER

        return (self.renderer or DEFAULT_RENDERER).render(self, True, "")


Node = Union[Leaf, Tree]


def new(root_value: Any = "", *items: Any) -> Tree:
    """Create a tree with a root value and children."""
    return Tree().root(root_value).child(*items)


def root(value: Any) -> Tree:
    """Shorthand for Tree().root(value)."""
    return Tree().root(value)


__all__ = ["Leaf", "Tree", "Node", "new", "root", "to_text"]
