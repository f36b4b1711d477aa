"""
Tree rendering.

A Renderer is an immutable bundle of rendering choices: the enumerator and
indenter, the style functions for markers and items, and the root style. A
Tree either carries its own Renderer or inherits the one its parent was drawn
with. Customizing a tree never mutates a Renderer; it installs a new one.

Rendering walks the tree recursively. For every level it:
    1. drops hidden siblings, so the last visible sibling gets the closing marker
    2. renders every marker and measures the widest one
    3. right-aligns each marker to that width
    4. extends markers and the inherited prefix downward for multi-line items
    5. recurses into branches with prefix + indent
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List

from canopy.core.style import (
    Style,
    background_style,
    height,
    join_horizontal,
    join_vertical,
    width,
)
from canopy.core.tree.children import Children, NodeChildren
from canopy.core.tree.enumerators import (
    Enumerator,
    Indenter,
    default_enumerator,
    default_indenter,
)
from canopy.core.tree.models import Node, Tree

StyleFunc = Callable[[Children, int], Style]


def null_style_func(children: Children, index: int) -> Style:
    return Style()


def default_enumerator_style(children: Children, index: int) -> Style:
    return Style().padding_right(1)


def fixed_style(style: Style) -> StyleFunc:
    """Wrap a single style as a StyleFunc that ignores its arguments."""

    def _style(children: Children, index: int) -> Style:
        return style

    return _style


@dataclass(frozen=True)
class Renderer:
    enumerator: Enumerator = default_enumerator
    indenter: Indenter = default_indenter
    enumerator_style: StyleFunc = default_enumerator_style
    item_style: StyleFunc = null_style_func
    root_style: Style = field(default_factory=Style)

    def render(self, node: Node, root: bool = True, prefix: str = "") -> str:
        """
        Render a node and its visible descendants.

        Args:
            node: Node to render
            root: Whether the node's own value is printed as the first line
            prefix: Text accumulated from ancestor indenters, prepended to
                every line produced for this level

        Returns:
            The rendered lines joined with newlines, or an empty string when
            the node is hidden or has nothing to show.
        """
        if node.hidden:
            return ""

        lines: List[str] = []
        if root and node.value:
            lines.append(self.root_style.render(node.value))

        children = visible_children(node.children)
        count = children.length()

        markers = [self.enumerator_style(children, i).render(self.enumerator(children, i)) for i in range(count)]
        max_width = max((width(marker) for marker in markers), default=0)

        for i in range(count):
            child = children.at(i)
            enum_style = self.enumerator_style(children, i)
            item_style = self.item_style(children, i)

            indent = enum_style.render(self.indenter(children, i))
            marker = markers[i]

            # Padding keeps the enumerator background so colored markers stay solid
            enum_bg = background_style(enum_style)
            pad = max_width - width(marker)
            if pad > 0:
                marker = enum_bg.render(" " * pad) + marker

            item = item_style.render(child.value)
            line_prefix = enum_bg.render(prefix)

            while height(item) > height(marker):
                marker = join_vertical(marker, indent)
            while height(marker) > height(line_prefix):
                line_prefix = join_vertical(line_prefix, prefix)

            lines.append(join_horizontal(line_prefix, marker, item))

            if child.children.length() > 0:
                renderer = self
                if isinstance(child, Tree) and child.renderer is not None:
                    renderer = child.renderer
                subtree = renderer.render(child, False, prefix + indent)
                if subtree:
                    lines.append(subtree)

        return "\n".join(lines)


def visible_children(children: Children) -> NodeChildren:
    """Collect the non-hidden nodes of a sibling collection, in order."""
    visible = NodeChildren()
    for i in range(children.length()):
        child = children.at(i)
        if child is not None and not child.hidden:
            visible.append(child)
    return visible


DEFAULT_RENDERER = Renderer()


__all__ = [
    "Renderer",
    "StyleFunc",
    "DEFAULT_RENDERER",
    "fixed_style",
    "null_style_func",
    "default_enumerator_style",
    "visible_children",
]
