"""
Lists: trees drawn with list markers.

A List is a Tree configured with the bullet enumerator and a single-space
indenter. Lists can hold other lists (drawn as nested sublists) or any tree.

    groceries = List(
        "Bananas",
        "Milk",
        List("Almond Milk", "Coconut Milk").enumerator(roman),
        "Eggs",
    )

    • Bananas
    • Milk
       I. Almond Milk
      II. Coconut Milk
    • Eggs
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from canopy.core.lists.enumerators import bullet
from canopy.core.style import Style
from canopy.core.tree.children import Children
from canopy.core.tree.enumerators import Enumerator, Indenter
from canopy.core.tree.models import Tree
from canopy.core.tree.renderer import StyleFunc

Items = Children


def list_indenter(items: Items, index: int) -> str:
    return " "


class List:
    """A list of items. Every method mutates the list and returns it."""

    def __init__(self, *items: Any) -> None:
        self.tree = Tree()
        self.items(*items).enumerator(bullet).indenter(list_indenter)

    @property
    def value(self) -> str:
        return self.tree.value

    @property
    def hidden(self) -> bool:
        return self.tree.hidden

    def hide(self, hide: bool = True) -> "List":
        self.tree.hide(hide)
        return self

    def offset(self, start: int, end: int) -> "List":
        self.tree.offset(start, end)
        return self

    def item(self, item: Any) -> "List":
        if isinstance(item, List):
            item = item.tree
        self.tree.child(item)
        return self

    def items(self, *items: Any) -> "List":
        for item in items:
            self.item(item)
        return self

    def enumerator(self, enumerator: Enumerator) -> "List":
        """
        Set the list enumerator: bullet, arabic, alphabet, roman, asterisk,
        dash, or any function of (items, index).
        """
        self.tree.enumerator(enumerator)
        return self

    def indenter(self, indenter: Indenter) -> "List":
        self.tree.indenter(indenter)
        return self

    def enumerator_style(self, style: Style) -> "List":
        self.tree.enumerator_style(style)
        return self

    def enumerator_style_func(self, fn: Optional[StyleFunc]) -> "List":
        self.tree.enumerator_style_func(fn)
        return self

    def item_style(self, style: Style) -> "List":
        self.tree.item_style(style)
        return self

    def item_style_func(self, fn: Optional[Callable[[Items, int], Style]]) -> "List":
        self.tree.item_style_func(fn)
        return self

    def render(self) -> str:
        return self.tree.render()

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"List({self.tree!r})"


__all__ = ["List", "Items", "list_indenter"]
