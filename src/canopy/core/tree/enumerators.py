"""
Branch markers and indentation for trees.

An Enumerator maps (siblings, index) to the marker printed before a node; an
Indenter maps the same pair to the text prepended to every line of that
node's descendants. Both only ever see visible siblings, so "last" always
means the last visible sibling.

    ├── Foo
    ├── Bar
    │   ├── Qux
    │   └── Quux
    └── Baz
"""

from __future__ import annotations

from typing import Callable

from canopy.core.tree.children import Children

Enumerator = Callable[[Children, int], str]
Indenter = Callable[[Children, int], str]


def is_last(children: Children, index: int) -> bool:
    return index == children.length() - 1


def default_enumerator(children: Children, index: int) -> str:
    """Classic tree branches; the last sibling closes the vertical rule."""
    if is_last(children, index):
        return "└──"
    return "├──"


def rounded_enumerator(children: Children, index: int) -> str:
    """Like default_enumerator, with a rounded corner on the last sibling."""
    if is_last(children, index):
        return "╰──"
    return "├──"


def default_indenter(children: Children, index: int) -> str:
    """Continue the vertical rule below every sibling but the last."""
    if is_last(children, index):
        return "   "
    return "│  "


__all__ = [
    "Enumerator",
    "Indenter",
    "default_enumerator",
    "rounded_enumerator",
    "default_indenter",
    "is_last",
]
