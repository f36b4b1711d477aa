"""
Sibling collections.

Children is the small protocol the renderer consumes: indexed access plus
length. NodeChildren is the list-backed collection every Tree owns by default;
Filter is a live view that re-indexes another collection by predicate.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Iterator, List, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:  # pragma: no cover - import for type hints only
    from canopy.core.tree.models import Node


@runtime_checkable
class Children(Protocol):
    """Ordered, index-addressable collection of nodes."""

    def at(self, index: int) -> Optional["Node"]:
        ...

    def length(self) -> int:
        ...

    def append(self, node: "Node") -> "Children":
        ...

    def remove_at(self, index: int) -> "Children":
        ...


class NodeChildren:
    """List-backed Children. Out-of-range access yields None, never an error."""

    def __init__(self, nodes: Optional[List["Node"]] = None) -> None:
        self._nodes: List["Node"] = list(nodes) if nodes else []

    def at(self, index: int) -> Optional["Node"]:
        if 0 <= index < len(self._nodes):
            return self._nodes[index]
        return None

    def length(self) -> int:
        return len(self._nodes)

    def append(self, node: "Node") -> "NodeChildren":
        self._nodes.append(node)
        return self

    def remove_at(self, index: int) -> "NodeChildren":
        if 0 <= index < len(self._nodes):
            del self._nodes[index]
        return self

    def replace_at(self, index: int, node: "Node") -> "NodeChildren":
        if 0 <= index < len(self._nodes):
            self._nodes[index] = node
        return self

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator["Node"]:
        return iter(self._nodes)

    def __repr__(self) -> str:
        return f"NodeChildren({self._nodes!r})"


def new_string_data(*values: str) -> NodeChildren:
    """Build a NodeChildren of leaves, one per value."""
    from canopy.core.tree.models import Leaf

    return NodeChildren([Leaf(value) for value in values])


class Filter:
    """
    Live view over another Children that keeps only indices matching a predicate.

    Length and indexed access re-scan the underlying collection on every call,
    so later mutation of the base is always reflected. The predicate receives
    indices of the underlying collection. Append and remove_at write through
    to the base; remove_at takes a base index.

    A Filter must be given a predicate before it is measured.

    Examples:
        >>> data = new_string_data("Foo", "Bar", "Baz")
        >>> view = Filter(data).filter(lambda i: i != 1)
        >>> [view.at(i).value for i in range(view.length())]
        ['Foo', 'Baz']
    """

    def __init__(self, data: Children, predicate: Optional[Callable[[int], bool]] = None) -> None:
        self.data = data
        self._predicate = predicate

    def filter(self, predicate: Callable[[int], bool]) -> "Filter":
        self._predicate = predicate
        return self

    def _matching(self) -> Iterator[int]:
        if self._predicate is None:
            raise TypeError("Filter has no predicate; call filter() before reading it")
        for i in range(self.data.length()):
            if self._predicate(i):
                yield i

    def at(self, index: int) -> Optional["Node"]:
        if index < 0:
            return None
        for position, base_index in enumerate(self._matching()):
            if position == index:
                return self.data.at(base_index)
        return None

    def length(self) -> int:
        return sum(1 for _ in self._matching())

    def append(self, node: "Node") -> "Filter":
        self.data = self.data.append(node)
        return self

    def base_index(self, index: int) -> int:
        """Map a position in the filtered view to its index in the base, or -1."""
        if index < 0:
            return -1
        for position, base_index in enumerate(self._matching()):
            if position == index:
                return base_index
        return -1

    def replace_at(self, index: int, node: "Node") -> "Filter":
        """Replace the node at a base index, keeping its position when the base supports it."""
        replace = getattr(self.data, "replace_at", None)
        if replace is None:
            self.data = self.data.remove_at(index).append(node)
        else:
            self.data = replace(index, node)
        return self

    def remove_at(self, index: int) -> "Filter":
        self.data = self.data.remove_at(index)
        return self

    def __len__(self) -> int:
        return self.length()

    def __iter__(self) -> Iterator["Node"]:
        for base_index in self._matching():
            yield self.data.at(base_index)


__all__ = ["Children", "NodeChildren", "Filter", "new_string_data"]
