"""
Enumerator and indenter registries.

Declarative tree documents and the command line refer to enumerators and
indenters by name. The registries map those names to the functions, and new
names can be registered at runtime:

    >>> enumerators.register("arrow", lambda items, i: "→")
    >>> enumerators.get("arrow")(None, 0)
    '→'
"""

from __future__ import annotations

from typing import Callable, Dict, Generic, Iterable, TypeVar

from pydantic import BaseModel, Field

from canopy.core.lists.enumerators import alphabet, arabic, asterisk, bullet, dash, roman
from canopy.core.lists.models import list_indenter
from canopy.core.tree.enumerators import default_enumerator, default_indenter, rounded_enumerator

T = TypeVar("T")


class NameRegistry(BaseModel, Generic[T]):
    items: Dict[str, T] = Field(default_factory=dict)

    def register(self, name: str, item: T) -> None:
        if name in self.items:
            raise ValueError(f"Duplicate registration: {name}")
        self.items[name] = item

    def get(self, name: str) -> T:
        if name not in self.items:
            available = ", ".join(sorted(self.items.keys()))
            raise KeyError(f"Unknown: {name}. Available: {available}")
        return self.items[name]

    def __contains__(self, name: str) -> bool:
        return name in self.items

    def all(self) -> Iterable[T]:
        return self.items.values()

    def names(self) -> Iterable[str]:
        return sorted(self.items.keys())


enumerators: NameRegistry[Callable] = NameRegistry()
indenters: NameRegistry[Callable] = NameRegistry()


def register_defaults() -> None:
    """Register the built-in enumerators and indenters (idempotent)."""
    builtin_enumerators = {
        "default": default_enumerator,
        "rounded": rounded_enumerator,
        "alphabet": alphabet,
        "arabic": arabic,
        "roman": roman,
        "bullet": bullet,
        "asterisk": asterisk,
        "dash": dash,
    }
    for name, fn in builtin_enumerators.items():
        if name not in enumerators:
            enumerators.register(name, fn)

    builtin_indenters = {
        "default": default_indenter,
        "list": list_indenter,
    }
    for name, fn in builtin_indenters.items():
        if name not in indenters:
            indenters.register(name, fn)


register_defaults()


__all__ = ["NameRegistry", "enumerators", "indenters", "register_defaults"]
