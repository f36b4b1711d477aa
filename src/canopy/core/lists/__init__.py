from canopy.core.lists.enumerators import alphabet, arabic, asterisk, bullet, dash, roman
from canopy.core.lists.models import Items, List, list_indenter

__all__ = [
    "List",
    "Items",
    "list_indenter",
    "alphabet",
    "arabic",
    "roman",
    "bullet",
    "asterisk",
    "dash",
]
