"""
Canopy: nested trees and lists rendered as aligned, styled terminal text.

Example:
    from canopy import Style, new, rounded_enumerator

    t = new(
        "Makeup",
        "Glossier",
        "Claire's Boutique",
        new("", "Nyx", "Mac"),
        "Sephora",
    ).enumerator(rounded_enumerator).enumerator_style(Style().foreground("63").padding_right(1))
    print(t)
"""

from canopy.config import Settings, configure, get_settings
from canopy.core.lists import List, alphabet, arabic, asterisk, bullet, dash, roman
from canopy.core.style import Style, height, width
from canopy.core.tree import (
    Children,
    Filter,
    Leaf,
    NodeChildren,
    Renderer,
    Tree,
    default_enumerator,
    default_indenter,
    new,
    new_string_data,
    root,
    rounded_enumerator,
)

__version__ = "0.1.0"

__all__ = [
    "Settings",
    "configure",
    "get_settings",
    "Style",
    "width",
    "height",
    "Children",
    "NodeChildren",
    "Filter",
    "new_string_data",
    "Leaf",
    "Tree",
    "Renderer",
    "new",
    "root",
    "default_enumerator",
    "rounded_enumerator",
    "default_indenter",
    "List",
    "alphabet",
    "arabic",
    "roman",
    "bullet",
    "asterisk",
    "dash",
]
