"""
Built-in list enumerators.

Each enumerator is a pure function of (items, index) returning the marker
printed before the item at that index. Only the index is used; the items are
accepted so that list enumerators plug into any Tree.

    A. Foo        1. Foo        I. Foo      • Foo
    B. Bar        2. Bar       II. Bar      • Bar
    C. Baz        3. Baz      III. Baz      • Baz
"""

from __future__ import annotations

from typing import List, Tuple

from canopy.core.tree.children import Children

ABC_LEN = 26

ROMAN_NUMERALS: List[Tuple[int, str]] = [
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
]


def alphabet(items: Children, index: int) -> str:
    """
    Spreadsheet-style letters: A..Z, AA..ZZ, AAA...

    Index 25 is "Z.", 26 is "AA.", 701 is "ZZ." and 702 is "AAA.".
    """
    letters = []
    n = index + 1
    while n > 0:
        n, rem = divmod(n - 1, ABC_LEN)
        letters.append(chr(ord("A") + rem))
    return "".join(reversed(letters)) + "."


def arabic(items: Children, index: int) -> str:
    return f"{index + 1}."


def roman(items: Children, index: int) -> str:
    """Roman numeral of index + 1, e.g. index 25 is "XXVI."."""
    remaining = index + 1
    result = []
    for value, symbol in ROMAN_NUMERALS:
        while remaining >= value:
            result.append(symbol)
            remaining -= value
    return "".join(result) + "."


def bullet(items: Children, index: int) -> str:
    return "•"


def asterisk(items: Children, index: int) -> str:
    return "*"


def dash(items: Children, index: int) -> str:
    return "-"


__all__ = ["alphabet", "arabic", "roman", "bullet", "asterisk", "dash", "ROMAN_NUMERALS"]
