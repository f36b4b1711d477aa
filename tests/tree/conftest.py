"""
Shared fixtures for tree tests.
"""

import pytest

from canopy.core.tree import Tree, new


@pytest.fixture
def nested_tree() -> Tree:
    """Two-level tree with a subtree in the middle."""
    return new(
        "",
        "Foo",
        new(
            "Bar",
            "Qux",
            new("Quux", "Foo", "Bar"),
            "Quuux",
        ),
        "Baz",
    )
