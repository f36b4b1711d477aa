"""
Tests for the node model and builder.

Tests cover:
- Leaf
- Tree builder methods
- Nameless-subtree merge policy
- Offsets
"""

from canopy.core.tree import Leaf, NodeChildren, Tree, new, new_string_data, root
from canopy.core.tree.node_factory import ensure_parent


class TestLeaf:
    """Tests for Leaf nodes."""

    def test_leaf_creation(self):
        """Leaf holds a value and a hidden flag."""
        leaf = Leaf("Foo")

        assert leaf.value == "Foo"
        assert leaf.hidden is False
        assert leaf.children.length() == 0
        assert str(leaf) == "Foo"

    def test_leaf_set_value_coerces(self):
        """Non-string values are converted to text and None to an empty string."""
        leaf = Leaf(None)
        assert leaf.value == ""

        leaf.set_value(42)
        assert leaf.value == "42"

    def test_leaf_children_out_of_range(self):
        """Indexing a leaf's children is total."""
        assert Leaf("Foo").children.at(0) is None


class TestTreeBuilder:
    """Tests for the chainable Tree builder."""

    def test_builder_returns_receiver(self):
        """Every builder method returns the same tree."""
        tree = Tree()

        assert tree.root("Foo") is tree
        assert tree.child("Bar") is tree
        assert tree.hide(False) is tree
        assert tree.offset(0, 0) is tree

    def test_child_accepts_mixed_items(self):
        """Strings, leaves, trees, lists and collections are all accepted."""
        tree = root("Root").child(
            "a",
            Leaf("b"),
            ["c", "d"],
            new_string_data("e", "f"),
            root("g").child("h"),
            None,
            7,
        )

        values = [tree.children.at(i).value for i in range(tree.children.length())]
        assert values == ["a", "b", "c", "d", "e", "f", "g", "7"]
        assert isinstance(tree.children.at(6), Tree)

    def test_root_from_tree_adopts_children(self):
        """Passing a tree to root() takes its value and splices its children."""
        source = new("Source", "a", "b")
        tree = root(source)

        assert tree.value == "Source"
        assert tree.children.length() == 2
        assert tree.render() == "Source\n├── a\n└── b"

    def test_set_value_and_set_hidden(self):
        """Node mutators update the tree."""
        tree = new("Old", "a")
        tree.set_value("New")
        tree.set_hidden(True)

        assert tree.value == "New"
        assert tree.hidden is True

    def test_tree_without_renderer_inherits(self):
        """A fresh tree has no renderer override."""
        assert Tree().renderer is None


class TestMergePolicy:
    """Tests for merging nameless subtrees into the previous sibling."""

    def test_nameless_subtree_after_leaf(self):
        """The preceding leaf becomes the subtree's name."""
        nested = new("foo", new("bar", "zaz"))
        flat = new("foo", "bar", new("", "zaz"))

        assert flat.render() == nested.render()
        assert flat.children.length() == 1
        assert isinstance(flat.children.at(0), Tree)
        assert flat.children.at(0).value == "bar"

    def test_nameless_subtree_after_subtree(self):
        """The subtree's children are moved onto the preceding subtree."""
        tree = new("", new("Bar", "Qux"), new("", "Quux", "Quuux"))

        assert tree.children.length() == 1
        bar = tree.children.at(0)
        assert [bar.children.at(i).value for i in range(bar.children.length())] == ["Qux", "Quux", "Quuux"]

    def test_named_subtree_is_not_merged(self):
        """Named subtrees are appended unchanged."""
        tree = new("", "Foo", new("Bar", "Qux"))

        assert tree.children.length() == 2

    def test_nameless_subtree_as_first_child(self):
        """With no previous sibling there is nothing to merge into."""
        sub = new("", "Qux")
        tree = new("", sub)

        assert tree.children.at(0) is sub

    def test_merge_keeps_position(self):
        """The merged subtree replaces the leaf in place, before later siblings."""
        tree = new("", "Foo", "Bar", new("", "Baz"), "Qux")

        assert tree.render() == "├── Foo\n├── Bar\n│   └── Baz\n└── Qux"

    def test_ensure_parent_reports_replaced_index(self):
        """ensure_parent names the sibling to replace."""
        siblings = NodeChildren([Leaf("Foo"), Leaf("Bar")])
        item = new("", "Baz")

        node, index = ensure_parent(siblings, item)

        assert node is item
        assert node.value == "Bar"
        assert index == 1

    def test_ensure_parent_named_item(self):
        """Named items are kept with no replacement."""
        siblings = NodeChildren([Leaf("Foo")])
        item = new("Named", "Baz")

        assert ensure_parent(siblings, item) == (item, -1)


class TestOffset:
    """Tests for child offsets."""

    def test_offset_window(self):
        """Only children in [start, length - end) are shown."""
        tree = new("", "A", "B", "C", "D").offset(1, 1)

        assert tree.render() == "├── B\n└── C"

    def test_offset_swaps_and_clamps(self):
        """start > end is swapped and negative start is clamped."""
        tree = new("", "A", "B", "C", "D").offset(1, -2)

        # swapped to (-2, 1), clamped to (0, 1)
        assert tree.render() == "├── A\n├── B\n└── C"

    def test_offset_end_clamped_to_length(self):
        """An end beyond the children hides everything after start."""
        tree = new("", "A", "B").offset(0, 10)

        assert tree.children.length() == 0
        assert tree.render() == ""
