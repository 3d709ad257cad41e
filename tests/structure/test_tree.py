"""
Tests for the template tree arena and its builder.
"""

import pytest
from pydantic import ValidationError

from mustree.exceptions import UnterminatedSectionError
from mustree.structure import Node, TagKind, TemplateTree, TreeBuilder


class TestNode:
    """Test Node model invariants."""

    def test_text_node(self):
        """Test text node properties."""
        node = Node(text="hello", position=3)

        assert node.is_text
        assert not node.is_tag
        assert node.children == ()

    def test_section_node(self):
        """Test section node properties."""
        node = Node(kind=TagKind.SECTION_BEGIN_INVERTED, name="x", children=(1,))

        assert node.is_tag
        assert node.is_section_begin
        assert not node.is_section_end

    def test_text_node_cannot_have_children(self):
        """Test that only sections may have children."""
        with pytest.raises(ValidationError):
            Node(text="hello", children=(1,))

    def test_variable_node_cannot_have_children(self):
        """Test that tag nodes other than sections have no children."""
        with pytest.raises(ValidationError):
            Node(kind=TagKind.VARIABLE, name="x", children=(1,))

    def test_negative_position_rejected(self):
        """Test that positions are offsets into the source."""
        with pytest.raises(ValidationError):
            Node(text="x", position=-1)

    def test_nodes_are_frozen(self):
        """Test that nodes cannot be modified after construction."""
        node = Node(text="x")
        with pytest.raises(ValidationError):
            node.text = "y"


class TestTemplateTree:
    """Test TemplateTree arena access."""

    def test_children_lookup(self):
        """Test resolving child indices."""
        tree = TemplateTree(
            nodes=(
                Node(kind=TagKind.SECTION_BEGIN, children=(1, 2)),
                Node(text="a"),
                Node(kind=TagKind.VARIABLE, name="b", position=1),
            )
        )

        children = tree.children(tree.root_node)
        assert [c.text or c.name for c in children] == ["a", "b"]
        assert tree.node(2).name == "b"
        assert len(tree) == 3

    def test_child_index_outside_arena(self):
        """Test that dangling child indices are rejected."""
        with pytest.raises(ValidationError):
            TemplateTree(nodes=(Node(kind=TagKind.SECTION_BEGIN, children=(5,)),))

    def test_root_outside_arena(self):
        """Test that the root must exist."""
        with pytest.raises(ValidationError):
            TemplateTree(nodes=(), root=0)


class TestTreeBuilder:
    """Test assembling and finalising trees."""

    def test_flat_tree(self):
        """Test building a tree with only top-level nodes."""
        builder = TreeBuilder()
        builder.add_text("Hi ", 0)
        builder.add_tag(TagKind.VARIABLE, "name", 3)

        tree = builder.finalize()

        assert tree.root == 0
        assert [n.text or n.name for n in tree.children(tree.root_node)] == ["Hi ", "name"]

    def test_section_end_removed(self):
        """Test that matching end tags are dropped from the finished tree."""
        builder = TreeBuilder()
        builder.add_tag(TagKind.SECTION_BEGIN, "a", 0)
        builder.add_text("body", 6)
        builder.add_tag(TagKind.SECTION_END, "a", 10)
        builder.close_section()

        tree = builder.finalize()

        (section,) = tree.children(tree.root_node)
        assert section.name == "a"
        assert [c.text for c in tree.children(section)] == ["body"]
        assert not any(n.is_section_end for n in tree.nodes)

    def test_open_depth(self):
        """Test tracking of open sections."""
        builder = TreeBuilder()
        assert builder.open_depth == 1

        builder.add_tag(TagKind.SECTION_BEGIN, "a", 0)
        builder.add_tag(TagKind.SECTION_BEGIN_INVERTED, "b", 6)
        assert builder.open_depth == 3

        builder.close_section()
        assert builder.open_depth == 2

    def test_cannot_close_root(self):
        """Test closing with only the root open."""
        with pytest.raises(IndexError):
            TreeBuilder().close_section()

    def test_unclosed_section(self):
        """Test that a section without end tag is reported."""
        builder = TreeBuilder("{{#a}}text")
        builder.add_tag(TagKind.SECTION_BEGIN, "a", 0)
        builder.add_text("text", 6)

        with pytest.raises(UnterminatedSectionError) as exc_info:
            builder.finalize()

        assert exc_info.value.name == "a"
        assert exc_info.value.position == 0
        assert exc_info.value.context.line == 1

    def test_outermost_failure_reported_first(self):
        """Test that sections are checked outermost first."""
        builder = TreeBuilder()
        builder.add_tag(TagKind.SECTION_BEGIN, "outer", 0)
        builder.add_tag(TagKind.SECTION_BEGIN, "inner", 10)

        with pytest.raises(UnterminatedSectionError) as exc_info:
            builder.finalize()

        assert exc_info.value.name == "outer"

    def test_empty_builder(self):
        """Test finalising a tree with no content."""
        tree = TreeBuilder().finalize()

        assert len(tree) == 1
        assert tree.children(tree.root_node) == []
