"""
Tests for depth-first tree traversal and its control outcomes.
"""

from mustree.execution.walk import WalkControl, walk, walk_children
from mustree.parsing.parser import parse_template

SOURCE = "a{{#s}}b{{#t}}c{{/t}}d{{/s}}e"


def labels(node):
    return node.text or node.name


class TestWalk:
    """Test visiting order and depth."""

    def test_visits_in_source_order_with_depth(self):
        """Test pre-order traversal with nesting depth."""
        tree = parse_template(SOURCE)
        seen = []

        def visit(node, depth):
            seen.append((labels(node), depth))
            return WalkControl.CONTINUE

        result = walk(tree, visit)

        assert result is WalkControl.CONTINUE
        assert seen == [
            ("a", 0),
            ("s", 0),
            ("b", 1),
            ("t", 1),
            ("c", 2),
            ("d", 1),
            ("e", 0),
        ]

    def test_skip_suppresses_descent(self):
        """Test that SKIP moves on to the next sibling."""
        tree = parse_template(SOURCE)
        seen = []

        def visit(node, depth):
            seen.append(labels(node))
            return WalkControl.SKIP if node.name == "s" else WalkControl.CONTINUE

        walk(tree, visit)

        assert seen == ["a", "s", "e"]

    def test_stop_ends_whole_walk(self):
        """Test that STOP from a nested node ends the traversal."""
        tree = parse_template(SOURCE)
        seen = []

        def visit(node, depth):
            seen.append(labels(node))
            return WalkControl.STOP if node.text == "c" else WalkControl.CONTINUE

        result = walk(tree, visit)

        assert result is WalkControl.STOP
        assert seen == ["a", "s", "b", "t", "c"]

    def test_walk_children_of_section(self):
        """Test walking only one section's children."""
        tree = parse_template(SOURCE)
        section = tree.children(tree.root_node)[1]
        seen = []

        def visit(node, depth):
            seen.append((labels(node), depth))
            return WalkControl.SKIP

        walk_children(tree, section, visit)

        assert seen == [("b", 0), ("t", 0), ("d", 0)]
