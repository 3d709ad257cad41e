"""
Depth-first traversal of template trees.

A walk calls a visitor for every node in source order. The visitor steers the
traversal by returning a WalkControl: CONTINUE descends into the node's
children, SKIP moves on to the next sibling without descending, and STOP
ends the whole walk.
"""

from collections.abc import Callable
from enum import Enum

from mustree.structure.tree import Node, TemplateTree


class WalkControl(Enum):
    """Outcome of visiting one node."""

    CONTINUE = "continue"
    STOP = "stop"
    SKIP = "skip"


WalkCallback = Callable[[Node, int], WalkControl]


def walk(tree: TemplateTree, callback: WalkCallback) -> WalkControl:
    """
    Walk every top-level node of a tree and their descendants.

    Params:
        tree: Tree to traverse
        callback: Visitor receiving each node and its nesting depth (0 for top level)

    Returns:
        STOP if the visitor ended the walk early, CONTINUE otherwise
    """
    return walk_children(tree, tree.root_node, callback)


def walk_children(
    tree: TemplateTree, node: Node, callback: WalkCallback, depth: int = 0
) -> WalkControl:
    """Walk the children of `node`, stopping at the first STOP."""
    for child in tree.children(node):
        if walk_node(tree, child, callback, depth) is WalkControl.STOP:
            return WalkControl.STOP
    return WalkControl.CONTINUE


def walk_node(
    tree: TemplateTree, node: Node, callback: WalkCallback, depth: int = 0
) -> WalkControl:
    """
    Visit one node and, unless told otherwise, its descendants.

    SKIP is consumed here; only STOP is ever returned to the caller.
    """
    control = callback(node, depth)
    if control is WalkControl.STOP:
        return control
    if control is WalkControl.SKIP:
        return WalkControl.CONTINUE
    return walk_children(tree, node, callback, depth + 1)
