"""
mustree execution components.

This package provides the tree walker, the scope stack used for name
resolution and the renderer built on both.
"""

from mustree.execution.renderer import Renderer, escape_html, render_tree
from mustree.execution.scopes import ScopeStack
from mustree.execution.walk import (
    WalkCallback,
    WalkControl,
    walk,
    walk_children,
    walk_node,
)

__all__ = [
    "Renderer",
    "ScopeStack",
    "WalkCallback",
    "WalkControl",
    "escape_html",
    "render_tree",
    "walk",
    "walk_children",
    "walk_node",
]
