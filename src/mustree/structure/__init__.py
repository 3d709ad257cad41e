"""
mustree template tree structures.

This package provides the immutable node arena produced by the parser and the
builder used to assemble it.
"""

from mustree.structure.builder import NodeDraft, TreeBuilder
from mustree.structure.tree import SECTION_KINDS, Node, TagKind, TemplateTree

__all__ = [
    "Node",
    "NodeDraft",
    "SECTION_KINDS",
    "TagKind",
    "TemplateTree",
    "TreeBuilder",
]
