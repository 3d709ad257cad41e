"""
Parsed template tree.

The tree is stored as an arena: a flat tuple of Node models in which every
node refers to its children by index. Index 0 is the implicit, unnamed root
section holding the top-level nodes. Trees are frozen once built and can be
rendered any number of times.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class TagKind(Enum):
    """Kind of a tag node, selected by the sigil after the opening delimiter."""

    VARIABLE = "variable"
    UNESCAPED_VARIABLE = "unescaped_variable"
    SECTION_BEGIN = "section_begin"
    SECTION_BEGIN_INVERTED = "section_begin_inverted"
    SECTION_END = "section_end"
    COMMENT = "comment"
    PARTIAL = "partial"


SECTION_KINDS = frozenset({TagKind.SECTION_BEGIN, TagKind.SECTION_BEGIN_INVERTED})


class Node(BaseModel):
    """
    One node of a parsed template.

    Text nodes have `kind` set to None and carry their literal source span in
    `text`. Tag nodes carry a kind and a resolved name; only section nodes have
    children.

    Params:
        kind: Tag kind, or None for a text node
        name: Resolved tag name (sigil and surrounding whitespace removed)
        text: Literal text for text nodes
        position: Character offset of the node in the template source
        children: Arena indices of child nodes, in source order
    """

    model_config = ConfigDict(frozen=True)

    kind: TagKind | None = None
    name: str = ""
    text: str = ""
    position: int = Field(default=0, ge=0)
    children: tuple[int, ...] = ()

    @model_validator(mode="after")
    def check_only_sections_have_children(self) -> "Node":
        if self.children and self.kind not in SECTION_KINDS:
            label = "text" if self.kind is None else self.kind.value
            raise ValueError(f"{label} node cannot have children")
        return self

    @property
    def is_text(self) -> bool:
        return self.kind is None

    @property
    def is_tag(self) -> bool:
        return self.kind is not None

    @property
    def is_section_begin(self) -> bool:
        return self.kind in SECTION_KINDS

    @property
    def is_section_end(self) -> bool:
        return self.kind is TagKind.SECTION_END


class TemplateTree(BaseModel):
    """
    Immutable arena of template nodes.

    Params:
        nodes: All nodes of the tree; children refer to positions in this tuple
        root: Index of the implicit root section
    """

    model_config = ConfigDict(frozen=True)

    nodes: tuple[Node, ...]
    root: int = 0

    @model_validator(mode="after")
    def check_children_in_arena(self) -> "TemplateTree":
        size = len(self.nodes)
        if not 0 <= self.root < size:
            raise ValueError(f"root index {self.root} outside arena of {size} nodes")
        for node in self.nodes:
            for index in node.children:
                if not 0 <= index < size:
                    raise ValueError(
                        f"child index {index} outside arena of {size} nodes"
                    )
        return self

    @property
    def root_node(self) -> Node:
        return self.nodes[self.root]

    def node(self, index: int) -> Node:
        return self.nodes[index]

    def children(self, node: Node) -> list[Node]:
        """Return the child nodes of `node` in source order."""
        return [self.nodes[index] for index in node.children]

    def __len__(self) -> int:
        return len(self.nodes)
