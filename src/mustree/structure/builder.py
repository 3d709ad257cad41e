"""
Arena builder for template trees.

The parser appends nodes to a growing arena and keeps a stack of open section
indices. Indices stay valid however large the arena grows. Once scanning is
done, `finalize` checks that every section ends with its matching end tag,
drops those end tags and freezes the result into a TemplateTree.
"""

from dataclasses import dataclass, field

from mustree.exceptions import ErrorContext, UnterminatedSectionError
from mustree.structure.tree import SECTION_KINDS, Node, TagKind, TemplateTree


@dataclass
class NodeDraft:
    """Mutable node used while the tree is being assembled."""

    kind: TagKind | None = None
    name: str = ""
    text: str = ""
    position: int = 0
    children: list[int] = field(default_factory=list)


class TreeBuilder:
    """
    Assembles a template tree while tracking open sections.

    Params:
        source: Template text, used only to enrich error locations
    """

    ROOT = 0

    def __init__(self, source: str = ""):
        self.source = source
        self._drafts: list[NodeDraft] = [NodeDraft(kind=TagKind.SECTION_BEGIN)]
        self._open: list[int] = [self.ROOT]

    @property
    def open_depth(self) -> int:
        """Number of open frames, including the root."""
        return len(self._open)

    def add_text(self, text: str, position: int) -> int:
        return self._append(NodeDraft(text=text, position=position))

    def add_tag(self, kind: TagKind, name: str, position: int) -> int:
        """
        Append a tag node to the innermost open section.

        Section begin tags become the new innermost section.

        Returns:
            Arena index of the new node
        """
        index = self._append(NodeDraft(kind=kind, name=name, position=position))
        if kind in SECTION_KINDS:
            self._open.append(index)
        return index

    def close_section(self) -> int:
        """
        Close the innermost open section.

        Returns:
            Arena index of the section that was closed

        Raises:
            IndexError: If only the root is open
        """
        if len(self._open) == 1:
            raise IndexError("cannot close the root section")
        return self._open.pop()

    def finalize(self) -> TemplateTree:
        """
        Validate section pairing and freeze the arena.

        Sections are checked in depth-first order; the first one whose last
        child is not an end tag with the same name is reported.

        Returns:
            Frozen TemplateTree with the root at index 0

        Raises:
            UnterminatedSectionError: For the first unclosed or misnamed section
        """
        for index in self._preorder(self.ROOT):
            if index == self.ROOT:
                continue
            draft = self._drafts[index]
            if draft.kind not in SECTION_KINDS:
                continue
            last = self._drafts[draft.children[-1]] if draft.children else None
            if (
                last is None
                or last.kind is not TagKind.SECTION_END
                or last.name != draft.name
            ):
                raise UnterminatedSectionError(
                    draft.name,
                    draft.position,
                    context=ErrorContext.from_source(
                        self.source, draft.position, draft.name
                    ),
                )
            draft.children.pop()

        nodes: list[Node] = []
        self._freeze(self.ROOT, nodes)
        return TemplateTree(nodes=tuple(nodes), root=0)

    def _append(self, draft: NodeDraft) -> int:
        self._drafts.append(draft)
        index = len(self._drafts) - 1
        self._drafts[self._open[-1]].children.append(index)
        return index

    def _preorder(self, index: int):
        # Children are read lazily so trailing end tags popped by the caller
        # are never visited.
        yield index
        for child in self._drafts[index].children:
            yield from self._preorder(child)

    def _freeze(self, index: int, nodes: list[Node]) -> int:
        draft = self._drafts[index]
        slot = len(nodes)
        nodes.append(None)
        children = tuple(self._freeze(child, nodes) for child in draft.children)
        nodes[slot] = Node(
            kind=draft.kind,
            name=draft.name,
            text=draft.text,
            position=draft.position,
            children=children,
        )
        return slot
