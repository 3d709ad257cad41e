"""
Tree-walking renderer.

Rendering visits the parsed tree depth first and writes output to a sink in
visiting order. Names are resolved against a ScopeStack; sections push their
list elements or object onto the stack while their children are rendered.
Missing names and values of the wrong type render as nothing, so rendering a
valid tree never fails (a partial resolver may still raise).
"""

import io
import logging
from functools import partial

from mustree.config import RenderOptions
from mustree.core.types import OutputSink, RenderData
from mustree.core.value import ObjectValue, Value, to_value
from mustree.exceptions import PartialRecursionError
from mustree.execution.scopes import ScopeStack
from mustree.execution.walk import WalkControl, walk, walk_children
from mustree.partials import load_partial
from mustree.structure.tree import Node, TagKind, TemplateTree

logger = logging.getLogger(__name__)

_HTML_ESCAPES = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&apos;",
    }
)


def escape_html(text: str) -> str:
    """Escape the five HTML special characters."""
    return text.translate(_HTML_ESCAPES)


class Renderer:
    """
    Renders template trees for one render call.

    Params:
        sink: Destination receiving output text
        scopes: Scope stack owned by this render call
        options: Render configuration
    """

    def __init__(
        self, sink: OutputSink, scopes: ScopeStack, options: RenderOptions | None = None
    ):
        self.sink = sink
        self.scopes = scopes
        self.options = options or RenderOptions()
        self._partial_depth = 0

    def render(self, tree: TemplateTree) -> WalkControl:
        """Render a whole tree against the current scopes."""
        return walk(tree, partial(self._visit, tree))

    def _visit(self, tree: TemplateTree, node: Node, depth: int) -> WalkControl:
        if node.is_text:
            self.sink.write(node.text)
            return WalkControl.CONTINUE

        kind = node.kind
        if kind is TagKind.VARIABLE or kind is TagKind.UNESCAPED_VARIABLE:
            value = self.scopes.resolve(node.name)
            if value is not None:
                self._write_value(value, escape=kind is TagKind.VARIABLE)
            return WalkControl.CONTINUE

        if kind is TagKind.SECTION_BEGIN:
            value = self.scopes.resolve(node.name)
            if value is None or value.is_falsy():
                return WalkControl.SKIP
            return self._render_section(tree, node, value)

        if kind is TagKind.SECTION_BEGIN_INVERTED:
            value = self.scopes.resolve(node.name)
            if value is not None and not value.is_falsy():
                return WalkControl.SKIP
            return self._render_section(tree, node, value)

        if kind is TagKind.PARTIAL:
            return self._render_partial(node.name)

        # Comments render nothing and have no children
        return WalkControl.SKIP

    def _write_value(self, value: Value, escape: bool) -> None:
        if value.is_string():
            self.sink.write(escape_html(value.text) if escape else value.text)
        elif value.is_bool():
            self.sink.write("true" if value.is_true() else "false")

    def _render_section(
        self, tree: TemplateTree, node: Node, value: Value | None
    ) -> WalkControl:
        """
        Render a section's children for a resolved value.

        Non-empty lists render the children once per element with that element
        pushed as a scope. Objects render them once with the object pushed.
        Anything else (True, or the missing/falsy value of an inverted section)
        renders them once against the enclosing scopes.

        Returns:
            STOP if rendering was stopped inside the section, SKIP otherwise
        """
        visit = partial(self._visit, tree)
        control = WalkControl.CONTINUE

        if value is not None and value.is_non_empty_list():
            for item in value.items:
                with self.scopes.pushed(item):
                    control = walk_children(tree, node, visit)
                if control is WalkControl.STOP:
                    break
        elif value is not None and value.is_object():
            with self.scopes.pushed(value):
                control = walk_children(tree, node, visit)
        else:
            control = walk_children(tree, node, visit)

        if control is WalkControl.STOP:
            return WalkControl.STOP
        return WalkControl.SKIP

    def _render_partial(self, name: str) -> WalkControl:
        if self.options.partials is None:
            logger.debug("Partial '%s' skipped: no partial resolver configured", name)
            return WalkControl.CONTINUE

        if self._partial_depth >= self.options.max_partial_depth:
            raise PartialRecursionError(name, self.options.max_partial_depth)

        tree = load_partial(self.options.partials, name)
        if tree is None:
            return WalkControl.CONTINUE

        self._partial_depth += 1
        try:
            return self.render(tree)
        finally:
            self._partial_depth -= 1


def render_tree(
    tree: TemplateTree,
    data: RenderData = None,
    sink: OutputSink | None = None,
    options: RenderOptions | None = None,
):
    """
    Render a parsed tree against data.

    The data (and every section value pushed while rendering) is referenced,
    not copied, and must not be mutated until the call returns.

    Params:
        tree: Parsed template tree
        data: Root value; a Value or plain Python data accepted by `to_value`.
            None renders against an empty object.
        sink: Optional object with a `write(str)` method
        options: Optional render configuration

    Returns:
        The sink when one is given, otherwise the rendered text
    """
    root = ObjectValue() if data is None else to_value(data)
    scopes = ScopeStack(root)

    if sink is None:
        buffer = io.StringIO()
        Renderer(buffer, scopes, options).render(tree)
        return buffer.getvalue()

    Renderer(sink, scopes, options).render(tree)
    return sink
