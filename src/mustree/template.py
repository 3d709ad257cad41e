"""
Template facade.

A Template parses its source once, on construction, and keeps either the
parsed tree or the parse error. Bad syntax never raises from the constructor;
callers check `is_valid` (or catch InvalidTemplateError from `render`).
"""

import io

from mustree.config import RenderOptions
from mustree.core.types import OutputSink, RenderData
from mustree.exceptions import InvalidTemplateError, TemplateParseError
from mustree.execution.renderer import render_tree
from mustree.execution.walk import WalkControl, walk
from mustree.parsing.parser import parse_template
from mustree.structure.tree import Node, TemplateTree


class Template:
    """
    A parsed template that can be rendered any number of times.

    Params:
        source: Template text
    """

    def __init__(self, source: str):
        self.source = source
        self._tree: TemplateTree | None = None
        self._error: TemplateParseError | None = None
        try:
            self._tree = parse_template(source)
        except TemplateParseError as e:
            self._error = e

    @property
    def is_valid(self) -> bool:
        return self._error is None

    @property
    def error(self) -> TemplateParseError | None:
        return self._error

    @property
    def error_message(self) -> str:
        """Human readable parse failure, or an empty string for valid templates."""
        if self._error is None:
            return ""
        return self._error.message

    @property
    def tree(self) -> TemplateTree:
        """
        The parsed tree.

        Raises:
            InvalidTemplateError: If the template failed to parse
        """
        if self._error is not None:
            raise InvalidTemplateError(self._error)
        return self._tree

    def render(
        self,
        data: RenderData = None,
        sink: OutputSink | None = None,
        options: RenderOptions | None = None,
    ):
        """
        Render the template against data.

        Params:
            data: Root value (a Value or plain Python data)
            sink: Optional object with a `write(str)` method
            options: Optional render configuration

        Returns:
            The sink when one is given, otherwise the rendered text

        Raises:
            InvalidTemplateError: If the template failed to parse
        """
        return render_tree(self.tree, data, sink=sink, options=options)

    def dump(self, stream: OutputSink | None = None):
        """
        Print the tree structure for debugging.

        Each node is written on its own line, indented by one space per nesting
        level: `TAG: {{name}}` for tags and `TXT: text` for text spans.

        Params:
            stream: Optional destination; defaults to an owned buffer

        Returns:
            The stream when one is given, otherwise the dump text
        """
        tree = self.tree
        out = stream if stream is not None else io.StringIO()

        def print_node(node: Node, depth: int) -> WalkControl:
            indent = " " * depth
            if node.is_tag:
                out.write(f"{indent}TAG: {{{{{node.name}}}}}\n")
            else:
                out.write(f"{indent}TXT: {node.text}\n")
            return WalkControl.CONTINUE

        walk(tree, print_node)
        if stream is not None:
            return stream
        return out.getvalue()

    def __repr__(self) -> str:
        status = "valid" if self.is_valid else f"invalid: {self.error_message}"
        return f"Template({self.source!r}, {status})"


def parse(source: str) -> Template:
    """Parse template source into a Template without raising on bad syntax."""
    return Template(source)


def render(
    source: str,
    data: RenderData = None,
    sink: OutputSink | None = None,
    options: RenderOptions | None = None,
):
    """
    Parse and render template source in one step.

    Raises:
        InvalidTemplateError: If the source does not parse
    """
    return Template(source).render(data, sink=sink, options=options)
