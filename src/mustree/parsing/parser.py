"""
Parser for mustache-style templates.

This module turns template source into a TemplateTree with a single
left-to-right scan. The scan tracks the active delimiters and the stack of
open sections; structural problems are reported as TemplateParseError
subclasses carrying the character offset of the offending construct.
"""

import logging

from mustree.exceptions import (
    ErrorContext,
    MalformedDelimiterTagError,
    TemplateParseError,
    UnmatchedSectionEndError,
    UnterminatedTagError,
)
from mustree.parsing.delimiters import (
    UNESCAPED_CLOSE,
    UNESCAPED_OPEN,
    Delimiters,
    parse_set_delimiter,
)
from mustree.structure.builder import TreeBuilder
from mustree.structure.tree import TagKind, TemplateTree

logger = logging.getLogger(__name__)

# ASCII whitespace trimmed from tag interiors
WHITESPACE = " \t\n\v\f\r"


class TemplateParser:
    """Parser for template source text."""

    SIGILS = {
        "#": TagKind.SECTION_BEGIN,
        "^": TagKind.SECTION_BEGIN_INVERTED,
        "/": TagKind.SECTION_END,
        ">": TagKind.PARTIAL,
        "&": TagKind.UNESCAPED_VARIABLE,
        "!": TagKind.COMMENT,
    }

    def parse(self, source: str) -> TemplateTree:
        """
        Parse template source into a tree.

        Params:
            source: Template text

        Returns:
            Frozen TemplateTree

        Raises:
            UnterminatedTagError: If a tag has no closing delimiter
            MalformedDelimiterTagError: If a set delimiter directive is invalid
            UnmatchedSectionEndError: If an end tag closes no open section
            UnterminatedSectionError: If a section is never closed by its own name
        """
        builder = TreeBuilder(source)
        delimiters = Delimiters()
        position = 0
        size = len(source)

        while position < size:
            tag_start = source.find(delimiters.open, position)
            if tag_start == -1:
                builder.add_text(source[position:], position)
                break
            if tag_start != position:
                builder.add_text(source[position:tag_start], position)

            # Triple braces only mean "unescaped" under the default delimiters
            contents_start = tag_start + len(delimiters.open)
            unescaped = delimiters.is_default and source.startswith(
                UNESCAPED_OPEN, contents_start
            )
            if unescaped:
                close = UNESCAPED_CLOSE
                contents_start += len(UNESCAPED_OPEN)
            else:
                close = delimiters.close

            tag_end = source.find(close, contents_start)
            if tag_end == -1:
                raise UnterminatedTagError(
                    tag_start, context=ErrorContext.from_source(source, tag_start)
                )
            contents = source[contents_start:tag_end].strip(WHITESPACE)
            position = tag_end + len(close)

            if contents.startswith("="):
                new_delimiters = parse_set_delimiter(contents)
                if new_delimiters is None:
                    raise MalformedDelimiterTagError(
                        tag_start,
                        context=ErrorContext.from_source(source, tag_start, contents),
                    )
                delimiters = new_delimiters
                continue

            kind, name = self.classify(contents, unescaped=unescaped)
            builder.add_tag(kind, name, tag_start)

            if kind is TagKind.SECTION_END:
                try:
                    builder.close_section()
                except IndexError:
                    raise UnmatchedSectionEndError(
                        name,
                        tag_start,
                        context=ErrorContext.from_source(source, tag_start, name),
                    ) from None

        return builder.finalize()

    @classmethod
    def classify(cls, contents: str, unescaped: bool = False) -> tuple[TagKind, str]:
        """
        Determine a tag's kind and name from its trimmed interior.

        Params:
            contents: Tag interior with surrounding whitespace removed
            unescaped: True for the triple brace form

        Returns:
            Tuple of tag kind and resolved name

        Examples:
            "# items" -> (SECTION_BEGIN, "items")
            "name" -> (VARIABLE, "name")
        """
        if unescaped:
            return TagKind.UNESCAPED_VARIABLE, contents
        if not contents:
            return TagKind.VARIABLE, ""

        kind = cls.SIGILS.get(contents[0])
        if kind is None:
            return TagKind.VARIABLE, contents
        return kind, contents[1:].strip(WHITESPACE)


def parse_template(source: str) -> TemplateTree:
    """
    Convenience function to parse template source.

    Params:
        source: Template text

    Returns:
        Frozen TemplateTree

    Raises:
        TemplateParseError: If the template is structurally invalid
    """
    try:
        return TemplateParser().parse(source)
    except TemplateParseError as e:
        logger.debug("Template parse failed (%s): %s", e.kind.value, e.message)
        raise
