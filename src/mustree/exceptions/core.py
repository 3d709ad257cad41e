"""
Exception classes for mustree template processing.

This module defines specific exception types for the error conditions that can
occur while parsing a template, accessing template data, and rendering a parsed
template.
"""

from dataclasses import dataclass
from enum import Enum


class ParseErrorKind(Enum):
    """Structural failure categories reported by the template parser."""

    UNTERMINATED_TAG = "unterminated tag"
    MALFORMED_DELIMITER_TAG = "malformed set delimiter tag"
    UNMATCHED_SECTION_END = "unmatched section end"
    UNTERMINATED_SECTION = "unterminated section"


@dataclass
class ErrorContext:
    """
    Context information for parse error messages.

    Captures where an error occurred in the template source, both as a raw
    character offset and as a human friendly line/column pair.

    Params:
        position: Character offset of the offending construct
        line: 1-based line number of the offset
        column: 1-based column number of the offset
        tag_name: Name of the tag or section involved, if any
        excerpt: Short slice of the source starting at the offset
    """

    position: int
    line: int | None = None
    column: int | None = None
    tag_name: str | None = None
    excerpt: str | None = None

    EXCERPT_LENGTH = 20

    @classmethod
    def from_source(
        cls, source: str, position: int, tag_name: str | None = None
    ) -> "ErrorContext":
        """
        Build a context by locating an offset inside template source.

        Params:
            source: Full template text
            position: Character offset within the template
            tag_name: Optional tag or section name

        Returns:
            ErrorContext with line, column and excerpt filled in
        """
        position = max(0, min(position, len(source)))
        line = source.count("\n", 0, position) + 1
        line_start = source.rfind("\n", 0, position) + 1
        excerpt = source[position : position + cls.EXCERPT_LENGTH].split("\n", 1)[0]
        return cls(
            position=position,
            line=line,
            column=position - line_start + 1,
            tag_name=tag_name,
            excerpt=excerpt or None,
        )

    def format_location(self) -> str:
        """
        Format location information as indented lines.

        Returns:
            Formatted location string
        """
        lines = []

        if self.line is not None and self.column is not None:
            lines.append(f"  at line {self.line}, column {self.column}")
        else:
            lines.append(f"  at offset {self.position}")

        if self.tag_name:
            lines.append(f"  in tag: {self.tag_name}")

        if self.excerpt:
            lines.append(f"  near: {self.excerpt!r}")

        return "\n".join(lines)


class MustreeError(Exception):
    """Base exception for all mustree errors."""

    pass


class InvalidAccessError(MustreeError):
    """Raised when a Value payload is accessed through the wrong variant."""

    def __init__(self, value_type: str, operation: str):
        """
        Initialize the exception.

        Params:
            value_type: Name of the variant the operation was attempted on
            operation: The accessor or mutator that is invalid for that variant
        """
        self.value_type = value_type
        self.operation = operation
        super().__init__(f"Cannot use '{operation}' on a {value_type} value")


class TemplateParseError(MustreeError):
    """
    Base class for structural template errors.

    Every parse error carries the character offset of the offending construct
    and, where applicable, the name of the tag or section involved.
    """

    kind: ParseErrorKind

    def __init__(
        self,
        message: str,
        position: int,
        name: str | None = None,
        context: ErrorContext | None = None,
    ):
        """
        Initialize the exception.

        Params:
            message: Primary error description including the offset
            position: Character offset of the offending construct
            name: Tag or section name, if relevant
            context: Optional ErrorContext with line/column information
        """
        self.position = position
        self.name = name
        self.context = context
        self.message = message

        if context:
            full_message = f"{message}\n{context.format_location()}"
        else:
            full_message = message
        super().__init__(full_message)


class UnterminatedTagError(TemplateParseError):
    """Raised when an opening delimiter has no matching closing delimiter."""

    kind = ParseErrorKind.UNTERMINATED_TAG

    def __init__(self, position: int, context: ErrorContext | None = None):
        """
        Initialize the exception.

        Params:
            position: Offset of the opening delimiter
            context: Optional source location details
        """
        super().__init__(
            f"No tag end delimiter found for start delimiter at {position}",
            position,
            context=context,
        )


class MalformedDelimiterTagError(TemplateParseError):
    """Raised when a set delimiter directive is not of the form `=OPEN CLOSE=`."""

    kind = ParseErrorKind.MALFORMED_DELIMITER_TAG

    def __init__(self, position: int, context: ErrorContext | None = None):
        """
        Initialize the exception.

        Params:
            position: Offset of the directive's opening delimiter
            context: Optional source location details
        """
        super().__init__(
            f"Invalid set delimiter tag found at {position}",
            position,
            context=context,
        )


class UnmatchedSectionEndError(TemplateParseError):
    """Raised when a section end tag appears with no section open."""

    kind = ParseErrorKind.UNMATCHED_SECTION_END

    def __init__(self, name: str, position: int, context: ErrorContext | None = None):
        """
        Initialize the exception.

        Params:
            name: Name carried by the stray end tag
            position: Offset of the end tag
            context: Optional source location details
        """
        super().__init__(
            f'Section end tag "{name}" found without start tag at {position}',
            position,
            name=name,
            context=context,
        )


class UnterminatedSectionError(TemplateParseError):
    """Raised when a section is never closed, or closed under another name."""

    kind = ParseErrorKind.UNTERMINATED_SECTION

    def __init__(self, name: str, position: int, context: ErrorContext | None = None):
        """
        Initialize the exception.

        Params:
            name: Name of the section begin tag lacking a matching end
            position: Offset of the section begin tag
            context: Optional source location details
        """
        super().__init__(
            f'No section end tag found for section "{name}" at {position}',
            position,
            name=name,
            context=context,
        )


class InvalidTemplateError(MustreeError):
    """Raised when rendering is attempted with a template that failed to parse."""

    def __init__(self, error: TemplateParseError, partial_name: str | None = None):
        """
        Initialize the exception.

        Params:
            error: The parse error that made the template unusable
            partial_name: Name of the partial, when the template came from one
        """
        self.error = error
        self.partial_name = partial_name
        if partial_name is not None:
            prefix = f"Partial '{partial_name}' is not a valid template"
        else:
            prefix = "Template is not valid"
        super().__init__(f"{prefix}: {error.message}")


class PartialRecursionError(MustreeError):
    """Raised when partials nest deeper than the configured limit."""

    def __init__(self, name: str, max_depth: int):
        """
        Initialize the exception.

        Params:
            name: The partial whose expansion exceeded the limit
            max_depth: Configured maximum nesting depth
        """
        self.name = name
        self.max_depth = max_depth
        super().__init__(
            f"Partial '{name}' exceeds maximum partial nesting depth of {max_depth}"
        )
