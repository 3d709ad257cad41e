"""
mustree exception classes.

This package provides all exception types used throughout mustree for
consistent error handling and reporting.
"""

from mustree.exceptions.core import (
    ErrorContext,
    InvalidAccessError,
    InvalidTemplateError,
    MalformedDelimiterTagError,
    MustreeError,
    ParseErrorKind,
    PartialRecursionError,
    TemplateParseError,
    UnmatchedSectionEndError,
    UnterminatedSectionError,
    UnterminatedTagError,
)

__all__ = [
    "MustreeError",
    "ErrorContext",
    "ParseErrorKind",
    "InvalidAccessError",
    "TemplateParseError",
    "UnterminatedTagError",
    "MalformedDelimiterTagError",
    "UnmatchedSectionEndError",
    "UnterminatedSectionError",
    "InvalidTemplateError",
    "PartialRecursionError",
]
