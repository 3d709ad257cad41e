"""
mustree parsing components.

This package provides template scanning, tag classification and delimiter
handling.
"""

from mustree.parsing.delimiters import (
    DEFAULT_CLOSE,
    DEFAULT_OPEN,
    Delimiters,
    parse_set_delimiter,
)
from mustree.parsing.parser import TemplateParser, parse_template

__all__ = [
    "DEFAULT_CLOSE",
    "DEFAULT_OPEN",
    "Delimiters",
    "TemplateParser",
    "parse_set_delimiter",
    "parse_template",
]
