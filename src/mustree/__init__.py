"""
mustree - a logic-less template engine

mustree compiles mustache-style templates into an immutable node tree and
renders that tree against variant data values.
"""

from importlib.metadata import version

from mustree.config import RenderOptions
from mustree.core.value import (
    FalseValue,
    ListValue,
    ObjectValue,
    StringValue,
    TrueValue,
    Value,
    to_value,
)
from mustree.exceptions import (
    InvalidTemplateError,
    MustreeError,
    TemplateParseError,
)
from mustree.partials import PartialRegistry
from mustree.template import Template, parse, render

__version__ = version("mustree")

__all__ = [
    "__version__",
    "Template",
    "parse",
    "render",
    "RenderOptions",
    "PartialRegistry",
    "Value",
    "ObjectValue",
    "StringValue",
    "ListValue",
    "TrueValue",
    "FalseValue",
    "to_value",
    "MustreeError",
    "TemplateParseError",
    "InvalidTemplateError",
]
