"""
Core mustree components.

This package provides the variant data model used for rendering and the
shared type definitions.
"""

from mustree.core.types import (
    OutputSink,
    PartialLookup,
    PartialResolver,
    PartialSource,
    RenderData,
)
from mustree.core.value import (
    FalseValue,
    ListValue,
    ObjectValue,
    StringValue,
    TrueValue,
    Value,
    ValueType,
    to_value,
)

__all__ = [
    "Value",
    "ValueType",
    "ObjectValue",
    "StringValue",
    "ListValue",
    "TrueValue",
    "FalseValue",
    "to_value",
    "OutputSink",
    "PartialLookup",
    "PartialResolver",
    "PartialSource",
    "RenderData",
]
