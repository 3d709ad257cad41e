"""
Core type definitions for mustree.

This module contains the type aliases and structural protocols shared by the
parser, renderer and template facade.
"""

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any, Protocol, Union

if TYPE_CHECKING:
    from mustree.template import Template


class OutputSink(Protocol):
    """Append-only text destination receiving rendered output."""

    def write(self, text: str, /) -> Any: ...


RenderData = Any

PartialSource = Union[str, "Template"]

PartialLookup = Callable[[str], PartialSource | None]

PartialResolver = Union[PartialLookup, Mapping[str, PartialSource]]
