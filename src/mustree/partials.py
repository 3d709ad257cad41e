"""
Partial template resolution.

A `{{> name}}` tag renders another template in place, against the current
scope stack. The core only knows partials by name; a resolver supplied through
RenderOptions turns that name into template source or a parsed Template.
Partials are parsed afresh every time they are rendered.
"""

import logging
from collections.abc import Mapping

from mustree.core.types import PartialResolver, PartialSource
from mustree.exceptions import InvalidTemplateError, TemplateParseError
from mustree.parsing.parser import parse_template
from mustree.structure.tree import TemplateTree

logger = logging.getLogger(__name__)


class PartialRegistry:
    """Small mutable registry of named partial templates.

    Responsibilities:
      - Maintain a mapping of partial name -> template source or Template.
      - Act as a resolver: calling the registry with a name returns the
        registered partial or None.

    Notes:
      - Lookups never parse; parsing happens when the partial is rendered.
    """

    def __init__(self, partials: Mapping[str, PartialSource] | None = None):
        self._partials: dict[str, PartialSource] = dict(partials or {})

    def __call__(self, name: str) -> PartialSource | None:
        return self._partials.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self._partials

    def get_partial(self, name: str) -> PartialSource:
        """Get a partial by its registered name.

        Params:
            name: Partial name as written in `{{> name}}`.

        Returns:
            Registered template source or Template.

        Raises:
            KeyError: If the partial name is not registered.
        """
        if name not in self._partials:
            raise KeyError(
                f"Partial {name} is not registered. Available partials: {self.list_partials()}"
            )
        return self._partials[name]

    def list_partials(self) -> list[str]:
        """List all registered partial names.

        Returns:
            List of partial names.
        """
        return list(self._partials.keys())

    def update_partial(self, name: str, partial: PartialSource) -> None:
        """Replace an existing partial.

        Params:
            name: Existing partial name to update.
            partial: New template source or Template.

        Raises:
            KeyError: If the partial name is not registered.
        """
        if name not in self._partials:
            raise KeyError(
                f"Partial {name} is not registered. Available partials: {self.list_partials()}"
            )
        self.set_partial(name, partial)

    def set_partial(self, name: str, partial: PartialSource) -> None:
        """Insert a new partial or overwrite an existing one.

        Params:
            name: Partial name.
            partial: Template source or Template to store.
        """
        self._partials[name] = partial

    def remove_partial(self, name: str) -> None:
        """Remove a partial.

        Raises:
            KeyError: If the partial name is not registered.
        """
        if name not in self._partials:
            raise KeyError(
                f"Partial {name} is not registered. Available partials: {self.list_partials()}"
            )
        del self._partials[name]


def resolve_partial(resolver: PartialResolver, name: str) -> PartialSource | None:
    """Look a partial up through a mapping or a callable resolver."""
    if isinstance(resolver, Mapping):
        return resolver.get(name)
    return resolver(name)


def load_partial(resolver: PartialResolver, name: str) -> TemplateTree | None:
    """
    Resolve a partial and return its parsed tree.

    Params:
        resolver: Mapping or callable supplying partials by name
        name: Partial name

    Returns:
        Parsed tree, or None if the resolver has no partial of that name

    Raises:
        InvalidTemplateError: If the partial does not parse
    """
    # Imported here to avoid a cycle: the Template facade renders through this module
    from mustree.template import Template

    source = resolve_partial(resolver, name)
    if source is None:
        logger.debug("Partial '%s' not found; rendering nothing", name)
        return None

    if isinstance(source, Template):
        if not source.is_valid:
            raise InvalidTemplateError(source.error, partial_name=name)
        return source.tree

    try:
        return parse_template(source)
    except TemplateParseError as e:
        raise InvalidTemplateError(e, partial_name=name) from e
