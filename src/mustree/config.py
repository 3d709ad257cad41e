"""
Render configuration.

RenderOptions bundles the knobs a caller can set for a render call: the
partial resolver that supplies named sub-templates and the limit on how deeply
partials may include each other.
"""

from attrs import field, frozen, validators

from mustree.core.types import PartialResolver

DEFAULT_MAX_PARTIAL_DEPTH = 32


@frozen
class RenderOptions:
    """
    Options applied to a single render call.

    Params:
        partials: Resolver for `{{> name}}` tags; a callable returning template
            source (or a Template) for a name, or a mapping of names to either.
            When None, partial tags render nothing.
        max_partial_depth: Maximum nesting of partials inside partials.
    """

    partials: PartialResolver | None = None
    max_partial_depth: int = field(
        default=DEFAULT_MAX_PARTIAL_DEPTH, validator=validators.ge(1)
    )
