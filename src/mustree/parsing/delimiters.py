"""
Tag delimiter handling.

Templates start with the `{{`/`}}` delimiter pair and may switch to any other
pair with a set delimiter directive such as `{{=<% %>=}}`.
"""

from attrs import frozen

DEFAULT_OPEN = "{{"
DEFAULT_CLOSE = "}}"
UNESCAPED_OPEN = "{"
UNESCAPED_CLOSE = "}}}"

# Smallest legal directive is "=X X="
MIN_DIRECTIVE_LENGTH = 5


@frozen
class Delimiters:
    """Active opening and closing tag delimiters."""

    open: str = DEFAULT_OPEN
    close: str = DEFAULT_CLOSE

    @property
    def is_default(self) -> bool:
        """True while the default brace pair is active."""
        return self.open == DEFAULT_OPEN and self.close == DEFAULT_CLOSE


def parse_set_delimiter(contents: str) -> Delimiters | None:
    """
    Parse the interior of a set delimiter directive.

    The interior must start and end with `=` and hold exactly one space
    separating the new, non-empty opening and closing delimiters.

    Params:
        contents: Trimmed tag interior, including the leading `=`

    Returns:
        The new delimiters, or None if the directive is malformed

    Examples:
        "=<% %>=" -> Delimiters("<%", "%>")
        "=<%%>=" -> None
    """
    if len(contents) < MIN_DIRECTIVE_LENGTH:
        return None
    if not contents.startswith("=") or not contents.endswith("="):
        return None
    if contents.count(" ") != 1:
        return None

    space = contents.index(" ")
    open_, close = contents[1:space], contents[space + 1 : -1]
    if not open_ or not close:
        return None
    return Delimiters(open=open_, close=close)
