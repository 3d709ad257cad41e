"""
Scope stack for name resolution during rendering.

A render call resolves every tag name against a chain of values: the root
data first, then one extra scope for each section element currently being
rendered. The stack holds references into the caller's data tree and never
copies it, so that data must stay alive (and unmodified) for the duration of
the render call. A stack belongs to one render call and is not thread-safe.
"""

from collections.abc import Iterator
from contextlib import contextmanager

from mustree.core.value import Value


class ScopeStack:
    """
    Ordered chain of values used to resolve names, innermost first.

    Params:
        root: Bottom scope that is never popped
    """

    def __init__(self, root: Value):
        self._scopes: list[Value] = [root]

    def push(self, value: Value) -> None:
        """Add `value` as the new innermost scope."""
        self._scopes.append(value)

    def pop(self) -> Value:
        """
        Remove the innermost scope.

        Returns:
            The value that was removed

        Raises:
            IndexError: If only the root scope is left
        """
        if len(self._scopes) == 1:
            raise IndexError("cannot pop the root scope")
        return self._scopes.pop()

    @contextmanager
    def pushed(self, value: Value) -> Iterator[Value]:
        """
        Push `value` for the duration of a `with` block.

        The scope is popped on every exit path, so the depth after the block
        always equals the depth before it.
        """
        self.push(value)
        try:
            yield value
        finally:
            self.pop()

    def resolve(self, name: str) -> Value | None:
        """
        Find the innermost scope defining `name`.

        Params:
            name: Tag name to look up

        Returns:
            The member value, or None if no scope is an object containing `name`
        """
        for scope in reversed(self._scopes):
            found = scope.get(name)
            if found is not None:
                return found
        return None

    def scopes(self) -> Iterator[Value]:
        """Iterate over scopes from innermost to root."""
        return reversed(self._scopes)

    @property
    def depth(self) -> int:
        return len(self._scopes)

    def __len__(self) -> int:
        return len(self._scopes)
