"""
Tests for the scope stack used during rendering.
"""

import pytest

from mustree.core.value import ListValue, ObjectValue, StringValue, to_value
from mustree.execution.scopes import ScopeStack


class TestResolve:
    """Test name resolution across scopes."""

    def test_resolve_from_root(self):
        """Test lookup in the root scope."""
        stack = ScopeStack(to_value({"a": "root"}))

        assert stack.resolve("a").text == "root"
        assert stack.resolve("missing") is None

    def test_innermost_scope_wins(self):
        """Test that pushed scopes shadow outer names."""
        stack = ScopeStack(to_value({"a": "root", "b": "outer"}))
        stack.push(to_value({"a": "inner"}))

        assert stack.resolve("a").text == "inner"
        assert stack.resolve("b").text == "outer"

    def test_non_object_scopes_are_passed_over(self):
        """Test that string and list scopes never match names."""
        stack = ScopeStack(to_value({"a": "root"}))
        stack.push(StringValue("a"))
        stack.push(ListValue())

        assert stack.resolve("a").text == "root"

    def test_returns_reference_not_copy(self):
        """Test that resolution hands back the stored value itself."""
        root = to_value({"obj": {"x": "1"}})
        stack = ScopeStack(root)

        assert stack.resolve("obj") is root.get("obj")

    def test_empty_object_member_is_found(self):
        """Test that an empty object counts as found."""
        stack = ScopeStack(to_value({"empty": {}}))

        found = stack.resolve("empty")
        assert found is not None
        assert found.is_object()


class TestPushPop:
    """Test stack discipline."""

    def test_push_pop_depth(self):
        """Test that depth follows pushes and pops."""
        stack = ScopeStack(ObjectValue())
        assert stack.depth == 1

        scope = ObjectValue()
        stack.push(scope)
        assert len(stack) == 2

        assert stack.pop() is scope
        assert stack.depth == 1

    def test_cannot_pop_root(self):
        """Test that the root scope stays in place."""
        stack = ScopeStack(ObjectValue())

        with pytest.raises(IndexError):
            stack.pop()

    def test_pushed_context_manager(self):
        """Test that pushed() pops when the block ends."""
        stack = ScopeStack(ObjectValue())
        inner = to_value({"x": "1"})

        with stack.pushed(inner) as scope:
            assert scope is inner
            assert stack.depth == 2
            assert stack.resolve("x").text == "1"

        assert stack.depth == 1
        assert stack.resolve("x") is None

    def test_pushed_pops_on_exception(self):
        """Test that pushed() pops on every exit path."""
        stack = ScopeStack(ObjectValue())

        with pytest.raises(RuntimeError):
            with stack.pushed(ObjectValue()):
                raise RuntimeError("boom")

        assert stack.depth == 1

    def test_scopes_innermost_first(self):
        """Test iteration order of scopes."""
        root = ObjectValue()
        inner = ObjectValue()
        stack = ScopeStack(root)
        stack.push(inner)

        assert list(stack.scopes()) == [inner, root]
        assert list(stack.scopes())[0] is inner
