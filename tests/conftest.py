"""
Shared test fixtures and utilities for the mustree test suite.
"""

import pytest

from mustree import PartialRegistry, to_value


@pytest.fixture
def people():
    """Root data with a list of people, a flag and an escaped title.

    Usage:
        def test_something(people):
            Template("{{#people}}{{name}}{{/people}}").render(people)
    """
    return to_value(
        {
            "title": "<People>",
            "show": True,
            "hide": False,
            "people": [
                {"name": "Ada", "role": "engineer"},
                {"name": "Grace", "role": "admiral"},
            ],
            "nobody": [],
        }
    )


@pytest.fixture
def partials():
    """Registry holding a couple of small partials."""
    return PartialRegistry(
        {
            "greeting": "Hello {{name}}!",
            "item": "<li>{{name}}</li>",
        }
    )
