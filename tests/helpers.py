"""Shared test helpers."""

from unittest.mock import MagicMock

from levenshtein_dql.interfaces import ExpressionRenderer


def make_renderer(rendered: dict):
    """ExpressionRenderer mock rendering each expression through ``rendered`` (keyed by id)."""
    renderer = MagicMock(spec=ExpressionRenderer)
    renderer.render.side_effect = lambda expression: rendered[id(expression)]
    return renderer
