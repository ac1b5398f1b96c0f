"""Tests for levenshtein_dql.expressions: base classes, dispatch, parameters."""

from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError

from levenshtein_dql.expressions import (
    BinaryOperatorExpression,
    Expression,
    FunctionNode,
    InputParameter,
    LiteralExpression,
    LiteralType,
    ParenthesizedExpression,
    PathExpression,
    UnaryOperatorExpression,
)
from levenshtein_dql.functions import TwoArgumentFunction
from tests.helpers import make_renderer


def test_expression_base_dispatch_raises():
    with pytest.raises(NotImplementedError, match="dispatch"):
        Expression().dispatch(MagicMock())


def test_function_node_base_parse_raises():
    with pytest.raises(NotImplementedError, match="parse"):
        FunctionNode.parse(MagicMock())


def test_function_node_base_get_sql_raises():
    with pytest.raises(NotImplementedError, match="get_sql"):
        FunctionNode().get_sql(MagicMock())


def test_two_argument_function_without_name_raises():
    left = InputParameter(name="a")
    right = InputParameter(name="b")
    node = TwoArgumentFunction(left_expression=left, right_expression=right)
    with pytest.raises(ValueError, match="FUNCTION_NAME"):
        node.get_sql(make_renderer({id(left): "?", id(right): "?"}))


def test_input_parameter_key():
    assert InputParameter(name="target").key == "target"
    assert InputParameter(name="3", positional=True).key == 3


def test_expressions_are_frozen():
    expr = LiteralExpression(type=LiteralType.NUMERIC, value="1")
    with pytest.raises(ValidationError):
        expr.value = "2"


@pytest.mark.parametrize(
    "expr, method",
    [
        (PathExpression(identification_variable="u", field="name"), "walk_path_expression"),
        (LiteralExpression(type=LiteralType.STRING, value="x"), "walk_literal"),
        (InputParameter(name="x"), "walk_input_parameter"),
        (
            BinaryOperatorExpression(symbol="+", left=InputParameter(name="a"), right=InputParameter(name="b")),
            "walk_binary_operator",
        ),
        (UnaryOperatorExpression(symbol="-", argument=InputParameter(name="a")), "walk_unary_operator"),
        (ParenthesizedExpression(expression=InputParameter(name="a")), "walk_parenthesized"),
        (FunctionNode(), "walk_function"),
    ],
)
def test_dispatch_calls_matching_walk_method(expr, method):
    walker = MagicMock()
    getattr(walker, method).return_value = "SQL"
    assert expr.dispatch(walker) == "SQL"
    getattr(walker, method).assert_called_once_with(expr)
