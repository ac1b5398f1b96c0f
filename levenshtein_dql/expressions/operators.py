"""Arithmetic operator expressions."""

from typing import Any

from ._bases import Expression


class BinaryOperatorExpression(Expression):
    """Two-operand arithmetic (``+``, ``-``, ``*``, ``/``); chains nest to the left."""

    symbol: str
    left: Expression
    right: Expression

    def dispatch(self, walker: Any) -> str:
        return walker.walk_binary_operator(self)


class UnaryOperatorExpression(Expression):
    """Signed arithmetic factor (e.g. ``-u.score``)."""

    symbol: str
    argument: Expression

    def dispatch(self, walker: Any) -> str:
        return walker.walk_unary_operator(self)


class ParenthesizedExpression(Expression):
    """``( SimpleArithmeticExpression )`` used as an arithmetic primary."""

    expression: Expression

    def dispatch(self, walker: Any) -> str:
        return walker.walk_parenthesized(self)
