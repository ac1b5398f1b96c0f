"""Shared grammar and SQL template for two-argument string functions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..expressions import Expression, FunctionNode
from ..lexer import TokenType

if TYPE_CHECKING:
    from ..interfaces import ExpressionRenderer, TokenConsumer


class TwoArgumentFunction(FunctionNode):
    """``NAME(ArithmeticPrimary, ArithmeticPrimary)`` rendered as ``NAME(left, right)``."""

    left_expression: Expression
    right_expression: Expression

    @property
    def function_name(self) -> str:
        return self.FUNCTION_NAME

    @classmethod
    def parse(cls, parser: TokenConsumer) -> TwoArgumentFunction:
        # name(str1, str2)
        parser.match(TokenType.IDENTIFIER)
        parser.match(TokenType.OPEN_PARENTHESIS)
        left_expression = parser.arithmetic_primary()
        parser.match(TokenType.COMMA)
        right_expression = parser.arithmetic_primary()
        parser.match(TokenType.CLOSE_PARENTHESIS)
        return cls(left_expression=left_expression, right_expression=right_expression)

    def get_sql(self, renderer: ExpressionRenderer) -> str:
        if not self.FUNCTION_NAME:
            raise ValueError(f"{type(self).__name__} must define FUNCTION_NAME")
        left = renderer.render(self.left_expression)
        right = renderer.render(self.right_expression)
        return f"{self.FUNCTION_NAME}({left}, {right})"
