"""Narrow host capabilities that custom functions are written against."""

from abc import ABC, abstractmethod

from .expressions import Expression
from .lexer import Token, TokenType


class TokenConsumer(ABC):
    """Grammar side of the host: match tokens and parse sub-expressions."""

    @abstractmethod
    def match(self, token_type: TokenType) -> Token:
        """Consume the next token if it has ``token_type``, else raise QuerySyntaxError."""
        ...  # pylint: disable=unnecessary-ellipsis

    @abstractmethod
    def arithmetic_primary(self) -> Expression:
        """Parse one arithmetic primary (path, literal, parameter, parenthesized or function call)."""
        ...  # pylint: disable=unnecessary-ellipsis


class ExpressionRenderer(ABC):
    """SQL generation side of the host: turn a sub-expression into SQL text."""

    @abstractmethod
    def render(self, expression: Expression) -> str:
        ...  # pylint: disable=unnecessary-ellipsis
