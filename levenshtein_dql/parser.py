"""Recursive-descent parser for scalar query fragments."""

from .config import Configuration, get_configuration
from .errors import QuerySyntaxError
from .expressions import (
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
from .interfaces import TokenConsumer
from .lexer import Lexer, Token, TokenType

_LITERAL_TYPES = {
    TokenType.STRING: LiteralType.STRING,
    TokenType.INTEGER: LiteralType.NUMERIC,
    TokenType.FLOAT: LiteralType.NUMERIC,
    TokenType.TRUE: LiteralType.BOOLEAN,
    TokenType.FALSE: LiteralType.BOOLEAN,
}


class Parser(TokenConsumer):
    """Parses one scalar expression, delegating registered function calls to their FunctionNode class.

    Grammar::

        SimpleArithmeticExpression ::= ArithmeticTerm {("+" | "-") ArithmeticTerm}*
        ArithmeticTerm             ::= ArithmeticFactor {("*" | "/") ArithmeticFactor}*
        ArithmeticFactor           ::= [("+" | "-")] ArithmeticPrimary
        ArithmeticPrimary          ::= SingleValuedPathExpression | Literal | InputParameter
                                     | "(" SimpleArithmeticExpression ")" | FunctionDeclaration
    """

    def __init__(self, dql: str, configuration: Configuration | None = None) -> None:
        self.lexer = Lexer(dql)
        self.configuration = configuration if configuration is not None else get_configuration()

    def parse(self) -> Expression:
        """Parse the whole fragment; trailing tokens are a syntax error."""
        expression = self.simple_arithmetic_expression()
        if self.lexer.lookahead is not None:
            self.syntax_error("end of string")
        return expression

    def syntax_error(self, expected: str, token: Token | None = None):
        token = token if token is not None else self.lexer.lookahead
        position = token.position if token is not None else self.lexer.end_position
        raise QuerySyntaxError(expected, token, position)

    def match(self, token_type: TokenType) -> Token:
        if not self.lexer.is_next_token(token_type):
            self.syntax_error(token_type.name)
        return self.lexer.move_next()

    def simple_arithmetic_expression(self) -> Expression:
        expression = self.arithmetic_term()
        while self.lexer.is_next_token(TokenType.PLUS) or self.lexer.is_next_token(TokenType.MINUS):
            symbol = self.lexer.move_next().value
            expression = BinaryOperatorExpression(symbol=symbol, left=expression, right=self.arithmetic_term())
        return expression

    def arithmetic_term(self) -> Expression:
        expression = self.arithmetic_factor()
        while self.lexer.is_next_token(TokenType.MULTIPLY) or self.lexer.is_next_token(TokenType.DIVIDE):
            symbol = self.lexer.move_next().value
            expression = BinaryOperatorExpression(symbol=symbol, left=expression, right=self.arithmetic_factor())
        return expression

    def arithmetic_factor(self) -> Expression:
        if self.lexer.is_next_token(TokenType.PLUS) or self.lexer.is_next_token(TokenType.MINUS):
            symbol = self.lexer.move_next().value
            return UnaryOperatorExpression(symbol=symbol, argument=self.arithmetic_primary())
        return self.arithmetic_primary()

    def arithmetic_primary(self) -> Expression:
        lookahead = self.lexer.lookahead
        if lookahead is None:
            self.syntax_error("ArithmeticPrimary")
        if lookahead.type is TokenType.OPEN_PARENTHESIS:
            self.match(TokenType.OPEN_PARENTHESIS)
            expression = self.simple_arithmetic_expression()
            self.match(TokenType.CLOSE_PARENTHESIS)
            return ParenthesizedExpression(expression=expression)
        if lookahead.type is TokenType.INPUT_PARAMETER:
            return self.input_parameter()
        if lookahead.type in _LITERAL_TYPES:
            return self.literal()
        if lookahead.type is TokenType.IDENTIFIER:
            following = self.lexer.glimpse()
            if following is not None and following.type is TokenType.OPEN_PARENTHESIS:
                return self.function_declaration()
            return self.single_valued_path_expression()
        self.syntax_error("ArithmeticPrimary")

    def function_declaration(self) -> FunctionNode:
        token = self.lexer.lookahead
        function_class = self.configuration.get_custom_numeric_function(token.value)
        if function_class is None:
            self.syntax_error("known function", token)
        return function_class.parse(self)

    def single_valued_path_expression(self) -> PathExpression:
        identification_variable = self.match(TokenType.IDENTIFIER).value
        self.match(TokenType.DOT)
        if self.lexer.is_next_token(TokenType.TRUE) or self.lexer.is_next_token(TokenType.FALSE):
            field = self.lexer.move_next().value
        else:
            field = self.match(TokenType.IDENTIFIER).value
        return PathExpression(identification_variable=identification_variable, field=field)

    def literal(self) -> LiteralExpression:
        token = self.lexer.move_next()
        return LiteralExpression(type=_LITERAL_TYPES[token.type], value=token.value)

    def input_parameter(self) -> InputParameter:
        token = self.match(TokenType.INPUT_PARAMETER)
        return InputParameter(name=token.value[1:], positional=token.value.startswith("?"))
