"""Tokenizer for query fragments."""

import enum
import re

from pydantic import BaseModel

from .errors import QuerySyntaxError


class TokenType(enum.Enum):
    IDENTIFIER = "identifier"
    INPUT_PARAMETER = "input parameter"
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    TRUE = "true"
    FALSE = "false"
    DOT = "."
    COMMA = ","
    OPEN_PARENTHESIS = "("
    CLOSE_PARENTHESIS = ")"
    PLUS = "+"
    MINUS = "-"
    MULTIPLY = "*"
    DIVIDE = "/"


class Token(BaseModel):
    """One lexical token and the column it starts at."""

    model_config = {"frozen": True}

    type: TokenType
    value: str
    position: int


_PUNCTUATION = {
    ".": TokenType.DOT,
    ",": TokenType.COMMA,
    "(": TokenType.OPEN_PARENTHESIS,
    ")": TokenType.CLOSE_PARENTHESIS,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MULTIPLY,
    "/": TokenType.DIVIDE,
}

_KEYWORDS = {
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
}

# Order matters: floats before integers, parameters before punctuation.
_PATTERN = re.compile(r"""
    (?P<whitespace>\s+)
  | (?P<float>(?:\d+\.\d*|\.\d+)(?:[eE][+-]?\d+)?|\d+[eE][+-]?\d+)
  | (?P<integer>\d+)
  | (?P<string>'(?:[^']|'')*')
  | (?P<input_parameter>:[A-Za-z_][A-Za-z0-9_]*|\?\d+)
  | (?P<identifier>[A-Za-z_][A-Za-z0-9_]*)
  | (?P<punctuation>[.,()+\-*/])
""", re.VERBOSE)


def tokenize(dql: str) -> list[Token]:
    """Split ``dql`` into tokens, skipping whitespace."""
    tokens = []
    position = 0
    while position < len(dql):
        match = _PATTERN.match(dql, position)
        if match is None:
            if dql[position] == "'":
                raise QuerySyntaxError("closing quote", position=len(dql))
            raise QuerySyntaxError(
                "valid token",
                Token(type=TokenType.IDENTIFIER, value=dql[position], position=position),
                position,
            )
        kind = match.lastgroup
        value = match.group()
        if kind == "punctuation":
            tokens.append(Token(type=_PUNCTUATION[value], value=value, position=position))
        elif kind == "identifier":
            token_type = _KEYWORDS.get(value.lower(), TokenType.IDENTIFIER)
            tokens.append(Token(type=token_type, value=value, position=position))
        elif kind == "string":
            tokens.append(Token(type=TokenType.STRING, value=value[1:-1].replace("''", "'"), position=position))
        elif kind != "whitespace":
            tokens.append(Token(type=TokenType(kind.replace("_", " ")), value=value, position=position))
        position = match.end()
    return tokens


class Lexer:
    """Cursor over the tokens of a query fragment.

    ``lookahead`` is the next token to be consumed (``None`` at the end),
    ``glimpse()`` peeks one token past it without moving.
    """

    def __init__(self, dql: str) -> None:
        self.dql = dql
        self.tokens = tokenize(dql)
        self._index = 0

    @property
    def lookahead(self) -> Token | None:
        if self._index < len(self.tokens):
            return self.tokens[self._index]
        return None

    def glimpse(self) -> Token | None:
        if self._index + 1 < len(self.tokens):
            return self.tokens[self._index + 1]
        return None

    def is_next_token(self, token_type: TokenType) -> bool:
        return self.lookahead is not None and self.lookahead.type is token_type

    def move_next(self) -> Token | None:
        """Consume the lookahead and return it."""
        token = self.lookahead
        if token is not None:
            self._index += 1
        return token

    @property
    def end_position(self) -> int:
        return len(self.dql)
