"""Exceptions raised while compiling query fragments."""

from typing import Any


class QueryException(ValueError):
    """Base error for query compilation."""


class QuerySyntaxError(QueryException):
    """Unexpected or missing token in a query fragment.

    ``position`` is the zero-based column of the offending token (or the end of
    the fragment), ``expected`` a human-readable name of what the grammar wanted.
    """

    def __init__(self, expected: str, token: Any = None, position: int = 0):
        self.expected = expected
        self.token = token
        self.position = position
        got = f"'{token.value}'" if token is not None else "end of string"
        super().__init__(f"line 0, col {position}: Error: Expected {expected}, got {got}")
