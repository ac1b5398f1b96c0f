"""Literal expression."""

import enum
from typing import Any

from ._bases import Expression


class LiteralType(enum.Enum):
    STRING = "string"
    NUMERIC = "numeric"
    BOOLEAN = "boolean"


class LiteralExpression(Expression):
    """String, numeric or boolean literal, as written in the query (strings unquoted)."""

    type: LiteralType
    value: str

    def dispatch(self, walker: Any) -> str:
        return walker.walk_literal(self)
