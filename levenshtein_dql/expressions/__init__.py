"""Expression nodes produced by the query parser.

Each node is an immutable pydantic model. The parser builds them from
arithmetic-primary productions (paths, literals, input parameters,
parenthesized arithmetic and custom function calls); the SQL walker renders
them by calling ``node.dispatch(walker)``, which forwards to the matching
``walker.walk_*`` method.
"""

from ._bases import Expression
from .function import FunctionNode
from .literal import LiteralExpression, LiteralType
from .operators import (
    BinaryOperatorExpression,
    ParenthesizedExpression,
    UnaryOperatorExpression,
)
from .parameter import InputParameter
from .path import PathExpression

__all__ = [
    "BinaryOperatorExpression",
    "Expression",
    "FunctionNode",
    "InputParameter",
    "LiteralExpression",
    "LiteralType",
    "ParenthesizedExpression",
    "PathExpression",
    "UnaryOperatorExpression",
]
