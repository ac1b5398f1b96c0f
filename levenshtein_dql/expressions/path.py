"""Single-valued path expression."""

from typing import Any

from ._bases import Expression


class PathExpression(Expression):
    """Field reference through an identification variable (e.g. ``u.name``)."""

    identification_variable: str
    field: str

    def dispatch(self, walker: Any) -> str:
        return walker.walk_path_expression(self)
