"""Base for custom scalar functions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from ._bases import Expression

if TYPE_CHECKING:
    from ..interfaces import ExpressionRenderer, TokenConsumer


class FunctionNode(Expression):
    """Custom function call (e.g. ``LEVENSHTEIN(a, b)``).

    Subclasses set ``FUNCTION_NAME`` and implement ``parse`` (a classmethod
    consuming the call from a TokenConsumer and returning a populated node) and
    ``get_sql`` (rendering the call through an ExpressionRenderer).
    """

    FUNCTION_NAME: ClassVar[str] = ""

    @classmethod
    def parse(cls, parser: TokenConsumer) -> FunctionNode:
        raise NotImplementedError("Subclasses must implement `parse`")

    def get_sql(self, renderer: ExpressionRenderer) -> str:
        raise NotImplementedError("Subclasses must implement `get_sql`")

    def dispatch(self, walker: Any) -> str:
        return walker.walk_function(self)
