"""Input parameter expression."""

from typing import Any

from ._bases import Expression


class InputParameter(Expression):
    """Bound parameter: named (``:target``) or positional (``?1``).

    ``name`` is stored without its ``:`` or ``?`` prefix.
    """

    name: str
    positional: bool = False

    @property
    def key(self) -> str | int:
        """Lookup key for bound values: ``int`` for positional, ``str`` otherwise."""
        return int(self.name) if self.positional else self.name

    def dispatch(self, walker: Any) -> str:
        return walker.walk_input_parameter(self)
