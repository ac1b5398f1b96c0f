"""Base expression type for parsed query fragments."""

from typing import Any

from pydantic import BaseModel


class Expression(BaseModel):
    """Base type for all nodes of a parsed scalar expression.

    Nodes are immutable once built by the parser. SQL generation goes through
    ``dispatch``: each subclass calls the matching ``walk_*`` method on the
    walker it is given, so the walker owns aliasing and parameter bookkeeping.
    """

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    def dispatch(self, walker: Any) -> str:
        """Render this node through ``walker``."""
        raise NotImplementedError("Subclasses must implement `dispatch`")
