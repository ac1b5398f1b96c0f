"""Compile a query fragment to SQL plus its parameter order."""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import BaseModel

from .config import Configuration, get_configuration
from .parser import Parser
from .sql_walker import SqlWalker

logger = logging.getLogger("levenshtein_dql")


class CompiledFragment(BaseModel):
    """SQL text and the input parameter keys matching its placeholders, in order."""

    model_config = {"frozen": True}

    sql: str
    parameters: tuple[str | int, ...] = ()

    def bind(self, values: Mapping[str | int, Any] | Sequence[Any]) -> tuple[Any, ...]:
        """Values for the placeholders in ``sql``.

        ``values`` is a mapping keyed by parameter name (``"target"``) or
        position (``1``), or a sequence indexed from 1 for positional parameters.
        """
        result = ()
        for key in self.parameters:
            try:
                if isinstance(values, Mapping):
                    result += (values[key],)
                elif isinstance(key, int) and key >= 1:
                    result += (values[key - 1],)
                else:
                    raise KeyError(key)
            except (KeyError, IndexError) as error:
                raise ValueError(f"No value bound for parameter `{key}`") from error
        return result


def compile_fragment(
    dql: str,
    configuration: Configuration | None = None,
    table_names: dict[str, str] | None = None,
    column_names: dict[str, dict[str, str]] | None = None,
) -> CompiledFragment:
    """Parse ``dql`` as a scalar expression and render it with a fresh SqlWalker.

    >>> compile_fragment("levenshtein(u.name, :target)").sql
    'LEVENSHTEIN(u0_.name, ?)'
    """
    configuration = configuration if configuration is not None else get_configuration()
    expression = Parser(dql, configuration).parse()
    walker = SqlWalker(configuration, table_names=table_names, column_names=column_names)
    sql = walker.render(expression)
    logger.debug("%s -> %s", dql, sql)
    return CompiledFragment(sql=sql, parameters=tuple(walker.parameters))
