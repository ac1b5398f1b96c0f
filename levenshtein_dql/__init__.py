"""levenshtein_dql: LEVENSHTEIN and LEVENSHTEIN_RATIO functions for DQL-style query fragments, compiled to MySQL."""

from .config import Configuration, configure, default_configuration, get_configuration
from .errors import QueryException, QuerySyntaxError
from .functions import LevenshteinFunction, LevenshteinRatioFunction, register_levenshtein_functions
from .interfaces import ExpressionRenderer, TokenConsumer
from .parser import Parser
from .query import CompiledFragment, compile_fragment
from .sql_walker import SqlWalker

__all__ = [
    "CompiledFragment",
    "Configuration",
    "ExpressionRenderer",
    "LevenshteinFunction",
    "LevenshteinRatioFunction",
    "Parser",
    "QueryException",
    "QuerySyntaxError",
    "SqlWalker",
    "TokenConsumer",
    "compile_fragment",
    "configure",
    "default_configuration",
    "get_configuration",
    "register_levenshtein_functions",
]
