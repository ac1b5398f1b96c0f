"""Custom DQL functions mapping to MySQL Levenshtein UDFs."""

from ._bases import TwoArgumentFunction
from .levenshtein import LevenshteinFunction
from .levenshtein_ratio import LevenshteinRatioFunction

LEVENSHTEIN_FUNCTIONS: dict[str, type[TwoArgumentFunction]] = {
    "levenshtein": LevenshteinFunction,
    "levenshtein_ratio": LevenshteinRatioFunction,
}


def register_levenshtein_functions(configuration):
    """Register ``levenshtein`` and ``levenshtein_ratio`` on ``configuration`` and return it."""
    for name, function_class in LEVENSHTEIN_FUNCTIONS.items():
        configuration.add_custom_numeric_function(name, function_class)
    return configuration


__all__ = [
    "LEVENSHTEIN_FUNCTIONS",
    "LevenshteinFunction",
    "LevenshteinRatioFunction",
    "TwoArgumentFunction",
    "register_levenshtein_functions",
]
