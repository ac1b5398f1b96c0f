"""LEVENSHTEIN(a, b): edit distance computed by the MySQL UDF of the same name."""

from typing import ClassVar

from ._bases import TwoArgumentFunction


class LevenshteinFunction(TwoArgumentFunction):
    """``LEVENSHTEIN(str1, str2)``."""

    FUNCTION_NAME: ClassVar[str] = "LEVENSHTEIN"
