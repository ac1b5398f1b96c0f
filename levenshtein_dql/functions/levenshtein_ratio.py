"""LEVENSHTEIN_RATIO(a, b): similarity ratio computed by the MySQL UDF of the same name."""

from typing import ClassVar

from ._bases import TwoArgumentFunction


class LevenshteinRatioFunction(TwoArgumentFunction):
    """``LEVENSHTEIN_RATIO(str1, str2)``."""

    FUNCTION_NAME: ClassVar[str] = "LEVENSHTEIN_RATIO"
