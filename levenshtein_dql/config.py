"""Compilation settings: custom function registry and parameter placeholder."""

import logging

from pydantic import BaseModel, Field as PydanticField

from .expressions import FunctionNode

logger = logging.getLogger("levenshtein_dql")


class Configuration(BaseModel):
    """Settings shared by the parser and the SQL walker.

    Function names are stored lowercased; lookups are case-insensitive.
    ``placeholder`` is emitted for every input parameter (``?`` for qmark
    drivers, ``%s`` for format drivers such as pymysql).
    """

    model_config = {"arbitrary_types_allowed": True}

    custom_numeric_functions: dict[str, type[FunctionNode]] = PydanticField(default_factory=dict)
    placeholder: str = "?"

    def add_custom_numeric_function(self, name: str, function_class: type[FunctionNode]) -> None:
        if not isinstance(function_class, type) or not issubclass(function_class, FunctionNode):
            raise ValueError(f"Custom function `{name}` must be a FunctionNode subclass, got {function_class!r}")
        logger.info("REGISTER FUNCTION %s", name.lower())
        self.custom_numeric_functions[name.lower()] = function_class

    def get_custom_numeric_function(self, name: str) -> type[FunctionNode] | None:
        return self.custom_numeric_functions.get(name.lower())


def default_configuration() -> Configuration:
    """New configuration with the Levenshtein functions registered."""
    from .functions import register_levenshtein_functions
    return register_levenshtein_functions(Configuration())


_configurations: dict[str, Configuration] = {}
def configure(configuration: Configuration, name: str = "default"):
    _configurations[name] = configuration


def get_configuration(name: str = "default") -> Configuration:
    try:
        return _configurations[name]
    except KeyError as error:
        if name == "default":
            _configurations[name] = default_configuration()
            return _configurations[name]
        raise ValueError(f"No configuration registered with name=`{name}`") from error
