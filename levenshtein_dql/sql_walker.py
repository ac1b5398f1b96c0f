"""Renders parsed expressions to MySQL SQL."""

from .config import Configuration, get_configuration
from .expressions import (
    BinaryOperatorExpression,
    Expression,
    FunctionNode,
    InputParameter,
    LiteralExpression,
    LiteralType,
    ParenthesizedExpression,
    PathExpression,
    UnaryOperatorExpression,
)
from .interfaces import ExpressionRenderer


class SqlWalker(ExpressionRenderer):
    """Walks an expression tree and produces SQL.

    Table aliases are built like ``u0_``: first letter of the table name, a
    per-walker counter, and an underscore. ``parameters`` lists the input
    parameter keys in the order their placeholders were emitted.
    """

    def __init__(
        self,
        configuration: Configuration | None = None,
        table_names: dict[str, str] | None = None,
        column_names: dict[str, dict[str, str]] | None = None,
    ) -> None:
        self.configuration = configuration if configuration is not None else get_configuration()
        self.table_names = table_names or {}
        self.column_names = column_names or {}
        self.sql_table_aliases: dict[str, str] = {}
        self.parameters: list[str | int] = []

    def render(self, expression: Expression) -> str:
        return expression.dispatch(self)

    def get_sql_table_alias(self, identification_variable: str) -> str:
        if identification_variable not in self.sql_table_aliases:
            table_name = self.table_names.get(identification_variable, identification_variable)
            if not table_name:
                raise ValueError(f"Empty table name for identification variable `{identification_variable}`")
            alias = f"{table_name[0].lower()}{len(self.sql_table_aliases)}_"
            self.sql_table_aliases[identification_variable] = alias
        return self.sql_table_aliases[identification_variable]

    def walk_path_expression(self, expression: PathExpression) -> str:
        alias = self.get_sql_table_alias(expression.identification_variable)
        columns = self.column_names.get(expression.identification_variable, {})
        return f"{alias}.{columns.get(expression.field, expression.field)}"

    def walk_literal(self, expression: LiteralExpression) -> str:
        if expression.type is LiteralType.STRING:
            value = expression.value.replace("'", "''")
            # format-style drivers interpolate the query with `%`
            if self.configuration.placeholder.startswith("%"):
                value = value.replace("%", "%%")
            return "'" + value + "'"
        if expression.type is LiteralType.BOOLEAN:
            return "1" if expression.value.lower() == "true" else "0"
        return expression.value

    def walk_input_parameter(self, expression: InputParameter) -> str:
        self.parameters.append(expression.key)
        return self.configuration.placeholder

    def walk_binary_operator(self, expression: BinaryOperatorExpression) -> str:
        return f"{self.render(expression.left)} {expression.symbol} {self.render(expression.right)}"

    def walk_unary_operator(self, expression: UnaryOperatorExpression) -> str:
        return f"{expression.symbol}{self.render(expression.argument)}"

    def walk_parenthesized(self, expression: ParenthesizedExpression) -> str:
        return f"({self.render(expression.expression)})"

    def walk_function(self, expression: FunctionNode) -> str:
        return expression.get_sql(self)
