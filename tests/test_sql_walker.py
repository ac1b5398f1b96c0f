"""Tests for levenshtein_dql.sql_walker: aliases, literals, parameters and operators."""

import pytest

from levenshtein_dql.config import Configuration, default_configuration
from levenshtein_dql.expressions import InputParameter, LiteralExpression, LiteralType, PathExpression
from levenshtein_dql.interfaces import ExpressionRenderer
from levenshtein_dql.parser import Parser
from levenshtein_dql.sql_walker import SqlWalker


def walk(dql, **kwargs):
    walker = SqlWalker(**kwargs)
    return walker.render(Parser(dql).parse()), walker


def test_sql_walker_is_expression_renderer():
    assert isinstance(SqlWalker(), ExpressionRenderer)


def test_sql_table_aliases_are_numbered_and_stable():
    walker = SqlWalker()
    assert walker.get_sql_table_alias("u") == "u0_"
    assert walker.get_sql_table_alias("p") == "p1_"
    assert walker.get_sql_table_alias("u") == "u0_"
    assert walker.sql_table_aliases == {"u": "u0_", "p": "p1_"}


def test_sql_table_alias_uses_table_name():
    walker = SqlWalker(table_names={"x": "Product"})
    assert walker.get_sql_table_alias("x") == "p0_"


def test_walk_path_expression_with_column_names():
    walker = SqlWalker(column_names={"u": {"name": "user_name"}})
    assert walker.render(PathExpression(identification_variable="u", field="name")) == "u0_.user_name"
    assert walker.render(PathExpression(identification_variable="u", field="email")) == "u0_.email"


def test_walk_literals():
    walker = SqlWalker()
    assert walker.render(LiteralExpression(type=LiteralType.STRING, value="it's")) == "'it''s'"
    assert walker.render(LiteralExpression(type=LiteralType.NUMERIC, value="2.5")) == "2.5"
    assert walker.render(LiteralExpression(type=LiteralType.BOOLEAN, value="TRUE")) == "1"
    assert walker.render(LiteralExpression(type=LiteralType.BOOLEAN, value="false")) == "0"


def test_walk_input_parameters_records_order():
    walker = SqlWalker()
    assert walker.render(InputParameter(name="b")) == "?"
    assert walker.render(InputParameter(name="2", positional=True)) == "?"
    assert walker.render(InputParameter(name="a")) == "?"
    assert walker.parameters == ["b", 2, "a"]


def test_walk_input_parameter_uses_configured_placeholder():
    walker = SqlWalker(Configuration(placeholder="%s"))
    assert walker.render(InputParameter(name="target")) == "%s"


def test_walk_arithmetic():
    sql, _ = walk("(u.a + 1) * -2 / u.b")
    assert sql == "(u0_.a + 1) * -2 / u0_.b"


def test_walk_levenshtein_function():
    sql, walker = walk("levenshtein(u.name, :target)")
    assert sql == "LEVENSHTEIN(u0_.name, ?)"
    assert walker.parameters == ["target"]


def test_walk_nested_functions_keep_argument_order():
    sql, walker = walk("levenshtein_ratio(levenshtein(p.a, :x), :y)")
    assert sql == "LEVENSHTEIN_RATIO(LEVENSHTEIN(p0_.a, ?), ?)"
    assert walker.parameters == ["x", "y"]


def test_walk_two_identification_variables():
    sql, _ = walk("levenshtein(u.name, p.name)", table_names={"u": "user", "p": "person"})
    assert sql == "LEVENSHTEIN(u0_.name, p1_.name)"


def test_sql_table_alias_empty_table_name_raises():
    walker = SqlWalker(table_names={"u": ""})
    with pytest.raises(ValueError, match="Empty table name for identification variable `u`"):
        walker.get_sql_table_alias("u")


def test_walk_string_literal_doubles_percent_for_format_placeholder():
    configuration = default_configuration()
    configuration.placeholder = "%s"
    walker = SqlWalker(configuration)
    sql = walker.render(Parser("levenshtein(u.a, '50%')", configuration).parse())
    assert sql == "LEVENSHTEIN(u0_.a, '50%%')"


def test_walk_string_literal_keeps_percent_for_qmark_placeholder():
    walker = SqlWalker(Configuration())
    assert walker.render(LiteralExpression(type=LiteralType.STRING, value="50%")) == "'50%'"


def test_walk_format_placeholder_sql_survives_interpolation():
    configuration = default_configuration()
    configuration.placeholder = "%s"
    walker = SqlWalker(configuration)
    sql = walker.render(Parser("levenshtein(u.name, '50%off') + levenshtein(u.a, :q)", configuration).parse())
    assert sql % ("'john'",) == "LEVENSHTEIN(u0_.name, '50%off') + LEVENSHTEIN(u0_.a, 'john')"
