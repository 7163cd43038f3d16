"""Unit tests for identifier quoting and table references."""

import pytest

from ddl.dialect import Dialect
from ddl.quoting import (
    build_fully_qualified_table_ref,
    build_qualified_table_ref,
    quote_identifier,
    quote_string_literal,
)


class TestPostgresStyle:
    """PostgreSQL and SQLite wrap identifiers in double quotes."""

    @pytest.mark.parametrize("dialect", ["postgresql", "sqlite"])
    def test_quotes_simple_identifiers(self, dialect):
        assert quote_identifier("users", dialect) == '"users"'
        assert quote_identifier("created_at", dialect) == '"created_at"'

    def test_escapes_embedded_double_quotes_by_doubling(self):
        assert quote_identifier('user"name', "postgresql") == '"user""name"'
        assert quote_identifier('a"b"c', "postgresql") == '"a""b""c"'

    def test_special_characters_and_reserved_words(self):
        assert quote_identifier("user name", "postgresql") == '"user name"'
        assert quote_identifier("123numbers", "postgresql") == '"123numbers"'
        assert quote_identifier("select", "postgresql") == '"select"'

    def test_empty_string(self):
        assert quote_identifier("", "postgresql") == '""'


class TestMySQLStyle:
    def test_quotes_with_backticks(self):
        assert quote_identifier("users", "mysql") == "`users`"

    def test_escapes_embedded_backticks(self):
        assert quote_identifier("user`name", "mysql") == "`user``name`"
        assert quote_identifier("a`b`c", "mysql") == "`a``b``c`"

    def test_empty_string(self):
        assert quote_identifier("", "mysql") == "``"


class TestMSSQLStyle:
    def test_quotes_with_brackets(self):
        assert quote_identifier("users", "mssql") == "[users]"
        assert quote_identifier("table-name", "mssql") == "[table-name]"

    def test_escapes_right_brackets(self):
        assert quote_identifier("user]name", "mssql") == "[user]]name]"
        assert quote_identifier("a]b]c", "mssql") == "[a]]b]]c]"

    def test_left_bracket_is_not_escaped(self):
        assert quote_identifier("user[name", "mssql") == "[user[name]"

    def test_empty_string(self):
        assert quote_identifier("", "mssql") == "[]"


@pytest.mark.parametrize("dialect", list(Dialect))
@pytest.mark.parametrize("name", ["users", 'we"ird', "back`tick", "br]acket", "", "x"])
def test_quoting_is_idempotent(dialect, name):
    """Quoting an already quoted identifier returns it unchanged."""
    once = quote_identifier(name, dialect)
    assert quote_identifier(once, dialect) == once


@pytest.mark.parametrize(
    "dialect, char, name",
    [
        (Dialect.POSTGRESQL, '"', 'a"b"c'),
        (Dialect.SQLITE, '"', 'x"y'),
        (Dialect.MYSQL, "`", "a`b``c"),
    ],
)
def test_escaped_quote_count_doubles(dialect, char, name):
    quoted = quote_identifier(name, dialect)
    assert quoted.count(char) == 2 * name.count(char) + 2


def test_mssql_closing_bracket_count_doubles():
    name = "a]b]c"
    quoted = quote_identifier(name, Dialect.MSSQL)
    assert quoted.count("]") == 2 * name.count("]") + 1
    assert quoted.count("[") == 1


def test_qualified_ref_omits_default_schema():
    assert build_qualified_table_ref("public", "users", "postgresql") == '"users"'
    assert build_qualified_table_ref("dbo", "users", "mssql") == "[users]"
    assert build_qualified_table_ref("public", "users", "sqlite") == '"users"'
    assert build_qualified_table_ref("main", "users", "sqlite") == '"users"'


def test_qualified_ref_keeps_other_schemas():
    assert build_qualified_table_ref("analytics", "events", "postgresql") == '"analytics"."events"'
    assert build_qualified_table_ref("sales", "orders", "mssql") == "[sales].[orders]"
    assert build_qualified_table_ref("shop", "orders", "mysql") == "`shop`.`orders`"


def test_qualified_ref_mysql_omits_public_only():
    assert build_qualified_table_ref("public", "users", "mysql") == "`users`"
    assert build_qualified_table_ref("main", "users", "mysql") == "`main`.`users`"
    assert build_qualified_table_ref("", "users", "mysql") == "`users`"


def test_fully_qualified_ref_keeps_default_schema():
    assert build_fully_qualified_table_ref("public", "users", "postgresql") == '"public"."users"'
    assert build_fully_qualified_table_ref("dbo", "users", "mssql") == "[dbo].[users]"
    assert build_fully_qualified_table_ref("", "users", "postgresql") == '"users"'


def test_quote_string_literal_doubles_single_quotes():
    assert quote_string_literal("it's") == "'it''s'"
    assert quote_string_literal("") == "''"
