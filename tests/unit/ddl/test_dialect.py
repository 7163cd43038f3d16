"""Unit tests for dialect normalization and capabilities."""

import pytest

from ddl.dialect import DIALECT_ALIASES, Dialect, capabilities_for_dialect, normalize_dialect


class TestDialectAliases:
    """Validate alias normalization across the registry."""

    def test_all_aliases_resolve_to_canonical(self) -> None:
        for alias, canonical in DIALECT_ALIASES.items():
            assert normalize_dialect(alias) is canonical

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("PostgreSQL", Dialect.POSTGRESQL),
            ("  PG  ", Dialect.POSTGRESQL),
            ("MariaDB", Dialect.MYSQL),
            ("sqlite3", Dialect.SQLITE),
            ("SQLServer", Dialect.MSSQL),
        ],
    )
    def test_aliases_are_case_insensitive(self, raw: str, expected: Dialect) -> None:
        assert normalize_dialect(raw) is expected

    def test_enum_passes_through(self) -> None:
        assert normalize_dialect(Dialect.MSSQL) is Dialect.MSSQL

    def test_unknown_dialect_raises(self) -> None:
        with pytest.raises(ValueError, match="Unsupported SQL dialect: 'oracle'"):
            normalize_dialect("oracle")


@pytest.mark.parametrize(
    "dialect, quote_open, quote_close, default_schema",
    [
        (Dialect.POSTGRESQL, '"', '"', "public"),
        (Dialect.SQLITE, '"', '"', "public"),
        (Dialect.MYSQL, "`", "`", None),
        (Dialect.MSSQL, "[", "]", "dbo"),
    ],
)
def test_quote_pair_and_default_schema(dialect, quote_open, quote_close, default_schema):
    caps = capabilities_for_dialect(dialect)
    assert caps.quote_open == quote_open
    assert caps.quote_close == quote_close
    assert caps.default_schema == default_schema


def test_postgres_only_features():
    pg = capabilities_for_dialect("postgresql")
    assert pg.supports_concurrently
    assert pg.supports_exclude_constraints
    assert pg.supports_partition_by
    assert pg.supports_tablespace
    assert pg.supports_unlogged
    assert pg.supports_inherits
    assert pg.supports_array_types

    for other in (Dialect.MYSQL, Dialect.SQLITE, Dialect.MSSQL):
        caps = capabilities_for_dialect(other)
        assert not caps.supports_concurrently
        assert not caps.supports_exclude_constraints
        assert not caps.supports_unlogged
        assert not caps.supports_array_types


def test_identifier_limits():
    assert capabilities_for_dialect("postgresql").max_identifier_length == 63
    assert capabilities_for_dialect("mysql").max_identifier_length == 64
    assert capabilities_for_dialect("mssql").max_identifier_length == 128


def test_include_columns_supported_on_postgres_and_mssql():
    assert capabilities_for_dialect("postgresql").supports_include_columns
    assert capabilities_for_dialect("mssql").supports_include_columns
    assert not capabilities_for_dialect("mysql").supports_include_columns


def test_sqlite_treats_main_as_implicit():
    assert capabilities_for_dialect("sqlite").implicit_schemas == {"public", "main"}
    assert capabilities_for_dialect("mysql").implicit_schemas == {"public"}
    assert capabilities_for_dialect("mysql").default_schema is None
