"""CREATE/DROP/RENAME INDEX and REINDEX synthesis.

PostgreSQL and SQLite keep index names in the schema namespace, so statements
address an index by its (optionally schema-qualified) name. MySQL and SQL Server
scope index names to their table and need ``ON {table}`` or an ALTER TABLE form.
"""

import logging
from typing import Optional, Union

from ddl.config import resolve_dialect
from ddl.dialect import Dialect, capabilities_for_dialect
from ddl.naming import generate_index_name
from ddl.quoting import build_qualified_table_ref, quote_identifier, quote_string_literal
from ddl.statement import DDLStatement, log_generated
from schema import IndexColumn, IndexDefinition, IndexMethod

logger = logging.getLogger(__name__)

DialectArg = Optional[Union[Dialect, str]]


def index_name_for(table: str, index: IndexDefinition, dialect: DialectArg = None) -> str:
    """Return the index name, generating ``idx_{table}_{cols}`` when unnamed."""
    if index.name:
        return index.name
    return generate_index_name(table, index.column_names, resolve_dialect(dialect))


def _index_column_clause(column: IndexColumn, dialect: Dialect) -> str:
    clause = quote_identifier(column.name, dialect)
    if column.order is not None:
        clause += f" {column.order.value}"
    if column.nulls_position is not None:
        clause += f" NULLS {column.nulls_position.value}"
    return clause


def build_create_index(
    schema: Optional[str], table: str, index: IndexDefinition, dialect: DialectArg = None
) -> DDLStatement:
    """Build ``CREATE [UNIQUE] INDEX [CONCURRENTLY] ...`` for one index.

    Features the dialect lacks (CONCURRENTLY, INCLUDE) are dropped rather than
    reported; the remaining statement is still valid for the target.
    """
    d = resolve_dialect(dialect)
    caps = capabilities_for_dialect(d)

    parts = ["CREATE"]
    if index.is_unique:
        parts.append("UNIQUE")
    parts.append("INDEX")
    if index.concurrent:
        if caps.supports_concurrently:
            parts.append("CONCURRENTLY")
        else:
            logger.debug("Dropping CONCURRENTLY for index on %s: unsupported by %s", table, d.value)

    parts.append(quote_identifier(index_name_for(table, index, d), d))
    parts.append("ON")
    parts.append(build_qualified_table_ref(schema, table, d))

    if index.method is not None and index.method != IndexMethod.BTREE:
        parts.append(f"USING {index.method.value}")

    parts.append("(" + ", ".join(_index_column_clause(c, d) for c in index.columns) + ")")

    if index.include:
        if caps.supports_include_columns:
            parts.append(
                "INCLUDE (" + ", ".join(quote_identifier(c, d) for c in index.include) + ")"
            )
        else:
            logger.debug(
                "Dropping INCLUDE columns for index on %s: unsupported by %s", table, d.value
            )

    if index.where:
        parts.append(f"WHERE {index.where}")

    statement = DDLStatement(sql=" ".join(parts) + ";")
    log_generated(logger, [statement])
    return statement


def build_drop_index(
    schema: Optional[str],
    table: str,
    name: str,
    dialect: DialectArg = None,
    *,
    if_exists: bool = True,
    concurrent: bool = False,
    cascade: bool = False,
) -> DDLStatement:
    """Build the dialect's DROP INDEX statement."""
    d = resolve_dialect(dialect)
    caps = capabilities_for_dialect(d)
    exists = " IF EXISTS" if if_exists else ""

    if d == Dialect.POSTGRESQL:
        concurrently = " CONCURRENTLY" if concurrent and caps.supports_concurrently else ""
        sql = (
            f"DROP INDEX{concurrently}{exists} "
            f"{build_qualified_table_ref(schema, name, d)}"
            f"{' CASCADE' if cascade else ''};"
        )
    elif d == Dialect.SQLITE:
        sql = f"DROP INDEX{exists} {build_qualified_table_ref(schema, name, d)};"
    elif d == Dialect.MYSQL:
        # MySQL has no IF EXISTS for DROP INDEX.
        sql = (
            f"DROP INDEX {quote_identifier(name, d)} "
            f"ON {build_qualified_table_ref(schema, table, d)};"
        )
    else:
        sql = (
            f"DROP INDEX{exists} {quote_identifier(name, d)} "
            f"ON {build_qualified_table_ref(schema, table, d)};"
        )

    if concurrent and not (d == Dialect.POSTGRESQL and caps.supports_concurrently):
        logger.debug("Dropping CONCURRENTLY for DROP INDEX %s: unsupported by %s", name, d.value)
    return DDLStatement(sql=sql)


def build_rename_index(
    schema: Optional[str], table: str, old_name: str, new_name: str, dialect: DialectArg = None
) -> DDLStatement:
    """Build the dialect's index rename statement."""
    d = resolve_dialect(dialect)
    caps = capabilities_for_dialect(d)

    if d == Dialect.MYSQL:
        sql = (
            f"ALTER TABLE {build_qualified_table_ref(schema, table, d)} "
            f"RENAME INDEX {quote_identifier(old_name, d)} TO {quote_identifier(new_name, d)};"
        )
    elif d == Dialect.MSSQL:
        object_name = f"{schema or caps.default_schema}.{table}.{old_name}"
        sql = (
            f"EXEC sp_rename {quote_string_literal(object_name)}, "
            f"{quote_string_literal(new_name)}, 'INDEX';"
        )
    else:
        # SQLite has no ALTER INDEX; the PostgreSQL form is emitted unchanged.
        sql = (
            f"ALTER INDEX {build_qualified_table_ref(schema, old_name, d)} "
            f"RENAME TO {quote_identifier(new_name, d)};"
        )
    return DDLStatement(sql=sql)


def build_reindex(
    schema: Optional[str],
    table: str,
    name: str,
    dialect: DialectArg = None,
    *,
    concurrent: bool = False,
) -> DDLStatement:
    """Build a statement that rebuilds one index."""
    d = resolve_dialect(dialect)
    caps = capabilities_for_dialect(d)

    if d == Dialect.POSTGRESQL:
        concurrently = " CONCURRENTLY" if concurrent and caps.supports_concurrently else ""
        sql = f"REINDEX INDEX{concurrently} {build_qualified_table_ref(schema, name, d)};"
    elif d == Dialect.SQLITE:
        sql = f"REINDEX {build_qualified_table_ref(schema, name, d)};"
    elif d == Dialect.MSSQL:
        sql = (
            f"ALTER INDEX {quote_identifier(name, d)} "
            f"ON {build_qualified_table_ref(schema, table, d)} REBUILD;"
        )
    else:
        # MySQL cannot rebuild a single index; OPTIMIZE rebuilds the table and its indexes.
        sql = f"OPTIMIZE TABLE {build_qualified_table_ref(schema, table, d)};"
    return DDLStatement(sql=sql)
