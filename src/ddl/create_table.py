"""CREATE TABLE and DROP TABLE synthesis.

``build_create_table`` returns one ``DDLStatement`` whose ``sql`` holds the table
statement followed by its index and comment statements, separated by blank lines.
Clause and option support is looked up in the dialect capability table; options a
dialect lacks are left out of the output.
"""

import logging
from typing import List, Optional, Union

from ddl.config import resolve_dialect
from ddl.dialect import Dialect, capabilities_for_dialect
from ddl.indexes import build_create_index
from ddl.quoting import build_qualified_table_ref, quote_identifier, quote_string_literal
from ddl.statement import DDLStatement, log_generated
from schema import (
    ColumnDefinition,
    ConstraintDefinition,
    ConstraintType,
    DefaultType,
    TableDefinition,
)

logger = logging.getLogger(__name__)

DialectArg = Optional[Union[Dialect, str]]


def _quote_list(names: List[str], dialect: Dialect) -> str:
    return ", ".join(quote_identifier(name, dialect) for name in names)


def _format_data_type(column: ColumnDefinition, dialect: Dialect) -> str:
    data_type = column.data_type
    if column.length is not None:
        data_type += f"({column.length})"
    elif column.precision is not None:
        if column.scale is not None:
            data_type += f"({column.precision},{column.scale})"
        else:
            data_type += f"({column.precision})"

    if column.is_array:
        if capabilities_for_dialect(dialect).supports_array_types:
            data_type += "[]"
        else:
            logger.debug(
                "Dropping array marker on %s: unsupported by %s", column.name, dialect.value
            )
    return data_type


def _default_expression(column: ColumnDefinition, dialect: Dialect) -> Optional[str]:
    if column.default_value:
        return column.default_value
    if (
        column.default_type == DefaultType.SEQUENCE
        and column.sequence_name
        and dialect == Dialect.POSTGRESQL
    ):
        return f"nextval({quote_string_literal(column.sequence_name)})"
    return None


def build_column_clause(
    column: ColumnDefinition, dialect: DialectArg = None, *, inline_primary_key: bool = True
) -> str:
    """Render one column definition as used in CREATE TABLE and ADD COLUMN.

    ``inline_primary_key`` is False when the column is part of a composite key,
    which is emitted as a table constraint instead.
    """
    d = resolve_dialect(dialect)
    parts = [quote_identifier(column.name, d), _format_data_type(column, d)]

    if column.collation:
        parts.append(f"COLLATE {quote_identifier(column.collation, d)}")
    if not column.is_nullable:
        parts.append("NOT NULL")

    default = _default_expression(column, d)
    if default:
        parts.append(f"DEFAULT {default}")
    if column.check_constraint:
        parts.append(f"CHECK ({column.check_constraint})")

    if column.is_primary_key and inline_primary_key:
        parts.append("PRIMARY KEY")
    elif column.is_unique:
        parts.append("UNIQUE")

    if column.comment and capabilities_for_dialect(d).comment_style == "inline":
        parts.append(f"COMMENT {quote_string_literal(column.comment)}")

    return " ".join(parts)


def build_constraint_clause(
    constraint: ConstraintDefinition, table_schema: Optional[str], dialect: DialectArg = None
) -> Optional[str]:
    """Render a table constraint, or ``None`` when the dialect cannot express it.

    Foreign keys without ``referenced_schema`` reference ``table_schema``.
    """
    d = resolve_dialect(dialect)
    caps = capabilities_for_dialect(d)
    prefix = f"CONSTRAINT {quote_identifier(constraint.name, d)} " if constraint.name else ""

    if constraint.type == ConstraintType.PRIMARY_KEY:
        body = f"PRIMARY KEY ({_quote_list(constraint.columns, d)})"
    elif constraint.type == ConstraintType.FOREIGN_KEY:
        referenced = build_qualified_table_ref(
            constraint.referenced_schema or table_schema, constraint.referenced_table or "", d
        )
        body = (
            f"FOREIGN KEY ({_quote_list(constraint.columns, d)}) "
            f"REFERENCES {referenced} ({_quote_list(constraint.referenced_columns, d)})"
        )
        if constraint.on_delete is not None:
            body += f" ON DELETE {constraint.on_delete.value}"
        if constraint.on_update is not None:
            body += f" ON UPDATE {constraint.on_update.value}"
    elif constraint.type == ConstraintType.UNIQUE:
        body = f"UNIQUE ({_quote_list(constraint.columns, d)})"
    elif constraint.type == ConstraintType.CHECK:
        body = f"CHECK ({constraint.check_expression or ''})"
    else:
        if not caps.supports_exclude_constraints:
            logger.debug(
                "Skipping EXCLUDE constraint %s: unsupported by %s", constraint.id, d.value
            )
            return None
        elements = ", ".join(
            f"{quote_identifier(element.column, d)} WITH {element.operator}"
            for element in constraint.exclude_elements
        )
        using = f" USING {constraint.exclude_using}" if constraint.exclude_using else ""
        body = f"EXCLUDE{using} ({elements})"

    return prefix + body


def _table_options(table: TableDefinition, dialect: Dialect) -> List[str]:
    caps = capabilities_for_dialect(dialect)
    options: List[str] = []

    if table.inherits:
        if caps.supports_inherits:
            options.append(f"INHERITS ({_quote_list(table.inherits, dialect)})")
        else:
            logger.debug("Dropping INHERITS on %s: unsupported by %s", table.name, dialect.value)

    if table.partition is not None:
        if caps.supports_partition_by:
            options.append(
                f"PARTITION BY {table.partition.type.value} "
                f"({_quote_list(table.partition.columns, dialect)})"
            )
        else:
            logger.debug(
                "Dropping PARTITION BY on %s: unsupported by %s", table.name, dialect.value
            )

    if table.tablespace:
        if caps.supports_tablespace:
            options.append(f"TABLESPACE {quote_identifier(table.tablespace, dialect)}")
        else:
            logger.debug("Dropping TABLESPACE on %s: unsupported by %s", table.name, dialect.value)

    if table.comment and caps.comment_style == "inline":
        options.append(f"COMMENT = {quote_string_literal(table.comment)}")

    return options


def build_comment_statements(table: TableDefinition, dialect: DialectArg = None) -> List[str]:
    """Return ``COMMENT ON`` statements for the table and its columns.

    Empty for dialects that render comments inline or do not support them.
    """
    d = resolve_dialect(dialect)
    caps = capabilities_for_dialect(d)
    has_comments = bool(table.comment) or any(column.comment for column in table.columns)
    if caps.comment_style != "comment_on":
        if has_comments and caps.comment_style == "none":
            logger.debug("Skipping comments on %s: unsupported by %s", table.name, d.value)
        return []

    ref = build_qualified_table_ref(table.schema_name, table.name, d)
    statements: List[str] = []
    if table.comment:
        statements.append(f"COMMENT ON TABLE {ref} IS {quote_string_literal(table.comment)};")
    for column in table.columns:
        if column.comment:
            statements.append(
                f"COMMENT ON COLUMN {ref}.{quote_identifier(column.name, d)} "
                f"IS {quote_string_literal(column.comment)};"
            )
    return statements


def build_create_table(table: TableDefinition, dialect: DialectArg = None) -> DDLStatement:
    """Build CREATE TABLE plus the table's CREATE INDEX and COMMENT statements.

    The definition is not validated here; run ``validate_table_definition``
    first for user-authored input.
    """
    d = resolve_dialect(dialect)
    caps = capabilities_for_dialect(d)
    ref = build_qualified_table_ref(table.schema_name, table.name, d)

    unlogged = ""
    if table.unlogged:
        if caps.supports_unlogged:
            unlogged = "UNLOGGED "
        else:
            logger.debug("Dropping UNLOGGED on %s: unsupported by %s", table.name, d.value)

    pk_columns = table.primary_key_columns()
    inline_pk = len(pk_columns) == 1
    definitions = [
        build_column_clause(column, d, inline_primary_key=inline_pk) for column in table.columns
    ]
    if len(pk_columns) > 1:
        definitions.append(f"PRIMARY KEY ({_quote_list([c.name for c in pk_columns], d)})")

    for constraint in table.constraints:
        clause = build_constraint_clause(constraint, table.schema_name, d)
        if clause is not None:
            definitions.append(clause)

    body = ",\n".join(f"  {definition}" for definition in definitions)
    create = f"CREATE {unlogged}TABLE {ref} (\n{body}\n)"
    options = _table_options(table, d)
    if options:
        create += " " + " ".join(options)
    create += ";"

    statements = [create]
    statements.extend(
        build_create_index(table.schema_name, table.name, index, d).sql for index in table.indexes
    )
    statements.extend(build_comment_statements(table, d))

    logger.debug(
        "Built CREATE TABLE for %s (%s): %d statement(s)", table.name, d.value, len(statements)
    )
    result = DDLStatement(sql="\n\n".join(statements))
    log_generated(logger, [result])
    return result


def build_drop_table(
    schema: Optional[str], table: str, cascade: bool = False, dialect: DialectArg = None
) -> DDLStatement:
    """Build ``DROP TABLE IF EXISTS {ref}[ CASCADE];``."""
    d = resolve_dialect(dialect)
    ref = build_qualified_table_ref(schema, table, d)
    statement = DDLStatement(sql=f"DROP TABLE IF EXISTS {ref}{' CASCADE' if cascade else ''};")
    log_generated(logger, [statement])
    return statement
