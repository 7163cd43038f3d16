"""ALTER TABLE batch synthesis.

Statements are emitted in a fixed order regardless of how the batch was built:

1. rename table
2. move to another schema
3. column operations (batch order)
4. constraint operations (batch order)
5. index operations (batch order)
6. table comment

Later statements address the table by its name and schema as of that point, so a
batch that renames and then adds a column targets the renamed table.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Union

from ddl.config import resolve_dialect
from ddl.create_table import build_column_clause, build_constraint_clause
from ddl.dialect import Dialect, capabilities_for_dialect
from ddl.indexes import build_create_index, build_drop_index, build_rename_index, build_reindex
from ddl.naming import generate_constraint_name
from ddl.quoting import build_qualified_table_ref, quote_identifier, quote_string_literal
from ddl.statement import DDLStatement, log_generated
from schema import (
    AddColumn,
    AddConstraint,
    AlterTableBatch,
    ColumnOperation,
    CommentAction,
    ConstraintOperation,
    CreateIndex,
    DropColumn,
    DropConstraint,
    DropIndex,
    IndexOperation,
    Reindex,
    RenameColumn,
    RenameConstraint,
    RenameIndex,
    SetColumnComment,
    SetColumnDefault,
    SetColumnNullable,
    SetColumnType,
)

logger = logging.getLogger(__name__)

DialectArg = Optional[Union[Dialect, str]]


@dataclass
class _TableTarget:
    """Schema and name of the table as the batch is applied."""

    schema: Optional[str]
    table: str
    dialect: Dialect

    @property
    def ref(self) -> str:
        return build_qualified_table_ref(self.schema, self.table, self.dialect)


def _comment_literal(comment: Optional[str]) -> str:
    return "NULL" if comment is None else quote_string_literal(comment)


def _column_statements(op: ColumnOperation, target: _TableTarget) -> List[str]:
    d = target.dialect
    alter = f"ALTER TABLE {target.ref}"

    if isinstance(op, AddColumn):
        statements = [f"{alter} ADD COLUMN {build_column_clause(op.column, d)};"]
        if op.column.comment and capabilities_for_dialect(d).comment_style == "comment_on":
            statements.append(
                f"COMMENT ON COLUMN {target.ref}.{quote_identifier(op.column.name, d)} "
                f"IS {quote_string_literal(op.column.comment)};"
            )
        return statements

    if isinstance(op, DropColumn):
        cascade = " CASCADE" if op.cascade else ""
        return [f"{alter} DROP COLUMN {quote_identifier(op.column_name, d)}{cascade};"]

    if isinstance(op, RenameColumn):
        return [
            f"{alter} RENAME COLUMN {quote_identifier(op.old_name, d)} "
            f"TO {quote_identifier(op.new_name, d)};"
        ]

    column = quote_identifier(op.column_name, d)

    if isinstance(op, SetColumnType):
        using = f" USING {op.using}" if op.using else ""
        return [f"{alter} ALTER COLUMN {column} TYPE {op.new_type}{using};"]

    if isinstance(op, SetColumnNullable):
        action = "DROP NOT NULL" if op.nullable else "SET NOT NULL"
        return [f"{alter} ALTER COLUMN {column} {action};"]

    if isinstance(op, SetColumnDefault):
        if op.default_value is None:
            return [f"{alter} ALTER COLUMN {column} DROP DEFAULT;"]
        return [f"{alter} ALTER COLUMN {column} SET DEFAULT {op.default_value};"]

    if isinstance(op, SetColumnComment):
        if capabilities_for_dialect(d).comment_style != "comment_on":
            logger.debug(
                "Skipping column comment on %s: unsupported by %s", op.column_name, d.value
            )
            return []
        return [f"COMMENT ON COLUMN {target.ref}.{column} IS {_comment_literal(op.comment)};"]

    raise TypeError(f"Unknown column operation: {type(op).__name__}")


def _constraint_statements(op: ConstraintOperation, target: _TableTarget) -> List[str]:
    d = target.dialect
    alter = f"ALTER TABLE {target.ref}"

    if isinstance(op, AddConstraint):
        constraint = op.constraint
        if not constraint.name:
            constraint = constraint.model_copy(
                update={"name": generate_constraint_name(target.table, constraint, d)}
            )
        clause = build_constraint_clause(constraint, target.schema, d)
        return [] if clause is None else [f"{alter} ADD {clause};"]

    if isinstance(op, DropConstraint):
        cascade = " CASCADE" if op.cascade else ""
        return [f"{alter} DROP CONSTRAINT {quote_identifier(op.name, d)}{cascade};"]

    if isinstance(op, RenameConstraint):
        return [
            f"{alter} RENAME CONSTRAINT {quote_identifier(op.old_name, d)} "
            f"TO {quote_identifier(op.new_name, d)};"
        ]

    raise TypeError(f"Unknown constraint operation: {type(op).__name__}")


def _index_statements(op: IndexOperation, target: _TableTarget) -> List[str]:
    d = target.dialect

    if isinstance(op, CreateIndex):
        return [build_create_index(target.schema, target.table, op.index, d).sql]

    if isinstance(op, DropIndex):
        statement = build_drop_index(
            target.schema,
            target.table,
            op.name,
            d,
            if_exists=op.if_exists,
            concurrent=op.concurrent,
            cascade=op.cascade,
        )
        return [statement.sql]

    if isinstance(op, RenameIndex):
        return [build_rename_index(target.schema, target.table, op.old_name, op.new_name, d).sql]

    if isinstance(op, Reindex):
        return [
            build_reindex(target.schema, target.table, op.name, d, concurrent=op.concurrent).sql
        ]

    raise TypeError(f"Unknown index operation: {type(op).__name__}")


def _table_comment_statements(batch: AlterTableBatch, target: _TableTarget) -> List[str]:
    change = batch.comment
    if change.action == CommentAction.UNCHANGED:
        return []

    d = target.dialect
    style = capabilities_for_dialect(d).comment_style
    value = change.value if change.action == CommentAction.SET else None

    if style == "comment_on":
        return [f"COMMENT ON TABLE {target.ref} IS {_comment_literal(value)};"]
    if style == "inline":
        return [f"ALTER TABLE {target.ref} COMMENT = {quote_string_literal(value or '')};"]
    logger.debug("Skipping table comment on %s: unsupported by %s", target.table, d.value)
    return []


def build_alter_table(batch: AlterTableBatch, dialect: DialectArg = None) -> List[DDLStatement]:
    """Build the ordered ALTER statements for a batch."""
    d = resolve_dialect(dialect)
    target = _TableTarget(schema=batch.schema_name, table=batch.table, dialect=d)
    sql: List[str] = []

    if batch.rename_table:
        sql.append(f"ALTER TABLE {target.ref} RENAME TO {quote_identifier(batch.rename_table, d)};")
        target.table = batch.rename_table

    if batch.set_schema:
        sql.append(f"ALTER TABLE {target.ref} SET SCHEMA {quote_identifier(batch.set_schema, d)};")
        target.schema = batch.set_schema

    for column_op in batch.column_operations:
        sql.extend(_column_statements(column_op, target))
    for constraint_op in batch.constraint_operations:
        sql.extend(_constraint_statements(constraint_op, target))
    for index_op in batch.index_operations:
        sql.extend(_index_statements(index_op, target))

    sql.extend(_table_comment_statements(batch, target))

    statements = [DDLStatement(sql=text) for text in sql]
    logger.debug(
        "Built ALTER TABLE batch for %s (%s): %d statement(s)", batch.table, d.value, len(sql)
    )
    log_generated(logger, statements)
    return statements
