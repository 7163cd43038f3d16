"""DDL synthesis for PostgreSQL, MySQL, SQLite and SQL Server.

Builders are pure functions over ``schema`` models: they read a definition and
return statement text, never mutating input or touching a connection.
"""

from ddl.alter_table import build_alter_table
from ddl.create_table import (
    build_column_clause,
    build_constraint_clause,
    build_create_table,
    build_drop_table,
)
from ddl.dialect import Dialect, DialectCapabilities, capabilities_for_dialect, normalize_dialect
from ddl.indexes import build_create_index, build_drop_index, build_reindex, build_rename_index
from ddl.naming import generate_constraint_name, generate_index_name
from ddl.preview import build_alter_preview_ddl, build_preview_ddl
from ddl.quoting import (
    build_fully_qualified_table_ref,
    build_qualified_table_ref,
    quote_identifier,
    quote_string_literal,
)
from ddl.statement import DDLStatement
from ddl.validation import (
    ValidationIssue,
    ValidationResult,
    validate_constraint_definition,
    validate_index_definition,
    validate_table_definition,
)

__all__ = [
    "DDLStatement",
    "Dialect",
    "DialectCapabilities",
    "ValidationIssue",
    "ValidationResult",
    "build_alter_preview_ddl",
    "build_alter_table",
    "build_column_clause",
    "build_constraint_clause",
    "build_create_index",
    "build_create_table",
    "build_drop_index",
    "build_drop_table",
    "build_fully_qualified_table_ref",
    "build_preview_ddl",
    "build_qualified_table_ref",
    "build_reindex",
    "build_rename_index",
    "capabilities_for_dialect",
    "generate_constraint_name",
    "generate_index_name",
    "normalize_dialect",
    "quote_identifier",
    "quote_string_literal",
    "validate_constraint_definition",
    "validate_index_definition",
    "validate_table_definition",
]
