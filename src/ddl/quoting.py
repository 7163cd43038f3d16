"""Identifier quoting and qualified table references."""

from typing import Optional, Union

from ddl.dialect import Dialect, capabilities_for_dialect


def _is_wrapped(value: str, start: str, end: str) -> bool:
    return value.startswith(start) and value.endswith(end) and len(value) >= len(start) + len(end)


def quote_identifier(name: str, dialect: Union[Dialect, str]) -> str:
    """Quote an identifier using the dialect's quote pair.

    - PostgreSQL/SQLite: "identifier"
    - MySQL: `identifier`
    - MSSQL: [identifier]

    Embedded closing quote characters are doubled. For MSSQL only ``]`` is
    escaped; ``[`` may appear unescaped inside a bracketed name. Input that is
    already wrapped in the dialect's quote pair is returned unchanged.
    """
    caps = capabilities_for_dialect(dialect)
    if name and _is_wrapped(name, caps.quote_open, caps.quote_close):
        return name
    escaped = name.replace(caps.escape_char, caps.escape_char * 2)
    return f"{caps.quote_open}{escaped}{caps.quote_close}"


def build_qualified_table_ref(
    schema: Optional[str], table: str, dialect: Union[Dialect, str]
) -> str:
    """Build a quoted table reference, omitting the dialect's implicit schema."""
    caps = capabilities_for_dialect(dialect)
    if not schema or schema in caps.implicit_schemas:
        return quote_identifier(table, dialect)
    return f"{quote_identifier(schema, dialect)}.{quote_identifier(table, dialect)}"


def build_fully_qualified_table_ref(
    schema: Optional[str], table: str, dialect: Union[Dialect, str]
) -> str:
    """Build a quoted table reference that always includes a non-empty schema.

    Useful where output must be explicit even for default schemas, e.g. exports.
    """
    if not schema:
        return quote_identifier(table, dialect)
    return f"{quote_identifier(schema, dialect)}.{quote_identifier(table, dialect)}"


def quote_string_literal(value: str) -> str:
    """Render text as a single-quoted SQL string literal."""
    return "'" + value.replace("'", "''") + "'"
