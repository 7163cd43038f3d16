"""SQL dialects and their DDL capabilities.

Canonical dialect IDs (lowercase):
- "postgresql"
- "mysql"
- "sqlite"
- "mssql"

User-facing aliases (case-insensitive) resolve through ``normalize_dialect``:

    >>> normalize_dialect("PG")
    <Dialect.POSTGRESQL: 'postgresql'>
    >>> normalize_dialect("sqlserver")
    <Dialect.MSSQL: 'mssql'>
"""

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Literal, Optional, Union

CommentStyle = Literal["comment_on", "inline", "none"]
IndexScope = Literal["schema", "table"]


class Dialect(str, Enum):
    """Supported target databases."""

    POSTGRESQL = "postgresql"
    MYSQL = "mysql"
    SQLITE = "sqlite"
    MSSQL = "mssql"


@dataclass(frozen=True)
class DialectCapabilities:
    """Quoting rules and DDL feature flags for one dialect."""

    dialect: Dialect
    quote_open: str
    quote_close: str
    default_schema: Optional[str] = None
    # Schemas besides the default that never need qualification.
    extra_implicit_schemas: FrozenSet[str] = frozenset()
    max_identifier_length: int = 63
    supports_concurrently: bool = False
    supports_include_columns: bool = False
    supports_exclude_constraints: bool = False
    supports_partition_by: bool = False
    supports_tablespace: bool = False
    supports_unlogged: bool = False
    supports_inherits: bool = False
    supports_array_types: bool = False
    comment_style: CommentStyle = "none"
    # Whether index names live in the schema namespace or per table.
    index_scope: IndexScope = "schema"

    @property
    def escape_char(self) -> str:
        """Character doubled inside a quoted identifier."""
        return self.quote_close

    @property
    def implicit_schemas(self) -> FrozenSet[str]:
        if self.default_schema is None:
            return self.extra_implicit_schemas
        return self.extra_implicit_schemas | {self.default_schema}


_CAPABILITIES: dict[Dialect, DialectCapabilities] = {
    Dialect.POSTGRESQL: DialectCapabilities(
        dialect=Dialect.POSTGRESQL,
        quote_open='"',
        quote_close='"',
        default_schema="public",
        max_identifier_length=63,
        supports_concurrently=True,
        supports_include_columns=True,
        supports_exclude_constraints=True,
        supports_partition_by=True,
        supports_tablespace=True,
        supports_unlogged=True,
        supports_inherits=True,
        supports_array_types=True,
        comment_style="comment_on",
        index_scope="schema",
    ),
    Dialect.MYSQL: DialectCapabilities(
        dialect=Dialect.MYSQL,
        quote_open="`",
        quote_close="`",
        default_schema=None,
        # The model default "public" names no MySQL database.
        extra_implicit_schemas=frozenset({"public"}),
        max_identifier_length=64,
        comment_style="inline",
        index_scope="table",
    ),
    Dialect.SQLITE: DialectCapabilities(
        dialect=Dialect.SQLITE,
        quote_open='"',
        quote_close='"',
        default_schema="public",
        extra_implicit_schemas=frozenset({"main"}),
        max_identifier_length=63,
        comment_style="none",
        index_scope="schema",
    ),
    Dialect.MSSQL: DialectCapabilities(
        dialect=Dialect.MSSQL,
        quote_open="[",
        quote_close="]",
        default_schema="dbo",
        max_identifier_length=128,
        supports_include_columns=True,
        comment_style="none",
        index_scope="table",
    ),
}

# Alias mappings: user-friendly names -> canonical dialect
DIALECT_ALIASES: dict[str, Dialect] = {
    # PostgreSQL aliases
    "postgresql": Dialect.POSTGRESQL,
    "postgres": Dialect.POSTGRESQL,
    "pg": Dialect.POSTGRESQL,
    # MySQL aliases
    "mysql": Dialect.MYSQL,
    "mariadb": Dialect.MYSQL,
    # SQLite aliases
    "sqlite": Dialect.SQLITE,
    "sqlite3": Dialect.SQLITE,
    # SQL Server aliases
    "mssql": Dialect.MSSQL,
    "sqlserver": Dialect.MSSQL,
    "tsql": Dialect.MSSQL,
}


def normalize_dialect(value: Union[Dialect, str]) -> Dialect:
    """Resolve a dialect or alias string to its canonical ``Dialect``.

    Raises:
        ValueError: If the value does not name a supported dialect.
    """
    if isinstance(value, Dialect):
        return value
    cleaned = (value or "").strip().lower()
    dialect = DIALECT_ALIASES.get(cleaned)
    if dialect is None:
        allowed = ", ".join(d.value for d in Dialect)
        raise ValueError(f"Unsupported SQL dialect: '{value}'. Allowed values: {allowed}")
    return dialect


def capabilities_for_dialect(dialect: Union[Dialect, str]) -> DialectCapabilities:
    """Return quoting rules and feature flags for a dialect."""
    return _CAPABILITIES[normalize_dialect(dialect)]
