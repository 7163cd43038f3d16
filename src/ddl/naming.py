"""Generated names for indexes and constraints.

Names are lowercased, stripped to ``[a-z0-9_]`` and cut to the target dialect's
identifier limit (PostgreSQL 63, MySQL 64, SQL Server 128; SQLite has no limit
and uses 63 for portability). ``DDL_IDENTIFIER_MAX_LENGTH`` overrides the limit.
"""

import logging
import re
from typing import Iterable, Union

from ddl.config import get_ddl_settings
from ddl.dialect import Dialect, capabilities_for_dialect
from schema import ConstraintDefinition, ConstraintType

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^a-z0-9_]")

_CONSTRAINT_SUFFIXES: dict[ConstraintType, str] = {
    ConstraintType.PRIMARY_KEY: "pkey",
    ConstraintType.FOREIGN_KEY: "fkey",
    ConstraintType.UNIQUE: "key",
    ConstraintType.CHECK: "check",
    ConstraintType.EXCLUDE: "excl",
}


def identifier_max_length(dialect: Union[Dialect, str]) -> int:
    """Return the maximum length for generated identifiers."""
    override = get_ddl_settings().identifier_max_length
    if override is not None:
        return override
    return capabilities_for_dialect(dialect).max_identifier_length


def sanitize_identifier(raw: str) -> str:
    """Lowercase and drop every character outside ``[a-z0-9_]``."""
    return _UNSAFE_CHARS.sub("", raw.lower())


def _fit(name: str, dialect: Union[Dialect, str]) -> str:
    limit = identifier_max_length(dialect)
    if len(name) > limit:
        logger.debug("Truncating generated name %s to %d characters", name, limit)
        return name[:limit]
    return name


def generate_index_name(
    table: str, column_names: Iterable[str], dialect: Union[Dialect, str]
) -> str:
    """Build ``idx_{table}_{col1}_{col2}...`` for an unnamed index."""
    raw = "_".join(["idx", table, *column_names])
    return _fit(sanitize_identifier(raw), dialect)


def generate_constraint_name(
    table: str, constraint: ConstraintDefinition, dialect: Union[Dialect, str]
) -> str:
    """Build a PostgreSQL-style name such as ``users_email_key`` or ``users_pkey``."""
    suffix = _CONSTRAINT_SUFFIXES[constraint.type]
    if constraint.type == ConstraintType.PRIMARY_KEY:
        parts = [table, suffix]
    elif constraint.type == ConstraintType.EXCLUDE:
        parts = [table, *(element.column for element in constraint.exclude_elements), suffix]
    else:
        parts = [table, *constraint.columns, suffix]
    return _fit(sanitize_identifier("_".join(parts)), dialect)
