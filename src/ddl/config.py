"""Environment-driven settings for DDL generation.

- ``DDL_DEFAULT_DIALECT``: dialect used when a builder is called without one
  (default ``postgresql``; aliases such as ``pg`` or ``sqlserver`` are accepted).
- ``DDL_IDENTIFIER_MAX_LENGTH``: overrides the per-dialect limit applied to
  generated index and constraint names.
- ``DDL_LOG_STATEMENTS``: log generated statement text at DEBUG level.
"""

from dataclasses import dataclass
from typing import Optional, Union

from common.config.env import get_env_bool, get_env_int, get_env_str
from ddl.dialect import Dialect, normalize_dialect


@dataclass(frozen=True)
class DDLSettings:
    default_dialect: Dialect = Dialect.POSTGRESQL
    identifier_max_length: Optional[int] = None
    log_statements: bool = False


def get_ddl_settings() -> DDLSettings:
    """Read DDL settings from the environment."""
    raw_dialect = get_env_str("DDL_DEFAULT_DIALECT")
    default_dialect = Dialect.POSTGRESQL
    if raw_dialect is not None and raw_dialect.strip():
        try:
            default_dialect = normalize_dialect(raw_dialect)
        except ValueError as exc:
            raise ValueError(f"Invalid value for DDL_DEFAULT_DIALECT: {exc}") from exc

    max_length = get_env_int("DDL_IDENTIFIER_MAX_LENGTH")
    if max_length is not None and max_length <= 0:
        raise ValueError(
            f"Environment variable 'DDL_IDENTIFIER_MAX_LENGTH' must be positive, got {max_length}."
        )

    return DDLSettings(
        default_dialect=default_dialect,
        identifier_max_length=max_length,
        log_statements=bool(get_env_bool("DDL_LOG_STATEMENTS", False)),
    )


def resolve_dialect(dialect: Optional[Union[Dialect, str]]) -> Dialect:
    """Return the requested dialect, or the configured default when ``None``."""
    if dialect is None:
        return get_ddl_settings().default_dialect
    return normalize_dialect(dialect)
