import logging
from dataclasses import dataclass, field
from typing import Any, List, Sequence

from ddl.config import get_ddl_settings


@dataclass(frozen=True)
class DDLStatement:
    """A generated statement ready for the execution layer.

    DDL never carries bind parameters; ``params`` is always empty and kept so
    statements share the ``{sql, params}`` shape of other executable queries.
    """

    sql: str
    params: List[Any] = field(default_factory=list)


def log_generated(source: logging.Logger, statements: Sequence[DDLStatement]) -> None:
    """Log generated statements when ``DDL_LOG_STATEMENTS`` is enabled."""
    if not get_ddl_settings().log_statements:
        return
    for statement in statements:
        source.debug("Generated DDL: %s", statement.sql)
