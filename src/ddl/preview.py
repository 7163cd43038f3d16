"""Read-only preview of generated DDL.

Preview text is the exact text that would be executed: no reformatting,
whitespace normalization or truncation is applied here.
"""

from typing import List, Optional, Union

from ddl.alter_table import build_alter_table
from ddl.create_table import build_create_table
from ddl.dialect import Dialect
from schema import AlterTableBatch, TableDefinition


def build_preview_ddl(table: TableDefinition, dialect: Optional[Union[Dialect, str]] = None) -> str:
    """Return the CREATE TABLE text for a table definition."""
    return build_create_table(table, dialect).sql


def build_alter_preview_ddl(
    batch: AlterTableBatch, dialect: Optional[Union[Dialect, str]] = None
) -> List[str]:
    """Return the SQL of every ALTER statement for a batch, in execution order."""
    return [statement.sql for statement in build_alter_table(batch, dialect)]
