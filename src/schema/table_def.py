from enum import Enum
from typing import List, Optional

from pydantic import Field

from .base import DefinitionModel
from .column_def import ColumnDefinition
from .constraint_def import ConstraintDefinition
from .index_def import IndexDefinition


class PartitionType(str, Enum):
    RANGE = "RANGE"
    LIST = "LIST"
    HASH = "HASH"


class PartitionSpec(DefinitionModel):
    """Declarative partitioning clause (PostgreSQL)."""

    type: PartitionType
    columns: List[str] = Field(default_factory=list)


class TableDefinition(DefinitionModel):
    """Canonical representation of a table as edited or introspected.

    ``unlogged``, ``inherits``, ``partition`` and ``tablespace`` are PostgreSQL
    options; other dialects ignore them when generating SQL.
    """

    schema_name: str = Field("public", alias="schema")
    name: str
    columns: List[ColumnDefinition] = Field(default_factory=list)
    constraints: List[ConstraintDefinition] = Field(default_factory=list)
    indexes: List[IndexDefinition] = Field(default_factory=list)
    comment: Optional[str] = None
    unlogged: bool = False
    inherits: List[str] = Field(default_factory=list)
    partition: Optional[PartitionSpec] = None
    tablespace: Optional[str] = None

    def primary_key_columns(self) -> List[ColumnDefinition]:
        """Columns flagged as primary key, in declaration order."""
        return [column for column in self.columns if column.is_primary_key]
