from enum import Enum
from typing import List, Optional

from pydantic import Field

from .base import DefinitionModel


class IndexMethod(str, Enum):
    """Index access methods. ``btree`` is the implicit default."""

    BTREE = "btree"
    HASH = "hash"
    GIN = "gin"
    GIST = "gist"
    SPGIST = "spgist"
    BRIN = "brin"


class SortOrder(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


class NullsPosition(str, Enum):
    FIRST = "FIRST"
    LAST = "LAST"


class IndexColumn(DefinitionModel):
    """A key column of an index with its optional ordering."""

    name: str
    order: Optional[SortOrder] = None
    nulls_position: Optional[NullsPosition] = None


class IndexDefinition(DefinitionModel):
    """Canonical representation of an index on a single table."""

    id: str = ""
    name: Optional[str] = None
    columns: List[IndexColumn] = Field(default_factory=list)
    is_unique: bool = False
    method: Optional[IndexMethod] = None
    where: Optional[str] = Field(None, description="Partial-index predicate, raw SQL")
    include: List[str] = Field(default_factory=list, description="Covering (non-key) columns")
    concurrent: bool = False

    @property
    def column_names(self) -> List[str]:
        return [column.name for column in self.columns]
