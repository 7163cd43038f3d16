from enum import Enum
from typing import List, Optional

from pydantic import Field

from .base import DefinitionModel


class ConstraintType(str, Enum):
    """Table-level constraint kinds."""

    PRIMARY_KEY = "primary_key"
    FOREIGN_KEY = "foreign_key"
    UNIQUE = "unique"
    CHECK = "check"
    EXCLUDE = "exclude"


class ReferentialAction(str, Enum):
    """Action applied to dependent rows when a referenced row changes."""

    NO_ACTION = "NO ACTION"
    RESTRICT = "RESTRICT"
    CASCADE = "CASCADE"
    SET_NULL = "SET NULL"
    SET_DEFAULT = "SET DEFAULT"


class ExcludeElement(DefinitionModel):
    """One ``column WITH operator`` pair of an EXCLUDE constraint."""

    column: str
    operator: str


class ConstraintDefinition(DefinitionModel):
    """Canonical representation of a table constraint.

    Only the fields matching ``type`` are read when generating SQL; the others
    are carried along untouched so editors can switch types without losing input.
    """

    id: str = ""
    name: Optional[str] = None
    type: ConstraintType
    columns: List[str] = Field(default_factory=list)

    # foreign_key
    referenced_schema: Optional[str] = None
    referenced_table: Optional[str] = None
    referenced_columns: List[str] = Field(default_factory=list)
    on_update: Optional[ReferentialAction] = None
    on_delete: Optional[ReferentialAction] = None

    # check
    check_expression: Optional[str] = None

    # exclude
    exclude_using: Optional[str] = None
    exclude_elements: List[ExcludeElement] = Field(default_factory=list)
