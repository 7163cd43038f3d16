from enum import Enum
from typing import Optional

from pydantic import Field

from .base import DefinitionModel


class DefaultType(str, Enum):
    """How a column default value was authored."""

    LITERAL = "literal"
    EXPRESSION = "expression"
    SEQUENCE = "sequence"


class ColumnDefinition(DefinitionModel):
    """Canonical representation of a column inside a table definition.

    ``data_type`` is the dialect-native type name. ``default_value`` and
    ``check_constraint`` are raw SQL text and are emitted verbatim.
    """

    id: str = ""
    name: str
    data_type: str
    length: Optional[int] = None
    precision: Optional[int] = None
    scale: Optional[int] = None
    is_array: bool = False
    is_nullable: bool = True
    is_primary_key: bool = False
    is_unique: bool = False
    default_value: Optional[str] = None
    default_type: Optional[DefaultType] = None
    sequence_name: Optional[str] = None
    check_constraint: Optional[str] = None
    collation: Optional[str] = None
    comment: Optional[str] = Field(None, description="Column comment text, unescaped")
