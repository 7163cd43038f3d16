"""ALTER TABLE batch model.

Each operation list is a tagged union keyed on ``type``; adding an operation kind
means adding a model here and a branch in ``ddl.alter_table``.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, List, Literal, Optional, Union

from pydantic import Field, field_validator

from .base import DefinitionModel
from .column_def import ColumnDefinition
from .constraint_def import ConstraintDefinition
from .index_def import IndexDefinition


class CommentAction(str, Enum):
    UNCHANGED = "unchanged"
    CLEAR = "clear"
    SET = "set"


class CommentChange(DefinitionModel):
    """Tri-state comment edit: leave as is, remove, or replace."""

    action: CommentAction = CommentAction.UNCHANGED
    value: Optional[str] = None

    @classmethod
    def unchanged(cls) -> "CommentChange":
        return cls(action=CommentAction.UNCHANGED)

    @classmethod
    def clear(cls) -> "CommentChange":
        return cls(action=CommentAction.CLEAR)

    @classmethod
    def set(cls, value: str) -> "CommentChange":
        return cls(action=CommentAction.SET, value=value)


# Column operations


class AddColumn(DefinitionModel):
    type: Literal["add"] = "add"
    column: ColumnDefinition


class DropColumn(DefinitionModel):
    type: Literal["drop"] = "drop"
    column_name: str
    cascade: bool = False


class RenameColumn(DefinitionModel):
    type: Literal["rename"] = "rename"
    old_name: str
    new_name: str


class SetColumnType(DefinitionModel):
    type: Literal["set_type"] = "set_type"
    column_name: str
    new_type: str
    using: Optional[str] = None


class SetColumnNullable(DefinitionModel):
    type: Literal["set_nullable"] = "set_nullable"
    column_name: str
    nullable: bool


class SetColumnDefault(DefinitionModel):
    """Set the default; ``default_value=None`` drops it."""

    type: Literal["set_default"] = "set_default"
    column_name: str
    default_value: Optional[str] = None


class SetColumnComment(DefinitionModel):
    """Set the column comment; ``comment=None`` clears it."""

    type: Literal["set_comment"] = "set_comment"
    column_name: str
    comment: Optional[str] = None


ColumnOperation = Annotated[
    Union[
        AddColumn,
        DropColumn,
        RenameColumn,
        SetColumnType,
        SetColumnNullable,
        SetColumnDefault,
        SetColumnComment,
    ],
    Field(discriminator="type"),
]


# Constraint operations


class AddConstraint(DefinitionModel):
    type: Literal["add_constraint"] = "add_constraint"
    constraint: ConstraintDefinition


class DropConstraint(DefinitionModel):
    type: Literal["drop_constraint"] = "drop_constraint"
    name: str
    cascade: bool = False


class RenameConstraint(DefinitionModel):
    type: Literal["rename_constraint"] = "rename_constraint"
    old_name: str
    new_name: str


ConstraintOperation = Annotated[
    Union[AddConstraint, DropConstraint, RenameConstraint],
    Field(discriminator="type"),
]


# Index operations


class CreateIndex(DefinitionModel):
    type: Literal["create_index"] = "create_index"
    index: IndexDefinition


class DropIndex(DefinitionModel):
    type: Literal["drop_index"] = "drop_index"
    name: str
    if_exists: bool = True
    concurrent: bool = False
    cascade: bool = False


class RenameIndex(DefinitionModel):
    type: Literal["rename_index"] = "rename_index"
    old_name: str
    new_name: str


class Reindex(DefinitionModel):
    type: Literal["reindex"] = "reindex"
    name: str
    concurrent: bool = False


IndexOperation = Annotated[
    Union[CreateIndex, DropIndex, RenameIndex, Reindex],
    Field(discriminator="type"),
]


class AlterTableBatch(DefinitionModel):
    """A set of changes against one existing table.

    ``comment`` accepts a ``CommentChange``, a string (set) or ``None`` (clear);
    leaving it out keeps the current comment.
    """

    schema_name: str = Field("public", alias="schema")
    table: str
    rename_table: Optional[str] = None
    set_schema: Optional[str] = None
    comment: CommentChange = Field(default_factory=CommentChange.unchanged)
    column_operations: List[ColumnOperation] = Field(default_factory=list)
    constraint_operations: List[ConstraintOperation] = Field(default_factory=list)
    index_operations: List[IndexOperation] = Field(default_factory=list)

    @field_validator("comment", mode="before")
    @classmethod
    def _coerce_comment(cls, value: Any) -> Any:
        if value is None:
            return CommentChange.clear()
        if isinstance(value, str):
            return CommentChange.set(value)
        return value
