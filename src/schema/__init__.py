"""Dialect-independent schema definition models."""

from .alter_batch import (
    AddColumn,
    AddConstraint,
    AlterTableBatch,
    ColumnOperation,
    CommentAction,
    CommentChange,
    ConstraintOperation,
    CreateIndex,
    DropColumn,
    DropConstraint,
    DropIndex,
    IndexOperation,
    Reindex,
    RenameColumn,
    RenameConstraint,
    RenameIndex,
    SetColumnComment,
    SetColumnDefault,
    SetColumnNullable,
    SetColumnType,
)
from .column_def import ColumnDefinition, DefaultType
from .constraint_def import (
    ConstraintDefinition,
    ConstraintType,
    ExcludeElement,
    ReferentialAction,
)
from .index_def import IndexColumn, IndexDefinition, IndexMethod, NullsPosition, SortOrder
from .table_def import PartitionSpec, PartitionType, TableDefinition

__all__ = [
    "AddColumn",
    "AddConstraint",
    "AlterTableBatch",
    "ColumnDefinition",
    "ColumnOperation",
    "CommentAction",
    "CommentChange",
    "ConstraintDefinition",
    "ConstraintOperation",
    "ConstraintType",
    "CreateIndex",
    "DefaultType",
    "DropColumn",
    "DropConstraint",
    "DropIndex",
    "ExcludeElement",
    "IndexColumn",
    "IndexDefinition",
    "IndexMethod",
    "IndexOperation",
    "NullsPosition",
    "PartitionSpec",
    "PartitionType",
    "ReferentialAction",
    "Reindex",
    "RenameColumn",
    "RenameConstraint",
    "RenameIndex",
    "SetColumnComment",
    "SetColumnDefault",
    "SetColumnNullable",
    "SetColumnType",
    "SortOrder",
    "TableDefinition",
]
