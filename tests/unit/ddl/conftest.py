"""Shared builders for DDL tests."""

import pytest

from schema import AlterTableBatch, ColumnDefinition, TableDefinition


def build_column(**overrides) -> ColumnDefinition:
    fields = {
        "id": "col-1",
        "name": "test_column",
        "data_type": "varchar",
        "is_nullable": True,
        "is_primary_key": False,
        "is_unique": False,
    }
    fields.update(overrides)
    return ColumnDefinition(**fields)


def build_table(**overrides) -> TableDefinition:
    fields = {
        "schema": "public",
        "name": "users",
        "columns": [
            build_column(
                id="col-1", name="id", data_type="integer", is_nullable=False, is_primary_key=True
            ),
            build_column(
                id="col-2", name="name", data_type="varchar", length=100, is_nullable=False
            ),
            build_column(
                id="col-3",
                name="email",
                data_type="varchar",
                length=255,
                is_nullable=False,
                is_unique=True,
            ),
            build_column(
                id="col-4", name="created_at", data_type="timestamp", default_value="now()"
            ),
        ],
        "constraints": [],
        "indexes": [],
    }
    fields.update(overrides)
    return TableDefinition(**fields)


def build_batch(**overrides) -> AlterTableBatch:
    fields = {"schema": "public", "table": "users"}
    fields.update(overrides)
    return AlterTableBatch(**fields)


@pytest.fixture
def make_column():
    return build_column


@pytest.fixture
def make_table():
    return build_table


@pytest.fixture
def make_batch():
    return build_batch
