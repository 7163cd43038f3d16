"""Unit tests for DDL preview text."""

import pytest

from ddl.alter_table import build_alter_table
from ddl.create_table import build_create_table
from ddl.preview import build_alter_preview_ddl, build_preview_ddl
from schema import DropColumn


@pytest.mark.parametrize("dialect", ["postgresql", "mysql", "sqlite", "mssql"])
def test_preview_matches_create_table(make_table, dialect):
    table = make_table(comment="User accounts")
    assert build_preview_ddl(table, dialect) == build_create_table(table, dialect).sql


def test_preview_uses_default_dialect(make_table, monkeypatch):
    monkeypatch.setenv("DDL_DEFAULT_DIALECT", "sqlserver")
    assert build_preview_ddl(make_table()).startswith("CREATE TABLE [public].[users] (")


def test_alter_preview_lists_statements_in_order(make_batch):
    batch = make_batch(rename_table="people", column_operations=[DropColumn(column_name="x")])
    preview = build_alter_preview_ddl(batch, "postgresql")
    assert preview == [statement.sql for statement in build_alter_table(batch, "postgresql")]
    assert preview == [
        'ALTER TABLE "users" RENAME TO "people";',
        'ALTER TABLE "people" DROP COLUMN "x";',
    ]


def test_alter_preview_empty_batch(make_batch):
    assert build_alter_preview_ddl(make_batch(), "mysql") == []
