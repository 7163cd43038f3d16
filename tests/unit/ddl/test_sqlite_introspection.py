"""Unit tests for mapping SQLite PRAGMA rows to table definitions."""

import sqlite3

import pytest

from ddl.create_table import build_create_table
from ddl.introspection.sqlite import (
    normalize_sqlite_type,
    referential_action_from_catalog,
    table_definition_from_pragma,
)
from schema import ConstraintDefinition, IndexColumn, IndexDefinition, ReferentialAction


@pytest.mark.parametrize(
    "declared, expected",
    [
        ("INTEGER", "integer"),
        ("bigint", "integer"),
        ("VARCHAR(32)", "text"),
        ("CLOB", "text"),
        ("", "text"),
        (None, "text"),
        ("BLOB", "blob"),
        ("DOUBLE PRECISION", "real"),
        ("FLOAT", "real"),
        ("NUMERIC", "numeric"),
        ("BOOLEAN", "boolean"),
        ("DATETIME", "datetime"),
    ],
)
def test_normalize_sqlite_type(declared, expected):
    assert normalize_sqlite_type(declared) == expected


def test_referential_action_from_catalog():
    assert referential_action_from_catalog("CASCADE") is ReferentialAction.CASCADE
    assert referential_action_from_catalog("set null") is ReferentialAction.SET_NULL
    assert referential_action_from_catalog(None) is ReferentialAction.NO_ACTION
    assert referential_action_from_catalog("SOMETHING") is ReferentialAction.NO_ACTION


def test_columns_from_table_info():
    table = table_definition_from_pragma(
        "users",
        table_info=[
            {"cid": 0, "name": "id", "type": "INTEGER", "notnull": 1, "dflt_value": None, "pk": 1},
            {"cid": 1, "name": "name", "type": "TEXT", "notnull": 0, "dflt_value": "''", "pk": 0},
        ],
    )
    assert table.schema_name == "main"
    assert table.name == "users"
    assert [(c.id, c.name, c.data_type) for c in table.columns] == [
        ("col-0", "id", "integer"),
        ("col-1", "name", "text"),
    ]
    assert table.columns[0].is_nullable is False
    assert table.columns[0].is_primary_key is True
    assert table.columns[1].default_value == "''"
    assert table.constraints == []
    assert table.indexes == []


def test_composite_foreign_key_grouped_by_id():
    table = table_definition_from_pragma(
        "line_items",
        table_info=[
            {"cid": 0, "name": "order_id", "type": "INTEGER", "notnull": 1, "pk": 0},
            {"cid": 1, "name": "line_no", "type": "INTEGER", "notnull": 1, "pk": 0},
        ],
        foreign_keys=[
            {"id": 0, "seq": 1, "table": "orders", "from": "line_no", "to": "no",
             "on_update": "NO ACTION", "on_delete": "CASCADE"},
            {"id": 0, "seq": 0, "table": "orders", "from": "order_id", "to": "id",
             "on_update": "NO ACTION", "on_delete": "CASCADE"},
        ],
    )
    assert table.constraints == [
        ConstraintDefinition(
            id="constraint-0",
            name="fk_line_items_order_id",
            type="foreign_key",
            columns=["order_id", "line_no"],
            referenced_schema="main",
            referenced_table="orders",
            referenced_columns=["id", "no"],
            on_update=ReferentialAction.NO_ACTION,
            on_delete=ReferentialAction.CASCADE,
        )
    ]


def test_constraint_backed_indexes_are_not_listed():
    table = table_definition_from_pragma(
        "users",
        table_info=[
            {"cid": 0, "name": "a", "type": "TEXT", "notnull": 0, "pk": 1},
            {"cid": 1, "name": "b", "type": "TEXT", "notnull": 0, "pk": 2},
            {"cid": 2, "name": "email", "type": "TEXT", "notnull": 0, "pk": 0},
        ],
        index_list=[
            {"seq": 0, "name": "sqlite_autoindex_users_1", "unique": 1, "origin": "pk"},
            {"seq": 1, "name": "sqlite_autoindex_users_2", "unique": 1, "origin": "u"},
            {"seq": 2, "name": "users_email_lower", "unique": 0, "origin": "c"},
        ],
        index_info={
            "sqlite_autoindex_users_1": [
                {"seqno": 0, "cid": 0, "name": "a"},
                {"seqno": 1, "cid": 1, "name": "b"},
            ],
            "sqlite_autoindex_users_2": [{"seqno": 0, "cid": 2, "name": "email"}],
            "users_email_lower": [{"seqno": 0, "cid": 2, "name": "email"}],
        },
    )
    assert [column.is_unique for column in table.columns] == [False, False, True]
    assert table.indexes == [
        IndexDefinition(
            id="index-0",
            name="users_email_lower",
            columns=[IndexColumn(name="email")],
            is_unique=False,
            method="btree",
        )
    ]


def _pragma(connection, statement):
    return [dict(row) for row in connection.execute(statement).fetchall()]


def test_round_trip_through_sqlite(make_table, make_column):
    table = make_table(
        schema="main",
        name="orders",
        columns=[
            make_column(
                id="a", name="id", data_type="integer", is_nullable=False, is_primary_key=True
            ),
            make_column(id="b", name="user_id", data_type="integer", is_nullable=False),
            make_column(
                id="c", name="sku", data_type="varchar", length=32, is_nullable=False,
                is_unique=True,
            ),
            make_column(id="d", name="amount", data_type="real", default_value="0"),
        ],
        constraints=[
            ConstraintDefinition(
                type="foreign_key",
                columns=["user_id"],
                referenced_table="users",
                referenced_columns=["id"],
                on_delete=ReferentialAction.CASCADE,
            )
        ],
        indexes=[IndexDefinition(columns=[IndexColumn(name="user_id")])],
    )

    connection = sqlite3.connect(":memory:")
    connection.row_factory = sqlite3.Row
    try:
        connection.execute("CREATE TABLE users (id INTEGER PRIMARY KEY)")
        connection.executescript(build_create_table(table, "sqlite").sql)

        index_list = _pragma(connection, 'PRAGMA index_list("orders")')
        restored = table_definition_from_pragma(
            "orders",
            table_info=_pragma(connection, 'PRAGMA table_info("orders")'),
            index_list=index_list,
            index_info={
                row["name"]: _pragma(connection, f'PRAGMA index_info("{row["name"]}")')
                for row in index_list
            },
            foreign_keys=_pragma(connection, 'PRAGMA foreign_key_list("orders")'),
        )
    finally:
        connection.close()

    assert [c.name for c in restored.columns] == ["id", "user_id", "sku", "amount"]
    assert [c.data_type for c in restored.columns] == ["integer", "integer", "text", "real"]
    assert [c.is_nullable for c in restored.columns] == [False, False, False, True]
    assert [c.is_primary_key for c in restored.columns] == [True, False, False, False]
    assert [c.is_unique for c in restored.columns] == [False, False, True, False]
    assert restored.columns[3].default_value == "0"

    (foreign_key,) = restored.constraints
    assert foreign_key.name == "fk_orders_user_id"
    assert foreign_key.referenced_table == "users"
    assert foreign_key.referenced_columns == ["id"]
    assert foreign_key.on_delete is ReferentialAction.CASCADE
    assert foreign_key.on_update is ReferentialAction.NO_ACTION

    assert [(i.name, i.column_names) for i in restored.indexes] == [
        ("idx_orders_user_id", ["user_id"])
    ]
