"""Map SQLite PRAGMA rows to a ``TableDefinition``.

The adapter runs ``PRAGMA table_info``, ``PRAGMA index_list``, ``PRAGMA index_info``
and ``PRAGMA foreign_key_list`` and passes the rows here as mappings keyed by the
PRAGMA column names. Nothing in this module touches a connection.
"""

import logging
from collections import OrderedDict
from typing import Any, Dict, List, Mapping, Optional, Sequence

from schema import (
    ColumnDefinition,
    ConstraintDefinition,
    ConstraintType,
    IndexColumn,
    IndexDefinition,
    IndexMethod,
    ReferentialAction,
    TableDefinition,
)

logger = logging.getLogger(__name__)

Row = Mapping[str, Any]

SQLITE_SCHEMA = "main"

_REFERENTIAL_ACTIONS = {action.value: action for action in ReferentialAction}


def normalize_sqlite_type(declared: Optional[str]) -> str:
    """Map a declared SQLite column type to a type name by affinity rules."""
    declared = declared or ""
    upper = declared.upper()

    if "INT" in upper:
        return "integer"
    if "CHAR" in upper or "CLOB" in upper or "TEXT" in upper or upper == "":
        return "text"
    if "BLOB" in upper or upper == "NONE":
        return "blob"
    if "REAL" in upper or "FLOA" in upper or "DOUB" in upper:
        return "real"
    # NUMERIC affinity (NUMERIC, DECIMAL, BOOLEAN, DATE, DATETIME) keeps the declared name.
    return declared.lower()


def referential_action_from_catalog(value: Optional[str]) -> ReferentialAction:
    """Map a catalog ON UPDATE/ON DELETE string; unknown values are NO ACTION."""
    return _REFERENTIAL_ACTIONS.get((value or "").strip().upper(), ReferentialAction.NO_ACTION)


def _columns_from_table_info(table_info: Sequence[Row]) -> List[ColumnDefinition]:
    return [
        ColumnDefinition(
            id=f"col-{position}",
            name=row["name"],
            data_type=normalize_sqlite_type(row.get("type")),
            is_nullable=row.get("notnull", 0) == 0,
            is_primary_key=(row.get("pk") or 0) > 0,
            is_unique=False,
            default_value=row.get("dflt_value") or None,
        )
        for position, row in enumerate(table_info)
    ]


def _foreign_keys(table: str, foreign_keys: Sequence[Row]) -> List[ConstraintDefinition]:
    groups: "OrderedDict[Any, List[Row]]" = OrderedDict()
    for row in foreign_keys:
        groups.setdefault(row["id"], []).append(row)

    constraints: List[ConstraintDefinition] = []
    for position, rows in enumerate(groups.values()):
        rows = sorted(rows, key=lambda r: r.get("seq", 0))
        first = rows[0]
        constraints.append(
            ConstraintDefinition(
                id=f"constraint-{position}",
                name=f"fk_{table}_{first['from']}",
                type=ConstraintType.FOREIGN_KEY,
                columns=[r["from"] for r in rows],
                referenced_schema=SQLITE_SCHEMA,
                referenced_table=first["table"],
                referenced_columns=[r["to"] for r in rows],
                on_update=referential_action_from_catalog(first.get("on_update")),
                on_delete=referential_action_from_catalog(first.get("on_delete")),
            )
        )
    return constraints


def table_definition_from_pragma(
    table: str,
    table_info: Sequence[Row],
    index_list: Sequence[Row] = (),
    index_info: Optional[Mapping[str, Sequence[Row]]] = None,
    foreign_keys: Sequence[Row] = (),
) -> TableDefinition:
    """Build a ``TableDefinition`` from PRAGMA rows of one SQLite table.

    Args:
        table: Table name.
        table_info: Rows of ``PRAGMA table_info`` (cid, name, type, notnull, dflt_value, pk).
        index_list: Rows of ``PRAGMA index_list`` (seq, name, unique, origin, partial).
        index_info: ``PRAGMA index_info`` rows keyed by index name (seqno, cid, name).
        foreign_keys: Rows of ``PRAGMA foreign_key_list``
            (id, seq, table, from, to, on_update, on_delete, match).

    Returns:
        The table definition in the ``main`` schema. Indexes SQLite created for
        PRIMARY KEY and UNIQUE constraints are not listed as indexes; a
        single-column UNIQUE marks its column ``is_unique`` instead.
    """
    index_info = index_info or {}
    columns = _columns_from_table_info(table_info)
    by_name: Dict[str, ColumnDefinition] = {column.name: column for column in columns}

    indexes: List[IndexDefinition] = []
    for row in index_list:
        name = row["name"]
        info = sorted(index_info.get(name, ()), key=lambda r: r.get("seqno", 0))
        origin = row.get("origin")

        if origin in ("pk", "u"):
            if origin == "u" and row.get("unique") and len(info) == 1:
                column = by_name.get(info[0]["name"])
                if column is not None:
                    column.is_unique = True
            continue

        if not info:
            logger.debug("Index %s on %s has no index_info rows", name, table)
        indexes.append(
            IndexDefinition(
                id=f"index-{len(indexes)}",
                name=name,
                columns=[IndexColumn(name=r["name"]) for r in info],
                is_unique=bool(row.get("unique")),
                method=IndexMethod.BTREE,
            )
        )

    return TableDefinition(
        schema=SQLITE_SCHEMA,
        name=table,
        columns=columns,
        constraints=_foreign_keys(table, foreign_keys),
        indexes=indexes,
    )
