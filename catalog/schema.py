# -*- coding: utf-8 -*-
# Foilbase/catalog/schema.py

"""
Project: Foilbase
Date: 10/18/2026

Purpose
-------
Single-version schema contract for the `airfoils` table: create it when absent,
refuse to write through a table whose definition differs, and expose a structural
diff so a later migration layer has something to build on.

Main Tasks
----------
    1. Hold the expected DDL and column layout (name, declared type, primary key).
    2. `ensure_schema`: create-if-absent, otherwise compare the live CREATE text
       (whitespace-normalized) with the expected one; raise SchemaMismatch on difference.
    3. `diff_columns` / `schema_diff`: column-by-column comparison via PRAGMA table_info.

Notes
-----
- SQLite stores CREATE TABLE text as issued, minus any `IF NOT EXISTS` clause; the
  comparison strips that clause from both sides.
- No migration: a mismatch is reported, never repaired.
"""

import logging
import re
from typing import List, NamedTuple, Sequence

from ._conn import open_store
from .errors import SchemaMismatch

__all__ = [
    "TABLE_NAME",
    "EXPECTED_DDL",
    "EXPECTED_COLUMNS",
    "ColumnSpec",
    "normalize_sql",
    "diff_columns",
    "schema_diff",
    "ensure_schema",
]

logger = logging.getLogger(__name__)

TABLE_NAME = "airfoils"

EXPECTED_DDL = """
CREATE TABLE airfoils (
    name TEXT PRIMARY KEY,
    camber REAL,
    camber_pos REAL,
    max_thickness REAL,
    max_thick_pos REAL,
    x_coord TEXT,
    y_coord TEXT
)"""


class ColumnSpec(NamedTuple):
    name: str
    decl_type: str
    primary_key: bool


EXPECTED_COLUMNS = (
    ColumnSpec("name", "TEXT", True),
    ColumnSpec("camber", "REAL", False),
    ColumnSpec("camber_pos", "REAL", False),
    ColumnSpec("max_thickness", "REAL", False),
    ColumnSpec("max_thick_pos", "REAL", False),
    ColumnSpec("x_coord", "TEXT", False),
    ColumnSpec("y_coord", "TEXT", False),
)

_WS = re.compile(r"\s+")
_PUNCT_WS = re.compile(r"\s*([(),])\s*")
_IF_NOT_EXISTS = re.compile(r"^(CREATE\s+TABLE)\s+IF\s+NOT\s+EXISTS\b", re.IGNORECASE)


def normalize_sql(sql: str) -> str:
    """Collapse whitespace (none around parentheses/commas), drop IF NOT EXISTS and a trailing ';'."""
    s = sql.strip().rstrip(";").strip()
    s = _IF_NOT_EXISTS.sub(r"\1", s)
    s = _WS.sub(" ", s)
    return _PUNCT_WS.sub(r"\1", s)


def _live_sql(conn):
    row = conn.execute(
        "SELECT sql FROM sqlite_master WHERE type='table' AND name=?", (TABLE_NAME,)
    ).fetchone()
    return None if row is None else row[0]


def _live_columns(conn) -> List[ColumnSpec]:
    # PRAGMA table_info rows: (cid, name, type, notnull, dflt_value, pk)
    rows = conn.execute("PRAGMA table_info({})".format(TABLE_NAME)).fetchall()
    return [ColumnSpec(r[1], (r[2] or "").upper(), bool(r[5])) for r in rows]


def diff_columns(live: Sequence[ColumnSpec],
                 expected: Sequence[ColumnSpec] = EXPECTED_COLUMNS) -> List[str]:
    """
    Compare two column layouts; return human-readable differences (empty if equal).

    Checks presence, position, declared type and primary-key flag of every column.
    """
    diffs: List[str] = []
    live_by_name = {c.name: (i, c) for i, c in enumerate(live)}
    expected_names = {c.name for c in expected}

    for i, exp in enumerate(expected):
        if exp.name not in live_by_name:
            diffs.append("missing column '{}'".format(exp.name))
            continue
        j, got = live_by_name[exp.name]
        if j != i:
            diffs.append("column '{}' at position {} (expected {})".format(exp.name, j, i))
        if got.decl_type != exp.decl_type:
            diffs.append("column '{}' type {} (expected {})".format(exp.name, got.decl_type or "<none>", exp.decl_type))
        if got.primary_key != exp.primary_key:
            diffs.append("column '{}' primary key={} (expected {})".format(exp.name, got.primary_key, exp.primary_key))

    for c in live:
        if c.name not in expected_names:
            diffs.append("unexpected column '{}'".format(c.name))
    return diffs


def schema_diff(store_path) -> List[str]:
    """
    Structural diff of the live `airfoils` table against the expected layout.

    Returns ["missing table 'airfoils'"] when the table does not exist.
    """
    with open_store(store_path) as conn:
        if _live_sql(conn) is None:
            return ["missing table '{}'".format(TABLE_NAME)]
        return diff_columns(_live_columns(conn))


def ensure_schema(store_path) -> bool:
    """
    Create the `airfoils` table if absent; otherwise verify it matches exactly.

    Parameters
    ----------
    store_path : str or PathLike
        SQLite store file (created if it does not exist).

    Returns
    -------
    bool
        True if the table was created by this call, False if it already matched.

    Raises
    ------
    SchemaMismatch
        If the existing definition differs from the expected one.
    StoreIOError
        If the store cannot be opened or queried.
    """
    with open_store(store_path) as conn:
        live = _live_sql(conn)
        if live is None:
            conn.execute(EXPECTED_DDL)
            logger.info("[Catalog] Created table '%s' in %s", TABLE_NAME, store_path)
            return True

        if normalize_sql(live) == normalize_sql(EXPECTED_DDL):
            logger.debug("[Catalog] Schema of '%s' in %s matches", TABLE_NAME, store_path)
            return False

        diffs = diff_columns(_live_columns(conn))

    logger.error("[Catalog] Schema mismatch in %s: %s", store_path, "; ".join(diffs) or "definition text differs")
    raise SchemaMismatch(
        "Existing '{}' table does not match the expected layout".format(TABLE_NAME),
        {"path": str(store_path), "differences": diffs},
        differences=diffs,
    )
