from __future__ import annotations

import sqlite3
from pathlib import Path

import pytest

from catalog.errors import SchemaMismatch, StoreIOError
from catalog.schema import (
    EXPECTED_COLUMNS,
    EXPECTED_DDL,
    ColumnSpec,
    diff_columns,
    ensure_schema,
    normalize_sql,
    schema_diff,
)


def _table_sql(path: Path) -> str:
    conn = sqlite3.connect(str(path))
    try:
        return conn.execute("SELECT sql FROM sqlite_master WHERE name='airfoils'").fetchone()[0]
    finally:
        conn.close()


def test_creates_table_on_fresh_store(store_path: Path):
    assert ensure_schema(store_path) is True
    assert normalize_sql(_table_sql(store_path)) == normalize_sql(EXPECTED_DDL)
    assert schema_diff(store_path) == []


def test_ensure_schema_is_idempotent(store_path: Path):
    ensure_schema(store_path)
    before = _table_sql(store_path)
    assert ensure_schema(store_path) is False
    assert ensure_schema(store_path) is False
    assert _table_sql(store_path) == before


def test_whitespace_variants_are_accepted(store_path: Path):
    conn = sqlite3.connect(str(store_path))
    conn.execute(
        "CREATE TABLE IF NOT EXISTS airfoils (name TEXT PRIMARY KEY, camber REAL, camber_pos REAL, "
        "max_thickness REAL, max_thick_pos REAL,\n\t x_coord TEXT, y_coord TEXT)"
    )
    conn.commit()
    conn.close()
    assert ensure_schema(store_path) is False


def test_different_columns_raise_mismatch(store_path: Path):
    conn = sqlite3.connect(str(store_path))
    conn.execute("CREATE TABLE airfoils (name TEXT PRIMARY KEY, camber REAL, coords BLOB)")
    conn.commit()
    conn.close()

    with pytest.raises(SchemaMismatch) as exc:
        ensure_schema(store_path)
    assert "missing column 'camber_pos'" in exc.value.differences
    assert "unexpected column 'coords'" in exc.value.differences


def test_mismatch_leaves_table_untouched(store_path: Path):
    conn = sqlite3.connect(str(store_path))
    conn.execute("CREATE TABLE airfoils (name TEXT)")
    conn.commit()
    conn.close()
    before = _table_sql(store_path)
    with pytest.raises(SchemaMismatch):
        ensure_schema(store_path)
    assert _table_sql(store_path) == before


def test_constraint_only_difference_is_a_mismatch(store_path: Path):
    conn = sqlite3.connect(str(store_path))
    conn.execute(
        "CREATE TABLE airfoils (name TEXT PRIMARY KEY, camber REAL NOT NULL, camber_pos REAL, "
        "max_thickness REAL, max_thick_pos REAL, x_coord TEXT, y_coord TEXT)"
    )
    conn.commit()
    conn.close()
    with pytest.raises(SchemaMismatch) as exc:
        ensure_schema(store_path)
    assert exc.value.differences == []


def test_schema_diff_reports_missing_table(store_path: Path):
    assert schema_diff(store_path) == ["missing table 'airfoils'"]


def test_diff_columns_type_position_and_pk():
    live = list(EXPECTED_COLUMNS)
    live[0] = ColumnSpec("name", "TEXT", False)
    live[1], live[2] = live[2], live[1]
    live[6] = ColumnSpec("y_coord", "BLOB", False)
    diffs = diff_columns(live)
    assert "column 'name' primary key=False (expected True)" in diffs
    assert "column 'camber' at position 2 (expected 1)" in diffs
    assert "column 'camber_pos' at position 1 (expected 2)" in diffs
    assert "column 'y_coord' type BLOB (expected TEXT)" in diffs


def test_normalize_sql_collapses_whitespace():
    assert normalize_sql("CREATE TABLE  t (\n a TEXT ,\n b REAL\n);") == "CREATE TABLE t(a TEXT,b REAL)"
    assert normalize_sql("CREATE TABLE IF NOT EXISTS t (a)") == "CREATE TABLE t(a)"


def test_non_database_file_raises_store_io_error(store_path: Path):
    store_path.write_bytes(b"this is not an sqlite database" * 64)
    with pytest.raises(StoreIOError):
        ensure_schema(store_path)
