# -*- coding: utf-8 -*-
# Foilbase/catalog/store.py

"""
Project: Foilbase
Date: 10/18/2026

Purpose
-------
Row-level operations on the `airfoils` table: wipe the store, insert one record,
list every record back as freshly built AirfoilRecord instances.

Main Tasks
----------
    1. `reset`: delete the store file; a failed delete is only logged.
    2. `insert`: encode coordinates and append one row; duplicate names are rejected.
    3. `list_all`: decode every row; any corrupt coordinate token aborts the listing.

Notes
-----
- `insert` and `list_all` assume `ensure_schema` has already run on the path.
- One connection per call; nothing is cached between calls.
"""

import logging
import math
import os
import sqlite3
from typing import List

from geometry.errors import InvalidGeometry
from geometry.record import AirfoilRecord
from ._conn import open_store
from .codec import decode_coords, encode_coords
from .errors import DuplicateKey, ParseError
from .schema import TABLE_NAME

__all__ = ["reset", "insert", "list_all"]

logger = logging.getLogger(__name__)

_COLUMNS = ("name", "camber", "camber_pos", "max_thickness", "max_thick_pos", "x_coord", "y_coord")

_INSERT_SQL = "INSERT INTO {} ({}) VALUES ({})".format(
    TABLE_NAME, ", ".join(_COLUMNS), ", ".join("?" * len(_COLUMNS))
)
_SELECT_SQL = "SELECT {} FROM {} ORDER BY rowid".format(", ".join(_COLUMNS), TABLE_NAME)
_SCALARS = _COLUMNS[1:5]


def _stored_scalar(value, column: str, name: str) -> float:
    if value is None:
        raise ParseError("Stored scalar column is NULL", {"name": name, "column": column})
    if isinstance(value, (bytes, str)):
        raise ParseError("Stored scalar is not a number", {"name": name, "column": column, "value": value})
    return float(value)


def reset(store_path) -> bool:
    """
    Remove the store file if present.

    Returns
    -------
    bool
        True if a file was deleted. False if there was none, or deletion failed
        (the failure is logged as a warning, not raised).
    """
    if not os.path.exists(store_path):
        return False
    try:
        os.remove(store_path)
    except OSError as e:
        logger.warning("[Catalog] Could not delete store %s: %s", store_path, e)
        return False
    logger.info("[Catalog] Deleted store %s", store_path)
    return True


def insert(record: AirfoilRecord, store_path) -> None:
    """
    Append `record` as a new row.

    Raises
    ------
    InvalidGeometry
        If a scalar field is NaN.
    DuplicateKey
        If a row with `record.name` already exists (the table is left unchanged).
    StoreIOError
        If the store cannot be opened or written.
    """
    for column in _SCALARS:
        if math.isnan(getattr(record, column)):
            # SQLite would store NaN as NULL
            raise InvalidGeometry("NaN scalar cannot be stored", {"name": record.name, "column": column})

    row = (
        record.name,
        float(record.camber),
        float(record.camber_pos),
        float(record.max_thickness),
        float(record.max_thick_pos),
        encode_coords(record.x_coord),
        encode_coords(record.y_coord),
    )
    with open_store(store_path) as conn:
        try:
            conn.execute(_INSERT_SQL, row)
        except sqlite3.IntegrityError as e:
            raise DuplicateKey(
                "Airfoil already in catalog", {"name": record.name, "path": str(store_path)}
            ) from e
    logger.info("[Catalog] Inserted '%s' (%d points) into %s", record.name, len(record.x_coord), store_path)


def list_all(store_path) -> List[AirfoilRecord]:
    """
    Read every row back, in insertion order.

    Raises
    ------
    ParseError
        If a stored coordinate token is not a float, a scalar column is NULL or the
        x/y columns differ in length; no partial result is returned.
    StoreIOError
        If the store cannot be opened or read.
    """
    with open_store(store_path) as conn:
        rows = conn.execute(_SELECT_SQL).fetchall()

    records = []
    for name, *scalars, xs, ys in rows:
        values = [_stored_scalar(v, column, name) for column, v in zip(_SCALARS, scalars)]
        x_coord = decode_coords(xs, name=name)
        y_coord = decode_coords(ys, name=name)
        if len(x_coord) != len(y_coord):
            raise ParseError("Stored x_coord and y_coord differ in length",
                             {"name": name, "column": "y_coord", "x_len": len(x_coord), "y_len": len(y_coord)})
        records.append(AirfoilRecord(name, *values, x_coord, y_coord))
    logger.debug("[Catalog] Listed %d records from %s", len(records), store_path)
    return records
