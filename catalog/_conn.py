# -*- coding: utf-8 -*-
# Foilbase/catalog/_conn.py

"""
Project: Foilbase
Date: 10/18/2026

Purpose
-------
Per-operation SQLite connection: open, yield, commit on success, roll back on
failure, always close. No connection outlives a catalog call.

Notes
-----
- sqlite3.IntegrityError passes through untouched so callers can map it to DuplicateKey.
- Every other sqlite3.Error becomes StoreIOError with the store path in context.
"""

import sqlite3
from contextlib import contextmanager

from .errors import StoreIOError


@contextmanager
def open_store(store_path):
    """Yield a sqlite3 connection to `store_path` for the duration of one operation."""
    try:
        conn = sqlite3.connect(str(store_path))
    except sqlite3.Error as e:
        raise StoreIOError("Cannot open store", {"path": str(store_path), "error": str(e)}) from e

    try:
        yield conn
        conn.commit()
    except sqlite3.IntegrityError:
        conn.rollback()
        raise
    except sqlite3.Error as e:
        conn.rollback()
        raise StoreIOError("Store operation failed", {"path": str(store_path), "error": str(e)}) from e
    except BaseException:
        conn.rollback()
        raise
    finally:
        conn.close()
