# -*- coding: utf-8 -*-
# Foilbase/catalog/__init__.py

"""
Project: Foilbase
Date: 10/18/2026

Catalog Package:
----------------
SQLite store of airfoil records keyed by name.

Modules:
--------
- schema:  Expected `airfoils` layout; ensure_schema (create or verify), schema_diff.
- store:   reset, insert, list_all.
- codec:   Comma-joined text form of coordinate columns.
- config:  Driver settings (defaults + validated overrides).
- export:  CSV / JSON / Excel writers for a listing.
- errors:  CatalogError, SchemaMismatch, DuplicateKey, StoreIOError, ConfigError.

Usage:
    from catalog import ensure_schema, insert, list_all
    ensure_schema("airfoils.db")
    insert(record, "airfoils.db")
    records = list_all("airfoils.db")
"""

from .errors import CatalogError, ConfigError, DuplicateKey, ParseError, SchemaMismatch, StoreIOError
from .schema import ensure_schema, schema_diff
from .store import insert, list_all, reset

__all__ = [
    "CatalogError",
    "ConfigError",
    "DuplicateKey",
    "ParseError",
    "SchemaMismatch",
    "StoreIOError",
    "ensure_schema",
    "insert",
    "list_all",
    "reset",
    "schema_diff",
]
