# -*- coding: utf-8 -*-
# Foilbase/catalog/errors.py

"""
Project: Foilbase
Date: 10/18/2026

Purpose
-------
Typed exceptions for the catalog layer. All derive from `FoilbaseError`, so the
driver can fail fast on a single except clause while tests match precise kinds.

Notes
-----
- `ParseError` is re-exported: a corrupt stored coordinate token raises it.
- `StoreIOError` wraps sqlite3/OS failures; context carries the store path.
"""

from geometry.errors import FoilbaseError, ParseError

__all__ = [
    "CatalogError",
    "SchemaMismatch",
    "DuplicateKey",
    "StoreIOError",
    "ConfigError",
    "ParseError",
]


class CatalogError(FoilbaseError):
    """Base class for catalog and driver configuration errors."""


class SchemaMismatch(CatalogError):
    """
    The live `airfoils` table differs from the expected layout.
    `differences` lists the structural diff (may be empty if only constraints differ).
    """
    def __init__(self, message, context=None, differences=None):
        super().__init__(message, context)
        self.differences = list(differences or [])


class DuplicateKey(CatalogError):
    """Insert of a `name` that is already present (no upsert path)."""


class StoreIOError(CatalogError):
    """
    Store file could not be opened, read or written:
      - unreadable / non-database file
      - locked or read-only store
    """


class ConfigError(CatalogError):
    """
    Driver configuration problems:
      - unknown keys
      - wrong value types or unsupported enum values
    """
