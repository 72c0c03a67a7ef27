# -*- coding: utf-8 -*-
# Foilbase/geometry/errors.py

"""
Project: Foilbase
Date: 10/18/2026

Purpose
-------
Typed exceptions shared by the geometry and catalog layers, with compact,
context-aware messages so a failing ingestion run points straight at the
offending file, record or token.

Main Tasks
----------
    1. Define FoilbaseError(message, context) with a compact context suffix in __str__.
    2. Provide the geometry-side subclasses: ParseError, InvalidGeometry.
    3. Supply _format_context helper and expose public names via __all__.

Notes
-----
- Context is optional; long values are truncated for readability.
- Catalog-specific errors subclass FoilbaseError in `catalog.errors`.
"""


__all__ = [
    "FoilbaseError",
    "ParseError",
    "InvalidGeometry",
]


def _format_context(ctx):
    """Return a compact ' | key1=val1, key2=val2' string or '' if no context."""
    if not ctx:
        return ""
    parts = []
    for k in sorted(ctx.keys()):
        sv = repr(ctx[k])
        # Keep it short; avoid huge dumps
        if len(sv) > 120:
            sv = sv[:117] + "..."
        parts.append("{}={}".format(k, sv))
    return " | " + ", ".join(parts)


class FoilbaseError(Exception):
    """
    Base class for all Foilbase errors.

    Parameters
    ----------
    message : str
        Human-readable error.
    context : dict, optional
        Extra fields to append in the string form (e.g., {"name": "ag08", "token": "0.1x"}).
    """
    def __init__(self, message, context=None):
        self.context = dict(context) if context else None
        super().__init__(message)

    def __str__(self):
        base = super().__str__()
        return base + _format_context(self.context)


class ParseError(FoilbaseError, ValueError):
    """
    A numeric token could not be converted to a float:
      - a stored coordinate token in the catalog
      - a malformed numeric field handed to a parser
    """


class InvalidGeometry(FoilbaseError, ValueError):
    """
    Coordinates that the characteristic extraction cannot rank:
      - NaN candidates at the camber/thickness max-selection step
      - input that cannot be shaped as (N, 2)
    """
