# -*- coding: utf-8 -*-
# Foilbase/geometry/__init__.py

"""
Project: Foilbase
Date: 10/18/2026

Modules:
--------
- loaders:  Format-specific readers for airfoil geometry (.dat). Provide raw point arrays.

- metrics:  Characteristic extraction (max camber, max thickness and their positions,
            percent of chord).

- record:   AirfoilRecord, the immutable value stored in and returned by the catalog.
              * AirfoilRecord.from_points(name, coords)
              * AirfoilRecord.from_dat_file(path)  → named after the file stem

- errors:   FoilbaseError root with context rendering; ParseError, InvalidGeometry.

Usage:
    from geometry import AirfoilRecord
    rec = AirfoilRecord.from_dat_file("ag08.dat")
"""

from .errors import FoilbaseError, InvalidGeometry, ParseError
from .metrics import AirfoilCharacteristics, compute_characteristics
from .record import AirfoilRecord

__all__ = [
    "AirfoilCharacteristics",
    "AirfoilRecord",
    "FoilbaseError",
    "InvalidGeometry",
    "ParseError",
    "compute_characteristics",
]
