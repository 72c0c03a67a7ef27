# -*- coding: utf-8 -*-
# Foilbase/geometry/metrics/__init__.py

"""
Project: Foilbase
Date: 10/18/2026

Modules:
--------
- characteristics: Max camber / max thickness (with chordwise positions) from an
                   index-paired upper/lower split of the surface listing.

Exports:
--------
- AirfoilCharacteristics
- compute_characteristics
- pair_surfaces
"""

from .characteristics import AirfoilCharacteristics, compute_characteristics, pair_surfaces

__all__ = [
    "AirfoilCharacteristics",
    "compute_characteristics",
    "pair_surfaces",
]
