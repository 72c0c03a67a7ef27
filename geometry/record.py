# -*- coding: utf-8 -*-
# Foilbase/geometry/record.py

"""
Project: Foilbase
Date: 10/18/2026

Purpose:
--------
The catalog's unit of storage: an airfoil name, its four characteristic scalars and
the original surface listing split into parallel x/y tuples.

Pipeline:
---------
from_dat_file() → load_dat → compute_characteristics → AirfoilRecord (frozen)
"""

import logging
import os
from dataclasses import dataclass
from typing import Tuple
import numpy as np

from .loaders.dat_loader import load_dat
from .metrics.characteristics import CoordinateSequence, _as_xy, compute_characteristics

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AirfoilRecord:
    """
    Immutable airfoil entry. Scalars are in percent of chord.

    Attributes
    ----------
    name : str
        Unique identifier (catalog primary key).
    camber, camber_pos : float
        Maximum camber and its chordwise location.
    max_thickness, max_thick_pos : float
        Maximum thickness (non-negative) and its chordwise location.
    x_coord, y_coord : Tuple[float, ...]
        Original coordinates, equal length, file order.
    """
    name: str
    camber: float
    camber_pos: float
    max_thickness: float
    max_thick_pos: float
    x_coord: Tuple[float, ...]
    y_coord: Tuple[float, ...]

    def __post_init__(self):
        if len(self.x_coord) != len(self.y_coord):
            raise ValueError(
                "[AirfoilRecord] x_coord and y_coord differ in length ({} vs {}) for '{}'".format(
                    len(self.x_coord), len(self.y_coord), self.name)
            )

    @classmethod
    def from_points(cls, name: str, coords: CoordinateSequence) -> "AirfoilRecord":
        """Build a record from raw coordinates, deriving the four scalars."""
        pts = _as_xy(coords)
        ch = compute_characteristics(pts)
        return cls(
            name=name,
            camber=ch.camber,
            camber_pos=ch.camber_pos,
            max_thickness=ch.max_thickness,
            max_thick_pos=ch.max_thick_pos,
            x_coord=tuple(float(x) for x in pts[:, 0]),
            y_coord=tuple(float(y) for y in pts[:, 1]),
        )

    @classmethod
    def from_dat_file(cls, filename: str) -> "AirfoilRecord":
        """Load a `.dat` file; the record is named after the file's base name without extension."""
        name = os.path.splitext(os.path.basename(filename))[0]
        rec = cls.from_points(name, load_dat(filename))
        logger.info(
            "[AirfoilRecord] '%s': camber=%.4g%% @ %.4g%%, t_max=%.4g%% @ %.4g%%",
            rec.name, rec.camber, rec.camber_pos, rec.max_thickness, rec.max_thick_pos,
        )
        return rec

    @property
    def points(self) -> np.ndarray:
        """Geometry as an (N, 2) float64 array."""
        if not self.x_coord:
            return np.empty((0, 2), dtype=np.float64)
        return np.column_stack((self.x_coord, self.y_coord)).astype(np.float64)
