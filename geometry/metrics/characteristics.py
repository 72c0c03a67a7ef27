# -*- coding: utf-8 -*-
# Foilbase/geometry/metrics/characteristics.py

"""
Project: Foilbase
Date: 10/18/2026

Purpose:
--------
Reduce an airfoil surface listing to its four catalog scalars: maximum camber,
camber position, maximum thickness and thickness position, all in percent of chord.

Main Tasks:
-----------
    1. Split the listing at len // 2 into upper (first half) and lower (second half).
    2. Reverse the lower half and pair it with the upper half by index.
    3. Pick the station with the largest camber (y_u + y_l) / 2 and the one with the
       largest signed thickness y_u - y_l; report |thickness| for the latter.
    4. Scale all four values by 100.

Notes:
------
- Stations are paired by position, not by matching x. Listings whose halves are not
  x-aligned or of equal length give approximate results.
- Selection is signed; taking |y_u - y_l| before selecting can pick another station.
- Ties resolve to the first station in upper-surface order.
"""

from typing import NamedTuple, Sequence, Tuple, Union
import numpy as np

from ..errors import InvalidGeometry

__all__ = ["AirfoilCharacteristics", "compute_characteristics", "pair_surfaces"]

CoordinateSequence = Union[np.ndarray, Sequence[Tuple[float, float]]]


class AirfoilCharacteristics(NamedTuple):
    camber: float
    camber_pos: float
    max_thickness: float
    max_thick_pos: float


def _as_xy(coords: CoordinateSequence) -> np.ndarray:
    try:
        pts = np.asarray(coords, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidGeometry("Coordinates are not a numeric (N, 2) listing", {"error": str(e)}) from e
    if pts.size == 0:
        return np.empty((0, 2), dtype=np.float64)
    if pts.ndim != 2 or pts.shape[1] != 2:
        raise InvalidGeometry("Expected (N, 2) coordinates", {"shape": pts.shape})
    return pts


def pair_surfaces(coords: CoordinateSequence) -> Tuple[np.ndarray, np.ndarray]:
    """
    Split a TE→upper→LE→lower→TE listing into index-paired surfaces.

    Returns
    -------
    (upper, lower) : Tuple[np.ndarray, np.ndarray]
        Two (M, 2) arrays, M = min(len(upper half), len(lower half)), where
        lower is the reversed second half so that row i of each is the same station.
    """
    pts = _as_xy(coords)
    mid = pts.shape[0] // 2
    upper = pts[:mid]
    lower = pts[mid:][::-1]
    m = min(upper.shape[0], lower.shape[0])
    return upper[:m], lower[:m]


def _select_max(candidates: np.ndarray, xs: np.ndarray, what: str) -> Tuple[float, float]:
    """Return (value, x) at the first maximum of `candidates`, or (0, 0) if empty."""
    if candidates.size == 0:
        return 0.0, 0.0
    if np.isnan(candidates).any():
        bad = np.flatnonzero(np.isnan(candidates))
        raise InvalidGeometry("NaN {} candidate".format(what), {"stations": bad.tolist()})
    i = int(np.argmax(candidates))
    if np.isnan(xs[i]):
        raise InvalidGeometry("NaN x at the {} station".format(what), {"station": i})
    return float(candidates[i]), float(xs[i])


def compute_characteristics(coords: CoordinateSequence) -> AirfoilCharacteristics:
    """
    Compute (camber, camber_pos, max_thickness, max_thick_pos) in percent of chord.

    Parameters
    ----------
    coords : CoordinateSequence
        (N, 2) array or sequence of (x, y) pairs in `.dat` surface order.

    Returns
    -------
    AirfoilCharacteristics
        All zeros when fewer than two points are given.

    Raises
    ------
    InvalidGeometry
        If the input cannot be shaped as (N, 2), a candidate is NaN or the
        selected station has a NaN x.
    """
    upper, lower = pair_surfaces(coords)
    xs = upper[:, 0]

    camber, camber_x = _select_max((upper[:, 1] + lower[:, 1]) / 2.0, xs, "camber")
    thickness, thick_x = _select_max(upper[:, 1] - lower[:, 1], xs, "thickness")

    return AirfoilCharacteristics(
        camber=camber * 100.0,
        camber_pos=camber_x * 100.0,
        max_thickness=abs(thickness) * 100.0,
        max_thick_pos=thick_x * 100.0,
    )
