# -*- coding: utf-8 -*-
# Foilbase/geometry/loaders/dat_loader.py

"""
Project: Foilbase
Date: 10/18/2026

Purpose:
--------
Read airfoil surface coordinates from `.dat`-style files and return them as a NumPy
array of shape (N, 2), in file order.

Main Features:
--------------
   1) Each line is scanned for two decimal numbers separated by whitespace.
   2) Both numbers need a fractional part (e.g. `1.0000  0.0012`, `.5 -.25`).
   3) Lines without such a pair (titles, headers, blank lines) are skipped silently.

Notes:
------
   - This module does *no* normalization, closing or reordering; just I/O parsing.
   - The pattern is searched, not anchored: leading text before the pair is ignored.
"""

import logging
import re
from typing import Iterable, List, Tuple
import numpy as np

from ..errors import ParseError

logger = logging.getLogger(__name__)

_PAIR_RE = re.compile(r"\s*([-+]?\d*\.\d+)\s+([-+]?\d*\.\d+)")


def parse_dat_lines(lines: Iterable[str]) -> np.ndarray:
    """
    Scan text lines for coordinate pairs.

    Parameters
    ----------
    lines : Iterable[str]
        Raw lines of a `.dat` file.

    Returns
    -------
    np.ndarray
        (N, 2) float64 array of (x, y) points; (0, 2) if nothing matched.

    Raises
    ------
    ParseError
        If a matched token cannot be converted to float.
    """
    data: List[Tuple[float, float]] = []
    for lineno, line in enumerate(lines, start=1):
        m = _PAIR_RE.search(line)
        if m is None:
            continue
        try:
            data.append((float(m.group(1)), float(m.group(2))))
        except ValueError as e:
            raise ParseError("Malformed coordinate pair", {"line": lineno, "text": line.strip()}) from e

    if not data:
        return np.empty((0, 2), dtype=np.float64)
    return np.asarray(data, dtype=np.float64)


def load_dat(filename: str) -> np.ndarray:
    """
    Load a 2D airfoil from a `.dat`-like file into an (N, 2) float64 array.

    Parameters
    ----------
    filename : str
        Path to the `.dat` file.

    Returns
    -------
    np.ndarray
        (N, 2) float64 array of (x, y) points in file order.

    Raises
    ------
    OSError
        If the file cannot be opened or read.
    ParseError
        If a matched token cannot be converted to float.
    """
    with open(filename, "r", encoding="utf-8", errors="ignore") as f:
        pts = parse_dat_lines(f)

    logger.info("[dat_loader] Parsed %d points from %s", pts.shape[0], filename)
    return pts
