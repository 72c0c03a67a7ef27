# -*- coding: utf-8 -*-
# Foilbase/catalog/export.py

"""
Project: Foilbase
Date: 10/18/2026

Purpose:
--------
Export a catalog listing into human-readable formats: CSV (one row of scalars per
airfoil), JSON (scalars plus full coordinates) and Excel (single sheet via pandas).

Main Tasks:
-----------
    1. Tabulate records as a pandas DataFrame (scalars + point count).
    2. Write CSV / JSON / Excel, creating parent folders as needed.
"""

import csv
import json
import logging
import os
from typing import Any, Dict, List, Sequence

import pandas as pd

from geometry.record import AirfoilRecord

__all__ = [
    "SCALAR_COLUMNS",
    "records_to_frame",
    "write_catalog_csv",
    "write_catalog_json",
    "write_catalog_excel",
]

logger = logging.getLogger(__name__)

SCALAR_COLUMNS = ["name", "camber", "camber_pos", "max_thickness", "max_thick_pos", "n_points"]


# ------------------------------
# Internal helpers
# ------------------------------
def _scalar_row(rec: AirfoilRecord) -> List[Any]:
    return [rec.name, rec.camber, rec.camber_pos, rec.max_thickness, rec.max_thick_pos, len(rec.x_coord)]


def _record_dict(rec: AirfoilRecord) -> Dict[str, Any]:
    return {
        "name": rec.name,
        "camber": rec.camber,
        "camber_pos": rec.camber_pos,
        "max_thickness": rec.max_thickness,
        "max_thick_pos": rec.max_thick_pos,
        "x_coord": list(rec.x_coord),
        "y_coord": list(rec.y_coord),
    }


def _ensure_parent(path: str) -> None:
    folder = os.path.dirname(os.path.abspath(path))
    if folder and not os.path.exists(folder):
        os.makedirs(folder, exist_ok=True)


# ------------------------------
# Public API
# ------------------------------
def records_to_frame(records: Sequence[AirfoilRecord]) -> pd.DataFrame:
    """One row per record with columns `SCALAR_COLUMNS`."""
    return pd.DataFrame([_scalar_row(r) for r in records], columns=SCALAR_COLUMNS)


def write_catalog_csv(records: Sequence[AirfoilRecord], path: str) -> str:
    """
    Write the scalar columns of each record to a CSV file.

    Returns
    -------
    str
        Written file path.
    """
    _ensure_parent(path)
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        w.writerow(SCALAR_COLUMNS)
        for rec in records:
            w.writerow(_scalar_row(rec))
    logger.info("[Export] Wrote %d records to %s", len(records), path)
    return path


def write_catalog_json(records: Sequence[AirfoilRecord], path: str, indent: int = 2) -> str:
    """
    Write records, coordinates included, as a JSON list.

    Returns
    -------
    str
        Written file path.
    """
    _ensure_parent(path)
    with open(path, "w", encoding="utf-8") as f:
        json.dump([_record_dict(r) for r in records], f, indent=indent, ensure_ascii=False)
    logger.info("[Export] Wrote %d records to %s", len(records), path)
    return path


def write_catalog_excel(records: Sequence[AirfoilRecord], path: str) -> str:
    """
    Write the scalar table to a single-sheet Excel file.

    Needs an Excel engine for pandas (e.g. openpyxl).
    """
    df = records_to_frame(records)
    _ensure_parent(path)
    df.to_excel(path, index=False, sheet_name="airfoils")
    logger.info("[Export] Wrote %d records to %s", len(records), path)
    return path
