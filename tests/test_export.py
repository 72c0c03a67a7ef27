from __future__ import annotations

import csv
import json
from pathlib import Path

import pytest

from catalog.export import (
    SCALAR_COLUMNS,
    records_to_frame,
    write_catalog_csv,
    write_catalog_excel,
    write_catalog_json,
)
from geometry.record import AirfoilRecord


@pytest.fixture
def records(symmetric_record: AirfoilRecord, cambered_dat: Path):
    return [symmetric_record, AirfoilRecord.from_dat_file(str(cambered_dat))]


def test_records_to_frame(records):
    df = records_to_frame(records)
    assert list(df.columns) == SCALAR_COLUMNS
    assert list(df["name"]) == ["sym0025", "cambered"]
    assert list(df["n_points"]) == [8, 9]


def test_csv_export(tmp_path: Path, records):
    path = write_catalog_csv(records, str(tmp_path / "out" / "airfoils.csv"))
    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f))
    assert rows[0] == SCALAR_COLUMNS
    assert rows[1][0] == "sym0025"
    assert float(rows[1][3]) == 25.0


def test_json_export_keeps_coordinates(tmp_path: Path, records):
    path = write_catalog_json(records, str(tmp_path / "airfoils.json"))
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    assert [d["name"] for d in data] == ["sym0025", "cambered"]
    assert tuple(data[1]["x_coord"]) == records[1].x_coord


def test_excel_export(tmp_path: Path, records):
    pytest.importorskip("openpyxl")
    import pandas as pd

    path = write_catalog_excel(records, str(tmp_path / "airfoils.xlsx"))
    df = pd.read_excel(path, sheet_name="airfoils")
    assert list(df["name"]) == ["sym0025", "cambered"]
