from __future__ import annotations

import dataclasses
from pathlib import Path

import numpy as np
import pytest

from geometry.metrics import compute_characteristics
from geometry.record import AirfoilRecord

from conftest import SYMMETRIC_COORDS


def test_from_points_splits_coordinates(symmetric_record: AirfoilRecord):
    assert symmetric_record.x_coord == tuple(SYMMETRIC_COORDS[:, 0])
    assert symmetric_record.y_coord == tuple(SYMMETRIC_COORDS[:, 1])
    assert symmetric_record.camber == 0.0
    assert symmetric_record.max_thickness == 25.0


def test_from_dat_file_names_after_stem(cambered_dat: Path):
    rec = AirfoilRecord.from_dat_file(str(cambered_dat))
    assert rec.name == "cambered"
    assert len(rec.x_coord) == 9
    expected = compute_characteristics(rec.points)
    assert (rec.camber, rec.camber_pos, rec.max_thickness, rec.max_thick_pos) == tuple(expected)


def test_name_keeps_inner_dots_and_commas(tmp_path: Path):
    path = tmp_path / "SB95 10,5-2.dat"
    path.write_text("0.0 0.0\n1.0 0.0\n", encoding="utf-8")
    rec = AirfoilRecord.from_dat_file(str(path))
    assert rec.name == "SB95 10,5-2"


def test_record_is_immutable(symmetric_record: AirfoilRecord):
    with pytest.raises(dataclasses.FrozenInstanceError):
        symmetric_record.name = "other"


def test_mismatched_lengths_rejected():
    with pytest.raises(ValueError):
        AirfoilRecord("bad", 0.0, 0.0, 0.0, 0.0, (0.0, 1.0), (0.0,))


def test_points_roundtrip(symmetric_record: AirfoilRecord):
    np.testing.assert_array_equal(symmetric_record.points, SYMMETRIC_COORDS)


def test_empty_record_points_shape():
    rec = AirfoilRecord.from_points("empty", [])
    assert rec.points.shape == (0, 2)
    assert (rec.camber, rec.camber_pos, rec.max_thickness, rec.max_thick_pos) == (0.0, 0.0, 0.0, 0.0)
