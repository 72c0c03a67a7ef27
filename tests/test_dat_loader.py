from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from geometry.loaders import load_dat, parse_dat_lines


def test_header_and_blank_lines_are_skipped(cambered_dat: Path):
    pts = load_dat(str(cambered_dat))
    assert pts.shape == (9, 2)
    assert pts.dtype == np.float64
    np.testing.assert_array_equal(pts[0], [1.0, 0.0013])
    np.testing.assert_array_equal(pts[-1], [1.0, -0.0013])


def test_fractional_part_is_required():
    pts = parse_dat_lines(["1 0", "1.0 0", "1.0 0.5", "  .5  -.25  "])
    np.testing.assert_array_equal(pts, [[1.0, 0.5], [0.5, -0.25]])


def test_signed_values_and_trailing_text():
    pts = parse_dat_lines(["+0.100 -0.020 extra column", "title 12 points"])
    np.testing.assert_array_equal(pts, [[0.1, -0.02]])


def test_numbers_embedded_after_text_are_found():
    # the pair is searched for, not anchored to the line start
    pts = parse_dat_lines(["pt 0.25 0.0500"])
    np.testing.assert_array_equal(pts, [[0.25, 0.05]])


def test_no_numeric_lines_gives_empty_array():
    pts = parse_dat_lines(["NACA 0012", "", "  "])
    assert pts.shape == (0, 2)


def test_file_order_is_preserved():
    pts = parse_dat_lines(["0.9 0.1", "0.1 0.9", "0.5 0.5"])
    np.testing.assert_array_equal(pts[:, 0], [0.9, 0.1, 0.5])


def test_missing_file_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_dat(str(tmp_path / "nope.dat"))
