from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import numpy as np
import pytest

from geometry.record import AirfoilRecord

# TE -> upper -> LE -> lower -> TE, lower is the upper mirrored in y
SYMMETRIC_COORDS = np.array(
    [
        (1.0, 0.0),
        (0.5, 0.0625),
        (0.25, 0.125),
        (0.0, 0.0),
        (0.0, -0.0),
        (0.25, -0.125),
        (0.5, -0.0625),
        (1.0, -0.0),
    ],
    dtype=np.float64,
)

CAMBERED_DAT = """\
Test cambered section
  1.00000  0.00130
  0.75000  0.04500
  0.50000  0.07800
  0.25000  0.08100
  0.00000  0.00000
  0.25000 -0.03200
  0.50000 -0.02000
  0.75000 -0.01000
  1.00000 -0.00130
"""


@pytest.fixture
def store_path(tmp_path: Path) -> Path:
    return tmp_path / "airfoils.db"


@pytest.fixture
def symmetric_record() -> AirfoilRecord:
    return AirfoilRecord.from_points("sym0025", SYMMETRIC_COORDS)


@pytest.fixture
def cambered_dat(tmp_path: Path) -> Path:
    path = tmp_path / "cambered.dat"
    path.write_text(CAMBERED_DAT, encoding="utf-8")
    return path
