# -*- coding: utf-8 -*-
# Foilbase/geometry/loaders/__init__.py

"""
Project: Foilbase
Date: 10/18/2026

Loaders Subpackage:
-------------------
File format-specific loaders for importing airfoil geometry data.

Modules:
--------
- dat_loader:  Line-scanning parser for `.dat` airfoil files (two-column decimal listing).

Assumptions & Notes:
--------------------
- Units: Native file units preserved; no automatic rescaling
- Topology: No closing, reordering or deduplication performed
"""

from .dat_loader import load_dat, parse_dat_lines

__all__ = ["dat_loader", "load_dat", "parse_dat_lines"]
