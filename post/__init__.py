# -*- coding: utf-8 -*-
# Foilbase/post/__init__.py

"""
Project: Foilbase
Date: 10/18/2026

Modules:
--------
- plot_geo: matplotlib quick-looks of catalog records (single record with picked
            stations, or several overlaid).
"""

__all__ = ["plot_geo"]
