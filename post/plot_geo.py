# -*- coding: utf-8 -*-
# Foilbase/post/plot_geo.py

"""
Project: Foilbase
Date: 10/18/2026

Purpose:
--------
Quick-look plots of catalog records using matplotlib: the surface polyline with the
stations picked for max camber and max thickness marked, so the index-paired
extraction can be checked by eye.
"""

from typing import Optional, Sequence
import matplotlib.pyplot as plt
from matplotlib.axes import Axes

from geometry.record import AirfoilRecord


def _mark_stations(ax: Axes, rec: AirfoilRecord) -> None:
    """Draw the picked camber/thickness stations (positions are percent of chord)."""
    if len(rec.x_coord) < 2:
        return
    xc = rec.camber_pos / 100.0
    xt = rec.max_thick_pos / 100.0
    ax.plot([xc], [rec.camber / 100.0], "r^", ms=6, label="max camber")
    ax.axvline(xt, color="g", ls=":", lw=1.0, label="max thickness")


def plot_record(rec: AirfoilRecord,
                *,
                show: bool = True,
                save_path: Optional[str] = None,
                ax: Optional[Axes] = None,
                mark_stations: bool = True) -> Axes:
    """
    Plot one record's surface.

    Parameters
    ----------
    rec : AirfoilRecord
        Record to draw.
    show : bool
        If True and we created the figure, display it.
    save_path : Optional[str]
        If given, save the figure to this path.
    ax : Optional[matplotlib.axes.Axes]
        Existing Axes to draw on; if None, a figure is created.
    mark_stations : bool
        Mark the max camber point and the max thickness station.
    """
    created_fig = False
    if ax is None:
        plt.figure(figsize=(8, 3))
        ax = plt.gca()
        created_fig = True

    pts = rec.points
    ax.plot(pts[:, 0], pts[:, 1], lw=1.5, label=rec.name)
    if mark_stations:
        _mark_stations(ax, rec)

    ax.set_aspect("equal", adjustable="box")
    ax.set_title("{}: camber {:.2f}% @ {:.1f}%, t {:.2f}% @ {:.1f}%".format(
        rec.name, rec.camber, rec.camber_pos, rec.max_thickness, rec.max_thick_pos))
    ax.set_xlabel("x/c")
    ax.set_ylabel("y/c")
    ax.grid(True)
    ax.legend(loc="best", fontsize=8)

    if save_path:
        ax.figure.savefig(save_path, dpi=300)
    if show and created_fig:
        plt.show()
    elif created_fig:
        plt.close(ax.figure)
    return ax


def plot_records(records: Sequence[AirfoilRecord],
                 *,
                 show: bool = True,
                 save_path: Optional[str] = None,
                 ax: Optional[Axes] = None) -> Axes:
    """Overlay several records on one Axes (no station markers)."""
    if not records:
        raise ValueError("No records to plot.")
    created_fig = False
    if ax is None:
        plt.figure(figsize=(8, 3))
        ax = plt.gca()
        created_fig = True

    for rec in records:
        pts = rec.points
        ax.plot(pts[:, 0], pts[:, 1], lw=1.2, label=rec.name)

    ax.set_aspect("equal", adjustable="box")
    ax.set_title("Catalog: {} airfoils".format(len(records)))
    ax.set_xlabel("x/c")
    ax.set_ylabel("y/c")
    ax.grid(True)
    ax.legend(loc="best", fontsize=8)

    if save_path:
        ax.figure.savefig(save_path, dpi=300)
    if show and created_fig:
        plt.show()
    elif created_fig:
        plt.close(ax.figure)
    return ax
