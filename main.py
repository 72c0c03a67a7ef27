# -*- coding: utf-8 -*-
# Foilbase/main.py

"""
Batch ingestion driver:
  1) Build settings (defaults + overrides) and configure logging
  2) Optionally wipe the store, then create/verify the `airfoils` table
  3) Load each .dat file, derive camber/thickness, insert the record
  4) List the catalog back and print a summary
  5) Optional CSV / JSON / Excel export

Usage:
  python main.py [FILE_OR_DIR ...]
Directories are searched with `dat_glob`. Any error aborts the run (exit code 1).
"""

import glob
import logging
import os
import sys

from geometry.errors import FoilbaseError
from geometry.record import AirfoilRecord
from catalog.config import build_config
from catalog.export import write_catalog_csv, write_catalog_excel, write_catalog_json
from catalog.schema import ensure_schema
from catalog.store import insert, list_all, reset


def _collect_dat_files(inputs, pattern):
    files = []
    for item in inputs:
        if os.path.isdir(item):
            files.extend(sorted(glob.glob(os.path.join(item, pattern))))
        else:
            files.append(item)
    return files


def _export(records, cfg, log):
    writers = {
        "csv": write_catalog_csv,
        "json": write_catalog_json,
        "xlsx": write_catalog_excel,
    }
    for fmt in cfg["export_formats"]:
        path = os.path.join(cfg["export_dir"], "airfoils.{}".format(fmt))
        writers[fmt](records, path)
        log.info("Exported %s", path)


def run(inputs, params=None):
    """Ingest `inputs` into the catalog described by `params`; return the listed records."""
    cfg = build_config(params)
    log = logging.getLogger("Foilbase")

    db_path = cfg["db_path"]
    if cfg["reset_on_start"]:
        reset(db_path)
    ensure_schema(db_path)

    for path in _collect_dat_files(inputs, cfg["dat_glob"]):
        insert(AirfoilRecord.from_dat_file(path), db_path)

    records = list_all(db_path)
    log.info("Catalog %s holds %d airfoils", db_path, len(records))

    if cfg["export_formats"]:
        _export(records, cfg, log)
    return records


if __name__ == "__main__":
    settings = build_config({"db_path": "airfoils.db", "export_formats": ["csv"]})
    logging.basicConfig(level=settings["log_level"], format="%(levelname)s:%(name)s:%(message)s")

    inputs = sys.argv[1:] or ["."]
    try:
        records = run(inputs, settings)
    except (FoilbaseError, OSError) as e:
        print("Ingestion failed: {}".format(e), file=sys.stderr)
        sys.exit(1)

    for rec in records:
        print("{:<24s} camber={:7.3f}% @ {:5.1f}%   t_max={:7.3f}% @ {:5.1f}%   ({} pts)".format(
            rec.name, rec.camber, rec.camber_pos, rec.max_thickness, rec.max_thick_pos, len(rec.x_coord)))
