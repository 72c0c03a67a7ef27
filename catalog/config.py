# -*- coding: utf-8 -*-
# Foilbase/catalog/config.py

"""
Project: Foilbase
Date: 10/18/2026

Purpose
-------
Assemble the ingestion driver's settings from flat defaults and user overrides:
canonicalize friendly keys, check value types and enumerations, and return a plain
dict. The catalog functions themselves never read this; the driver passes
`cfg["db_path"]` explicitly.

Main Tasks
----------
    1. Canonicalize override keys via `ALIASES`.
    2. Reject unknown keys, wrong types and unsupported enum values (ConfigError).
    3. Merge over `DEFAULTS` and return a new dict.
"""

from typing import Any, Dict, Mapping, Optional

from .errors import ConfigError

__all__ = ["DEFAULTS", "ALIASES", "ENUMS", "normalize_keys", "validate", "build_config"]

DEFAULTS = {
    "db_path": "airfoils.db",
    "reset_on_start": True,
    "dat_glob": "*.dat",
    "log_level": "INFO",
    "export_dir": "",
    "export_formats": (),
}

ALIASES = {
    "db": "db_path",
    "store": "db_path",
    "store_path": "db_path",
    "reset": "reset_on_start",
    "glob": "dat_glob",
    "level": "log_level",
    "export": "export_formats",
}

ENUMS = {
    "log_level": {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"},
    "export_formats": {"csv", "json", "xlsx"},
}

_TYPES = {
    "db_path": str,
    "reset_on_start": bool,
    "dat_glob": str,
    "log_level": str,
    "export_dir": str,
    "export_formats": (list, tuple),
}


def normalize_keys(params: Mapping[str, Any]) -> Dict[str, Any]:
    """Map user-friendly keys to canonical names (values untouched)."""
    return {ALIASES.get(k, k): v for k, v in params.items()}


def validate(params: Mapping[str, Any]) -> None:
    """
    Check canonical params: known key, expected type, allowed enum values.

    Raises
    ------
    ConfigError
        On the first violation.
    """
    for key, value in params.items():
        if key not in DEFAULTS:
            raise ConfigError("Unknown config key", {"key": key, "allowed": sorted(DEFAULTS)})
        if not isinstance(value, _TYPES[key]):
            raise ConfigError("Wrong type for config key", {"key": key, "value": value})

    level = params.get("log_level")
    if level is not None and level.upper() not in ENUMS["log_level"]:
        raise ConfigError("Unsupported log level", {"key": "log_level", "value": level})

    for fmt in params.get("export_formats", ()):
        if fmt not in ENUMS["export_formats"]:
            raise ConfigError("Unsupported export format",
                              {"key": "export_formats", "value": fmt,
                               "allowed": sorted(ENUMS["export_formats"])})


def build_config(params: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """
    Merge validated overrides over `DEFAULTS`.

    `log_level` is upper-cased and `export_formats` returned as a tuple.
    """
    cfg = dict(DEFAULTS)
    if params:
        params = normalize_keys(params)
        validate(params)
        cfg.update(params)
    cfg["log_level"] = cfg["log_level"].upper()
    cfg["export_formats"] = tuple(cfg["export_formats"])
    return cfg
