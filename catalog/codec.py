# -*- coding: utf-8 -*-
# Foilbase/catalog/codec.py

"""
Project: Foilbase
Date: 10/18/2026

Purpose
-------
Text form of coordinate columns: comma-joined decimal literals, no brackets, no
escaping. Each value is written with `repr(float)` (shortest text that parses back
to the same float), so stored geometry round-trips exactly.
"""

import re
from typing import Iterable, Tuple

from .errors import ParseError

__all__ = ["encode_coords", "decode_coords"]

_SEP = ","
_FLOAT_RE = re.compile(
    r"[-+]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?|inf|infinity|nan)", re.IGNORECASE
)


def encode_coords(values: Iterable[float]) -> str:
    """Join values as '0.5,0.0123,-0.01'. An empty sequence gives ''."""
    return _SEP.join(repr(float(v)) for v in values)


def decode_coords(text: str, *, name: str = None) -> Tuple[float, ...]:
    """
    Split a stored coordinate column back into floats.

    Parameters
    ----------
    text : str
        Comma-joined literals as written by `encode_coords`.
    name : str, optional
        Record name, only used for error context.

    Raises
    ------
    ParseError
        On the first token that is not a plain decimal, exponent, inf or nan literal
        (no whitespace, no digit separators), or if the column is NULL.
    """
    if text is None:
        raise ParseError("Stored coordinate column is NULL", {"name": name})
    if text == "":
        return ()
    out = []
    for i, tok in enumerate(text.split(_SEP)):
        if _FLOAT_RE.fullmatch(tok) is None:
            raise ParseError("Stored coordinate is not a float",
                             {"name": name, "index": i, "token": tok})
        out.append(float(tok))
    return tuple(out)
