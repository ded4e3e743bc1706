"""Lenient numeric parsing of cell values, with C locale `atoi`/`atof` semantics."""

from __future__ import annotations

__all__ = ["atof", "atoi"]

import re

C_SPACE = " \t\n\v\f\r"

re_int = re.compile(r"[+-]?\d+")
re_dec = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
re_hex = re.compile(r"([+-]?)0[xX]((?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?\d+)?)")
re_inf = re.compile(r"([+-]?)(inf(?:inity)?|nan)", re.IGNORECASE)


def atoi(s: str) -> int:
    """Leading integer of `s`, `0` when there is none (`"12abc"` -> 12, `"abc"` -> 0)."""
    m = re_int.match(s.lstrip(C_SPACE))
    return int(m.group()) if m else 0


def atof(s: str) -> float:
    """
    Longest leading floating point number of `s`, `0.0` when there is none.

    Non-numeric content silently becomes `0.0`: this is not a validation layer.
    """
    s = s.lstrip(C_SPACE)

    if m := re_hex.match(s):
        value = float.fromhex(m.group(2))
        return -value if m.group(1) == "-" else value

    if m := re_dec.match(s):
        return float(m.group())

    if m := re_inf.match(s):
        return float(m.group())

    return 0.0
