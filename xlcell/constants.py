"""
Common constants for XLSX cell decoding.

CellType is ordered by "width": when cells of different types share a column,
the column takes the widest type (BLANK < DATE < NUMERIC < TEXT).

CellType.BLANK   -> pyarrow.null()
CellType.DATE    -> pyarrow.TimestampArray (serial date -> seconds since unix epoch)
CellType.NUMERIC -> pyarrow.DoubleArray
CellType.TEXT    -> pyarrow.LargeStringArray
"""

from __future__ import annotations

__all__ = [
    "DATE_FORMATS",
    "EPOCH_1900",
    "EPOCH_1904",
    "SECONDS_PER_DAY",
    "CellType",
]

from enum import IntEnum


class CellType(IntEnum):
    BLANK = 0x00
    DATE = 0x10
    NUMERIC = 0x20
    TEXT = 0x30


SECONDS_PER_DAY = 86_400

EPOCH_1900 = 25_569
"Serial number of 1970-01-01 in the 1900 date system"

EPOCH_1904 = 24_107
"Serial number of 1970-01-01 in the 1904 date system"

DATE_FORMATS = frozenset(
    [0x0E, 0x0F, 0x10, 0x11, 0x12, 0x13, 0x14, 0x15, 0x16, 0x2D, 0x2E, 0x2F],
)
"Built-in `numFmtId` values with date or time representation"
