from __future__ import annotations

__all__ = ["build_ref", "col_idx", "col_name", "parse_ref"]

from .core import NUMBA_AVAILABLE, cached
from .errors import MalformedReference


def _scan_ref(ref: str) -> tuple[int, int, int]:
    # Order of letters and digits is not checked: "1A" is accepted.
    row = 0
    col = 0
    for i in range(len(ref)):
        x = ord(ref[i])
        if 48 <= x <= 57:
            row = row * 10 + (x - 48)
        elif 65 <= x <= 90:
            col = col * 26 + (x - 64)
        else:
            return row, col, i
    return row, col, -1


if NUMBA_AVAILABLE:
    import numba as nb

    _scan_ref = nb.njit(_scan_ref)  # type: ignore


def parse_ref(ref: str) -> tuple[int, int]:
    """
    Parse cell reference (`"AA12"`) into 0-based `(row, col)`.

    Raises `MalformedReference` on any character outside of `[A-Z0-9]`.
    Reference without digits gives row `-1`.
    """
    row, col, bad = _scan_ref(ref)
    if bad >= 0:
        raise MalformedReference(ref[bad], ref)
    return row - 1, col - 1


def col_idx(col: str) -> int:
    """0-based index of column letters (`"A"` -> 0, `"AA"` -> 26)."""
    return parse_ref(col)[1]


@cached
def col_name(col: int) -> str:
    """Column letters of 0-based column index."""
    if col < 0:
        msg = f"Column index must be >= 0, not {col}"
        raise ValueError(msg)
    letters: list[str] = []
    value = col + 1
    while value > 0:
        value, rem = divmod(value - 1, 26)
        letters.append(chr(65 + rem))
    return "".join(reversed(letters))


def build_ref(row: int, col: int) -> str:
    """Conventional reference of 0-based `(row, col)`, inverse of `parse_ref`."""
    if row < 0:
        msg = f"Row index must be >= 0, not {row}"
        raise ValueError(msg)
    return f"{col_name(col)}{row + 1}"
