# ruff: noqa:D101
from __future__ import annotations

__all__ = [
    "InvalidStringTableIndex",
    "MalformedReference",
    "MalformedRichText",
    "UnknownCellType",
    "XlcellWarning",
    "diagnostic",
    "report",
]

import warnings

from .core import as_dataclass


class MalformedReference(ValueError):
    """Cell reference is absent or contains a character outside of `[A-Z0-9]`."""

    def __init__(self, char: str | None, ref: str | None) -> None:
        if ref is None:
            msg = "Invalid cell: lacks ref attribute"
        else:
            msg = f"Invalid character {char!r} in cell ref {ref!r}"
        super().__init__(msg)
        self.char = char
        self.ref = ref


class XlcellWarning(UserWarning):
    """Base class of non-fatal cell decoding problems."""


class UnknownCellType(XlcellWarning):
    pass


class MalformedRichText(XlcellWarning):
    pass


class InvalidStringTableIndex(IndexError, XlcellWarning):
    """
    Shared string index is out of range of the shared string table.

    Raised by the strict text accessor, reported as a warning by the lenient ones.
    """


@as_dataclass(readonly=True)
class diagnostic:  # noqa: N801
    """Non-fatal problem found while decoding a cell."""

    row: int
    "0-based row index"

    col: int
    "0-based column index"

    category: type[XlcellWarning]

    message: str

    def __str__(self) -> str:
        return f"[{self.row + 1}, {self.col + 1}]: {self.message}"


def report(
    diagnostics: list[diagnostic] | None,
    row: int,
    col: int,
    category: type[XlcellWarning],
    message: str,
) -> None:
    """Append diagnostic to `diagnostics`, or emit it as a warning when no list given."""
    d = diagnostic(row, col, category, message)
    if diagnostics is not None:
        diagnostics.append(d)
    else:
        warnings.warn(str(d), category, stacklevel=3)
