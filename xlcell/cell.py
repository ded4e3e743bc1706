# ruff: noqa:PLR0911
"""
Decoding of a single worksheet cell (`<c>` element).

Key reference for the structure is ECMA-376, 4th edition:
    18.3.1.4   c           (Cell)
    18.3.1.96  v           (Cell Value)
    18.3.1.53  is          (Rich Text Inline)
    18.18.11   ST_CellType (Cell Type)
"""

from __future__ import annotations

__all__ = ["xl_cell"]

from typing import TYPE_CHECKING

from .casts import atof, atoi
from .constants import SECONDS_PER_DAY, CellType
from .errors import (
    InvalidStringTableIndex,
    MalformedReference,
    MalformedRichText,
    UnknownCellType,
    report,
)
from .ref import parse_ref
from .rich import parse_string

if TYPE_CHECKING:
    from typing import Collection, Sequence

    from .errors import diagnostic
    from .tree import xml_node


class xl_cell:  # noqa: N801
    """
    Typed view of a `<c>` element.

    Only coordinates are computed on construction: type and value are decoded on every call,
    from the shared strings, date styles and missing value sentinel given to that call.
    """

    __slots__ = ("col", "node", "row")

    def __init__(self, node: xml_node) -> None:
        ref = node.attr("r")
        if ref is None:
            raise MalformedReference(None, None)

        self.node = node
        self.row, self.col = parse_ref(ref)

    def __repr__(self) -> str:
        return f"xl_cell(row={self.row}, col={self.col}, t={self.node.attr('t')!r})"

    def _v(self) -> str | None:
        v = self.node.first("v")
        return None if v is None else v.text

    def as_str(self, shared: Sequence[str | None]) -> str | None:
        """
        Raw value, or shared string when `t="s"`. No comparison with missing value sentinel.

        Raises `InvalidStringTableIndex` for out of range shared string index: any other
        string of the table would be wrong data.
        """
        v = self._v()
        if v is None:
            return None

        if self.node.attr("t") != "s":
            return v

        sid = atoi(v)
        if not (0 <= sid < len(shared)):
            msg = f"[{self.row + 1}, {self.col + 1}]: Invalid string id {sid}"
            raise InvalidStringTableIndex(msg)
        return shared[sid]

    def as_float(self, na: str = "") -> float | None:
        """Numeric value, `None` when missing or equal to `na`. Non-numeric text gives `0.0`."""
        v = self._v()
        if v is None or v == na:
            return None
        return atof(v)

    def as_date(self, na: str, offset: int) -> float | None:
        """Serial date as seconds since the epoch, which has serial number `offset`."""
        v = self._v()
        if v is None or v == na:
            return None
        return (atof(v) - offset) * SECONDS_PER_DAY

    def as_text(
        self,
        na: str,
        shared: Sequence[str | None],
        diagnostics: list[diagnostic] | None = None,
    ) -> str | None:
        """
        Text of inline string, shared string or raw value; `None` when missing or equal to `na`.

        Out of range shared string index is reported and gives `None`.
        """
        is_ = self.node.first("is")
        if is_ is not None:
            value = parse_string(is_)
            if value is None:
                report(
                    diagnostics,
                    self.row,
                    self.col,
                    MalformedRichText,
                    "inline string has no text",
                )
                return None
            return None if value == na else value

        v = self._v()
        if v is None:
            return None

        if self.node.attr("t") == "s":
            return self._shared(v, na, shared, diagnostics)

        return None if v == na else v

    def type(
        self,
        na: str,
        shared: Sequence[str | None],
        date_styles: Collection[int],
        diagnostics: list[diagnostic] | None = None,
    ) -> CellType:
        t = self.node.attr("t")

        if t is None or t == "n":
            s = self.node.attr("s")
            style = -1 if s is None else atoi(s)
            return CellType.DATE if style in date_styles else CellType.NUMERIC

        if t == "b":
            return CellType.NUMERIC

        if t == "d":
            # ISO-8601 date text: parsing is left to the caller
            return CellType.TEXT

        if t == "e":
            return CellType.BLANK

        if t == "s":
            v = self._v()
            if v is None:
                return CellType.BLANK
            value = self._shared(v, na, shared, diagnostics)
            return CellType.BLANK if value is None else CellType.TEXT

        if t == "str":
            v = self._v()
            return CellType.BLANK if v is None or v == na else CellType.TEXT

        if t == "inlineStr":
            return CellType.TEXT

        report(
            diagnostics,
            self.row,
            self.col,
            UnknownCellType,
            f"unknown type {t!r}",
        )
        return CellType.TEXT

    def _shared(
        self,
        v: str,
        na: str,
        shared: Sequence[str | None],
        diagnostics: list[diagnostic] | None,
    ) -> str | None:
        sid = atoi(v)
        if not (0 <= sid < len(shared)):
            report(
                diagnostics,
                self.row,
                self.col,
                InvalidStringTableIndex,
                f"Invalid string id {sid}",
            )
            return None

        value = shared[sid]
        return None if value is None or value == na else value
