from __future__ import annotations

__all__ = ["read", "sheet_data"]

from typing import TYPE_CHECKING

import numpy as np
import pyarrow as pa
from tqdm import tqdm

from ..constants import CellType
from ..core import as_dataclass
from .xlsx import XlsxWorkbook

if TYPE_CHECKING:
    from pathlib import Path
    from typing import IO, Sequence

    from ..cell import xl_cell
    from ..errors import diagnostic

F__8 = pa.float64()
UTF8 = pa.large_string()
T_MS = pa.timestamp("ms")


@as_dataclass
class sheet_data:  # noqa: N801
    """Worksheet as arrow table, with non-fatal problems found while decoding its cells."""

    table: pa.Table
    diagnostics: list[diagnostic]


def __make_header(
    cells: dict[int, xl_cell],
    col_indexes: Sequence[int],
    na: str,
    shared: Sequence[str | None],
    diagnostics: list[diagnostic],
) -> list[str]:
    hdrs = []
    for i, col in enumerate(col_indexes):
        name = None
        if (c := cells.get(col)) is not None:
            name = c.as_text(na, shared, diagnostics)
        hdrs.append(name or f"Unnamed. {i}")

    result_hdrs: list[str] = []
    for hdr in hdrs:
        n = hdr
        i = 1
        while n in result_hdrs:
            n = f"{hdr}.{i}"
            i += 1
        result_hdrs.append(n)

    return result_hdrs


def __make_column(
    cells: list[tuple[int, xl_cell, CellType]],
    length: int,
    na: str,
    shared: Sequence[str | None],
    epoch: int,
    diagnostics: list[diagnostic],
) -> pa.Array:
    kind = max((t for _, _, t in cells), default=CellType.BLANK)

    if kind == CellType.BLANK:
        return pa.nulls(length)

    if kind == CellType.TEXT:
        texts: list[str | None] = [None] * length
        for row, c, t in cells:
            if t != CellType.BLANK:
                texts[row] = c.as_text(na, shared, diagnostics)
        return pa.array(texts, UTF8)

    values = np.zeros(length, np.float64)
    mask = np.ones(length, np.bool_)

    for row, c, t in cells:
        if t == CellType.BLANK:
            continue
        value = c.as_date(na, epoch) if kind == CellType.DATE else c.as_float(na)
        if value is not None:
            values[row] = value
            mask[row] = False

    if kind == CellType.DATE:
        return pa.array(np.round(values * 1000).astype(np.int64), T_MS, mask=mask)
    return pa.array(values, F__8, mask=mask)


def read(
    # ? File name/path/binary stream
    file: str | Path | IO[bytes],
    # ? Sheet number/name
    sheet: int | str = 0,
    /,
    header: bool = False,  # noqa: FBT001, FBT002
    *,
    # ? Missing value sentinel: cells with this text are nulls
    na: str = "",
    skip_rows: int = 0,
    take_rows: int = 0,
    with_tqdm: bool = False,
) -> sheet_data:
    """
    Read worksheet into `pyarrow.Table`, one column per used worksheet column.

    Column type is the widest type of its cells (blank < date < numeric < text): dates within
    numeric column are kept as serial numbers, numbers within text column as their raw text.
    """
    diagnostics: list[diagnostic] = []
    columns: dict[int, list[tuple[int, xl_cell, CellType]]] = {}
    head: dict[int, xl_cell] = {}

    with XlsxWorkbook(file, na=na) as _reader:
        shared = _reader.shared
        date_styles = _reader.date_styles
        epoch = _reader.epoch

        tq = None
        cbk = None
        if with_tqdm:
            tq = tqdm(desc=f"Excel reading: [{sheet}]", unit=" rows")
            tq.__enter__()
            cbk = tq.update

        first_row = -1
        last_row = -1
        try:
            for _cell in _reader.iter_worksheet(
                sheet,
                skip_rows=skip_rows,
                take_rows=take_rows,
                row_callback=cbk,
            ):
                if first_row < 0:
                    first_row = _cell.row
                if header and _cell.row == first_row:
                    head[_cell.col] = _cell
                    columns.setdefault(_cell.col, [])
                    continue

                t = _cell.type(na, shared, date_styles, diagnostics)
                columns.setdefault(_cell.col, []).append((_cell.row, _cell, t))
                last_row = max(last_row, _cell.row)
        finally:
            if tq is not None:
                tq.__exit__(None, None, None)

        col_indexes = sorted(columns)

        if header:
            names = __make_header(head, col_indexes, na, shared, diagnostics)
            first_row += 1
        else:
            names = [f"Unnamed. {i}" for i, _ in enumerate(col_indexes)]

        length = last_row - first_row + 1 if 0 <= first_row <= last_row else 0

        arrays = [
            __make_column(
                [(row - first_row, c, t) for row, c, t in columns[col]],
                length,
                na,
                shared,
                epoch,
                diagnostics,
            )
            for col in col_indexes
        ]

    return sheet_data(pa.table(arrays, names), diagnostics)
