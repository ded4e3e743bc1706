# ruff: noqa:D102, D105, D107, TRY003, EM101
from __future__ import annotations

__all__ = [
    "XlsxWorkbook",
    "is_date_format",
    "scan_date_styles",
    "scan_epoch",
    "scan_shared_strings",
]


import re
from functools import cached_property
from typing import TYPE_CHECKING
from zipfile import ZipFile

from ..cell import xl_cell
from ..constants import DATE_FORMATS, EPOCH_1900, EPOCH_1904
from ..rels import Relationship
from ..rich import parse_string
from ..tree import xml_tree

if TYPE_CHECKING:
    from pathlib import Path
    from typing import IO, Callable, Iterator

    from typing_extensions import Self

re_dt = re.compile(r"(?<!\\)[dmhysDMHYS]")
re_xt = re.compile(r'(?:".*?")|(?:\[(?!(?:hh?|mm?|ss?)\])[^\]]*\])')


def is_date_format(code: str) -> bool:
    """Format code (first section only) has date or time tokens outside of literals and brackets."""
    fmt = code.split(";", 1)[0]
    if fmt == "0" or ".00" in fmt:
        return False
    return bool(re_dt.search(re_xt.sub("", fmt)))


def scan_shared_strings(io: IO[bytes] | bytes) -> list[str | None]:
    """Shared string table: text of every `<si>` (`None`, when `<si>` has no text)."""
    tree = xml_tree.parse(io)
    return [parse_string(si) for si in tree.root.iter("si")]


def scan_date_styles(io: IO[bytes] | bytes) -> frozenset[int]:
    """Indexes of cell styles (`cellXfs/xf`) which number format represents a date."""
    tree = xml_tree.parse(io)
    root = tree.root

    custom_dates: set[int] = set()
    if (fmts := root.first("numFmts")) is not None:
        for fmt in fmts.iter("numFmt"):
            if is_date_format(fmt.attr("formatCode") or ""):
                custom_dates.add(int(fmt.attr("numFmtId") or "0"))

    ret: set[int] = set()
    if (xfs := root.first("cellXfs")) is not None:
        for i, xf in enumerate(xfs.iter("xf")):
            fmt_id = int(xf.attr("numFmtId") or "0")
            if fmt_id in custom_dates or fmt_id in DATE_FORMATS:
                ret.add(i)

    return frozenset(ret)


def scan_epoch(io: IO[bytes] | bytes) -> int:
    """Serial number of unix epoch for the workbook's date system (1900 or 1904)."""
    tree = xml_tree.parse(io)
    pr = tree.root.first("workbookPr")
    if pr is not None and pr.attr("date1904") in {"1", "true"}:
        return EPOCH_1904
    return EPOCH_1900


class XlsxWorkbook:  # noqa: D101
    __slots__ = ("__dict__", "__file", "na", "zf")

    def __init__(
        self,
        file: str | Path | IO[bytes],
        *,
        na: str = "",
    ) -> None:
        self.__file = file
        self.na = na
        self.zf: ZipFile | None = None

    def __enter__(self) -> Self:
        self.zf = ZipFile(self.__file).__enter__()
        if "xl/workbook.xml" not in self.zf.namelist():
            raise AssertionError("Invalid xlsx file")
        return self

    def __exit__(self, *_):  # noqa: ANN002, ANN204
        if self.zf is not None:
            self.zf.__exit__(*_)

    def __zip(self) -> ZipFile:
        if self.zf is None:
            msg = "Workbook is not open"
            raise RuntimeError(msg)
        return self.zf

    @cached_property
    def sheets(self) -> dict[str, str]:
        zf = self.__zip()

        rId_to_file = {}  # noqa: N806
        with zf.open("xl/_rels/workbook.xml.rels") as io:
            for rel in Relationship.scan_xml(io):
                if rel.Type == "worksheet":
                    rId_to_file[rel.Id] = rel.part_name()

        with zf.open("xl/workbook.xml") as io:
            tree = xml_tree.parse(io)

        rId_to_name = {}  # noqa: N806
        if (sheets := tree.root.first("sheets")) is not None:
            for sheet in sheets.iter("sheet"):
                rId_to_name[sheet.attr("r:id")] = sheet.attr("name")

        return {rId_to_name[x]: rId_to_file[x] for x in rId_to_name if x in rId_to_file}

    @cached_property
    def shared(self) -> list[str | None]:
        zf = self.__zip()
        if "xl/sharedStrings.xml" not in zf.namelist():
            return []
        with zf.open("xl/sharedStrings.xml") as io:
            return scan_shared_strings(io)

    @cached_property
    def date_styles(self) -> frozenset[int]:
        zf = self.__zip()
        if "xl/styles.xml" not in zf.namelist():
            return frozenset()
        with zf.open("xl/styles.xml") as io:
            return scan_date_styles(io)

    @cached_property
    def epoch(self) -> int:
        with self.__zip().open("xl/workbook.xml") as io:
            return scan_epoch(io)

    def sheet_path(self, sheet: int | str = 0) -> str:
        _sheets = self.sheets

        if isinstance(sheet, int):
            if not (0 <= sheet < len(_sheets)):
                raise IndexError(sheet)
            return next(y for i, y in enumerate(_sheets.values()) if i == sheet)

        if sheet not in _sheets:
            raise KeyError(sheet)
        return _sheets[sheet]

    def iter_worksheet(
        self,
        sheet: int | str = 0,
        *,
        skip_rows: int = 0,
        take_rows: int = 0,
        row_callback: Callable[[], None] | None = None,
    ) -> Iterator[xl_cell]:
        """
        Cells of worksheet, in document order.

        Rows are selected by their 0-based index from cell references: `skip_rows` first
        rows are skipped, then (when `take_rows` > 0) only `take_rows` rows are taken.
        """
        if not isinstance(skip_rows, int) or skip_rows < 0:
            raise ValueError("Argument `skip_rows` must be a positive integer")
        if not isinstance(take_rows, int) or take_rows < 0:
            raise ValueError("Argument `take_rows` must be a positive integer")

        sheet_path = self.sheet_path(sheet)

        with self.__zip().open(sheet_path) as io:
            tree = xml_tree.parse(io)

        data = tree.root.first("sheetData")
        if data is None:
            return

        for row in data.iter("row"):
            for node in row.iter("c"):
                c = xl_cell(node)
                if c.row < skip_rows:
                    continue
                if take_rows and c.row >= skip_rows + take_rows:
                    return
                yield c

            if row_callback is not None:
                row_callback()
