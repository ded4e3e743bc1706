from .cell import xl_cell
from .constants import EPOCH_1900, EPOCH_1904, CellType
from .core import as_dataclass, cached
from .errors import (
    InvalidStringTableIndex,
    MalformedReference,
    MalformedRichText,
    UnknownCellType,
    XlcellWarning,
    diagnostic,
)
from .ref import build_ref, col_name, parse_ref
from .rels import Relationship
from .rich import parse_string
from .tree import xml_node, xml_tree
from .reader import XlsxWorkbook, read, sheet_data

__all__ = [
    "EPOCH_1900",
    "EPOCH_1904",
    "CellType",
    "InvalidStringTableIndex",
    "MalformedReference",
    "MalformedRichText",
    "Relationship",
    "UnknownCellType",
    "XlcellWarning",
    "XlsxWorkbook",
    "as_dataclass",
    "build_ref",
    "cached",
    "col_name",
    "diagnostic",
    "parse_ref",
    "parse_string",
    "read",
    "sheet_data",
    "xl_cell",
    "xml_node",
    "xml_tree",
]
