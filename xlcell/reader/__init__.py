from .reader import read, sheet_data
from .xlsx import XlsxWorkbook, scan_date_styles, scan_epoch, scan_shared_strings

__all__ = [
    "XlsxWorkbook",
    "read",
    "scan_date_styles",
    "scan_epoch",
    "scan_shared_strings",
    "sheet_data",
]
