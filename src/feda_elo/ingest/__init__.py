"""Input adapters that read and normalize the rating worksheet."""

from .loader import LoadReport, load_rows, row_to_record
from .names import decode_text, split_name
from .spreadsheet import Workbook, open_workbook
from .worksheet import RawRow, Worksheet, iter_rows

__all__ = [
    "LoadReport",
    "RawRow",
    "Workbook",
    "Worksheet",
    "decode_text",
    "iter_rows",
    "load_rows",
    "open_workbook",
    "row_to_record",
    "split_name",
]
