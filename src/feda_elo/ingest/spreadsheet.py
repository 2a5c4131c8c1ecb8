"""Workbook adapters for the legacy ``.xls`` and the ``.xlsx`` rating exports."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Sequence, Tuple
from zipfile import BadZipFile

import openpyxl
import xlrd
from openpyxl.utils.exceptions import InvalidFileException
from xlrd.compdoc import CompDocError

from feda_elo.errors import ParseError


logger = logging.getLogger(__name__)

_EMPTY_XLS_TYPES = {xlrd.XL_CELL_EMPTY, xlrd.XL_CELL_BLANK, xlrd.XL_CELL_ERROR}


class XlsWorksheet:
    def __init__(self, sheet: xlrd.sheet.Sheet):
        self._sheet = sheet

    def row_range(self) -> Tuple[int, int]:
        return 0, self._sheet.nrows - 1

    def cell(self, row: int, col: int) -> Any:
        if row < 0 or col < 0 or row >= self._sheet.nrows:
            return None
        if col >= self._sheet.row_len(row):
            return None
        if self._sheet.cell_type(row, col) in _EMPTY_XLS_TYPES:
            return None
        return self._sheet.cell_value(row, col)


class XlsxWorksheet:
    def __init__(self, rows: Sequence[Sequence[Any]]):
        self._rows = rows

    def row_range(self) -> Tuple[int, int]:
        return 0, len(self._rows) - 1

    def cell(self, row: int, col: int) -> Any:
        if row < 0 or col < 0 or row >= len(self._rows):
            return None
        values = self._rows[row]
        if col >= len(values):
            return None
        return values[col]


class Workbook:
    """Parsed workbook; close it (or use it as a context manager) when done."""

    def __init__(self, path: Path):
        self.path = path

    def sheet_names(self) -> List[str]:
        raise NotImplementedError

    def sheet(self, name: str):
        raise NotImplementedError

    def close(self) -> None:
        raise NotImplementedError

    def __enter__(self) -> "Workbook":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _missing_sheet(self, name: str) -> ParseError:
        return ParseError(
            f"Worksheet {name!r} not found in {self.path} (sheets: {self.sheet_names()})"
        )


class XlsWorkbook(Workbook):
    def __init__(self, path: Path):
        super().__init__(path)
        try:
            self._book = xlrd.open_workbook(str(path), on_demand=True)
        except (xlrd.XLRDError, CompDocError, OSError) as exc:
            raise ParseError(f"Cannot parse spreadsheet {path}: {exc}") from exc

    def sheet_names(self) -> List[str]:
        return list(self._book.sheet_names())

    def sheet(self, name: str) -> XlsWorksheet:
        try:
            return XlsWorksheet(self._book.sheet_by_name(name))
        except xlrd.XLRDError as exc:
            raise self._missing_sheet(name) from exc

    def close(self) -> None:
        self._book.release_resources()


class XlsxWorkbook(Workbook):
    def __init__(self, path: Path):
        super().__init__(path)
        try:
            self._book = openpyxl.load_workbook(str(path), read_only=True, data_only=True)
        except (InvalidFileException, BadZipFile, KeyError, OSError) as exc:
            raise ParseError(f"Cannot parse spreadsheet {path}: {exc}") from exc

    def sheet_names(self) -> List[str]:
        return list(self._book.sheetnames)

    def sheet(self, name: str) -> XlsxWorksheet:
        if name not in self._book.sheetnames:
            raise self._missing_sheet(name)
        rows = list(self._book[name].iter_rows(values_only=True))
        return XlsxWorksheet(rows)

    def close(self) -> None:
        self._book.close()


_OPENERS: Dict[str, Callable[[Path], Workbook]] = {
    ".xls": XlsWorkbook,
    ".xlsx": XlsxWorkbook,
    ".xlsm": XlsxWorkbook,
}


def open_workbook(path: Path | str) -> Workbook:
    """Open ``path`` with the reader matching its extension."""

    path = Path(path)
    suffix = path.suffix.lower()
    opener = _OPENERS.get(suffix)
    if opener is None:
        raise ParseError(f"Unsupported spreadsheet format {suffix!r} for {path}")
    if not path.is_file():
        raise ParseError(f"Spreadsheet not found: {path}")
    logger.debug("Opening %s workbook %s", suffix, path)
    return opener(path)
