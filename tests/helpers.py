"""Worksheet builders shared by the test modules."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Sequence, Tuple

import openpyxl
import xlwt


HEADER_ROWS = [
    ["FEDERACION ESPAÑOLA DE AJEDREZ"],
    ["Lista de ELO"],
    ["Noviembre 2017"],
    ["ID", "NOMBRE", "FED", "ELO", "PARTIDAS", "NAC", "TIT", "BANDERA"],
]

SAMPLE_ROWS = [
    (2200001, "GARCIA LOPEZ, Juan", "MAD", 2105, 12, 1980, "FM", None),
    (2200002, "PEREZ RUIZ, Ana", "CAT", 1950, 7, 1995, "WFM", "i"),
    (2200003, "MARTIN SANZ, Luis", "AND", 1720, 0, 2004, None, None),
    (2200004, "ALONSO, Maria", "VAL", 1800, 20, 1975, None, "w"),
    (2200005, "DIAZ GIL, Pedro", "GAL", 2011, 31, 1969, "CM", None),
]


class FakeWorksheet:
    """In-memory worksheet; row indexes include the 4 header rows."""

    def __init__(self, rows: Sequence[Sequence[Any]], header_rows: int = 4):
        self._rows = [[f"header {i}"] for i in range(header_rows)] + [list(r) for r in rows]
        self.reads = 0

    def row_range(self) -> Tuple[int, int]:
        return 0, len(self._rows) - 1

    def cell(self, row: int, col: int) -> Any:
        self.reads += 1
        if row >= len(self._rows) or col >= len(self._rows[row]):
            return None
        return self._rows[row][col]


def write_workbook(
    path: Path,
    rows: Iterable[Sequence[Any]],
    *,
    sheet: str = "ELO",
) -> Path:
    workbook = openpyxl.Workbook()
    worksheet = workbook.active
    worksheet.title = sheet
    for line in HEADER_ROWS:
        worksheet.append(line)
    for row in rows:
        worksheet.append(list(row))
    workbook.save(path)
    return path


def write_xls(
    path: Path,
    rows: Iterable[Sequence[Any]],
    *,
    sheet: str = "ELO",
) -> Path:
    """Write a BIFF ``.xls`` workbook; ``None`` cells are left empty."""

    workbook = xlwt.Workbook()
    worksheet = workbook.add_sheet(sheet)
    for r, line in enumerate([*HEADER_ROWS, *rows]):
        for c, value in enumerate(line):
            if value is not None:
                worksheet.write(r, c, value)
    workbook.save(str(path))
    return path
