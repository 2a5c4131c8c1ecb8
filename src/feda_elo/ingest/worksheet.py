"""Positional row extraction from the ELO worksheet."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional, Protocol, Sequence, Tuple

from feda_elo.config.schema import SOURCE_COLUMNS, SOURCE_ENCODING
from feda_elo.ingest.names import decode_text


class Worksheet(Protocol):
    def row_range(self) -> Tuple[int, int]:
        ...

    def cell(self, row: int, col: int) -> Any:
        ...


@dataclass(frozen=True)
class RawRow:
    """Cell values of one worksheet row before normalization."""

    row: int
    feda_id: Any = None
    name: Optional[str] = None
    fed: Any = None
    rating: Any = None
    games: Any = None
    birth: Any = None
    title: Any = None
    flag: Any = None

    @classmethod
    def from_cells(
        cls, row: int, cells: Sequence[Any], *, encoding: str = SOURCE_ENCODING
    ) -> "RawRow":
        values = dict(zip(SOURCE_COLUMNS, cells))
        values["name"] = decode_text(values.get("name"), encoding)
        return cls(row=row, **values)


def iter_rows(
    worksheet: Worksheet,
    start_row: int,
    end_row: int,
    *,
    encoding: str = SOURCE_ENCODING,
) -> Iterator[RawRow]:
    """Yield one RawRow per row in ``[start_row, end_row]``.

    Missing cells read as ``None``. Each call re-reads the worksheet.
    """

    width = len(SOURCE_COLUMNS)
    for row in range(start_row, end_row + 1):
        cells = [worksheet.cell(row, col) for col in range(width)]
        yield RawRow.from_cells(row, cells, encoding=encoding)
