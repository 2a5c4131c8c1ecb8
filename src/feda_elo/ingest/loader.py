"""Chunked worksheet → record → sink loading."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, List, Optional, Tuple

from pydantic import ValidationError

from feda_elo.config.schema import CHUNK_SIZE, SOURCE_ENCODING
from feda_elo.errors import RecordError
from feda_elo.ingest.names import split_name
from feda_elo.ingest.worksheet import RawRow, Worksheet, iter_rows
from feda_elo.models import PlayerRecord

if TYPE_CHECKING:
    from feda_elo.persistence import BackendSink


logger = logging.getLogger(__name__)

NameNormalizer = Callable[[Optional[str]], Tuple[Optional[str], Optional[str]]]
RecordCallback = Callable[[PlayerRecord], None]


@dataclass
class LoadReport:
    rows_read: int = 0
    records_loaded: int = 0
    records_rejected: int = 0
    commits: int = 0
    rejected_rows: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "rows_read": self.rows_read,
            "records_loaded": self.records_loaded,
            "records_rejected": self.records_rejected,
            "commits": self.commits,
            "rejected_rows": list(self.rejected_rows),
        }


def row_to_record(raw: RawRow, normalizer: NameNormalizer = split_name) -> PlayerRecord:
    """Build the normalized record for one raw row.

    Raises RecordError when a cell cannot be coerced to its column type.
    """

    surname, given = normalizer(raw.name)
    try:
        return PlayerRecord(
            feda_id=raw.feda_id,
            surname=surname,
            name=given,
            fed=raw.fed,
            rating=raw.rating,
            games=raw.games,
            birth=raw.birth,
            title=raw.title,
            flag=raw.flag,
        )
    except ValidationError as exc:
        fields = ", ".join(
            ".".join(str(part) for part in error["loc"]) for error in exc.errors()
        )
        raise RecordError(f"malformed value in {fields}") from exc


def load_rows(
    worksheet: Worksheet,
    sink: "BackendSink",
    *,
    start_row: int,
    end_row: int,
    chunk_size: int = CHUNK_SIZE,
    normalizer: NameNormalizer = split_name,
    callback: RecordCallback | None = None,
    strict: bool = False,
    verbose: bool = False,
    encoding: str = SOURCE_ENCODING,
) -> LoadReport:
    """Stream rows ``[start_row, end_row]`` into ``sink``, committing every chunk.

    Each record is inserted and then handed to ``callback``. A RecordError
    aborts the load when ``strict``; otherwise the row is skipped and reported.
    BackendError always propagates. The sink is never finalized here.
    """

    if chunk_size < 1:
        raise ValueError("chunk_size must be at least 1")

    report = LoadReport()
    first = start_row
    while first <= end_row:
        last = min(first + chunk_size - 1, end_row)
        for raw in iter_rows(worksheet, first, last, encoding=encoding):
            report.rows_read += 1
            try:
                record = row_to_record(raw, normalizer)
                sink.insert(record)
            except RecordError as exc:
                if strict:
                    raise RecordError(f"row {raw.row}: {exc}") from exc
                report.records_rejected += 1
                report.rejected_rows.append(f"row {raw.row}: {exc}")
                log = logger.warning if verbose else logger.debug
                log("DB Error at row %s (id=%s): %s", raw.row, raw.feda_id, exc)
                continue
            report.records_loaded += 1
            if callback is not None:
                callback(record)
        sink.commit()
        report.commits += 1
        if verbose:
            logger.info("+ Commit rows %s..%s (%s loaded)", first, last, report.records_loaded)
        first += chunk_size
    return report
