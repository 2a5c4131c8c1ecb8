"""Persistence sinks for normalized rating records.

Every sink supports the same lifecycle: ``create_schema()`` once, ``insert()``
per record, ``commit()`` per chunk and ``finalize()`` at the end (also on
failure). Sinks are selected by :class:`~feda_elo.config.BackendKind`.
"""

from __future__ import annotations

import csv
import logging
import sqlite3
from pathlib import Path
from typing import IO, Callable, Dict, Optional

from feda_elo.config.schema import (
    COLUMNS,
    TABLE_NAME,
    create_table_sql,
    drop_table_sql,
    insert_sql,
)
from feda_elo.config.targets import BackendKind
from feda_elo.errors import BackendError, RecordError
from feda_elo.models import PlayerRecord


logger = logging.getLogger(__name__)

_INSERT_SQL = insert_sql()
_REQUIRED_COLUMNS = tuple(
    (index, column.name)
    for index, column in enumerate(COLUMNS)
    if not column.nullable and not column.primary_key
)


class BackendSink:
    """Common interface of all sinks."""

    kind: BackendKind

    def create_schema(self) -> None:
        raise NotImplementedError

    def insert(self, record: PlayerRecord) -> None:
        raise NotImplementedError

    def commit(self) -> None:
        raise NotImplementedError

    def finalize(self) -> None:
        raise NotImplementedError

    def __enter__(self) -> "BackendSink":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.finalize()


class NullSink(BackendSink):
    """Accepts and discards records; used for dry runs."""

    kind = BackendKind.NULL

    def __init__(self, path: Path | str | None = None):
        self.path = None

    def create_schema(self) -> None:
        logger.debug("NULL target: nothing to create")

    def insert(self, record: PlayerRecord) -> None:
        return None

    def commit(self) -> None:
        return None

    def finalize(self) -> None:
        return None


class SqliteSink(BackendSink):
    """SQLite-backed sink writing the ``elo_feda`` table."""

    kind = BackendKind.SQLITE

    def __init__(self, path: Path | str):
        self.path = Path(path)
        self._conn: Optional[sqlite3.Connection] = None
        self._cursor: Optional[sqlite3.Cursor] = None

    def _connect(self) -> sqlite3.Connection:
        if self._conn is None:
            try:
                self._conn = sqlite3.connect(self.path)
            except sqlite3.Error as exc:
                raise BackendError(f"Cannot open database {self.path}: {exc}") from exc
        return self._conn

    def create_schema(self) -> None:
        conn = self._connect()
        try:
            conn.execute(drop_table_sql())
            conn.execute(create_table_sql())
            conn.commit()
        except sqlite3.Error as exc:
            raise BackendError(f"Cannot create table {TABLE_NAME}: {exc}") from exc
        self._cursor = conn.cursor()

    def insert(self, record: PlayerRecord) -> None:
        if self._cursor is None:
            raise BackendError("create_schema() must run before insert()")
        try:
            self._cursor.execute(_INSERT_SQL, record.as_row())
        except (sqlite3.IntegrityError, sqlite3.InterfaceError, sqlite3.DataError) as exc:
            raise RecordError(str(exc)) from exc
        except sqlite3.Error as exc:
            raise BackendError(f"Insert into {self.path} failed: {exc}") from exc

    def commit(self) -> None:
        if self._conn is None:
            return
        try:
            self._conn.commit()
        except sqlite3.Error as exc:
            raise BackendError(f"Commit to {self.path} failed: {exc}") from exc

    def finalize(self) -> None:
        if self._cursor is not None:
            self._cursor.close()
            self._cursor = None
        if self._conn is not None:
            self._conn.close()
            self._conn = None


class CsvSink(BackendSink):
    """Flat-file sink: header-less, fully quoted UTF-8 CSV."""

    kind = BackendKind.CSV

    def __init__(self, path: Path | str):
        self.path = Path(path)
        self._fh: Optional[IO[str]] = None
        self._writer = None

    def create_schema(self) -> None:
        self.finalize()
        try:
            if self.path.exists():
                self.path.unlink()
            self._fh = self.path.open("w", newline="", encoding="utf-8")
        except OSError as exc:
            raise BackendError(f"Cannot create {self.path}: {exc}") from exc
        self._writer = csv.writer(
            self._fh,
            delimiter=",",
            quotechar='"',
            doublequote=True,
            quoting=csv.QUOTE_ALL,
            lineterminator="\n",
        )

    def insert(self, record: PlayerRecord) -> None:
        if self._writer is None or self._fh is None:
            raise BackendError("create_schema() must run before insert()")
        row = record.as_row()
        for index, name in _REQUIRED_COLUMNS:
            if row[index] is None:
                raise RecordError(f"NOT NULL constraint failed: {TABLE_NAME}.{name}")
        try:
            self._writer.writerow(row)
            self._fh.flush()
        except OSError as exc:
            raise BackendError(f"Write to {self.path} failed: {exc}") from exc

    def commit(self) -> None:
        # Rows are flushed as they are written.
        return None

    def finalize(self) -> None:
        if self._fh is not None:
            self._fh.close()
        self._fh = None
        self._writer = None


_SINKS: Dict[BackendKind, Callable[..., BackendSink]] = {
    BackendKind.NULL: NullSink,
    BackendKind.SQLITE: SqliteSink,
    BackendKind.CSV: CsvSink,
}


def open_sink(kind: BackendKind, path: Path | str | None = None) -> BackendSink:
    """Build the sink for ``kind``; persistent kinds need a destination path."""

    factory = _SINKS[kind]
    if kind is not BackendKind.NULL and path is None:
        raise ValueError(f"{kind.value} sink requires a destination path")
    return factory(path)


__all__ = [
    "BackendSink",
    "CsvSink",
    "NullSink",
    "SqliteSink",
    "open_sink",
]
