"""Fixed record schema and worksheet layout for FEDA rating exports."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ColumnSpec:
    name: str
    sql_type: str
    nullable: bool = True
    primary_key: bool = False

    def ddl(self) -> str:
        parts = [self.name, self.sql_type]
        if self.primary_key:
            parts.append("PRIMARY KEY")
        elif not self.nullable:
            parts.append("NOT NULL")
        return " ".join(parts)


TABLE_NAME = "elo_feda"

COLUMNS: Tuple[ColumnSpec, ...] = (
    ColumnSpec("feda_id", "INTEGER", primary_key=True),
    ColumnSpec("surname", "VARCHAR(32)", nullable=False),
    ColumnSpec("name", "VARCHAR(32)"),
    ColumnSpec("fed", "VARCHAR(8)"),
    ColumnSpec("rating", "INTEGER"),
    ColumnSpec("games", "INTEGER"),
    ColumnSpec("birth", "INTEGER"),
    ColumnSpec("title", "VARCHAR(16)"),
    ColumnSpec("flag", "VARCHAR(8)"),
)

# Worksheet columns 0-7, in order. The name column still holds "SURNAME, Given".
SOURCE_COLUMNS: Tuple[str, ...] = (
    "feda_id",
    "name",
    "fed",
    "rating",
    "games",
    "birth",
    "title",
    "flag",
)

SHEET_NAME = "ELO"
START_ROW = 4
CHUNK_SIZE = 2000
SOURCE_ENCODING = "latin-1"
GIVEN_NAME_PLACEHOLDER = "***"

_DEFAULT_URL_ENV = "FEDA_ELO_URL"
_DEFAULT_URL = "http://feda.org/feda2k16/wp-content/uploads/2017_11.zip"

# Spreadsheet members accepted inside the downloaded archive.
SPREADSHEET_PATTERN = r"\.xlsx?$"


def default_url() -> str:
    """Archive URL used when none is given, overridable via FEDA_ELO_URL."""

    return os.getenv(_DEFAULT_URL_ENV) or _DEFAULT_URL


def column_names() -> Tuple[str, ...]:
    return tuple(column.name for column in COLUMNS)


def create_table_sql() -> str:
    body = ",\n".join(f"    {column.ddl()}" for column in COLUMNS)
    return f"CREATE TABLE {TABLE_NAME}(\n{body}\n)"


def drop_table_sql() -> str:
    return f"DROP TABLE IF EXISTS {TABLE_NAME}"


def insert_sql() -> str:
    names = ", ".join(column_names())
    placeholders = ", ".join("?" for _ in COLUMNS)
    return f"INSERT INTO {TABLE_NAME} ({names}) VALUES ({placeholders})"
