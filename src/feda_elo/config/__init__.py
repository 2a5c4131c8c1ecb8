"""Configuration helpers for the record schema, targets and run options."""

from .options import PipelineOptions
from .schema import (
    CHUNK_SIZE,
    COLUMNS,
    SHEET_NAME,
    START_ROW,
    TABLE_NAME,
    ColumnSpec,
    column_names,
)
from .targets import BackendKind, iter_extensions

__all__ = [
    "BackendKind",
    "CHUNK_SIZE",
    "COLUMNS",
    "ColumnSpec",
    "PipelineOptions",
    "SHEET_NAME",
    "START_ROW",
    "TABLE_NAME",
    "column_names",
    "iter_extensions",
]
