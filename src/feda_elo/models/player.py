"""Canonical player record shared by the loader, sinks and observers."""

from __future__ import annotations

from typing import Any, Optional, Tuple

from pydantic import BaseModel, field_validator
from pydantic.config import ConfigDict

from feda_elo.config.schema import column_names


class PlayerRecord(BaseModel):
    """One normalized row of the federation rating list.

    Field names match the ``elo_feda`` columns; ``name`` holds the given name.
    """

    feda_id: Optional[int] = None
    surname: Optional[str] = None
    name: Optional[str] = None
    fed: Optional[str] = None
    rating: Optional[int] = None
    games: Optional[int] = None
    birth: Optional[int] = None
    title: Optional[str] = None
    flag: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @field_validator("feda_id", "rating", "games", "birth", mode="before")
    @classmethod
    def _blank_int_is_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("surname", "name", "fed", "title", "flag", mode="before")
    @classmethod
    def _text(cls, value: Any) -> Any:
        # Spreadsheet cells come back as floats even for codes like "2".
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            value = str(value)
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value

    def as_row(self) -> Tuple[Any, ...]:
        """Return the column values in table order."""

        return tuple(getattr(self, column) for column in column_names())
