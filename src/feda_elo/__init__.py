"""Load the FEDA chess rating list into SQLite or CSV."""

from feda_elo.errors import (
    BackendError,
    ConfigurationError,
    ExtractionError,
    FedaEloError,
    FetchError,
    ParseError,
    PersistenceError,
    RecordError,
)
from feda_elo.models import PlayerRecord
from feda_elo.pipeline import Pipeline

__all__ = [
    "BackendError",
    "ConfigurationError",
    "ExtractionError",
    "FedaEloError",
    "FetchError",
    "ParseError",
    "PersistenceError",
    "Pipeline",
    "PlayerRecord",
    "RecordError",
]
