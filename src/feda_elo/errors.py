"""Exception hierarchy shared by the loader, sinks and collaborators."""

from __future__ import annotations


class FedaEloError(Exception):
    """Base class for every error raised by feda_elo."""


class ConfigurationError(FedaEloError, ValueError):
    """Raised when a pipeline is built with an invalid folder or target."""


class FetchError(FedaEloError):
    """Raised when the rating archive cannot be downloaded."""


class ExtractionError(FedaEloError):
    """Raised when no spreadsheet can be extracted from the archive."""


class ParseError(FedaEloError):
    """Raised when the workbook cannot be opened or lacks the expected sheet."""


class PersistenceError(FedaEloError):
    """Raised when a sink fails to store data."""


class RecordError(PersistenceError):
    """A single record was rejected (constraint violation, malformed value)."""


class BackendError(PersistenceError):
    """The backing store itself failed; the run cannot continue."""


__all__ = [
    "FedaEloError",
    "ConfigurationError",
    "FetchError",
    "ExtractionError",
    "ParseError",
    "PersistenceError",
    "RecordError",
    "BackendError",
]
