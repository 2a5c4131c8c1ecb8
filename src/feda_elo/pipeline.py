"""Download, parse and cleanup of one FEDA rating list."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import httpx

from feda_elo.config.options import PipelineOptions
from feda_elo.config.schema import SHEET_NAME, SPREADSHEET_PATTERN, START_ROW
from feda_elo.config.targets import BackendKind
from feda_elo.errors import ParseError
from feda_elo.fetch import extract_matching, fetch_archive
from feda_elo.ingest.loader import LoadReport, RecordCallback, load_rows
from feda_elo.ingest.spreadsheet import open_workbook
from feda_elo.persistence import BackendSink, open_sink


logger = logging.getLogger(__name__)

_DEFAULT_STEM = "chess_elo_feda"


def attach_console_handler(log: logging.Logger) -> bool:
    """Send ``log`` records at INFO and above to stdout unless a handler exists.

    Returns whether a handler was attached.
    """

    if log.hasHandlers():
        return False
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    log.addHandler(handler)
    if log.level == logging.NOTSET or log.level > logging.INFO:
        log.setLevel(logging.INFO)
    return True


class Pipeline:
    """Loads the FEDA rating list into the backend chosen by ``target``.

    ``target`` ending in ``.sqlite`` builds an SQLite database, ``.csv`` a CSV
    file and an empty target only validates the rows. ``callback`` receives
    every stored :class:`~feda_elo.models.PlayerRecord` in worksheet order.

    Progress goes through the ``feda_elo`` logger. With ``verbose`` and no
    logging configured by the caller, a stdout handler is attached to it.
    """

    def __init__(
        self,
        folder: Path | str,
        *,
        target: str = "",
        url: Optional[str] = None,
        callback: RecordCallback | None = None,
        verbose: bool = False,
        strict: bool = False,
        spreadsheet: Path | str | None = None,
        chunk_size: Optional[int] = None,
        client: Optional[httpx.Client] = None,
    ):
        values: dict[str, object] = {
            "folder": folder,
            "target": target or "",
            "verbose": verbose,
            "strict": strict,
            "spreadsheet": spreadsheet,
        }
        if url is not None:
            values["url"] = url
        if chunk_size is not None:
            values["chunk_size"] = chunk_size
        self.options = PipelineOptions.build(**values)
        self.callback = callback
        self.spreadsheet: Optional[Path] = self.options.spreadsheet
        self.report: Optional[LoadReport] = None
        self._client = client
        self._downloaded = False
        if verbose:
            attach_console_handler(logging.getLogger("feda_elo"))

    @property
    def backend(self) -> BackendKind:
        return self.options.backend

    @property
    def destination(self) -> Optional[Path]:
        return self.options.destination

    def _progress(self, message: str, *args: object) -> None:
        if self.options.verbose:
            logger.info(message, *args)
        else:
            logger.debug(message, *args)

    def download(self) -> bool:
        """Fetch the archive and extract its spreadsheet into the folder."""

        stem = self.options.folder / (self.options.target or _DEFAULT_STEM)
        archive = stem.with_name(stem.name + ".zip")
        try:
            fetch_archive(self.options.url, archive, client=self._client)
            self._progress("+ Download: %s", archive)
            spreadsheet = extract_matching(archive, SPREADSHEET_PATTERN, stem, keep_suffix=True)
        finally:
            archive.unlink(missing_ok=True)
        self._progress("+ Unzip: %s", spreadsheet)
        self.spreadsheet = spreadsheet
        self._downloaded = True
        return spreadsheet.exists()

    def _open_sink(self) -> BackendSink:
        if self.backend is BackendKind.NULL:
            self._progress("+ NULL target")
        else:
            self._progress("+ DB File: %s", self.destination)
        return open_sink(self.backend, self.destination)

    def parse(self) -> int:
        """Rebuild the destination from the spreadsheet; return records stored."""

        if self.spreadsheet is None:
            raise ParseError("No spreadsheet to parse: call download() or pass spreadsheet=")

        self._progress("+ Load spreadsheet: %s", self.spreadsheet)
        with open_workbook(self.spreadsheet) as workbook:
            worksheet = workbook.sheet(SHEET_NAME)
            _, row_max = worksheet.row_range()
            with self._open_sink() as sink:
                sink.create_schema()
                self.report = load_rows(
                    worksheet,
                    sink,
                    start_row=START_ROW,
                    end_row=row_max,
                    chunk_size=self.options.chunk_size,
                    callback=self.callback,
                    strict=self.options.strict,
                    verbose=self.options.verbose,
                )

        report = self.report
        if report.records_rejected:
            logger.warning(
                "%s of %s rows rejected while loading %s",
                report.records_rejected,
                report.rows_read,
                self.spreadsheet,
            )
        self._progress(
            "+ Loaded %s records in %s commits", report.records_loaded, report.commits
        )
        return report.records_loaded

    def cleanup(self) -> None:
        """Delete the spreadsheet fetched by download(); local inputs are kept."""

        if not self._downloaded or self.spreadsheet is None:
            return
        if self.spreadsheet.exists():
            self._progress("+ remove spreadsheet file: %s", self.spreadsheet)
            self.spreadsheet.unlink()

    def run(self) -> int:
        """``download()``, ``parse()`` and ``cleanup()`` in a single call."""

        if not self.download():
            return 0
        try:
            return self.parse()
        finally:
            self.cleanup()
