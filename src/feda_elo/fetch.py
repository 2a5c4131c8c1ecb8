"""Download the rating archive and pull the spreadsheet out of it."""

from __future__ import annotations

import logging
import re
import shutil
import zipfile
from pathlib import Path
from typing import Optional

import httpx

from feda_elo.errors import ExtractionError, FetchError


logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 60.0


def fetch_archive(
    url: str,
    destination: Path,
    *,
    client: Optional[httpx.Client] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> Path:
    """Stream ``url`` into ``destination``; an empty body writes nothing.

    A failed transfer removes whatever part of ``destination`` was written.
    """

    owns_client = client is None
    if client is None:
        client = httpx.Client(timeout=timeout, follow_redirects=True)
    written = 0
    try:
        with client.stream("GET", url) as response:
            if response.is_error:
                raise FetchError(
                    f"GET [{url}] failed: {response.status_code} {response.reason_phrase}"
                )
            chunks = response.iter_bytes()
            first = next(chunks, b"")
            if first:
                with destination.open("wb") as fh:
                    fh.write(first)
                    written += len(first)
                    for chunk in chunks:
                        fh.write(chunk)
                        written += len(chunk)
            logger.debug(
                "Download %s => [%s] %s (%s bytes)",
                destination,
                response.status_code,
                response.reason_phrase,
                written,
            )
    except httpx.HTTPError as exc:
        destination.unlink(missing_ok=True)
        raise FetchError(f"GET [{url}] failed: {exc}") from exc
    except OSError as exc:
        destination.unlink(missing_ok=True)
        raise FetchError(f"Cannot write {destination}: {exc}") from exc
    finally:
        if owns_client:
            client.close()
    return destination


def extract_matching(
    archive: Path, pattern: str, destination: Path, *, keep_suffix: bool = False
) -> Path:
    """Copy the first member of ``archive`` whose name matches ``pattern``.

    With ``keep_suffix`` the member's extension is appended to ``destination``.
    A failed copy removes the partially written ``destination``.
    """

    matcher = re.compile(pattern, re.IGNORECASE)
    try:
        with zipfile.ZipFile(archive) as bundle:
            for member in bundle.infolist():
                if member.is_dir() or not matcher.search(member.filename):
                    continue
                if keep_suffix:
                    suffix = Path(member.filename).suffix.lower()
                    destination = destination.with_name(destination.name + suffix)
                try:
                    with bundle.open(member) as src, destination.open("wb") as dst:
                        shutil.copyfileobj(src, dst)
                except (zipfile.BadZipFile, OSError):
                    destination.unlink(missing_ok=True)
                    raise
                logger.debug("Extracted %s from %s to %s", member.filename, archive, destination)
                return destination
    except (zipfile.BadZipFile, OSError) as exc:
        raise ExtractionError(f"Cannot open {archive}: {exc}") from exc
    raise ExtractionError(f"No member matching {pattern!r} in {archive}")
