"""Surname / given-name splitting for federation name strings."""

from __future__ import annotations

import re
from typing import Any, List, Optional, Tuple

from feda_elo.config.schema import GIVEN_NAME_PLACEHOLDER, SOURCE_ENCODING


_COMMA_SPLIT = re.compile(r"\s*,\s*")
_PERIOD_SPLIT = re.compile(r"\s*\.\s*")


def decode_text(value: Any, encoding: str = SOURCE_ENCODING) -> Optional[str]:
    """Return ``value`` as text, decoding raw bytes from the source encoding."""

    if value is None:
        return None
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode(encoding)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _split(pattern: re.Pattern[str], text: str) -> List[str]:
    parts = pattern.split(text)
    while parts and not parts[-1]:
        parts.pop()
    return parts


def _part(parts: List[str], index: int) -> Optional[str]:
    if index < len(parts) and parts[index]:
        return parts[index]
    return None


def split_name(raw: Optional[str]) -> Tuple[Optional[str], Optional[str]]:
    """Split ``"SURNAME, Given"`` into ``(surname, given_name)``.

    Exports mix ``"Last, First"``, ``"Last. F"`` and single-token names:

    1. comma split with both parts present wins;
    2. otherwise a period splits abbreviated names;
    3. otherwise a lone token is the surname and the given name is ``"***"``;
    4. anything else yields ``(None, None)``.
    """

    if raw is None:
        return None, None
    text = raw.strip()
    if not text:
        return None, None

    parts = _split(_COMMA_SPLIT, text)
    surname, given = _part(parts, 0), _part(parts, 1)
    if surname and given:
        return surname, given

    if "." in text:
        dotted = _split(_PERIOD_SPLIT, text)
        return _part(dotted, 0), _part(dotted, 1)

    if surname:
        return surname, GIVEN_NAME_PLACEHOLDER
    return None, None
