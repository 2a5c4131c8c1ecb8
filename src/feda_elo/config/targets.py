"""Backend selection from the target file name."""

from __future__ import annotations

import re
from enum import Enum
from typing import Dict, Iterable

from feda_elo.errors import ConfigurationError


_EXTENSION = re.compile(r"(\w+)$")


class BackendKind(str, Enum):
    NULL = "null"
    SQLITE = "sqlite"
    CSV = "csv"

    @classmethod
    def from_target(cls, target: str | None) -> "BackendKind":
        """Resolve the backend for a target name; an empty target means a dry run.

        The trailing word of the name selects the backend, so ``elo.sqlite``,
        ``.sqlite`` and ``sqlite`` all resolve to SQLite.
        """

        if not target:
            return cls.NULL
        match = _EXTENSION.search(target)
        extension = match.group(1).lower() if match else ""
        if extension not in _EXTENSIONS:
            raise ConfigurationError(
                f"Unsupported target: [{extension}]; expected one of {sorted(_EXTENSIONS)}"
            )
        return _EXTENSIONS[extension]


_EXTENSIONS: Dict[str, BackendKind] = {
    "sqlite": BackendKind.SQLITE,
    "csv": BackendKind.CSV,
}


def iter_extensions() -> Iterable[str]:
    """Return the file extensions that select a persistent backend."""

    return _EXTENSIONS.keys()
