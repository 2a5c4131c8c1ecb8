"""Persist and load CLI run profiles."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class RunProfile:
    folder: Optional[str] = None
    target: str = ""
    url: Optional[str] = None
    strict: bool = False

    @classmethod
    def load(cls, path: Path) -> "RunProfile":
        data = json.loads(path.read_text(encoding="utf-8"))
        return cls(
            folder=data.get("folder"),
            target=data.get("target", ""),
            url=data.get("url"),
            strict=bool(data.get("strict", False)),
        )

    def save(self, path: Path) -> None:
        payload = {
            "folder": self.folder,
            "target": self.target,
            "url": self.url,
            "strict": self.strict,
        }
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
