"""Validated run options for the pipeline facade."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from feda_elo.config.schema import CHUNK_SIZE, default_url
from feda_elo.config.targets import BackendKind
from feda_elo.errors import ConfigurationError


class PipelineOptions(BaseModel):
    folder: Path
    target: str = ""
    url: str = Field(default_factory=default_url)
    verbose: bool = False
    strict: bool = False
    chunk_size: int = Field(default=CHUNK_SIZE, ge=1)
    spreadsheet: Path | None = None

    model_config = ConfigDict(frozen=True)

    @field_validator("folder")
    @classmethod
    def _folder_must_exist(cls, value: Path) -> Path:
        if not value.is_dir():
            raise ValueError(f"Invalid path: [{value}]")
        return value

    @field_validator("target")
    @classmethod
    def _target_must_be_supported(cls, value: str) -> str:
        value = value.strip()
        BackendKind.from_target(value)
        return value

    @classmethod
    def build(cls, **values: object) -> "PipelineOptions":
        """Validate options, reporting any failure as a ConfigurationError."""

        try:
            return cls(**values)
        except ValidationError as exc:
            messages = "; ".join(error["msg"] for error in exc.errors())
            raise ConfigurationError(messages) from exc

    @property
    def backend(self) -> BackendKind:
        return BackendKind.from_target(self.target)

    @property
    def destination(self) -> Path | None:
        if self.backend is BackendKind.NULL:
            return None
        return self.folder / self.target
