from __future__ import annotations

from pathlib import Path

import pytest

from tests.helpers import SAMPLE_ROWS, write_workbook


@pytest.fixture
def sample_workbook(tmp_path: Path) -> Path:
    return write_workbook(tmp_path / "elo.xlsx", SAMPLE_ROWS)
