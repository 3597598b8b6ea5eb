from pathlib import Path
from typing import Iterator

import pytest

from woody import logger as woody_logger


@pytest.fixture(autouse=True)
def log_path(tmp_path: Path, monkeypatch) -> Iterator[Path]:
    path = tmp_path / "woody.log"
    monkeypatch.setenv("WOODY_FILE", str(path))
    monkeypatch.delenv("WOODY_LEVEL", raising=False)
    woody_logger.reset_instance()
    yield path
    woody_logger.reset_instance()
