"""Append-only file sink shared by every logger handle."""

from __future__ import annotations

import threading
from pathlib import Path


class ConfigurationError(RuntimeError):
    """Raised when the configured log file cannot be opened for appending."""


class SinkWriteError(RuntimeError):
    """Raised when a formatted line cannot be written to the log file."""


class FileSink:
    """Owns the log file handle and serializes writes to it."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._lock = threading.Lock()
        try:
            self._file = self._path.open("ab")
        except OSError as exc:
            raise ConfigurationError(f"Cannot open log file for append: {self._path}: {exc}") from exc

    @property
    def path(self) -> Path:
        return self._path

    def write(self, data: bytes) -> None:
        """Write ``data`` in full before any other writer can start."""
        with self._lock:
            try:
                self._file.write(data)
                self._file.flush()
            except (OSError, ValueError) as exc:
                raise SinkWriteError(f"Failed to write log file: {self._path}: {exc}") from exc

    def close(self) -> None:
        with self._lock:
            self._file.close()
