"""Process-wide logger and the registry that hands it out."""

from __future__ import annotations

import inspect
import os
import threading
from typing import Any, Tuple, TextIO, Union

from woody.config import load_config
from woody.formatter import format_record
from woody.levels import Severity, Threshold
from woody.record import Record
from woody.sink import FileSink

ThresholdLike = Union[Threshold, Severity, str]


def caller_location(stacklevel: int = 1) -> Tuple[str, int]:
    """Return ``(file name, line)`` of a frame above the function calling this one.

    ``stacklevel=1`` is the immediate caller of that function.
    """
    frame = inspect.currentframe()
    if frame is None:
        return "unknown", 0
    try:
        frame = frame.f_back
        for _ in range(stacklevel):
            if frame is None or frame.f_back is None:
                break
            frame = frame.f_back
        if frame is None:
            return "unknown", 0
        return os.path.basename(frame.f_code.co_filename), frame.f_lineno
    finally:
        del frame


def render_message(message: Any, args: tuple, kwargs: dict) -> str:
    if args or kwargs:
        return str(message).format(*args, **kwargs)
    return str(message)


class Logger:
    """Filters records, formats them and writes them through a shared sink."""

    def __init__(self, sink: FileSink, threshold: ThresholdLike = Threshold.ALWAYS) -> None:
        self._sink = sink
        self._threshold = Threshold.coerce(threshold)
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"Logger(filename={self.filename!r}, threshold={self.threshold!r})"

    @property
    def filename(self) -> str:
        return str(self._sink.path)

    @property
    def threshold(self) -> Threshold:
        with self._lock:
            return self._threshold

    def set_threshold(self, threshold: ThresholdLike) -> None:
        """Change the threshold for every holder of this logger."""
        value = Threshold.coerce(threshold)
        with self._lock:
            self._threshold = value

    def admits(self, severity: Severity) -> bool:
        return self.threshold.admits(severity)

    def log(self, record: Record, writer: TextIO | None = None) -> bool:
        """Write a record if the threshold admits it.

        Args:
            record: Record to write.
            writer: Optional stream receiving the line instead of the log file.

        Returns:
            True if the record was written, False if it was filtered out.
        """
        if not self.admits(record.severity):
            return False
        line = format_record(record)
        if writer is not None:
            writer.write(line)
            return True
        self._sink.write(line.encode("utf-8"))
        return True

    def emit(self, severity: Severity, message: Any, /, *args: Any, stacklevel: int = 1, **kwargs: Any) -> bool:
        """Build a record located at the caller and log it."""
        if not self.admits(severity):
            return False
        source_file, line_number = caller_location(stacklevel)
        record = Record(
            severity=severity,
            message=render_message(message, args, kwargs),
            source_file=source_file,
            line_number=line_number,
        )
        return self.log(record)

    def error(self, message: Any, /, *args: Any, stacklevel: int = 1, **kwargs: Any) -> bool:
        return self.emit(Severity.ERROR, message, *args, stacklevel=stacklevel + 1, **kwargs)

    def warning(self, message: Any, /, *args: Any, stacklevel: int = 1, **kwargs: Any) -> bool:
        return self.emit(Severity.WARNING, message, *args, stacklevel=stacklevel + 1, **kwargs)

    def info(self, message: Any, /, *args: Any, stacklevel: int = 1, **kwargs: Any) -> bool:
        return self.emit(Severity.INFO, message, *args, stacklevel=stacklevel + 1, **kwargs)

    def debug(self, message: Any, /, *args: Any, stacklevel: int = 1, **kwargs: Any) -> bool:
        return self.emit(Severity.DEBUG, message, *args, stacklevel=stacklevel + 1, **kwargs)

    def trace(self, message: Any, /, *args: Any, stacklevel: int = 1, **kwargs: Any) -> bool:
        return self.emit(Severity.TRACE, message, *args, stacklevel=stacklevel + 1, **kwargs)

    def text(self, message: Any, /, *args: Any, stacklevel: int = 1, **kwargs: Any) -> bool:
        return self.emit(Severity.OFF, message, *args, stacklevel=stacklevel + 1, **kwargs)

    def close(self) -> None:
        self._sink.close()


_INSTANCE: Logger | None = None
_INSTANCE_LOCK = threading.Lock()


def get_instance() -> Logger:
    """Return the process-wide logger, creating it on first use.

    The first call reads ``WOODY_FILE`` and ``WOODY_LEVEL`` and opens the log
    file. ``ConfigurationError`` propagates if the file cannot be opened.
    """
    global _INSTANCE
    with _INSTANCE_LOCK:
        if _INSTANCE is None:
            cfg = load_config()
            _INSTANCE = Logger(FileSink(cfg.filename), cfg.threshold)
        return _INSTANCE


def get_logger() -> Logger:
    """Return the shared logger instance."""
    return get_instance()


def reset_instance() -> None:
    """Close and drop the process-wide logger. Used for test isolation."""
    global _INSTANCE
    with _INSTANCE_LOCK:
        if _INSTANCE is not None:
            _INSTANCE.close()
        _INSTANCE = None
