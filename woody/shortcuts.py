"""Module-level logging calls that record the caller's file and line."""

from __future__ import annotations

from typing import Any

from woody.levels import Severity
from woody.logger import get_instance


def log_at(severity: Severity, message: Any, /, *args: Any, stacklevel: int = 1, **kwargs: Any) -> bool:
    """Log ``message`` at ``severity`` through the process-wide logger.

    When positional or keyword arguments are given, ``message`` is treated as a
    ``str.format`` template.
    """
    return get_instance().emit(severity, message, *args, stacklevel=stacklevel + 1, **kwargs)


def error(message: Any, /, *args: Any, stacklevel: int = 1, **kwargs: Any) -> bool:
    return log_at(Severity.ERROR, message, *args, stacklevel=stacklevel + 1, **kwargs)


def warning(message: Any, /, *args: Any, stacklevel: int = 1, **kwargs: Any) -> bool:
    return log_at(Severity.WARNING, message, *args, stacklevel=stacklevel + 1, **kwargs)


def info(message: Any, /, *args: Any, stacklevel: int = 1, **kwargs: Any) -> bool:
    return log_at(Severity.INFO, message, *args, stacklevel=stacklevel + 1, **kwargs)


def debug(message: Any, /, *args: Any, stacklevel: int = 1, **kwargs: Any) -> bool:
    return log_at(Severity.DEBUG, message, *args, stacklevel=stacklevel + 1, **kwargs)


def trace(message: Any, /, *args: Any, stacklevel: int = 1, **kwargs: Any) -> bool:
    return log_at(Severity.TRACE, message, *args, stacklevel=stacklevel + 1, **kwargs)


def text(message: Any, /, *args: Any, stacklevel: int = 1, **kwargs: Any) -> bool:
    """Log plain text; it passes any threshold except Off."""
    return log_at(Severity.OFF, message, *args, stacklevel=stacklevel + 1, **kwargs)
