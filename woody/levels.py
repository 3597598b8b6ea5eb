"""Severities and the threshold used to filter them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import ClassVar, Union


class Severity(IntEnum):
    """Record severity; the value is both the rank and the numeric alias."""

    OFF = 0
    TRACE = 1
    INFO = 2
    DEBUG = 3
    WARNING = 4
    ERROR = 5

    @property
    def label(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.name


class ThresholdKind(Enum):
    OFF = "off"
    ALWAYS = "always"
    AT = "at"


_NAMES = {
    "error": Severity.ERROR,
    "warn": Severity.WARNING,
    "warning": Severity.WARNING,
    "debug": Severity.DEBUG,
    "info": Severity.INFO,
    "trace": Severity.TRACE,
    "off": Severity.OFF,
}

_ALIASES = {"0", "1", "2", "3", "4", "5"}


@dataclass(frozen=True)
class Threshold:
    """Minimum severity admitted by a logger, or one of the two special gates.

    ``Threshold.OFF`` drops every record. ``Threshold.ALWAYS`` admits every
    record and is the default when nothing is configured.
    """

    kind: ThresholdKind
    severity: Severity | None = None

    OFF: ClassVar["Threshold"]
    ALWAYS: ClassVar["Threshold"]

    @classmethod
    def at(cls, severity: Severity) -> "Threshold":
        severity = Severity(severity)
        if severity is Severity.OFF:
            return cls.OFF
        return cls(ThresholdKind.AT, severity)

    @classmethod
    def coerce(cls, value: Union["Threshold", Severity, int, str, None]) -> "Threshold":
        """Build a threshold from a Threshold, a severity rank or a level name.

        Raises:
            ValueError: If ``value`` is a string that names no level.
        """
        if isinstance(value, Threshold):
            return value
        if isinstance(value, int):
            return cls.at(value)
        if value is None:
            return cls.ALWAYS
        if isinstance(value, str):
            if not is_known_level(value):
                raise ValueError(f"Unknown log level: {value!r}")
            return parse_threshold(value)
        raise TypeError(f"Unsupported threshold value: {value!r}")

    @property
    def label(self) -> str:
        if self.kind is ThresholdKind.OFF:
            return "OFF"
        if self.kind is ThresholdKind.ALWAYS:
            return ""
        return self.severity.label

    def admits(self, severity: Severity) -> bool:
        """Return True when a record at ``severity`` passes this threshold."""
        if self.kind is ThresholdKind.ALWAYS:
            return True
        if self.kind is ThresholdKind.OFF:
            return False
        # plain text records pass any severity gate
        if severity is Severity.OFF:
            return True
        return severity >= self.severity


Threshold.OFF = Threshold(ThresholdKind.OFF)
Threshold.ALWAYS = Threshold(ThresholdKind.ALWAYS)


def is_known_level(value: str | None) -> bool:
    if value is None:
        return False
    return _lookup(value) is not None


def _lookup(value: str) -> Severity | None:
    key = value.strip().lower()
    if key in _NAMES:
        return _NAMES[key]
    if key in _ALIASES:
        return Severity(int(key))
    return None


def parse_threshold(value: str | None) -> Threshold:
    """Map a level name or numeric alias to a threshold.

    Args:
        value: Case-insensitive name (``error``, ``warn``, ``warning``, ``debug``,
            ``info``, ``trace``, ``off``) or alias ``0``-``5``.

    Returns:
        The matching threshold, or ``Threshold.ALWAYS`` for missing or unknown
        values.
    """
    if value is None:
        return Threshold.ALWAYS
    severity = _lookup(value)
    if severity is None:
        return Threshold.ALWAYS
    return Threshold.at(severity)
