"""Configuration loading from the environment."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping

from woody.levels import Threshold, is_known_level, parse_threshold

DEFAULT_FILENAME = "debug.log"
FILE_ENV = "WOODY_FILE"
LEVEL_ENV = "WOODY_LEVEL"


@dataclass
class WoodyConfig:
    """Settings read once when the process-wide logger is created."""

    filename: str = DEFAULT_FILENAME
    threshold: Threshold = field(default_factory=lambda: Threshold.ALWAYS)


def _as_filename(value: Any) -> str:
    if value is None:
        return DEFAULT_FILENAME
    text = str(value)
    if not text.strip():
        return DEFAULT_FILENAME
    return text


def _as_threshold(value: Any) -> Threshold:
    if isinstance(value, Threshold):
        return value
    if value is None:
        return Threshold.ALWAYS
    text = str(value)
    if text.strip() and not is_known_level(text):
        print(f"woody: unknown {LEVEL_ENV} value {text!r}, logging everything", file=sys.stderr)
    return parse_threshold(text)


def config_from_dict(raw: Mapping[str, Any]) -> WoodyConfig:
    """Build a WoodyConfig from raw values.

    Args:
        raw: Mapping with optional ``filename`` and ``threshold`` entries.

    Returns:
        Normalized WoodyConfig instance.
    """
    return WoodyConfig(
        filename=_as_filename(raw.get("filename")),
        threshold=_as_threshold(raw.get("threshold")),
    )


def load_config(environ: Mapping[str, str] | None = None) -> WoodyConfig:
    """Read ``WOODY_FILE`` and ``WOODY_LEVEL`` into a WoodyConfig."""
    env = os.environ if environ is None else environ
    raw: Dict[str, Any] = {
        "filename": env.get(FILE_ENV),
        "threshold": env.get(LEVEL_ENV),
    }
    return config_from_dict(raw)
