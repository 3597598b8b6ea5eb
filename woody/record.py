"""Log record value type."""

from __future__ import annotations

from dataclasses import dataclass, replace

from woody.levels import Severity


@dataclass(frozen=True)
class Record:
    """One log event captured at the call site, before formatting."""

    severity: Severity
    message: str
    source_file: str
    line_number: int
    thread_name: str | None = None

    def __post_init__(self) -> None:
        if self.line_number < 0:
            raise ValueError(f"line_number must be non-negative: {self.line_number}")

    def with_thread(self, thread_name: str | None) -> "Record":
        return replace(self, thread_name=thread_name)
