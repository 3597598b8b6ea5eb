"""Record formatting and parsing of formatted lines."""

from __future__ import annotations

import re
import threading
from dataclasses import dataclass
from datetime import datetime

from woody.record import Record

UNNAMED_THREAD = "unnamed"

LINE_PATTERN = re.compile(
    r"\[(?P<timestamp>[^\]]+)\] "
    r"\[(?P<level>[A-Z]*)\] "
    r"\[(?P<thread>[^\]]+)\] "
    r"\[(?P<source_file>[^\]]+?):(?P<line_number>[0-9]+)\] "
    r"(?P<message>.*)\n?"
)


@dataclass(frozen=True)
class ParsedLine:
    """Fields recovered from one formatted log line."""

    timestamp: str
    level: str
    thread: str
    source_file: str
    line_number: int
    message: str


def format_timestamp(now: datetime | None = None) -> str:
    """Format a local wall-clock time as ``YYYY-MM-DD HH:MM:SS.mmm TZ``."""
    if now is None:
        now = datetime.now().astimezone()
    elif now.tzinfo is None:
        now = now.astimezone()
    millis = now.microsecond // 1000
    return f"{now.strftime('%Y-%m-%d %H:%M:%S')}.{millis:03d} {now.strftime('%Z')}"


def current_thread_name() -> str:
    return threading.current_thread().name or UNNAMED_THREAD


def format_record(
    record: Record,
    now: datetime | None = None,
    thread_name: str | None = None,
) -> str:
    """Render a record as a single newline-terminated log line.

    Args:
        record: Record to render.
        now: Timestamp to use; defaults to the current local time.
        thread_name: Fallback thread name when the record carries none;
            defaults to the current thread's name.

    Returns:
        ``[<TS>] [<LEVEL>] [<THREAD>] [<FILE>:<LINE>] <MESSAGE>\\n``
    """
    thread = record.thread_name or thread_name or current_thread_name()
    location = f"{record.source_file}:{record.line_number}"
    return (
        f"[{format_timestamp(now)}] [{record.severity.label}] [{thread}] "
        f"[{location}] {record.message}\n"
    )


def parse_line(line: str) -> ParsedLine | None:
    """Parse a formatted log line, returning None when it does not match."""
    match = LINE_PATTERN.fullmatch(line)
    if not match:
        return None
    return ParsedLine(
        timestamp=match.group("timestamp"),
        level=match.group("level"),
        thread=match.group("thread"),
        source_file=match.group("source_file"),
        line_number=int(match.group("line_number")),
        message=match.group("message"),
    )
