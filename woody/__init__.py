"""A small process-wide logger that appends formatted records to one file."""

from woody.config import WoodyConfig, config_from_dict, load_config
from woody.formatter import ParsedLine, format_record, format_timestamp, parse_line
from woody.levels import Severity, Threshold, ThresholdKind, parse_threshold
from woody.logger import Logger, get_instance, get_logger, reset_instance
from woody.record import Record
from woody.shortcuts import debug, error, info, log_at, text, trace, warning
from woody.sink import ConfigurationError, FileSink, SinkWriteError

__all__ = [
    "ConfigurationError",
    "FileSink",
    "Logger",
    "ParsedLine",
    "Record",
    "Severity",
    "SinkWriteError",
    "Threshold",
    "ThresholdKind",
    "WoodyConfig",
    "config_from_dict",
    "debug",
    "error",
    "format_record",
    "format_timestamp",
    "get_instance",
    "get_logger",
    "info",
    "load_config",
    "log_at",
    "parse_line",
    "parse_threshold",
    "reset_instance",
    "text",
    "trace",
    "warning",
]
