import inspect
from pathlib import Path

import pytest

import woody
from woody.formatter import parse_line
from woody.levels import Severity


def _last(path: Path):
    return parse_line(path.read_text(encoding="utf-8").splitlines(keepends=True)[-1])


@pytest.mark.parametrize(
    "call, label",
    [
        (woody.error, "ERROR"),
        (woody.warning, "WARNING"),
        (woody.info, "INFO"),
        (woody.debug, "DEBUG"),
        (woody.trace, "TRACE"),
        (woody.text, "OFF"),
    ],
)
def test_each_entry_point_writes_its_level(log_path: Path, call, label: str) -> None:
    message = f"Hello, {call.__name__}!"
    call(message)

    parsed = _last(log_path)
    assert parsed.level == label
    assert parsed.message == message


def test_shortcut_records_call_site(log_path: Path) -> None:
    line = inspect.currentframe().f_lineno + 1
    woody.info("here")

    parsed = _last(log_path)
    assert parsed.source_file == "test_shortcuts.py"
    assert parsed.line_number == line


def test_stacklevel_points_at_wrapper_caller(log_path: Path) -> None:
    def report(message: str) -> None:
        woody.error(message, stacklevel=2)

    line = inspect.currentframe().f_lineno + 1
    report("wrapped")

    assert _last(log_path).line_number == line


def test_format_arguments(log_path: Path) -> None:
    woody.debug("Hello, {}! {count} left", "world", count=3)
    assert _last(log_path).message == "Hello, world! 3 left"


def test_message_without_arguments_is_not_formatted(log_path: Path) -> None:
    woody.info("{not a field}")
    assert _last(log_path).message == "{not a field}"


def test_non_string_message(log_path: Path) -> None:
    woody.warning(42)
    assert _last(log_path).message == "42"


def test_log_at_custom_severity(log_path: Path) -> None:
    assert woody.log_at(Severity.TRACE, "deep") is True
    assert _last(log_path).level == "TRACE"


def test_filtered_shortcut_skips_formatting(log_path: Path) -> None:
    woody.get_instance().set_threshold("error")

    # the template is invalid; it must not be rendered when filtered out
    assert woody.info("{0} {1}", "only-one") is False
    assert log_path.read_text(encoding="utf-8") == ""


def test_text_is_suppressed_only_by_off(log_path: Path) -> None:
    woody.get_instance().set_threshold("error")
    assert woody.text("visible") is True

    woody.get_instance().set_threshold("off")
    assert woody.text("hidden") is False

    lines = log_path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1
    assert lines[0].endswith("] visible")


def test_template_fields_may_share_parameter_names(log_path: Path) -> None:
    assert woody.info("{message} lost", message="disk") is True
    assert woody.error("severity={severity}", severity="high") is True
    assert woody.log_at(Severity.WARNING, "{severity}/{message}", severity="s", message="m") is True

    lines = log_path.read_text(encoding="utf-8").splitlines(keepends=True)
    assert [parse_line(line).message for line in lines] == ["disk lost", "severity=high", "s/m"]
