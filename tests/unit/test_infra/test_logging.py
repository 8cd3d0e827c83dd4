"""Unit tests for structured logging."""
from __future__ import annotations

import json
import logging
import sys

import pytest

from pagination_service.infra.logging import (
    ContextInjectingFilter,
    JSONFormatter,
    clear_log_context,
    get_log_context,
    set_log_context,
)
from pagination_service.infra.logging.config import _build_formatters_config


def _record(msg: str = "hello", **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="pagination_service.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.fixture(autouse=True)
def _clean_context():
    clear_log_context()
    yield
    clear_log_context()


@pytest.mark.unit
class TestJSONFormatter:
    """Test suite for JSONFormatter."""

    def test_basic_fields(self):
        output = json.loads(JSONFormatter().format(_record("Served page")))

        assert output["level"] == "INFO"
        assert output["logger"] == "pagination_service.test"
        assert output["message"] == "Served page"
        assert output["timestamp"].endswith("Z")

    def test_static_and_extra_fields(self):
        formatter = JSONFormatter(static={"service": "pagination-service"})

        output = json.loads(formatter.format(_record(page=2, size=10)))

        assert output["service"] == "pagination-service"
        assert output["page"] == 2
        assert output["size"] == 10
        assert "pathname" not in output

    def test_exception_is_rendered(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = _record()
            record.exc_info = sys.exc_info()

        output = json.loads(JSONFormatter().format(record))

        assert "ValueError: boom" in output["exception"]

    def test_output_is_single_line(self):
        line = JSONFormatter().format(_record("multi\nline"))

        assert "\n" not in line

    def test_unserializable_values_are_stringified(self):
        output = json.loads(JSONFormatter().format(_record(obj=object())))

        assert output["obj"].startswith("<object object")


@pytest.mark.unit
class TestLogContext:
    """Test suite for context propagation into records."""

    def test_set_and_get(self):
        set_log_context(request_id="abc")
        set_log_context(path="/paginate")

        assert get_log_context() == {"request_id": "abc", "path": "/paginate"}

    def test_filter_injects_context(self):
        set_log_context(request_id="abc")
        record = _record()

        assert ContextInjectingFilter().filter(record) is True
        assert record.request_id == "abc"

    def test_explicit_extra_wins(self):
        set_log_context(request_id="from-context")
        record = _record(request_id="from-extra")

        ContextInjectingFilter().filter(record)

        assert record.request_id == "from-extra"

    def test_clear(self):
        set_log_context(request_id="abc")
        clear_log_context()

        assert get_log_context() == {}


@pytest.mark.unit
def test_formatter_config_carries_service_name():
    config = _build_formatters_config("pagination-service")

    assert config["json"]["static"] == {"service": "pagination-service"}


@pytest.mark.unit
def test_configure_logging_writes_json_file(tmp_path):
    from pagination_service.infra.logging import configure_logging

    log_file = tmp_path / "logs" / "service.jsonl"
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        configure_logging(
            log_level="INFO",
            json_logs=False,
            console_enabled=False,
            file_path=log_file,
            service_name="pagination-service",
        )
        set_log_context(request_id="req-1")
        logging.getLogger("pagination_service.test").info("Served page", extra={"page": 3})
        for handler in root.handlers:
            handler.flush()
    finally:
        for handler in root.handlers:
            if handler not in saved_handlers:
                handler.close()
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)

    line = json.loads(log_file.read_text(encoding="utf-8").strip().splitlines()[-1])
    assert line["message"] == "Served page"
    assert line["service"] == "pagination-service"
    assert line["request_id"] == "req-1"
    assert line["page"] == 3
