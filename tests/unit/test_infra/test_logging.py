"""Unit tests for the logging infrastructure."""
from __future__ import annotations

import json
import logging

import pytest

from catalog_service.core.settings import LoggingSettings
from catalog_service.infra.logging import (
    ContextInjectingFilter,
    JSONFormatter,
    clear_log_context,
    configure_logging,
    get_log_context,
    remove_from_log_context,
    set_log_context,
    setup_logging,
    shutdown,
)


@pytest.fixture
def restore_root_logger():
    """Undo global logging changes made by a test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    filters = root.filters[:]
    yield root
    shutdown()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.filters[:] = filters
    root.setLevel(level)
    logging.captureWarnings(False)
    clear_log_context()


def _make_record(message: str = "hello", **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="catalog_service.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def _read_jsonl(path) -> list[dict]:
    return [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines() if line]


class TestLogContext:
    """Tests for contextvar-backed log context."""

    def setup_method(self):
        clear_log_context()

    def teardown_method(self):
        clear_log_context()

    def test_set_and_get(self):
        set_log_context(request_id="abc-123")
        set_log_context(book_id=7)

        assert get_log_context() == {"request_id": "abc-123", "book_id": 7}

    def test_remove_keys(self):
        set_log_context(request_id="abc-123", temp="value")
        remove_from_log_context("temp", "missing")

        assert get_log_context() == {"request_id": "abc-123"}

    def test_get_returns_copy(self):
        set_log_context(request_id="abc-123")
        get_log_context()["request_id"] = "changed"

        assert get_log_context()["request_id"] == "abc-123"

    def test_filter_injects_without_overwriting(self):
        set_log_context(request_id="abc-123", name="ignored")
        record = _make_record()

        assert ContextInjectingFilter().filter(record) is True
        assert record.request_id == "abc-123"
        assert record.name == "catalog_service.test"


class TestJSONFormatter:
    """Tests for JSONFormatter."""

    def test_formats_single_json_line(self):
        formatter = JSONFormatter(static={"service": "catalog-service"})

        line = formatter.format(_make_record("page built", cursor="MQ=="))
        data = json.loads(line)

        assert "\n" not in line
        assert data["level"] == "INFO"
        assert data["logger"] == "catalog_service.test"
        assert data["message"] == "page built"
        assert data["service"] == "catalog-service"
        assert data["cursor"] == "MQ=="
        assert data["timestamp"].endswith("Z")

    def test_exception_is_kept_on_one_line(self):
        formatter = JSONFormatter()
        try:
            raise ValueError("boom")
        except ValueError:
            import sys

            record = _make_record()
            record.exc_info = sys.exc_info()

        line = formatter.format(record)

        assert "\n" not in line
        assert "ValueError: boom" in json.loads(line)["exception"]


@pytest.mark.usefixtures("restore_root_logger")
class TestConfigureLogging:
    """Tests for configure_logging/setup_logging."""

    def test_json_file_logging_with_context(self, tmp_path):
        log_file = tmp_path / "logs" / "catalog.jsonl"
        configure_logging(
            log_level="DEBUG",
            file_path=log_file,
            console_enabled=False,
            service_name="catalog-test",
        )

        set_log_context(request_id="req-1")
        logging.getLogger("catalog_service.test").info("created", extra={"book_id": 3})
        shutdown()

        entries = _read_jsonl(log_file)
        created = [entry for entry in entries if entry["message"] == "created"]
        assert len(created) == 1
        assert created[0]["book_id"] == 3
        assert created[0]["request_id"] == "req-1"
        assert created[0]["service"] == "catalog-test"

    def test_file_level_filters_records(self, tmp_path):
        log_file = tmp_path / "catalog.log"
        configure_logging(
            log_level="DEBUG",
            file_level="WARNING",
            file_path=log_file,
            json_logs=False,
            console_enabled=False,
        )

        logger = logging.getLogger("catalog_service.test")
        logger.info("quiet")
        logger.warning("loud")
        shutdown()

        text = log_file.read_text(encoding="utf-8")
        assert "loud" in text
        assert "quiet" not in text

    def test_setup_logging_is_idempotent(self, tmp_path, restore_root_logger):
        settings = LoggingSettings(
            console_enabled=False,
            file_enabled=True,
            file_path=tmp_path / "catalog.jsonl",
            level="warning",
        )

        setup_logging(settings)
        queue_handlers = len(restore_root_logger.handlers)
        setup_logging(settings)

        assert len(restore_root_logger.handlers) == queue_handlers
        assert restore_root_logger.level == logging.WARNING

    def test_setup_logging_force_reconfigures(self, tmp_path, restore_root_logger):
        settings = LoggingSettings(console_enabled=False, file_enabled=False, level="ERROR")

        setup_logging(settings, force=True)
        setup_logging(settings, force=True, log_level="DEBUG")

        assert restore_root_logger.level == logging.DEBUG
