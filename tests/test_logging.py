"""Tests for logging configuration."""
import json
import logging

from category_api.core.logging_config import JSONFormatter, request_id_var, setup_logging


def test_json_formatter_includes_request_id_and_extras():
    record = logging.LogRecord("category_api.test", logging.INFO, __file__, 1, "hello %s", ("world",), None)
    record.status_code = 201

    token = request_id_var.set("abc123")
    try:
        entry = json.loads(JSONFormatter().format(record))
    finally:
        request_id_var.reset(token)

    assert entry["message"] == "hello world"
    assert entry["request_id"] == "abc123"
    assert entry["status_code"] == 201
    assert entry["level"] == "INFO"


def test_setup_logging_writes_files(tmp_path):
    setup_logging(log_level="INFO", log_dir=tmp_path, log_json=True)

    logging.getLogger("category_api.test").error("something broke")
    for handler in logging.getLogger().handlers:
        handler.flush()

    main_log = (tmp_path / "category_api.log").read_text(encoding="utf-8")
    error_log = (tmp_path / "category_api.error.log").read_text(encoding="utf-8")
    assert "something broke" in main_log
    assert "something broke" in error_log
    assert "Logging configured" not in error_log
