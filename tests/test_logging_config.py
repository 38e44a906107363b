"""
Tests for logging configuration.
"""

import json
import logging
import os
from unittest.mock import patch

from app.logging_config import JsonFormatter, get_log_level


def _record(msg: str, **attrs) -> logging.LogRecord:
    record = logging.LogRecord("app.test", logging.INFO, __file__, 1, msg, None, None)
    for key, value in attrs.items():
        setattr(record, key, value)
    return record


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def test_formats_record_as_json(self):
        output = json.loads(JsonFormatter().format(_record("hello")))

        assert output["message"] == "hello"
        assert output["severity"] == "INFO"
        assert output["name"] == "app.test"
        assert output["service"] == "github-oauth-callback"
        assert "timestamp" in output

    def test_merges_extra_fields(self):
        record = _record("login", extra_fields={"github_id": 42})

        output = json.loads(JsonFormatter().format(record))

        assert output["github_id"] == 42


class TestLogLevel:
    def test_default_level_is_info(self):
        with patch.dict(os.environ, {}, clear=True):
            assert get_log_level() == logging.INFO

    def test_level_from_env(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "debug"}):
            assert get_log_level() == logging.DEBUG

    def test_unknown_level_falls_back(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "chatty"}):
            assert get_log_level() == logging.INFO
