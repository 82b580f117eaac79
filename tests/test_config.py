"""Tests for environment configuration and logging setup."""

import json
import logging
import sys

import pytest
import structlog

from flatorm import Dialect
from flatorm.core.config import load_config
from flatorm.utils.logging import json_formatter, setup_logging


class TestConfig:
    """Test configuration loading."""

    def test_defaults(self, monkeypatch):
        for key in ("FLATORM_LOG_LEVEL", "FLATORM_LOG_FORMAT", "FLATORM_DEFAULT_DIALECT", "FLATORM_ECHO_SQL"):
            monkeypatch.delenv(key, raising=False)

        cfg = load_config()
        assert cfg.log_level == "INFO"
        assert cfg.log_format == "text"
        assert cfg.dialect is Dialect.SQLITE
        assert cfg.echo_sql is False

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("FLATORM_LOG_LEVEL", "debug")
        monkeypatch.setenv("FLATORM_DEFAULT_DIALECT", "postgresql")
        monkeypatch.setenv("FLATORM_ECHO_SQL", "yes")

        cfg = load_config()
        assert cfg.log_level == "DEBUG"
        assert cfg.as_dict()["default_dialect"] == "postgres"
        assert cfg.echo_sql is True

    @pytest.mark.parametrize(
        "key,value",
        [
            ("FLATORM_LOG_LEVEL", "LOUD"),
            ("FLATORM_LOG_FORMAT", "xml"),
            ("FLATORM_DEFAULT_DIALECT", "oracle"),
        ],
    )
    def test_invalid_values(self, monkeypatch, key, value):
        monkeypatch.setenv(key, value)
        with pytest.raises(ValueError):
            load_config()


class TestLogging:
    """Test logging setup."""

    def test_json_formatter(self):
        record = logging.LogRecord("flatorm.test", logging.WARNING, __file__, 1, "hello %s", ("x",), None)
        payload = json.loads(json_formatter().format(record))

        assert payload["level"] == "warning"
        assert payload["logger"] == "flatorm.test"
        assert payload["event"] == "hello x"
        assert "timestamp" in payload

    def test_json_formatter_renders_exceptions(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = logging.LogRecord(
                "flatorm.test", logging.ERROR, __file__, 1, "failed", (), sys.exc_info()
            )
        payload = json.loads(json_formatter().format(record))

        assert payload["event"] == "failed"
        assert "ValueError: boom" in payload["exception"]

    def test_setup_logging_json_format(self, monkeypatch):
        monkeypatch.setenv("FLATORM_LOG_FORMAT", "json")
        root = logging.getLogger()
        previous = (root.level, list(root.handlers))
        try:
            setup_logging(load_config())
            assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)
        finally:
            root.setLevel(previous[0])
            root.handlers[:] = previous[1]

    def test_setup_logging_sets_level(self, monkeypatch):
        monkeypatch.setenv("FLATORM_LOG_LEVEL", "WARNING")
        root = logging.getLogger()
        previous = (root.level, list(root.handlers))
        try:
            setup_logging(load_config())
            assert root.level == logging.WARNING
        finally:
            root.setLevel(previous[0])
            root.handlers[:] = previous[1]
