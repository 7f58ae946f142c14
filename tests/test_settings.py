"""Tests for settings and logging configuration."""

import logging

import pytest
from pydantic import ValidationError
from strict_records.config.logging import get_logger, setup_logging
from strict_records.config.settings import Settings, get_settings, reset_settings


def test_defaults():
    settings = Settings()
    assert settings.default_max_depth == 2
    assert settings.log_level == "INFO"
    assert settings.log_file is None


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("STRICT_RECORDS_DEFAULT_MAX_DEPTH", "4")
    monkeypatch.setenv("STRICT_RECORDS_LOG_LEVEL", "debug")
    settings = Settings()
    assert settings.default_max_depth == 4
    assert settings.log_level == "DEBUG"


def test_rejects_negative_depth():
    with pytest.raises(ValidationError):
        Settings(default_max_depth=-1)


def test_rejects_unknown_log_level():
    with pytest.raises(ValidationError):
        Settings(log_level="chatty")


def test_get_settings_is_cached():
    first = get_settings()
    assert get_settings() is first
    reset_settings()
    assert get_settings() is not first


def test_get_logger_namespace():
    assert get_logger("strict_records.flush").name == "strict_records.flush"
    assert get_logger("custom").name == "strict_records.custom"


def test_setup_logging_writes_file(tmp_path):
    log_file = tmp_path / "logs" / "run.log"
    log_file.parent.mkdir()
    setup_logging(level="DEBUG", log_file=log_file)
    try:
        get_logger("test").debug("hello from test")
        for handler in logging.getLogger("strict_records").handlers:
            handler.flush()
        assert "hello from test" in log_file.read_text(encoding="utf-8")
    finally:
        setup_logging()


def test_setup_logging_replaces_handlers():
    first = setup_logging(level="WARNING")
    try:
        assert first.name == "strict_records"
        assert first.level == logging.WARNING
        assert len(first.handlers) == 1
        assert setup_logging(level="INFO") is first
        assert len(first.handlers) == 1
        assert first.propagate is False
    finally:
        setup_logging()
