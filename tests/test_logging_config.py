"""
Tests for logging configuration.
"""

import json
import logging
import sys

import pytest

from fastcc.logging_config import JSONFormatter, configure_logging, get_logger


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_defaults_to_warning_on_stderr(restore_root_logger, monkeypatch):
    monkeypatch.delenv("FASTCC_LOG_LEVEL", raising=False)
    monkeypatch.delenv("FASTCC_LOG_FORMAT", raising=False)

    configure_logging()

    root = restore_root_logger
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1
    assert root.handlers[0].stream is sys.stderr


def test_env_level_and_json_format(restore_root_logger, monkeypatch):
    monkeypatch.setenv("FASTCC_LOG_LEVEL", "debug")
    monkeypatch.setenv("FASTCC_LOG_FORMAT", "json")

    configure_logging()

    root = restore_root_logger
    assert root.level == logging.DEBUG
    assert isinstance(root.handlers[0].formatter, JSONFormatter)


def test_invalid_level_falls_back(restore_root_logger, capsys):
    configure_logging(level="LOUD")

    assert restore_root_logger.level == logging.WARNING
    assert "Invalid FASTCC_LOG_LEVEL" in capsys.readouterr().err


def test_json_formatter_output():
    record = logging.LogRecord(
        name="fastcc.commit.validator",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg="validated %d messages",
        args=(3,),
        exc_info=None
    )
    record.extra_data = {"valid": 2}

    data = json.loads(JSONFormatter().format(record))

    assert data["level"] == "INFO"
    assert data["logger"] == "fastcc.commit.validator"
    assert data["message"] == "validated 3 messages"
    assert data["extra"] == {"valid": 2}


def test_get_logger():
    assert get_logger("fastcc.test").name == "fastcc.test"
