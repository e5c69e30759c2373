"""Structured Logging — JSON formatter and requirement logger setup."""

import json
import logging

import pytest

from requirement.infrastructure.observability import (
    LOGGER_NAME,
    JSONFormatter,
    configure_from_settings,
    setup_logging,
)


@pytest.fixture(autouse=True)
def _reset_logger():
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "requirement.core.require", logging.DEBUG, __file__, 1,
        "Requirement not met: %s", ("Must not be null",), None,
    )
    record.__dict__.update(extra)
    return record


# ─── JSONFormatter ───────────────────────────────────────────────

def test_json_formatter_base_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "DEBUG"
    assert payload["logger"] == "requirement.core.require"
    assert payload["message"] == "Requirement not met: Must not be null"
    assert "timestamp" in payload


def test_json_formatter_surfaces_extra_fields():
    payload = json.loads(JSONFormatter().format(_record(
        requirement="Must not be null", error_code="REQUIREMENT_NOT_MET", value_type="NoneType",
    )))
    assert payload["requirement"] == "Must not be null"
    assert payload["error_code"] == "REQUIREMENT_NOT_MET"
    assert payload["value_type"] == "NoneType"
    assert "exception" not in payload


# ─── setup_logging ───────────────────────────────────────────────

def test_setup_logging_sets_level_and_json_handler():
    logger = setup_logging("debug", "json")
    assert logger.name == LOGGER_NAME
    assert logger.level == logging.DEBUG
    assert isinstance(logger.handlers[-1].formatter, JSONFormatter)


def test_setup_logging_text_format():
    logger = setup_logging("INFO", "text")
    assert logger.level == logging.INFO
    assert not isinstance(logger.handlers[-1].formatter, JSONFormatter)


def test_setup_logging_is_idempotent():
    setup_logging("INFO", "json")
    count = len(logging.getLogger(LOGGER_NAME).handlers)
    setup_logging("INFO", "json")
    assert len(logging.getLogger(LOGGER_NAME).handlers) == count


def test_setup_logging_leaves_root_logger_alone():
    root_handlers = list(logging.root.handlers)
    setup_logging("DEBUG", "json")
    assert logging.root.handlers == root_handlers


def test_unknown_level_falls_back_to_warning():
    assert setup_logging("chatty", "json").level == logging.WARNING


def test_configure_from_settings(monkeypatch):
    monkeypatch.setenv("REQUIREMENT_LOG_LEVEL", "error")
    monkeypatch.setenv("REQUIREMENT_LOG_FORMAT", "text")
    logger = configure_from_settings()
    assert logger.level == logging.ERROR
    assert not isinstance(logger.handlers[-1].formatter, JSONFormatter)
