"""Tests for structured logging setup."""

import json
import logging

import pytest
import structlog

from src.core.logsetup import configure_logging


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    level = root.level
    yield
    structlog.reset_defaults()
    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)


def test_configure_logging_emits_json(restore_logging, capsys) -> None:
    configure_logging("WARNING")

    structlog.get_logger("numeric_text").warning(
        "numeric_text_conversion_failed", canonical="-1.x"
    )

    record = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert record["event"] == "numeric_text_conversion_failed"
    assert record["level"] == "warning"
    assert record["canonical"] == "-1.x"
    assert record["logger"] == "numeric_text"
    assert "timestamp" in record


def test_level_filters_info(restore_logging, capsys) -> None:
    configure_logging("WARNING")

    structlog.get_logger("numeric_text").info("ignored")

    assert capsys.readouterr().out == ""
