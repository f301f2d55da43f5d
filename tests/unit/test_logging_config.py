"""
Unit tests for structlog configuration.
"""

import json
import logging

import pytest

from horsekick_service.logging_config import configure_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.captureWarnings(False)


def test_production_renders_json(capsys, restore_root_logger):
    configure_logging("INFO", "production")
    capsys.readouterr()

    logging.getLogger("horsekick_service.test").warning("rows dropped")

    line = capsys.readouterr().out.strip().splitlines()[-1]
    event = json.loads(line)
    assert event["event"] == "rows dropped"
    assert event["level"] == "warning"
    assert event["app"] == "horsekick-service"


def test_level_applied_to_root(restore_root_logger):
    configure_logging("warning", "development")

    assert logging.getLogger().level == logging.WARNING


def test_access_log_quieted(restore_root_logger):
    configure_logging("DEBUG", "development")

    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("uvicorn.access").level == logging.WARNING


def test_unknown_level_falls_back_to_info(restore_root_logger):
    configure_logging("chatty", "development")

    assert logging.getLogger().level == logging.INFO
