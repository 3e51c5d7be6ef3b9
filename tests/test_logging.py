"""Test Module for logging Module."""

import json
import logging

from loguru import logger

from sommerzeit.config.config import get_config
from sommerzeit.core import logging as sommerzeit_logging
from sommerzeit.core.logging import logging_setup
from sommerzeit.sommerzeit import is_german_dst

# -----------------------------
# logging_setup
# -----------------------------


def test_logging_setup_console_default(logging_reset):
    config = get_config()
    logging_setup(config)

    assert config.logging.console_level == "INFO"
    assert sommerzeit_logging.console_handler_id is not None
    assert sommerzeit_logging.file_handler_id is None


def test_logging_setup_level_from_environment(monkeypatch, logging_reset):
    monkeypatch.setenv("SOMMERZEIT_LOGGING__LEVEL", "warning")
    config = get_config()
    logging_setup(config)

    assert config.logging.console_level == "WARNING"
    # No file path - no file handler
    assert config.logging.file_level == "WARNING"
    assert sommerzeit_logging.file_handler_id is None


def test_logging_setup_invalid_level_from_environment(monkeypatch, log_messages, logging_reset):
    monkeypatch.setenv("SOMMERZEIT_LOGGING__LEVEL", "loud")
    config = get_config()
    logging_setup(config)

    assert config.logging.console_level == "INFO"
    assert config.logging.file_level == "INFO"
    assert sommerzeit_logging.console_handler_id is not None
    assert any(
        message.startswith("ERROR Invalid console_level 'loud' - forced to INFO")
        for message in log_messages
    )


def test_logging_setup_replaces_handlers(logging_reset):
    config = get_config()
    logging_setup(config)
    first_id = sommerzeit_logging.console_handler_id
    logging_setup(config)

    assert sommerzeit_logging.console_handler_id != first_id


def test_logging_setup_file(tmp_path, logging_reset):
    log_file = tmp_path / "sommerzeit.log"
    config = get_config()
    config.logging.file_level = "debug"
    config.logging.file_path = log_file
    logging_setup(config)

    assert sommerzeit_logging.file_handler_id is not None
    logger.warning("file logging check")
    logger.remove(sommerzeit_logging.file_handler_id)
    sommerzeit_logging.file_handler_id = None

    records = [json.loads(line) for line in log_file.read_text().splitlines() if line.strip()]
    messages = [record["record"]["message"] for record in records]
    assert "file logging check" in messages


def test_intercept_handler(log_messages, logging_reset):
    logging_setup(get_config())
    logging.getLogger("sommerzeit.test").warning("from standard logging")

    assert any("WARNING from standard logging" in message for message in log_messages)


def test_classifier_traces_transition_month(log_messages):
    is_german_dst(1679792400)

    assert any(message.startswith("TRACE") for message in log_messages)
