import pytest
from loguru import logger

from sommerzeit.config.config import reset_config
from sommerzeit.core import logging as sommerzeit_logging


@pytest.fixture(autouse=True)
def config_reset(monkeypatch):
    """Start every test with a fresh configuration and without environment overrides."""
    for name in (
        "SOMMERZEIT_LOGGING__LEVEL",
        "SOMMERZEIT_LOGGING__CONSOLE_LEVEL",
        "SOMMERZEIT_LOGGING__FILE_LEVEL",
        "SOMMERZEIT_LOGGING__FILE_PATH",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def logging_reset():
    """Remove the handlers installed by `logging_setup` after the test."""
    yield
    for handler_id in (sommerzeit_logging.console_handler_id, sommerzeit_logging.file_handler_id):
        if handler_id is not None:
            try:
                logger.remove(handler_id)
            except ValueError:
                pass
    sommerzeit_logging.console_handler_id = None
    sommerzeit_logging.file_handler_id = None


@pytest.fixture
def log_messages():
    """Collect Loguru messages of the test."""
    messages: list = []
    handler_id = logger.add(messages.append, level="TRACE", format="{level} {message}")
    yield messages
    logger.remove(handler_id)
