"""Utility for configuring Loguru loggers."""

import logging as pylogging
import os
import sys
from types import FrameType
from typing import Any, Optional

from loguru import logger
from pydantic import ValidationError


class InterceptHandler(pylogging.Handler):
    """A logging handler that redirects standard Python logging messages to Loguru.

    This handler ensures consistency between the `logging` module and Loguru by intercepting
    logs sent to the standard logging system and re-emitting them through Loguru with proper
    formatting and context (including exception info and call depth).

    Attributes:
        loglevel_mapping (dict): Mapping from standard logging levels to Loguru level names.
    """

    loglevel_mapping: dict[int, str] = {
        50: "CRITICAL",
        40: "ERROR",
        30: "WARNING",
        20: "INFO",
        10: "DEBUG",
        5: "TRACE",
        0: "NOTSET",
    }

    def emit(self, record: pylogging.LogRecord) -> None:
        """Emits a logging record by forwarding it to Loguru with preserved metadata.

        Args:
            record (logging.LogRecord): A record object containing log message and metadata.
        """
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = self.loglevel_mapping.get(record.levelno, "INFO")

        frame: Optional[FrameType] = pylogging.currentframe()
        depth: int = 2
        while frame and frame.f_code.co_filename == pylogging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


console_handler_id: Optional[int] = None
file_handler_id: Optional[int] = None


def _set_level(config: Any, field_name: str, level: Optional[str]) -> None:
    """Assign a logging level to the logging settings, invalid levels are forced to INFO."""
    try:
        setattr(config.logging, field_name, level)
    except ValidationError as e:
        logger.error(f"Invalid {field_name} '{level}' - forced to INFO: {e}")
        setattr(config.logging, field_name, "INFO")


def logging_setup(config: Any) -> None:
    """(Re)configure the Loguru handlers from the logging settings of `config`.

    Levels not given in the configuration are taken from the `SOMMERZEIT_LOGGING__LEVEL`
    environment variable. The console handler defaults to INFO.
    """
    global console_handler_id, file_handler_id

    for field_name in ("console_level", "file_level"):
        if not getattr(config.logging, field_name):
            # No value given - check environment value - may also be None
            _set_level(config, field_name, os.getenv("SOMMERZEIT_LOGGING__LEVEL"))

    # Remove handlers, on first setup the default Loguru stderr handler
    removable = (console_handler_id, file_handler_id)
    if console_handler_id is None:
        removable = (0, file_handler_id)
    for handler_id in removable:
        if handler_id is None:
            continue
        try:
            logger.remove(handler_id)
        except ValueError as e:
            logger.debug("Handler {} already removed: {}", handler_id, e)
    console_handler_id = None
    file_handler_id = None

    # Always add console handler
    if config.logging.console_level is None:
        config.logging.console_level = "INFO"

    console_handler_id = logger.add(
        sys.stderr,
        backtrace=True,
        level=config.logging.console_level,
    )

    # Add file handler
    if config.logging.file_level and config.logging.file_path:
        file_handler_id = logger.add(
            sink=config.logging.file_path,
            rotation="100 MB",
            retention="3 days",
            backtrace=True,
            level=config.logging.file_level,
            serialize=True,  # JSON dict formatting
        )

    # Redirect standard logging to Loguru
    root_logger = pylogging.getLogger()
    if not any(isinstance(handler, InterceptHandler) for handler in root_logger.handlers):
        root_logger.addHandler(InterceptHandler())
    root_logger.setLevel(pylogging.NOTSET)

    logger.info(
        f"Logger reconfigured - console: {config.logging.console_level}, file: {config.logging.file_level}."
    )
