"""This module provides functionality to manage the configuration of sommerzeit.

Configuration is read from environment variables with the prefix `SOMMERZEIT_`. Nested
settings use `__` as delimiter, e.g. `SOMMERZEIT_LOGGING__CONSOLE_LEVEL=DEBUG`.

Key features:
- Validating configurations using Pydantic models
- Process wide configuration instance
"""

import threading
from typing import ClassVar, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from sommerzeit.core.logsettings import LoggingCommonSettings


class ConfigSommerzeit(BaseSettings):
    """Settings for all of sommerzeit.

    Example:
        ```python
        config = get_config()  # Always returns the same instance
        print(config.logging.console_level)
        ```
    """

    APP_NAME: ClassVar[str] = "sommerzeit"
    ENV_PREFIX: ClassVar[str] = "SOMMERZEIT_"

    logging: LoggingCommonSettings = Field(
        default_factory=LoggingCommonSettings,
        description="Logging Settings",
    )

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        nested_model_default_partial_update=True,
        env_prefix=ENV_PREFIX,
        validate_assignment=True,
    )


_config: Optional[ConfigSommerzeit] = None
_config_lock = threading.Lock()


def get_config() -> ConfigSommerzeit:
    """Gets the sommerzeit configuration data."""
    global _config

    with _config_lock:
        if _config is None:
            _config = ConfigSommerzeit()
        return _config


def reset_config() -> None:
    """Drop the configuration instance. The next `get_config` reads the environment again."""
    global _config

    with _config_lock:
        _config = None
