"""Settings for logging.

Kept in an extra module to avoid cyclic dependencies on package import.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator

from sommerzeit.config.configabc import SettingsBaseModel
from sommerzeit.core.logabc import LOGGING_LEVELS


class LoggingCommonSettings(SettingsBaseModel):
    """Logging Configuration."""

    console_level: Optional[str] = Field(
        default=None,
        description="Logging level when logging to console.",
        examples=LOGGING_LEVELS,
    )

    file_level: Optional[str] = Field(
        default=None,
        description="Logging level when logging to file.",
        examples=LOGGING_LEVELS,
    )

    file_path: Optional[Path] = Field(
        default=None,
        description="Path of the JSON formatted log file. No file logging if not set.",
        examples=[None, "/var/log/sommerzeit.log"],
    )

    # Validators
    @field_validator("console_level", "file_level", mode="after")
    @classmethod
    def validate_level(cls, value: Optional[str]) -> Optional[str]:
        """Validate logging level string."""
        if value is None:
            # Nothing to set
            return None
        if isinstance(value, str):
            level = value.upper()
            if level == "NONE":
                return None
            if level not in LOGGING_LEVELS:
                raise ValueError(f"Logging level {value} not supported")
            value = level
        else:
            raise TypeError(f"Invalid {type(value)} of logging level {value}")
        return value
