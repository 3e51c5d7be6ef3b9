"""Abstract and base classes for configuration."""

from pydantic import BaseModel, ConfigDict


class SettingsBaseModel(BaseModel):
    """Base model class for all settings configurations."""

    model_config = ConfigDict(
        use_enum_values=True,
        validate_assignment=True,
    )
