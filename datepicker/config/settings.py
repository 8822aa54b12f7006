"""Process-wide datepicker settings using Pydantic for type validation and configuration."""

import logging
import os
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..exceptions import ConfigurationError
from .loader import read_config_file

logger = logging.getLogger(__name__)

ENV_PREFIX = "DATEPICKER_"
_LOG_LEVELS = {"DEBUG", "VERBOSE", "INFO", "WARNING", "ERROR", "CRITICAL"}


class DatePickerSettings(BaseSettings):
    """Defaults shared by every widget instance, with environment variable support."""

    # Locale
    default_locale: str = Field(
        default="en", description="Locale used when a widget names none or an unknown one"
    )

    # Presentation defaults
    prevent_focus_style_for_touch_and_click: bool = Field(
        default=True,
        description="Only show the wrapper focus overlay for keyboard focus, not click/touch",
    )
    show_other_month_date: bool = Field(
        default=True, description="Show labels of days borrowed from adjacent months"
    )
    style_weekend: bool = Field(default=False, description="Give weekend cells distinct overlays")

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Console log level: DEBUG, VERBOSE, INFO, WARNING, ERROR, CRITICAL",
    )
    console_colors: bool = Field(
        default=True, description="Enable colored console output (auto-detected)"
    )

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ConfigurationError(
                f"Unknown log level: {v}", field_name="log_level", field_value=v
            )
        return level

    @classmethod
    def from_mapping(cls, config_data: Optional[dict[str, Any]]) -> "DatePickerSettings":
        """Build settings from a mapping, letting environment variables win.

        Args:
            config_data: Settings values, typically the ``settings`` section of a YAML file

        Returns:
            DatePickerSettings instance
        """
        explicit = {}
        for name, value in (config_data or {}).items():
            if name not in cls.model_fields:
                logger.warning(f"Ignoring unknown datepicker setting: {name}")
                continue
            if f"{ENV_PREFIX}{name.upper()}" in os.environ:
                logger.debug(f"Setting {name} taken from environment, YAML value ignored")
                continue
            explicit[name] = value
        return cls(**explicit)

    @classmethod
    def from_yaml(cls, config_file: Union[str, Path]) -> "DatePickerSettings":
        """Load settings from the ``settings`` section of a YAML configuration file."""
        config_data = read_config_file(config_file)
        return cls.from_mapping(config_data.get("settings"))


# Global settings management
_settings_instance: Optional[DatePickerSettings] = None


def get_settings() -> DatePickerSettings:
    """Get the global settings instance, creating it lazily if needed."""
    if globals()["_settings_instance"] is None:
        globals()["_settings_instance"] = DatePickerSettings()
    return globals()["_settings_instance"]


def set_settings(settings: DatePickerSettings) -> None:
    """Replace the global settings instance."""
    globals()["_settings_instance"] = settings


def reset_settings() -> None:
    """Reset the global settings instance (primarily for testing)."""
    globals()["_settings_instance"] = None
