"""Configuration: process-wide settings, per-widget options and YAML loading."""

from .loader import read_config_file
from .options import DatePickerOptions
from .settings import DatePickerSettings, get_settings, reset_settings, set_settings

__all__ = [
    "DatePickerOptions",
    "DatePickerSettings",
    "get_settings",
    "read_config_file",
    "reset_settings",
    "set_settings",
]
