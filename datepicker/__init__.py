"""Datepicker - embeddable month-calendar date picker engine.

The engine lays out locale-aware week grids, owns the displayed month, tracks a
single selectable date (linked, controlled or uncontrolled) and maintains the
hover/active/focus interaction state that drives rendering and accessibility.
"""

from .config import DatePickerOptions, DatePickerSettings, get_settings, reset_settings
from .core import CalendarPosition, DayCell, ValueLink, ValueMode, build_grid
from .core.day_key import make_day_key, parse_day_key
from .exceptions import ConfigurationError, DatePickerError, DayKeyError, LocaleDataError
from .locale import LocaleData, register_locale, resolve_locale
from .render import CalendarView, build_view, render_text
from .ui import DatePicker, DatePickerCallbacks, KeyEvent, MouseEvent, TouchEvent

__version__ = "1.0.0"
__author__ = "Datepicker Team"
__description__ = "Embeddable month-calendar date picker engine"

__all__ = [
    "CalendarPosition",
    "CalendarView",
    "ConfigurationError",
    "DatePicker",
    "DatePickerCallbacks",
    "DatePickerError",
    "DatePickerOptions",
    "DatePickerSettings",
    "DayCell",
    "DayKeyError",
    "KeyEvent",
    "LocaleData",
    "LocaleDataError",
    "MouseEvent",
    "TouchEvent",
    "ValueLink",
    "ValueMode",
    "__author__",
    "__description__",
    "__version__",
    "build_grid",
    "build_view",
    "get_settings",
    "make_day_key",
    "parse_day_key",
    "register_locale",
    "render_text",
    "reset_settings",
    "resolve_locale",
]
