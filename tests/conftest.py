"""Shared test fixtures: fixed clock, callback mocks and a picker factory."""

import logging
import os
from datetime import date
from typing import Any, Callable
from unittest.mock import Mock

import pytest

from datepicker.config.settings import ENV_PREFIX, reset_settings
from datepicker.locale.resolver import reset_locales
from datepicker.ui.picker import DatePicker, DatePickerCallbacks

FIXED_TODAY = date(2024, 1, 15)

CALLBACK_NAMES = (
    "on_day_focus",
    "on_day_blur",
    "on_day_key_down",
    "on_day_mouse_down",
    "on_day_mouse_up",
    "on_day_touch_start",
    "on_day_touch_end",
    "on_update",
    "on_month_change",
)


@pytest.fixture(autouse=True)
def isolate_global_state(monkeypatch: pytest.MonkeyPatch) -> Any:
    """Give every test fresh settings, a fresh locale registry and a clean logger."""
    for name in list(os.environ):
        if name.upper().startswith(ENV_PREFIX):
            monkeypatch.delenv(name, raising=False)
    reset_settings()
    reset_locales()

    package_logger = logging.getLogger("datepicker")
    saved_level = package_logger.level
    saved_handlers = list(package_logger.handlers)

    yield

    package_logger.setLevel(saved_level)
    package_logger.handlers[:] = saved_handlers
    reset_settings()
    reset_locales()


@pytest.fixture
def today() -> date:
    """Fixed 'today' used by every picker built through the factory."""
    return FIXED_TODAY


@pytest.fixture
def callback_log() -> Mock:
    """Parent mock recording every callback in call order."""
    return Mock()


@pytest.fixture
def callbacks(callback_log: Mock) -> DatePickerCallbacks:
    """DatePickerCallbacks whose callbacks are children of ``callback_log``."""
    return DatePickerCallbacks(**{name: getattr(callback_log, name) for name in CALLBACK_NAMES})


@pytest.fixture
def make_picker(callbacks: DatePickerCallbacks, today: date) -> Callable[..., DatePicker]:
    """Factory building pickers on January 2024 with a fixed clock.

    Keyword arguments are passed as options; ``clock`` overrides the fixed today.
    """

    def _make(clock: Callable[[], date] = lambda: FIXED_TODAY, **options: Any) -> DatePicker:
        options.setdefault("month", 1)
        options.setdefault("year", 2024)
        return DatePicker(options, callbacks=callbacks, clock=clock)

    return _make


@pytest.fixture
def called(callback_log: Mock) -> Callable[[], list[str]]:
    """Return a function listing the names of recorded callbacks in call order."""
    return lambda: [recorded[0] for recorded in callback_log.mock_calls]
