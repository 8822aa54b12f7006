"""Unit tests for month navigation controls and reactive option updates."""

import logging
from datetime import date
from typing import Callable
from unittest.mock import Mock

import pytest

from datepicker.config.options import DatePickerOptions
from datepicker.core.position import CalendarPosition
from datepicker.core.value import ValueLink, ValueMode
from datepicker.exceptions import ConfigurationError
from datepicker.ui.events import MouseButton, MouseEvent, TouchEvent
from datepicker.ui.interaction import NavState
from datepicker.ui.picker import DatePicker


class TestNavigationControls:
    """Test previous/next month controls."""

    def test_prev_mouse_down_when_january_then_december_previous_year(
        self, make_picker: Callable[..., DatePicker], callback_log: Mock
    ) -> None:
        picker = make_picker()

        picker.on_prev_nav_mouse_down(MouseEvent())

        assert picker.position == CalendarPosition(month=11, year=2023)
        assert picker.state.prev_nav is NavState.PRESSED
        callback_log.on_month_change.assert_called_once_with(12)

        picker.on_prev_nav_mouse_up(MouseEvent())
        assert picker.state.prev_nav is NavState.IDLE

    def test_next_touch_start_when_single_touch_then_next_month(
        self, make_picker: Callable[..., DatePicker], callback_log: Mock
    ) -> None:
        picker = make_picker()

        picker.on_next_nav_touch_start(TouchEvent())

        assert picker.position == CalendarPosition(month=1, year=2024)
        assert picker.state.next_nav is NavState.PRESSED
        callback_log.on_month_change.assert_called_once_with(2)

        picker.on_next_nav_touch_end(TouchEvent(touches=0))
        assert picker.state.next_nav is NavState.IDLE

    def test_nav_when_disabled_then_ignored(
        self, make_picker: Callable[..., DatePicker], callback_log: Mock
    ) -> None:
        picker = make_picker(disabled=True)

        picker.on_next_nav_mouse_down(MouseEvent())
        picker.on_prev_nav_touch_start(TouchEvent())

        assert picker.position == CalendarPosition(month=0, year=2024)
        assert picker.state.next_nav is NavState.IDLE
        callback_log.on_month_change.assert_not_called()

    def test_nav_when_secondary_button_then_ignored(
        self, make_picker: Callable[..., DatePicker]
    ) -> None:
        picker = make_picker()

        picker.on_next_nav_mouse_down(MouseEvent(button=MouseButton.SECONDARY))

        assert picker.position == CalendarPosition(month=0, year=2024)

    def test_nav_when_read_only_then_still_navigates(
        self, make_picker: Callable[..., DatePicker]
    ) -> None:
        picker = make_picker(read_only=True)

        picker.on_next_nav_mouse_down(MouseEvent())

        assert picker.position == CalendarPosition(month=1, year=2024)

    def test_programmatic_navigation_when_called_then_notifies(
        self, make_picker: Callable[..., DatePicker], callback_log: Mock
    ) -> None:
        picker = make_picker()

        picker.show_next_month()
        picker.show_previous_month()

        assert picker.position == CalendarPosition(month=0, year=2024)
        assert [c.args for c in callback_log.on_month_change.call_args_list] == [(2,), (1,)]


class TestConstruction:
    """Test picker construction from options."""

    def test_picker_when_options_model_then_used_as_is(self, callbacks) -> None:
        options = DatePickerOptions(month=5, year=2024, default_value=date(2024, 5, 2))

        picker = DatePicker(options, callbacks=callbacks)

        assert picker.options is options
        assert picker.position == CalendarPosition(month=4, year=2024)
        assert picker.value == date(2024, 5, 2)
        assert picker.value_mode is ValueMode.UNCONTROLLED

    def test_picker_when_invalid_month_then_raises_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError):
            DatePicker({"month": 13, "year": 2024})

    def test_picker_when_locale_unknown_then_settings_default_locale(
        self, make_picker: Callable[..., DatePicker]
    ) -> None:
        picker = make_picker(locale="xx")

        assert picker.locale.month_names[0] == "January"

    def test_grid_when_built_then_follows_locale_first_day(
        self, make_picker: Callable[..., DatePicker]
    ) -> None:
        picker = make_picker(locale="de")

        assert picker.grid[0][0].date == date(2024, 1, 1)


class TestUpdate:
    """Test reactive option updates."""

    def test_update_when_month_changes_then_position_overridden_silently(
        self, make_picker: Callable[..., DatePicker], callback_log: Mock
    ) -> None:
        picker = make_picker()

        picker.update({"month": 7, "year": 2025})

        assert picker.position == CalendarPosition(month=6, year=2025)
        callback_log.on_month_change.assert_not_called()

    def test_update_when_controlled_then_new_value_taken(
        self, make_picker: Callable[..., DatePicker]
    ) -> None:
        picker = make_picker(value=date(2024, 1, 2))

        picker.update({"month": 1, "year": 2024, "value": date(2024, 1, 9)})

        assert picker.value == date(2024, 1, 9)

    def test_update_when_controlled_and_value_omitted_then_value_kept(
        self, make_picker: Callable[..., DatePicker], caplog: pytest.LogCaptureFixture
    ) -> None:
        picker = make_picker(value=date(2024, 1, 9))

        with caplog.at_level(logging.WARNING, logger="datepicker"):
            picker.update({"month": 1, "year": 2024, "read_only": True})

        assert picker.value == date(2024, 1, 9)
        assert picker.value_mode is ValueMode.CONTROLLED
        assert "Value mode is fixed" not in caplog.text

    def test_update_when_controlled_value_supplied_as_none_then_cleared(
        self, make_picker: Callable[..., DatePicker]
    ) -> None:
        picker = make_picker(value=date(2024, 1, 9))

        picker.update({"month": 1, "year": 2024, "value": None})

        assert picker.value is None

    def test_update_when_linked_and_link_omitted_then_link_kept(
        self, make_picker: Callable[..., DatePicker]
    ) -> None:
        link = ValueLink(value=date(2024, 1, 4), request_change=Mock())
        picker = make_picker(value_link=link)

        picker.update({"month": 2, "year": 2024})

        assert picker.value == date(2024, 1, 4)
        assert picker.value_mode is ValueMode.LINKED

    def test_update_when_linked_then_new_link_read(
        self, make_picker: Callable[..., DatePicker]
    ) -> None:
        picker = make_picker(value_link=ValueLink(value=None, request_change=Mock()))

        picker.update(
            {"month": 1, "year": 2024, "value_link": ValueLink(date(2024, 1, 4), Mock())}
        )

        assert picker.value == date(2024, 1, 4)

    def test_update_when_other_value_source_then_mode_fixed_and_warning(
        self, make_picker: Callable[..., DatePicker], caplog: pytest.LogCaptureFixture
    ) -> None:
        picker = make_picker(default_value=date(2024, 1, 2))

        with caplog.at_level(logging.WARNING, logger="datepicker"):
            picker.update({"month": 1, "year": 2024, "value": date(2024, 1, 9)})

        assert picker.value_mode is ValueMode.UNCONTROLLED
        assert picker.value == date(2024, 1, 2)
        assert "Value mode is fixed at construction" in caplog.text

    def test_update_when_locale_changes_then_re_resolved(
        self, make_picker: Callable[..., DatePicker]
    ) -> None:
        picker = make_picker()

        picker.update({"month": 1, "year": 2024, "locale": "ar"})

        assert picker.locale.is_rtl is True

    def test_update_when_becoming_disabled_then_transient_state_reset_except_hover(
        self, make_picker: Callable[..., DatePicker]
    ) -> None:
        picker = make_picker()
        picker.on_wrapper_mouse_over()
        picker.on_wrapper_focus()
        picker.on_day_mouse_down("1/20/2024", MouseEvent())

        picker.update({"month": 1, "year": 2024, "disabled": True})

        assert picker.state.wrapper.hovered
        assert not picker.state.wrapper.focused
        assert picker.state.active_day_key is None
        assert picker.state.focused_day_key is None

    def test_update_when_read_only_then_selection_locked(
        self, make_picker: Callable[..., DatePicker]
    ) -> None:
        picker = make_picker()

        picker.update({"month": 1, "year": 2024, "read_only": True})
        picker.select(20)

        assert picker.value is None
