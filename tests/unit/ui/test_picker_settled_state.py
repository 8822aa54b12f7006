"""Unit tests checking that callbacks observe fully settled picker state."""

from datetime import date
from typing import Any, Callable

import pytest

from datepicker.core.position import CalendarPosition
from datepicker.ui.events import KeyEvent, MouseEvent
from datepicker.ui.picker import DatePicker, DatePickerCallbacks


@pytest.fixture
def observed() -> list[tuple[Any, ...]]:
    """Records of what each callback saw when it ran."""
    return []


@pytest.fixture
def observing_picker(observed: list[tuple[Any, ...]]) -> Callable[..., DatePicker]:
    """Factory for a picker whose callbacks snapshot the picker state they observe."""

    def _make(**options: Any) -> DatePicker:
        options.setdefault("month", 1)
        options.setdefault("year", 2024)
        picker: DatePicker

        def snapshot(name: str) -> Callable[..., None]:
            def _record(*args: Any) -> None:
                observed.append(
                    (
                        name,
                        args,
                        picker.position,
                        picker.value,
                        picker.state.focused_day_key,
                        picker.state.active_day_key,
                    )
                )

            return _record

        callbacks = DatePickerCallbacks(
            on_update=snapshot("on_update"),
            on_month_change=snapshot("on_month_change"),
            on_day_focus=snapshot("on_day_focus"),
            on_day_blur=snapshot("on_day_blur"),
            on_day_mouse_down=snapshot("on_day_mouse_down"),
            on_day_key_down=snapshot("on_day_key_down"),
        )
        picker = DatePicker(options, callbacks=callbacks, clock=lambda: date(2024, 1, 31))
        return picker

    return _make


class TestSettledStateBeforeCallbacks:
    """Test that every callback of an event sees the state after the whole event."""

    def test_day_mouse_down_when_callbacks_fire_then_value_active_and_focus_settled(
        self, observing_picker: Callable[..., DatePicker], observed: list
    ) -> None:
        picker = observing_picker()
        event = MouseEvent()

        picker.on_day_mouse_down("1/31/2024", event)

        position = CalendarPosition(month=0, year=2024)
        settled = (position, date(2024, 1, 31), "1/31/2024", "1/31/2024")
        assert observed == [
            ("on_update", (date(2024, 1, 31),)) + settled,
            ("on_day_focus", ("1/31/2024",)) + settled,
            ("on_day_mouse_down", (event,)) + settled,
        ]

    def test_arrow_right_when_month_boundary_crossed_then_position_and_focus_settled(
        self, observing_picker: Callable[..., DatePicker], observed: list
    ) -> None:
        picker = observing_picker()
        picker.on_wrapper_focus()
        observed.clear()
        event = KeyEvent(key="ArrowRight")

        picker.on_wrapper_key_down(event)

        settled = (CalendarPosition(month=1, year=2024), None, "2/1/2024", None)
        assert observed == [
            ("on_month_change", (2,)) + settled,
            ("on_day_blur", ("1/31/2024",)) + settled,
            ("on_day_focus", ("2/1/2024",)) + settled,
            ("on_day_key_down", (event,)) + settled,
        ]

    def test_enter_when_selecting_focused_day_then_update_sees_new_value(
        self, observing_picker: Callable[..., DatePicker], observed: list
    ) -> None:
        picker = observing_picker()
        picker.on_wrapper_focus()
        observed.clear()

        picker.on_wrapper_key_down(KeyEvent(key="Enter"))

        assert observed[0][0] == "on_update"
        assert observed[0][3] == date(2024, 1, 31)
