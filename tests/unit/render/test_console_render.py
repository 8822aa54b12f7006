"""Unit tests for the plain-text month sheet renderer."""

from datetime import date
from typing import Callable

from datepicker.render.console import CELL_WIDTH, render_text
from datepicker.render.view import build_view
from datepicker.ui.picker import DatePicker


class TestRenderText:
    """Test render_text output."""

    def test_render_when_enabled_then_title_between_controls(
        self, make_picker: Callable[..., DatePicker]
    ) -> None:
        lines = render_text(build_view(make_picker())).splitlines()

        assert lines[0].startswith("<")
        assert lines[0].endswith(">")
        assert "January 2024" in lines[0]
        assert lines[1] == "".join(name.rjust(CELL_WIDTH) for name in ["Su", "Mo", "Tu", "We", "Th", "Fr", "Sa"])
        assert len(lines) == 2 + 5

    def test_render_when_disabled_then_no_controls(
        self, make_picker: Callable[..., DatePicker]
    ) -> None:
        first_line = render_text(build_view(make_picker(disabled=True))).splitlines()[0]

        assert "<" not in first_line
        assert not first_line.endswith(">")
        assert first_line.strip() == "January 2024"

    def test_render_when_today_then_star_marker(
        self, make_picker: Callable[..., DatePicker]
    ) -> None:
        text = render_text(build_view(make_picker()))

        assert "*15" in text

    def test_render_when_selected_then_bracket_marker(
        self, make_picker: Callable[..., DatePicker]
    ) -> None:
        text = render_text(build_view(make_picker(default_value=date(2024, 1, 20))))

        assert "[20]" in text

    def test_render_when_focused_then_focus_marker_over_today(
        self, make_picker: Callable[..., DatePicker]
    ) -> None:
        picker = make_picker()
        picker.on_wrapper_focus()

        text = render_text(build_view(picker))

        assert ">15<" in text
        assert "*15" not in text

    def test_render_when_other_months_hidden_then_first_week_starts_blank(
        self, make_picker: Callable[..., DatePicker]
    ) -> None:
        lines = render_text(build_view(make_picker(show_other_month_date=False))).splitlines()

        assert lines[2] == "".join(str(day).rjust(CELL_WIDTH) for day in ["", 1, 2, 3, 4, 5, 6])
        assert lines[-1] == "".join(str(day).rjust(CELL_WIDTH) for day in [28, 29, 30, 31]).rstrip()
