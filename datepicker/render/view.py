"""
View model builder: settled widget state -> attribute and overlay bags.

The view is a pure function of a DatePicker's state. Styling is expressed as an
ordered tuple of named overlays per element, applied last-wins by whatever
renders the view; no notion of a document or style sheet lives here.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Optional

from ..core.grid import DayCell, rotate_day_names, weekday_order
from ..core.value import same_day
from ..ui.interaction import NavState
from ..ui.picker import DatePicker
from .props import DAY_DENYLIST, WRAPPER_DENYLIST, sanitize_props

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HeaderCell:
    """A column header naming one weekday."""

    label: str
    weekday: int
    weekend: bool = False
    role: str = "columnheader"


@dataclass(frozen=True)
class DayView:
    """Rendering data for one day cell."""

    date: date
    day_key: str
    label: str
    in_month: bool
    attributes: dict[str, Any]
    overlays: tuple[str, ...]

    @property
    def today(self) -> bool:
        return "today" in self.overlays

    @property
    def selected(self) -> bool:
        return "selected" in self.overlays

    @property
    def focused(self) -> bool:
        return "focus" in self.overlays


@dataclass(frozen=True)
class NavControlView:
    """A previous/next month control."""

    direction: str
    overlays: tuple[str, ...]


@dataclass(frozen=True)
class NavView:
    """Navigation bar: month heading plus its controls (None when hidden)."""

    heading_id: str
    label: str
    prev: Optional[NavControlView]
    next: Optional[NavControlView]


@dataclass(frozen=True)
class CalendarView:
    """Complete view model of a date picker.

    Attributes:
        attributes: Wrapper element attributes, pass-through props included
        overlays: Wrapper overlays in application order
        nav: Navigation bar
        grid_attributes: Attributes of the grid element
        header: Column headers in display order
        weeks: Day cells per week in display order (mirrored for RTL)
        is_rtl: Whether display order is right-to-left
    """

    attributes: dict[str, Any]
    overlays: tuple[str, ...]
    nav: NavView
    grid_attributes: dict[str, Any]
    header: tuple[HeaderCell, ...]
    weeks: tuple[tuple[DayView, ...], ...]
    is_rtl: bool = False


def _wrapper_attributes(picker: DatePicker) -> dict[str, Any]:
    options = picker.options
    attributes: dict[str, Any] = {}
    if not options.disabled:
        attributes["tabIndex"] = options.tab_index
    attributes.update(
        {
            "aria-label": options.aria_label,
            "aria-disabled": options.disabled,
            "aria-readonly": options.read_only,
            "disabled": options.disabled,
        }
    )
    attributes.update(sanitize_props(options.wrapper_props, WRAPPER_DENYLIST))
    return attributes


def _wrapper_overlays(picker: DatePicker) -> tuple[str, ...]:
    """Wrapper overlays: base, read_only, disabled, disabled_hover | hover, active | focus."""
    wrapper = picker.state.wrapper
    overlays = ["base"]
    if picker.read_only:
        overlays.append("read_only")
    if picker.disabled:
        overlays.append("disabled")
        if wrapper.hovered:
            overlays.append("disabled_hover")
        return tuple(overlays)

    if wrapper.hovered:
        overlays.append("hover")
    if wrapper.active:
        overlays.append("active")
    else:
        if picker.options.effective_prevent_focus_style:
            show_focus = wrapper.keyboard_focused
        else:
            show_focus = wrapper.focused
        if show_focus:
            overlays.append("focus")
    return tuple(overlays)


def _nav_view(picker: DatePicker) -> NavView:
    position = picker.position
    label = f"{picker.locale.month_names[position.month]} {position.year}"
    heading_id = f"{position.month}-{position.year}"
    if picker.disabled:
        return NavView(heading_id=heading_id, label=label, prev=None, next=None)

    def control(direction: str, state: NavState) -> NavControlView:
        overlays = ("base", "active") if state is NavState.PRESSED else ("base",)
        return NavControlView(direction=direction, overlays=overlays)

    return NavView(
        heading_id=heading_id,
        label=label,
        prev=control("prev", picker.state.prev_nav),
        next=control("next", picker.state.next_nav),
    )


def _header(picker: DatePicker, style_weekend: bool) -> tuple[HeaderCell, ...]:
    locale = picker.locale
    names = rotate_day_names(list(locale.day_names_min), locale.first_day)
    cells = [
        HeaderCell(label=name, weekday=weekday, weekend=style_weekend and weekday == locale.week_end)
        for name, weekday in zip(names, weekday_order(locale.first_day))
    ]
    if locale.is_rtl:
        cells.reverse()
    return tuple(cells)


def _day_view(
    picker: DatePicker,
    cell: DayCell,
    today: date,
    day_props: dict[str, Any],
    style_weekend: bool,
    show_other_month_date: bool,
) -> DayView:
    """Build one day cell.

    Overlays are applied in order: base, read_only, disabled, disabled_hover,
    weekend, then today, selected, hover, focus, active for days of the displayed
    month, or other_month for borrowed days.
    """
    options = picker.options
    flags = picker.state.day_flags(cell.day_key)
    overlays = ["base"]
    attributes: dict[str, Any] = {"role": "gridcell"}

    if options.read_only:
        overlays.append("read_only")
    if options.disabled:
        overlays.append("disabled")
        if cell.in_month and flags.hovered:
            overlays.append("disabled_hover")
    if style_weekend and cell.weekday == picker.locale.week_end:
        overlays.append("weekend")

    if cell.in_month:
        is_today = cell.date == today
        is_selected = same_day(picker.value, cell.date)
        if is_today:
            overlays.append("today")
        if is_selected:
            overlays.append("selected")
        if not options.disabled:
            if flags.hovered:
                overlays.append("hover")
            if flags.focused:
                overlays.append("focus")
            if flags.active and not options.read_only:
                overlays.append("active")
        attributes["aria-current"] = "date" if is_today else ""
        attributes["aria-selected"] = is_selected
    else:
        overlays.append("other_month")

    label = str(options.render_day(cell.date)) if options.render_day else str(cell.day)
    if not cell.in_month and not show_other_month_date:
        label = ""

    attributes.update(day_props)
    return DayView(
        date=cell.date,
        day_key=cell.day_key,
        label=label,
        in_month=cell.in_month,
        attributes=attributes,
        overlays=tuple(overlays),
    )


def build_view(picker: DatePicker) -> CalendarView:
    """Build the complete view model of a date picker's settled state.

    Args:
        picker: The DatePicker to describe

    Returns:
        CalendarView with weeks and header already in display order
    """
    options = picker.options
    style_weekend = options.effective_style_weekend
    show_other_month_date = options.effective_show_other_month_date
    today = picker.today
    day_props = sanitize_props(options.day_props, DAY_DENYLIST)

    weeks = []
    for week in picker.grid:
        days = [
            _day_view(picker, cell, today, day_props, style_weekend, show_other_month_date)
            for cell in week
        ]
        if picker.locale.is_rtl:
            days.reverse()
        weeks.append(tuple(days))

    nav = _nav_view(picker)
    logger.debug(f"Built view for {picker.position} with {len(weeks)} weeks")
    return CalendarView(
        attributes=_wrapper_attributes(picker),
        overlays=_wrapper_overlays(picker),
        nav=nav,
        grid_attributes={"role": "grid", "aria-labelledby": nav.heading_id},
        header=_header(picker, style_weekend),
        weeks=tuple(weeks),
        is_rtl=picker.locale.is_rtl,
    )
