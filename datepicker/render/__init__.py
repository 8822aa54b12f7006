"""Rendering boundary: view models, pass-through sanitisation and text output."""

from .console import render_text
from .props import DAY_DENYLIST, WRAPPER_DENYLIST, sanitize_props
from .view import CalendarView, DayView, HeaderCell, NavControlView, NavView, build_view

__all__ = [
    "DAY_DENYLIST",
    "WRAPPER_DENYLIST",
    "CalendarView",
    "DayView",
    "HeaderCell",
    "NavControlView",
    "NavView",
    "build_view",
    "render_text",
    "sanitize_props",
]
