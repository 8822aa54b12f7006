"""Plain-text month sheet renderer for terminals and logs."""

from .view import CalendarView, DayView

CELL_WIDTH = 5


def _day_text(day: DayView) -> str:
    """Format one day label; selected wins over focused, focused over today."""
    if not day.label:
        return ""
    if day.selected:
        return f"[{day.label}]"
    if day.focused:
        return f">{day.label}<"
    if day.today:
        return f"*{day.label}"
    return day.label


def render_text(view: CalendarView) -> str:
    """Render a CalendarView as a fixed-width month sheet.

    Markers: ``[d]`` selected, ``>d<`` keyboard focus, ``*d`` today. The
    previous/next controls are drawn as ``<`` and ``>`` unless hidden.

    Args:
        view: View model built by ``build_view``

    Returns:
        Multi-line string without a trailing newline
    """
    width = CELL_WIDTH * 7
    prev_marker = "<" if view.nav.prev else " "
    next_marker = ">" if view.nav.next else " "
    title = view.nav.label.center(width - 4)

    lines = [f"{prev_marker} {title} {next_marker}".rstrip()]
    lines.append("".join(cell.label.rjust(CELL_WIDTH) for cell in view.header))
    for week in view.weeks:
        lines.append("".join(_day_text(day).rjust(CELL_WIDTH) for day in week).rstrip())
    return "\n".join(lines)
