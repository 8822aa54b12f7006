"""Week-grid generation for a displayed month."""

import calendar
import logging
from dataclasses import dataclass
from datetime import date, timedelta

from .day_key import make_day_key

logger = logging.getLogger(__name__)

DAYS_PER_WEEK = 7


def sunday_weekday(value: date) -> int:
    """Return the weekday of a date with Sunday as 0 and Saturday as 6."""
    return (value.weekday() + 1) % DAYS_PER_WEEK


def days_in_month(month: int, year: int) -> int:
    """Return the number of days in a zero-based month."""
    return calendar.monthrange(year, month + 1)[1]


@dataclass(frozen=True)
class DayCell:
    """A single cell of the week grid.

    Attributes:
        date: The fully resolved calendar date shown in the cell
        in_month: False for dates borrowed from the previous or next month
    """

    date: date
    in_month: bool

    @property
    def day_key(self) -> str:
        """Stable identity of the cell's date."""
        return make_day_key(self.date)

    @property
    def day(self) -> int:
        return self.date.day

    @property
    def weekday(self) -> int:
        """Weekday with Sunday as 0."""
        return sunday_weekday(self.date)


Week = tuple[DayCell, ...]
WeekGrid = tuple[Week, ...]


def build_grid(month: int, year: int, first_weekday: int) -> WeekGrid:
    """Lay out the whole weeks covering a month.

    The grid starts on ``first_weekday``, borrows leading days from the previous
    month and pads the final week with days of the next month. Weeks are always
    returned in chronological (left-to-right) order; mirroring for right-to-left
    locales is left to the consumer.

    Args:
        month: Zero-based month (0 = January)
        year: Four-digit year
        first_weekday: Weekday the grid starts on, Sunday = 0

    Returns:
        Tuple of 4 to 6 weeks, each holding exactly 7 cells
    """
    first_of_month = date(year, month + 1, 1)
    leading = (sunday_weekday(first_of_month) - first_weekday) % DAYS_PER_WEEK
    covered = leading + days_in_month(month, year)
    week_count = -(-covered // DAYS_PER_WEEK)

    start = first_of_month - timedelta(days=leading)
    cells = []
    for offset in range(week_count * DAYS_PER_WEEK):
        current = start + timedelta(days=offset)
        cells.append(DayCell(date=current, in_month=current.month == month + 1))

    grid = tuple(
        tuple(cells[index : index + DAYS_PER_WEEK])
        for index in range(0, len(cells), DAYS_PER_WEEK)
    )
    logger.debug(
        f"Built {len(grid)}-week grid for {month + 1}/{year} "
        f"(first weekday {first_weekday}, {leading} leading days)"
    )
    return grid


def rotate_day_names(day_names: list[str], first_weekday: int) -> list[str]:
    """Rotate Sunday-first day names so the list starts on ``first_weekday``."""
    return list(day_names[first_weekday:]) + list(day_names[:first_weekday])


def weekday_order(first_weekday: int) -> list[int]:
    """Return the Sunday-based weekday numbers in grid column order."""
    return [(first_weekday + column) % DAYS_PER_WEEK for column in range(DAYS_PER_WEEK)]
