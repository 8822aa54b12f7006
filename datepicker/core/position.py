"""Calendar position (displayed month/year) and its controller."""

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Callable, Optional

from .dispatch import CallbackQueue, Stage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalendarPosition:
    """The displayed month and year.

    Attributes:
        month: Zero-based month, always within 0..11
        year: Calendar year
    """

    month: int
    year: int

    @classmethod
    def from_display(cls, month: int, year: int) -> "CalendarPosition":
        """Build a position from a 1-based month number."""
        return cls(month=month - 1, year=year)

    @property
    def display_month(self) -> int:
        """1-based month number."""
        return self.month + 1

    def contains(self, value: date) -> bool:
        """Check whether a date falls inside the displayed month."""
        return value.year == self.year and value.month == self.month + 1

    def resolve(self, day: int) -> date:
        """Combine a day of month with this position into a full date.

        Days past the end of the month overflow into the following month
        (day 31 of April resolves to May 1) so any focused day stays addressable.
        """
        return date(self.year, self.month + 1, 1) + timedelta(days=day - 1)

    def __str__(self) -> str:
        return f"{self.display_month}/{self.year}"


def increment(position: CalendarPosition) -> CalendarPosition:
    """Return the position one month later, rolling December into January."""
    if position.month == 11:
        return CalendarPosition(month=0, year=position.year + 1)
    return CalendarPosition(month=position.month + 1, year=position.year)


def decrement(position: CalendarPosition) -> CalendarPosition:
    """Return the position one month earlier, rolling January into December."""
    if position.month == 0:
        return CalendarPosition(month=11, year=position.year - 1)
    return CalendarPosition(month=position.month - 1, year=position.year)


class PositionController:
    """Owns the displayed position and notifies the owner of every step."""

    def __init__(
        self,
        position: CalendarPosition,
        dispatcher: Optional[CallbackQueue] = None,
        on_month_change: Optional[Callable[[int], None]] = None,
    ) -> None:
        """Initialize the position controller.

        Args:
            position: Initial displayed position
            dispatcher: Queue used to deliver month-change notifications
            on_month_change: Called with the new 1-based month after every step
        """
        self._position = position
        self._dispatcher = dispatcher or CallbackQueue()
        self.on_month_change = on_month_change

        logger.debug(f"Position controller initialized at {position}")

    @property
    def position(self) -> CalendarPosition:
        return self._position

    def increment(self) -> CalendarPosition:
        """Move one month forward."""
        return self._step(increment(self._position))

    def decrement(self) -> CalendarPosition:
        """Move one month backward."""
        return self._step(decrement(self._position))

    def follow(self, previous: date, current: date) -> Optional[CalendarPosition]:
        """Step once towards ``current`` if it lies in another month than ``previous``.

        Args:
            previous: Date focused before the move
            current: Date focused after the move

        Returns:
            The new position, or None when both dates share a month
        """
        before = (previous.year, previous.month)
        after = (current.year, current.month)
        if after < before:
            return self.decrement()
        if after > before:
            return self.increment()
        return None

    def reset(self, position: CalendarPosition) -> None:
        """Override the position from configuration, without notifying."""
        if position != self._position:
            logger.debug(f"Position overridden: {self._position} -> {position}")
        self._position = position

    def _step(self, new_position: CalendarPosition) -> CalendarPosition:
        old_position = self._position
        self._position = new_position
        logger.debug(f"Displayed month changed: {old_position} -> {new_position}")
        self._dispatcher.emit(Stage.POSITION, self.on_month_change, new_position.display_month)
        return new_position
