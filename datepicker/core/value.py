"""Selected-value ownership: linked, controlled and uncontrolled modes."""

import logging
from datetime import date
from enum import Enum
from typing import Callable, Optional

from .dispatch import CallbackQueue, Stage
from .position import CalendarPosition

logger = logging.getLogger(__name__)


class ValueMode(Enum):
    """Who owns the selected date."""

    LINKED = "linked"
    CONTROLLED = "controlled"
    UNCONTROLLED = "uncontrolled"


class ValueLink:
    """Externally owned value paired with its change-request callback.

    The owner is expected to update ``value`` (or hand over a new link) in
    response to ``request_change``. The widget keeps a reference to the link
    itself, never a copy of its value.
    """

    def __init__(
        self, value: Optional[date], request_change: Callable[[Optional[date]], None]
    ) -> None:
        self.value = value
        self.request_change = request_change

    def __repr__(self) -> str:
        return f"ValueLink(value={self.value!r}, request_change={self.request_change!r})"


def same_day(first: Optional[date], second: Optional[date]) -> bool:
    """Compare two dates by their day, month and year components only."""
    if first is None or second is None:
        return False
    return (first.year, first.month, first.day) == (second.year, second.month, second.day)


class ValueController:
    """Owns or projects the selected date and commits selections."""

    def __init__(
        self,
        mode: ValueMode,
        position_provider: Callable[[], CalendarPosition],
        value: Optional[date] = None,
        link: Optional[ValueLink] = None,
        dispatcher: Optional[CallbackQueue] = None,
        on_update: Optional[Callable[[Optional[date]], None]] = None,
    ) -> None:
        """Initialize the value controller.

        Args:
            mode: Ownership mode, fixed for the controller's lifetime
            position_provider: Returns the currently displayed position
            value: Initial value (controlled value or uncontrolled default)
            link: Value link, required in linked mode
            dispatcher: Queue used to deliver notifications
            on_update: Called with the resolved value after every commit
        """
        self.mode = mode
        self._position_provider = position_provider
        self._value = value if mode is not ValueMode.LINKED else None
        self._link = link
        self._dispatcher = dispatcher or CallbackQueue()
        self.on_update = on_update
        self.locked = False

        logger.debug(f"Value controller initialized in {mode.value} mode")

    @property
    def value(self) -> Optional[date]:
        """The currently selected date, read from its owner."""
        if self.mode is ValueMode.LINKED:
            return self._link.value if self._link else None
        return self._value

    def sync(self, value: Optional[date] = None, link: Optional[ValueLink] = None) -> None:
        """Take over a new externally owned value after an options update.

        Uncontrolled controllers own their value and ignore this call.
        """
        if self.mode is ValueMode.LINKED and link is not None:
            self._link = link
        elif self.mode is ValueMode.CONTROLLED:
            self._value = value

    def select(self, day: Optional[int]) -> Optional[date]:
        """Commit a selection of a day in the displayed month.

        Args:
            day: Day of month to select, or None to clear the selection

        Returns:
            The resolved date (None when clearing). While locked the call is a
            no-op and the current value is returned unchanged.
        """
        if self.locked:
            logger.debug(f"Selection of day {day} suppressed (disabled or read-only)")
            return self.value

        resolved: Optional[date] = None
        if day:
            resolved = self._position_provider().resolve(day)

        if self.mode is ValueMode.LINKED:
            if self._link is not None:
                self._dispatcher.emit(Stage.COMMIT, self._link.request_change, resolved)
        elif self.mode is ValueMode.UNCONTROLLED:
            self._value = resolved

        logger.debug(f"Selection committed ({self.mode.value}): {resolved}")
        self._dispatcher.emit(Stage.COMMIT, self.on_update, resolved)
        return resolved

    def toggle(self, candidate: date) -> Optional[date]:
        """Select ``candidate``'s day, or clear the selection if it is already selected."""
        if self.locked:
            logger.debug(f"Toggle of {candidate} suppressed (disabled or read-only)")
            return self.value

        if same_day(self.value, candidate):
            return self.select(None)
        return self.select(candidate.day)
