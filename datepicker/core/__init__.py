"""Calendar engine: day keys, week grids, displayed position and selected value."""

from .day_key import make_day_key, parse_day_key
from .dispatch import CallbackQueue, Stage
from .grid import DayCell, WeekGrid, build_grid
from .position import CalendarPosition, PositionController, decrement, increment
from .value import ValueController, ValueLink, ValueMode, same_day

__all__ = [
    "CalendarPosition",
    "CallbackQueue",
    "DayCell",
    "PositionController",
    "Stage",
    "ValueController",
    "ValueLink",
    "ValueMode",
    "WeekGrid",
    "build_grid",
    "decrement",
    "increment",
    "make_day_key",
    "parse_day_key",
    "same_day",
]
