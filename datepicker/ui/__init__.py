"""Input events, key decoding, interaction state and the DatePicker state machine."""

from .events import KeyEvent, MouseButton, MouseEvent, TouchEvent
from .interaction import DayFlags, FocusState, InteractionState, NavState, WrapperState
from .keyboard import KeyCode, arrow_offset, parse_key
from .picker import DatePicker, DatePickerCallbacks

__all__ = [
    "DatePicker",
    "DatePickerCallbacks",
    "DayFlags",
    "FocusState",
    "InteractionState",
    "KeyCode",
    "KeyEvent",
    "MouseButton",
    "MouseEvent",
    "NavState",
    "TouchEvent",
    "WrapperState",
    "arrow_offset",
    "parse_key",
]
