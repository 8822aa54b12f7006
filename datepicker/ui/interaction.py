"""Transient interaction state records.

Each scope (wrapper, prev/next navigation control, day cells) is a small
immutable value. Handlers build a complete replacement state and swap it in
with a single assignment, so readers never see a half-applied transition.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional


class FocusState(Enum):
    """How the wrapper currently holds focus."""

    NONE = "none"
    POINTER = "pointer"  # focus arrived while pressed (click or touch)
    KEYBOARD = "keyboard"


class NavState(Enum):
    """State of a month navigation control."""

    IDLE = "idle"
    PRESSED = "pressed"


@dataclass(frozen=True)
class WrapperState:
    """Hover, press and focus state of the widget wrapper."""

    hovered: bool = False
    pressed: bool = False
    focus: FocusState = FocusState.NONE

    @property
    def active(self) -> bool:
        return self.pressed

    @property
    def focused(self) -> bool:
        return self.focus is not FocusState.NONE

    @property
    def keyboard_focused(self) -> bool:
        return self.focus is FocusState.KEYBOARD


@dataclass(frozen=True)
class DayFlags:
    """Interaction flags of a single day cell, derived from InteractionState."""

    hovered: bool = False
    active: bool = False
    focused: bool = False


@dataclass(frozen=True)
class InteractionState:
    """Complete transient interaction state of a widget instance.

    Day-level state is addressed by day key; holding a single optional key per
    flag guarantees that at most one cell is hovered, active or focused at a time.

    Attributes:
        hovered_day_key: Day under the pointer
        active_day_key: Day currently pressed
        focused_day_key: Day holding keyboard focus
        wrapper: Wrapper hover/press/focus state
        prev_nav: Previous-month control state
        next_nav: Next-month control state
    """

    hovered_day_key: Optional[str] = None
    active_day_key: Optional[str] = None
    focused_day_key: Optional[str] = None
    wrapper: WrapperState = field(default_factory=WrapperState)
    prev_nav: NavState = NavState.IDLE
    next_nav: NavState = NavState.IDLE

    def day_flags(self, day_key: str) -> DayFlags:
        """Return the hover/active/focus flags of one day cell."""
        return DayFlags(
            hovered=self.hovered_day_key == day_key,
            active=self.active_day_key == day_key,
            focused=self.focused_day_key == day_key,
        )

    def with_wrapper(self, **changes) -> "InteractionState":
        """Return a copy with the given wrapper fields replaced."""
        return replace(self, wrapper=replace(self.wrapper, **changes))

    def reset(self) -> "InteractionState":
        """Drop every transient flag except wrapper hover."""
        return InteractionState(wrapper=WrapperState(hovered=self.wrapper.hovered))
