"""DatePicker: the interaction state machine tying the engine together.

The picker owns the displayed position, the interaction state and (in
uncontrolled mode) the selected value. Hosts forward pointer, touch and keyboard
events to the ``on_*`` handlers; every handler settles all of its state changes
before any external callback fires.
"""

import logging
from dataclasses import dataclass, replace
from datetime import date, timedelta
from typing import Any, Callable, Optional, Union

from ..config.options import DatePickerOptions
from ..config.settings import get_settings
from ..core.day_key import make_day_key, parse_day_key
from ..core.dispatch import CallbackQueue, Stage
from ..core.grid import WeekGrid, build_grid, days_in_month
from ..core.position import CalendarPosition, PositionController
from ..core.value import ValueController, ValueMode
from ..locale.models import LocaleData
from ..locale.resolver import resolve_locale
from .events import KeyEvent, MouseEvent, TouchEvent
from .interaction import FocusState, InteractionState, NavState
from .keyboard import ARROW_KEYS, KeyCode, arrow_offset, parse_key

logger = logging.getLogger(__name__)


@dataclass
class DatePickerCallbacks:
    """External callbacks, all optional and invoked synchronously.

    Attributes:
        on_day_focus: Called with the day key that gained keyboard focus
        on_day_blur: Called with the day key that lost keyboard focus
        on_day_key_down: Raw key-down passthrough (KeyEvent)
        on_day_mouse_down: Raw day mouse-down passthrough (MouseEvent)
        on_day_mouse_up: Raw day mouse-up passthrough (MouseEvent)
        on_day_touch_start: Raw day touch-start passthrough (TouchEvent)
        on_day_touch_end: Raw day touch-end passthrough (TouchEvent)
        on_update: Called with the resolved value (or None) on every commit
        on_month_change: Called with the new 1-based month on every navigation step
    """

    on_day_focus: Optional[Callable[[str], Any]] = None
    on_day_blur: Optional[Callable[[str], Any]] = None
    on_day_key_down: Optional[Callable[[KeyEvent], Any]] = None
    on_day_mouse_down: Optional[Callable[[MouseEvent], Any]] = None
    on_day_mouse_up: Optional[Callable[[MouseEvent], Any]] = None
    on_day_touch_start: Optional[Callable[[TouchEvent], Any]] = None
    on_day_touch_end: Optional[Callable[[TouchEvent], Any]] = None
    on_update: Optional[Callable[[Optional[date]], Any]] = None
    on_month_change: Optional[Callable[[int], Any]] = None


OptionsInput = Union[DatePickerOptions, dict[str, Any], None]

# Options that decide value ownership
VALUE_SOURCES = frozenset({"value_link", "value", "default_value"})


def _coerce_options(options: OptionsInput) -> DatePickerOptions:
    if isinstance(options, DatePickerOptions):
        return options
    return DatePickerOptions(**(options or {}))


class DatePicker:
    """A single month-calendar widget instance."""

    def __init__(
        self,
        options: OptionsInput = None,
        callbacks: Optional[DatePickerCallbacks] = None,
        clock: Callable[[], date] = date.today,
    ) -> None:
        """Initialize the date picker.

        Args:
            options: DatePickerOptions, or a mapping of their fields
            callbacks: External callbacks
            clock: Returns today's date, used for the today marker and focus seeding

        Raises:
            ConfigurationError: If the options are rejected
        """
        self.options = _coerce_options(options)
        self.callbacks = callbacks or DatePickerCallbacks()
        self._clock = clock
        self._dispatcher = CallbackQueue()

        self.locale = self._resolve_locale(self.options)
        self._position = PositionController(
            self.options.position,
            dispatcher=self._dispatcher,
            on_month_change=self.callbacks.on_month_change,
        )
        self._value = ValueController(
            self.options.value_mode,
            lambda: self._position.position,
            value=self.options.initial_value,
            link=self.options.value_link,
            dispatcher=self._dispatcher,
            on_update=self.callbacks.on_update,
        )
        self._value.locked = self.options.disabled or self.options.read_only
        self._state = InteractionState()

        logger.debug(
            f"DatePicker created at {self._position.position} "
            f"({self._value.mode.value} value, rtl={self.locale.is_rtl})"
        )

    # State accessors

    @property
    def state(self) -> InteractionState:
        return self._state

    @property
    def position(self) -> CalendarPosition:
        return self._position.position

    @property
    def value(self) -> Optional[date]:
        return self._value.value

    @property
    def value_mode(self) -> ValueMode:
        return self._value.mode

    @property
    def disabled(self) -> bool:
        return self.options.disabled

    @property
    def read_only(self) -> bool:
        return self.options.read_only

    @property
    def today(self) -> date:
        return self._clock()

    @property
    def grid(self) -> WeekGrid:
        """Week grid of the displayed month in chronological order."""
        position = self._position.position
        return build_grid(position.month, position.year, self.locale.first_day)

    @property
    def focused_date(self) -> Optional[date]:
        if self._state.focused_day_key is None:
            return None
        return parse_day_key(self._state.focused_day_key)

    # Programmatic operations

    def select(self, day: Optional[int]) -> Optional[date]:
        """Select a day of the displayed month, or clear the selection with None."""
        with self._dispatcher.batch():
            return self._value.select(day)

    def toggle(self, candidate: date) -> Optional[date]:
        """Select ``candidate`` or clear it if it is already selected."""
        with self._dispatcher.batch():
            return self._value.toggle(candidate)

    def show_next_month(self) -> CalendarPosition:
        with self._dispatcher.batch():
            return self._position.increment()

    def show_previous_month(self) -> CalendarPosition:
        with self._dispatcher.batch():
            return self._position.decrement()

    def update(self, options: OptionsInput) -> None:
        """Re-apply options supplied by the host after construction.

        The displayed position is overridden without a month-change notification,
        the locale is re-resolved and an externally owned value is re-read when the
        options supply one. The value mode chosen at construction never changes.
        Entering the disabled state drops transient interaction state.

        Args:
            options: New options, DatePickerOptions or a mapping of their fields
        """
        new_options = _coerce_options(options)
        supplied = new_options.model_fields_set & VALUE_SOURCES
        if supplied and new_options.value_mode is not self._value.mode:
            logger.warning(
                f"Value mode is fixed at construction ({self._value.mode.value}), "
                f"ignoring {new_options.value_mode.value} value source"
            )

        was_disabled = self.options.disabled
        self.options = new_options
        self.locale = self._resolve_locale(new_options)
        self._position.reset(new_options.position)
        if self._value.mode is ValueMode.CONTROLLED and "value" in supplied:
            self._value.sync(value=new_options.value)
        elif self._value.mode is ValueMode.LINKED and "value_link" in supplied:
            self._value.sync(link=new_options.value_link)
        self._value.locked = new_options.disabled or new_options.read_only

        if new_options.disabled and not was_disabled:
            logger.debug("DatePicker disabled, resetting interaction state")
            with self._dispatcher.batch():
                self._commit(self._state.reset())

    # Wrapper handlers

    def on_wrapper_focus(self) -> None:
        """Focus entered the wrapper.

        Keyboard focus seeds the focused day with today's day of month expressed
        against the displayed month. Focus arriving while the wrapper is pressed
        comes from a click or touch and seeds nothing.
        """
        if self.disabled:
            return
        with self._dispatcher.batch():
            if self._state.wrapper.pressed:
                self._commit(self._state.with_wrapper(focus=FocusState.POINTER))
                return
            new_state = self._state.with_wrapper(focus=FocusState.KEYBOARD)
            if new_state.focused_day_key is None:
                new_state = replace(new_state, focused_day_key=self._seed_day_key())
            self._commit(new_state)

    def on_wrapper_blur(self) -> None:
        """Focus left the wrapper; the keyboard-focused day is dropped."""
        if self.disabled:
            return
        with self._dispatcher.batch():
            new_state = self._state.with_wrapper(focus=FocusState.NONE)
            self._commit(replace(new_state, focused_day_key=None))

    def on_wrapper_mouse_down(self, event: MouseEvent) -> None:
        if self.disabled or not event.is_primary:
            return
        with self._dispatcher.batch():
            self._commit(self._state.with_wrapper(pressed=True))

    def on_wrapper_mouse_up(self, event: MouseEvent) -> None:
        if self.disabled or not event.is_primary:
            return
        with self._dispatcher.batch():
            self._commit(self._state.with_wrapper(pressed=False))

    def on_wrapper_touch_start(self, event: TouchEvent) -> None:
        if self.disabled or not event.is_single:
            return
        with self._dispatcher.batch():
            self._commit(self._state.with_wrapper(pressed=True))

    def on_wrapper_touch_end(self, event: Optional[TouchEvent] = None) -> None:
        if self.disabled:
            return
        with self._dispatcher.batch():
            self._commit(self._state.with_wrapper(pressed=False))

    def on_wrapper_mouse_over(self) -> None:
        with self._dispatcher.batch():
            self._commit(self._state.with_wrapper(hovered=True))

    def on_wrapper_mouse_out(self) -> None:
        with self._dispatcher.batch():
            self._commit(self._state.with_wrapper(hovered=False))

    def on_wrapper_key_down(self, event: KeyEvent) -> None:
        """Interpret a key pressed while a day holds keyboard focus.

        Arrow keys move the focused day (mirrored left/right in RTL locales) and
        the displayed month follows when the move crosses a month boundary.
        Enter selects the focused day of month and Space toggles the focused
        date. The raw key callback fires afterwards whether or not the key
        matched anything.

        Args:
            event: The key-down event; handled keys get ``prevent_default()``
        """
        if self._state.focused_day_key is None:
            return

        with self._dispatcher.batch():
            if not self.disabled:
                focused = parse_day_key(self._state.focused_day_key)
                code = parse_key(event.key)
                if code in ARROW_KEYS:
                    event.prevent_default()
                    self._move_focus(focused, arrow_offset(code, self.locale.is_rtl))
                elif code is KeyCode.ENTER:
                    event.prevent_default()
                    self._value.select(focused.day)
                elif code is KeyCode.SPACE:
                    event.prevent_default()
                    self._value.toggle(focused)
            self._dispatcher.emit(Stage.PASSTHROUGH, self.callbacks.on_day_key_down, event)

    # Day handlers

    def on_day_mouse_down(self, day_key: str, event: MouseEvent) -> None:
        """Primary-button press on a day selects it and gives it keyboard focus."""
        with self._dispatcher.batch():
            day = self._in_month_date(day_key)
            if day is not None and event.is_primary and self._interactive:
                self._value.select(day.day)
                self._commit(
                    replace(self._state, active_day_key=day_key, focused_day_key=day_key)
                )
            elif day is not None and event.is_primary:
                logger.debug(f"Mouse-down on {day_key} ignored (disabled or read-only)")
            self._dispatcher.emit(Stage.PASSTHROUGH, self.callbacks.on_day_mouse_down, event)

    def on_day_mouse_up(self, day_key: str, event: MouseEvent) -> None:
        with self._dispatcher.batch():
            if (
                self._in_month_date(day_key) is not None
                and event.is_primary
                and self._interactive
                and self._state.active_day_key == day_key
            ):
                self._commit(replace(self._state, active_day_key=None))
            self._dispatcher.emit(Stage.PASSTHROUGH, self.callbacks.on_day_mouse_up, event)

    def on_day_mouse_over(self, day_key: str, event: Optional[MouseEvent] = None) -> None:
        """Pointer entered a day; hover is tracked while disabled but not while read-only."""
        if self._in_month_date(day_key) is None or self.read_only:
            return
        with self._dispatcher.batch():
            self._commit(replace(self._state, hovered_day_key=day_key))

    def on_day_mouse_out(self, day_key: str, event: Optional[MouseEvent] = None) -> None:
        """Pointer left a day; hover is cleared whichever button is involved."""
        if self._state.hovered_day_key != day_key:
            return
        with self._dispatcher.batch():
            self._commit(replace(self._state, hovered_day_key=None))

    def on_day_touch_start(self, day_key: str, event: TouchEvent) -> None:
        """Single-touch press on a day selects it without moving keyboard focus."""
        with self._dispatcher.batch():
            day = self._in_month_date(day_key)
            if day is not None and event.is_single and self._interactive:
                self._value.select(day.day)
                self._commit(replace(self._state, active_day_key=day_key))
            self._dispatcher.emit(Stage.PASSTHROUGH, self.callbacks.on_day_touch_start, event)

    def on_day_touch_end(self, day_key: str, event: TouchEvent) -> None:
        with self._dispatcher.batch():
            if (
                self._in_month_date(day_key) is not None
                and self._interactive
                and self._state.active_day_key == day_key
            ):
                self._commit(replace(self._state, active_day_key=None))
            self._dispatcher.emit(Stage.PASSTHROUGH, self.callbacks.on_day_touch_end, event)

    # Navigation control handlers

    def on_prev_nav_mouse_down(self, event: MouseEvent) -> None:
        if event.is_primary:
            self._press_nav("prev_nav", self._position.decrement)

    def on_prev_nav_mouse_up(self, event: MouseEvent) -> None:
        if event.is_primary:
            self._release_nav("prev_nav")

    def on_prev_nav_touch_start(self, event: TouchEvent) -> None:
        if event.is_single:
            self._press_nav("prev_nav", self._position.decrement)

    def on_prev_nav_touch_end(self, event: Optional[TouchEvent] = None) -> None:
        self._release_nav("prev_nav")

    def on_next_nav_mouse_down(self, event: MouseEvent) -> None:
        if event.is_primary:
            self._press_nav("next_nav", self._position.increment)

    def on_next_nav_mouse_up(self, event: MouseEvent) -> None:
        if event.is_primary:
            self._release_nav("next_nav")

    def on_next_nav_touch_start(self, event: TouchEvent) -> None:
        if event.is_single:
            self._press_nav("next_nav", self._position.increment)

    def on_next_nav_touch_end(self, event: Optional[TouchEvent] = None) -> None:
        self._release_nav("next_nav")

    # Internals

    @property
    def _interactive(self) -> bool:
        return not self.options.disabled and not self.options.read_only

    def _resolve_locale(self, options: DatePickerOptions) -> LocaleData:
        return resolve_locale(options.locale, get_settings().default_locale)

    def _seed_day_key(self) -> str:
        """Today's day of month expressed against the displayed month.

        Days the displayed month does not have are clamped to its last day.
        """
        position = self._position.position
        day = min(self._clock().day, days_in_month(position.month, position.year))
        return make_day_key(position.resolve(day))

    def _in_month_date(self, day_key: str) -> Optional[date]:
        """Parse a day key, returning None for days outside the displayed month."""
        day = parse_day_key(day_key)
        if not self._position.position.contains(day):
            return None
        return day

    def _move_focus(self, focused: date, offset: int) -> None:
        target = focused + timedelta(days=offset)
        self._position.follow(focused, target)
        self._commit(replace(self._state, focused_day_key=make_day_key(target)))

    def _press_nav(self, control: str, step: Callable[[], CalendarPosition]) -> None:
        if self.disabled:
            return
        with self._dispatcher.batch():
            step()
            self._commit(replace(self._state, **{control: NavState.PRESSED}))

    def _release_nav(self, control: str) -> None:
        if self.disabled:
            return
        with self._dispatcher.batch():
            self._commit(replace(self._state, **{control: NavState.IDLE}))

    def _commit(self, new_state: InteractionState) -> None:
        """Swap in a new interaction state, queueing day focus/blur callbacks."""
        old_key = self._state.focused_day_key
        new_key = new_state.focused_day_key
        if old_key != new_key:
            if old_key is not None:
                self._dispatcher.emit(Stage.FOCUS, self.callbacks.on_day_blur, old_key)
            if new_key is not None:
                self._dispatcher.emit(Stage.FOCUS, self.callbacks.on_day_focus, new_key)
        self._state = new_state
