"""
Per-widget options using Pydantic for validation.

Options mirror what a host passes to a date picker on construction and on every
update. Which of ``value_link`` / ``value`` / ``default_value`` was supplied
decides the value-ownership mode, with that precedence.
"""

import logging
from datetime import date
from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..core.position import CalendarPosition
from ..core.value import ValueLink, ValueMode
from ..exceptions import ConfigurationError
from .settings import get_settings

logger = logging.getLogger(__name__)

# Grids borrow days from adjacent months, which must stay inside date's range
MIN_YEAR = 2
MAX_YEAR = 9998


def _current_month() -> int:
    return date.today().month


def _current_year() -> int:
    return date.today().year


class DatePickerOptions(BaseModel):
    """Options accepted by a DatePicker instance.

    Attributes:
        default_value: Initial value in uncontrolled mode
        value: Externally owned value (controlled mode)
        value_link: Externally owned value plus change-request callback (linked mode)
        locale: Locale identifier, resolved through the locale registry
        month: Displayed month, 1-12
        year: Displayed year
        show_other_month_date: Show labels of days borrowed from adjacent months
        style_weekend: Give weekend cells and headers distinct overlays
        disabled: Suppress all interaction except hover tracking
        read_only: Suppress selection-affecting interaction
        render_day: Override for the per-cell label
        tab_index: Tab index of the wrapper when enabled
        aria_label: Accessible label of the wrapper
        prevent_focus_style_for_touch_and_click: Override of the settings default
        wrapper_props: Pass-through properties for the wrapper element
        day_props: Pass-through properties for day cells

    Example:
        >>> options = DatePickerOptions(month=1, year=2024, default_value=date(2024, 1, 15))
        >>> options.value_mode
        <ValueMode.UNCONTROLLED: 'uncontrolled'>
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    # Value ownership
    default_value: Optional[date] = Field(default=None, description="Uncontrolled initial value")
    value: Optional[date] = Field(default=None, description="Controlled value")
    value_link: Optional[ValueLink] = Field(default=None, description="Linked value")

    # Calendar configuration
    locale: Optional[str] = Field(default=None, description="Locale identifier")
    month: int = Field(default_factory=_current_month, description="Displayed month (1-12)")
    year: int = Field(default_factory=_current_year, description="Displayed year")
    show_other_month_date: Optional[bool] = Field(
        default=None, description="Show adjacent-month day labels (settings default when unset)"
    )
    style_weekend: Optional[bool] = Field(
        default=None, description="Weekend treatment (settings default when unset)"
    )
    render_day: Optional[Callable[[date], Any]] = Field(
        default=None, description="Per-cell label override"
    )

    # Interaction
    disabled: bool = Field(default=False, description="Disable all interaction")
    read_only: bool = Field(default=False, description="Disable selection")

    # Accessibility and pass-through
    tab_index: int = Field(default=0, description="Wrapper tab index")
    aria_label: str = Field(default="datepicker", description="Wrapper accessible label")
    prevent_focus_style_for_touch_and_click: Optional[bool] = Field(
        default=None, description="Focus overlay only for keyboard focus (settings default when unset)"
    )
    wrapper_props: dict[str, Any] = Field(default_factory=dict, description="Wrapper pass-through")
    day_props: dict[str, Any] = Field(default_factory=dict, description="Day pass-through")

    @field_validator("month")
    @classmethod
    def validate_month(cls, v: int) -> int:
        """Reject months outside 1..12 before they reach the engine.

        Raises:
            ConfigurationError: If the month is out of range
        """
        if not 1 <= v <= 12:
            raise ConfigurationError(
                "Month must be within 1..12", field_name="month", field_value=v
            )
        return v

    @field_validator("year")
    @classmethod
    def validate_year(cls, v: int) -> int:
        """Reject years whose grids would leave the supported date range.

        Raises:
            ConfigurationError: If the year is out of range
        """
        if not MIN_YEAR <= v <= MAX_YEAR:
            raise ConfigurationError(
                f"Year must be within {MIN_YEAR}..{MAX_YEAR}", field_name="year", field_value=v
            )
        return v

    @field_validator("value_link")
    @classmethod
    def validate_value_link(cls, v: Optional[ValueLink]) -> Optional[ValueLink]:
        """Require a callable change-request callback on linked values.

        Raises:
            ConfigurationError: If the link has no usable callback
        """
        if v is not None and not callable(v.request_change):
            raise ConfigurationError(
                "Linked value requires a callable request_change",
                field_name="value_link",
                field_value=v.request_change,
            )
        return v

    @model_validator(mode="after")
    def validate_value_sources(self) -> "DatePickerOptions":
        """Resolve competing value sources by precedence (never an error)."""
        if "value_link" in self.model_fields_set and self.value_link is None:
            raise ConfigurationError(
                "Linked value mode requires a ValueLink", field_name="value_link"
            )
        supplied = [
            name for name in ("value_link", "value", "default_value") if name in self.model_fields_set
        ]
        if len(supplied) > 1:
            logger.debug(f"Multiple value sources supplied {supplied}, using {supplied[0]}")
        return self

    @property
    def value_mode(self) -> ValueMode:
        """Value-ownership mode selected by the supplied value source."""
        if "value_link" in self.model_fields_set:
            return ValueMode.LINKED
        if "value" in self.model_fields_set:
            return ValueMode.CONTROLLED
        return ValueMode.UNCONTROLLED

    @property
    def initial_value(self) -> Optional[date]:
        """Value the widget starts with, taken from the winning source."""
        mode = self.value_mode
        if mode is ValueMode.LINKED:
            return self.value_link.value if self.value_link else None
        if mode is ValueMode.CONTROLLED:
            return self.value
        return self.default_value

    @property
    def position(self) -> CalendarPosition:
        """Displayed position, zero-based internally."""
        return CalendarPosition.from_display(self.month, self.year)

    @property
    def effective_show_other_month_date(self) -> bool:
        if self.show_other_month_date is None:
            return get_settings().show_other_month_date
        return self.show_other_month_date

    @property
    def effective_style_weekend(self) -> bool:
        if self.style_weekend is None:
            return get_settings().style_weekend
        return self.style_weekend

    @property
    def effective_prevent_focus_style(self) -> bool:
        if self.prevent_focus_style_for_touch_and_click is None:
            return get_settings().prevent_focus_style_for_touch_and_click
        return self.prevent_focus_style_for_touch_and_click
