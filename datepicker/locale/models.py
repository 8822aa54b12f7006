"""Locale data model used by the grid generator and the view builder."""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..exceptions import LocaleDataError

DAY_NAME_COUNT = 7
MONTH_NAME_COUNT = 12


class LocaleData(BaseModel):
    """Resolved calendar conventions for one locale.

    Attributes:
        first_day: Weekday the grid starts on, Sunday = 0
        week_end: Weekday given weekend treatment, Sunday = 0
        day_names_min: Seven short day names, index 0 = Sunday
        month_names: Twelve month names, index 0 = January
        is_rtl: Whether the locale reads right-to-left
    """

    model_config = ConfigDict(frozen=True)

    first_day: int = Field(default=0, description="First weekday of the grid (Sunday = 0)")
    week_end: int = Field(default=0, description="Weekend weekday (Sunday = 0)")
    day_names_min: tuple[str, ...] = Field(..., description="Short day names, Sunday first")
    month_names: tuple[str, ...] = Field(..., description="Month names, January first")
    is_rtl: bool = Field(default=False, description="Right-to-left text direction")

    @field_validator("first_day", "week_end")
    @classmethod
    def validate_weekday(cls, v: int) -> int:
        if not 0 <= v <= 6:
            raise LocaleDataError(f"Weekday must be within 0..6, got {v}")
        return v

    @model_validator(mode="after")
    def validate_name_tables(self) -> "LocaleData":
        """Enforce the fixed 7 / 12 entry shape of the name tables."""
        if len(self.day_names_min) != DAY_NAME_COUNT:
            raise LocaleDataError(
                f"Expected {DAY_NAME_COUNT} day names, got {len(self.day_names_min)}"
            )
        if len(set(self.day_names_min)) != DAY_NAME_COUNT:
            raise LocaleDataError("Day names must be distinct")
        if len(self.month_names) != MONTH_NAME_COUNT:
            raise LocaleDataError(
                f"Expected {MONTH_NAME_COUNT} month names, got {len(self.month_names)}"
            )
        return self
