"""
Exceptions raised by the datepicker engine and its configuration layer.

The engine itself is total over its documented input domain; these exceptions
mark configuration problems and programming-contract violations only.
"""

from typing import Any, Optional


class DatePickerError(Exception):
    """Base exception for all datepicker errors.

    Args:
        message: Human-readable error description
        details: Optional dictionary containing additional error context

    Example:
        >>> raise DatePickerError("Widget misconfigured", {"component": "options"})
    """

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ConfigurationError(DatePickerError):
    """Exception raised when widget options or settings are rejected.

    Out-of-range months, a linked value without a change callback and unreadable
    configuration files all end up here, before anything reaches the engine.

    Args:
        message: Human-readable validation error description
        field_name: Name of the option that failed validation
        field_value: The rejected value
        validation_errors: List of specific validation error messages
        details: Additional context about the failure
    """

    def __init__(
        self,
        message: str,
        field_name: Optional[str] = None,
        field_value: Optional[Any] = None,
        validation_errors: Optional[list[str]] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.field_name = field_name
        self.field_value = field_value
        self.validation_errors = validation_errors or []

        error_details = details or {}
        if field_name:
            error_details["field_name"] = field_name
        if field_value is not None:
            error_details["field_value"] = str(field_value)
        if self.validation_errors:
            error_details["validation_errors"] = self.validation_errors

        super().__init__(message, error_details)


class DayKeyError(DatePickerError):
    """Exception raised when a malformed day key is parsed.

    Day keys are produced exclusively by the engine, so this signals a caller
    handing in a key it made up.
    """

    def __init__(self, key: Any) -> None:
        self.key = key
        super().__init__(f"Malformed day key: {key!r}", {"key": str(key)})


class LocaleDataError(DatePickerError):
    """Exception raised when locale data violates its fixed-shape invariants."""

    def __init__(self, message: str, locale: Optional[str] = None) -> None:
        self.locale = locale
        super().__init__(message, {"locale": locale} if locale else None)
