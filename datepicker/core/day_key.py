"""Day keys: stable string identities for calendar dates.

A day key has the form ``"<month>/<day>/<year>"`` with a 1-based month and no
zero padding, e.g. ``"1/31/2024"``.
"""

from datetime import date

from ..exceptions import DayKeyError

DAY_KEY_SEPARATOR = "/"


def make_day_key(value: date) -> str:
    """Build the day key for a date (datetimes are reduced to their date part)."""
    return f"{value.month}{DAY_KEY_SEPARATOR}{value.day}{DAY_KEY_SEPARATOR}{value.year}"


def parse_day_key(key: str) -> date:
    """Reconstruct the date a day key was built from.

    Args:
        key: Day key produced by make_day_key

    Returns:
        The date identified by the key

    Raises:
        DayKeyError: If the key is not a well-formed day key
    """
    if not isinstance(key, str):
        raise DayKeyError(key)

    parts = key.split(DAY_KEY_SEPARATOR)
    if len(parts) != 3:
        raise DayKeyError(key)

    try:
        month, day, year = (int(part) for part in parts)
        return date(year, month, day)
    except ValueError as e:
        raise DayKeyError(key) from e
