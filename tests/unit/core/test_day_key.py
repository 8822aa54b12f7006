"""Unit tests for day key construction and parsing."""

from datetime import date, datetime

import pytest

from datepicker.core.day_key import make_day_key, parse_day_key
from datepicker.exceptions import DayKeyError


class TestMakeDayKey:
    """Test day key construction."""

    def test_make_day_key_when_date_then_month_day_year_without_padding(self) -> None:
        assert make_day_key(date(2024, 1, 31)) == "1/31/2024"
        assert make_day_key(date(2023, 12, 5)) == "12/5/2023"

    def test_make_day_key_when_datetime_then_uses_date_part(self) -> None:
        assert make_day_key(datetime(2024, 2, 1, 23, 59)) == "2/1/2024"

    def test_make_day_key_when_different_dates_then_keys_differ(self) -> None:
        assert make_day_key(date(2024, 1, 12)) != make_day_key(date(2024, 11, 2))


class TestParseDayKey:
    """Test day key parsing."""

    @pytest.mark.parametrize(
        "value",
        [date(2024, 1, 1), date(2024, 2, 29), date(1999, 12, 31), date(2030, 7, 4)],
    )
    def test_parse_day_key_when_built_from_date_then_reproduces_date(self, value: date) -> None:
        """A key derived from a date parses back to the same day, month and year."""
        assert parse_day_key(make_day_key(value)) == value

    @pytest.mark.parametrize("key", ["", "1/31", "1/31/2024/1", "a/b/c", "2/30/2024", "13/1/2024"])
    def test_parse_day_key_when_malformed_then_raises_day_key_error(self, key: str) -> None:
        with pytest.raises(DayKeyError) as exc_info:
            parse_day_key(key)

        assert exc_info.value.key == key
        assert "Malformed day key" in str(exc_info.value)

    def test_parse_day_key_when_not_a_string_then_raises_day_key_error(self) -> None:
        with pytest.raises(DayKeyError):
            parse_day_key(20240131)  # type: ignore[arg-type]
