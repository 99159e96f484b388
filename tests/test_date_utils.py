"""Tests for local date parsing and formatting."""

from datetime import date, datetime

import pytest

from utils.date_utils import add_days, format_date, parse_local_date, to_local_date


class TestParseLocalDate:

    def test_parses_iso_date(self):
        assert parse_local_date("2024-01-01") == date(2024, 1, 1)

    def test_surrounding_whitespace_is_ignored(self):
        assert parse_local_date(" 2024-03-09 ") == date(2024, 3, 9)

    def test_empty_input_is_today(self):
        assert parse_local_date("") == date.today()
        assert parse_local_date(None) == date.today()

    @pytest.mark.parametrize("value", ["2024/01/01", "01-01", "abcd-ef-gh", "2024-1"])
    def test_malformed_input_raises(self, value):
        with pytest.raises(ValueError, match="Expected YYYY-MM-DD"):
            parse_local_date(value)

    def test_impossible_date_raises(self):
        with pytest.raises(ValueError):
            parse_local_date("2023-02-29")


class TestFormatDate:

    def test_zero_padded_month_and_day(self):
        assert format_date(date(2024, 3, 5)) == "03/05/2024"

    def test_four_digit_year(self):
        assert format_date(date(999, 12, 31)) == "12/31/0999"

    def test_datetime_time_is_ignored(self):
        assert format_date(datetime(2024, 10, 7, 23, 59)) == "10/07/2024"


class TestDateArithmetic:

    def test_to_local_date_truncates_datetime(self):
        assert to_local_date(datetime(2024, 1, 1, 18, 30)) == date(2024, 1, 1)

    def test_add_days_crosses_leap_day(self):
        assert add_days(date(2024, 2, 28), 1) == date(2024, 2, 29)
        assert add_days(date(2024, 2, 28), 2) == date(2024, 3, 1)
