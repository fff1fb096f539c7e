"""Tests for date parser with relative dates."""

from datetime import date

import pytest

from ledgerbook.utils.date_parser import get_date_range, parse_date

TODAY = date(2024, 3, 15)


def test_parse_absolute_date():
    """Test parsing absolute dates."""
    assert parse_date("2024-01-15") == date(2024, 1, 15)
    assert parse_date("January 15, 2024") == date(2024, 1, 15)


def test_parse_today_and_yesterday():
    assert parse_date("today", today=TODAY) == TODAY
    assert parse_date(" Yesterday ", today=TODAY) == date(2024, 3, 14)


def test_parse_month_and_year_forms():
    assert parse_date("this month", today=TODAY) == date(2024, 3, 1)
    assert parse_date("last month", today=TODAY) == date(2024, 2, 1)
    assert parse_date("this year", today=TODAY) == date(2024, 1, 1)
    assert parse_date("last year", today=TODAY) == date(2023, 1, 1)


def test_parse_last_month_in_january():
    assert parse_date("last month", today=date(2024, 1, 20)) == date(2023, 12, 1)


def test_parse_defaults_to_real_today():
    assert parse_date("today") == date.today()


def test_parse_invalid_date():
    with pytest.raises(ValueError, match="Could not parse date"):
        parse_date("not a date")


def test_get_date_range_this_periods():
    assert get_date_range("this-month", today=TODAY) == (date(2024, 3, 1), TODAY)
    assert get_date_range("this-year", today=TODAY) == (date(2024, 1, 1), TODAY)


def test_get_date_range_last_month():
    assert get_date_range("last-month", today=TODAY) == (
        date(2024, 2, 1),
        date(2024, 2, 29),
    )


def test_get_date_range_last_year():
    assert get_date_range("last-year", today=TODAY) == (
        date(2023, 1, 1),
        date(2023, 12, 31),
    )


def test_get_date_range_unknown_period():
    with pytest.raises(ValueError, match="Unknown period"):
        get_date_range("next-decade")
