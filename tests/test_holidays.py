"""Tests for the holiday calendar."""

from datetime import date, timedelta

import pytest

from turkholidays.errors import YearOutOfRangeError
from turkholidays.holidays import (
    _hijri_to_gregorian,
    _intdiv,
    get_fixed_holidays,
    get_holiday_name,
    get_holidays_in_year,
    get_named_holidays,
    get_public_holidays,
    get_religious_holidays,
    is_day_off,
    is_public_holiday,
    is_weekend,
    is_working_day,
    next_holiday,
    to_iso_strings,
)
from turkholidays.models import HolidayKind


def fixed_clock(day: date):
    """Build a clock that always returns the given day."""
    return lambda: day


def test_fixed_holidays_2024():
    """Test the fixed holidays for 2024."""
    assert to_iso_strings(get_fixed_holidays(2024)) == [
        "2024-01-01",
        "2024-04-23",
        "2024-05-01",
        "2024-05-19",
        "2024-07-15",
        "2024-08-30",
        "2024-10-29",
    ]


@pytest.mark.parametrize("year", [1, 622, 1900, 2024, 2025, 2100, 9999])
def test_public_holidays_structure(year):
    """Test that public holidays are fixed holidays followed by religious ones."""
    holidays = get_public_holidays(year)

    assert len(holidays) == 14
    assert holidays == get_fixed_holidays(year) + get_religious_holidays(year)
    assert holidays[:7] == [
        date(year, month, day)
        for month, day in [(1, 1), (4, 23), (5, 1), (5, 19), (7, 15), (8, 30), (10, 29)]
    ]


@pytest.mark.parametrize("year", [1, 1453, 1923, 2024, 2050, 9999])
def test_religious_holidays_are_consecutive_runs(year):
    """Test the 3-day and 4-day observance runs."""
    holidays = get_religious_holidays(year)

    assert len(holidays) == 7
    fitr, adha = holidays[:3], holidays[3:]
    for run in (fitr, adha):
        for previous, current in zip(run, run[1:]):
            assert current == previous + timedelta(days=1)


def test_religious_holidays_2024():
    """Test the approximated religious holidays for 2024."""
    assert to_iso_strings(get_religious_holidays(2024)) == [
        "2023-03-27",
        "2023-03-28",
        "2023-03-29",
        "2023-06-04",
        "2023-06-05",
        "2023-06-06",
        "2023-06-07",
    ]


def test_hijri_conversion():
    """Test the Hijri to Gregorian conversion."""
    assert _hijri_to_gregorian(2024, 10, 1) == date(2023, 3, 27)
    assert _hijri_to_gregorian(2024, 12, 10) == date(2023, 6, 4)
    # Deterministic
    assert _hijri_to_gregorian(2030, 12, 10) == _hijri_to_gregorian(2030, 12, 10)


def test_intdiv_truncates_toward_zero():
    """Test integer division rounding."""
    assert _intdiv(7, 2) == 3
    assert _intdiv(-7, 2) == -3
    assert _intdiv(-621, 33) == -18
    assert _intdiv(0, 33) == 0


def test_current_year_default():
    """Test that omitting the year uses the current year."""
    year = date.today().year
    assert get_public_holidays() == get_public_holidays(year)
    assert get_public_holidays(None)[0] == date(year, 1, 1)


@pytest.mark.parametrize("year", [0, -1, 10000])
def test_out_of_range_year(year):
    """Test years outside the representable date range."""
    with pytest.raises(YearOutOfRangeError):
        get_public_holidays(year)
    with pytest.raises(YearOutOfRangeError):
        get_religious_holidays(year)


def test_out_of_range_conversion():
    """Test a conversion that lands outside the representable date range."""
    with pytest.raises(YearOutOfRangeError):
        _hijri_to_gregorian(-100_000, 10, 1)
    with pytest.raises(OverflowError):
        _hijri_to_gregorian(100_000, 12, 10)


def test_named_holidays():
    """Test holiday names and kinds."""
    holidays = get_named_holidays(2024)

    assert [holiday.date for holiday in holidays] == get_public_holidays(2024)
    assert holidays[0].name == "Yılbaşı"
    assert holidays[0].iso == "2024-01-01"
    assert holidays[6].name == "Cumhuriyet Bayramı"
    assert all(holiday.kind == HolidayKind.FIXED for holiday in holidays[:7])
    assert [holiday.name for holiday in holidays[7:]] == ["Ramazan Bayramı"] * 3 + [
        "Kurban Bayramı"
    ] * 4
    assert all(holiday.kind == HolidayKind.RELIGIOUS for holiday in holidays[7:])


def test_get_holiday_name():
    """Test looking up a holiday name."""
    assert get_holiday_name(date(2024, 4, 23)) == "Ulusal Egemenlik ve Çocuk Bayramı"
    assert get_holiday_name(date(2024, 8, 30)) == "Zafer Bayramı"
    assert get_holiday_name(date(2024, 4, 24)) is None


def test_is_weekend():
    """Test weekend detection."""
    # January 6, 2024 is a Saturday
    assert is_weekend(date(2024, 1, 6))
    assert is_weekend(date(2024, 1, 7))
    assert not is_weekend(date(2024, 1, 8))


def test_is_public_holiday():
    """Test holiday membership."""
    assert is_public_holiday(date(2024, 10, 29))
    assert not is_public_holiday(date(2024, 10, 30))


def test_is_working_day():
    """Test working day detection."""
    # April 23, 2024 is a Tuesday holiday
    assert not is_working_day(date(2024, 4, 23))
    assert not is_working_day(date(2024, 1, 6))
    assert is_working_day(date(2024, 4, 24))
    assert not is_working_day(date(2024, 4, 24), extra_days_off={date(2024, 4, 24)})


def test_is_day_off_weekend():
    """Test that weekends are always days off."""
    assert is_day_off(clock=fixed_clock(date(2024, 1, 6)))
    assert is_day_off(clock=fixed_clock(date(2024, 1, 7)))


def test_is_day_off_holiday():
    """Test a holiday falling on a weekday."""
    assert is_day_off(clock=fixed_clock(date(2024, 4, 23)))
    assert is_day_off(clock=fixed_clock(date(2024, 1, 1)))


def test_is_day_off_working_day():
    """Test a regular weekday."""
    assert not is_day_off(clock=fixed_clock(date(2024, 4, 24)))


def test_is_day_off_extra_day():
    """Test a configured extra day off."""
    assert is_day_off(
        clock=fixed_clock(date(2024, 4, 24)), extra_days_off=frozenset({date(2024, 4, 24)})
    )


def test_is_day_off_uses_holidays_of_current_year():
    """Test that only the holiday set of today's year is consulted."""
    # 2023-03-27 (Monday) comes from the 2024 set, not the 2023 one
    assert date(2023, 3, 27) not in get_public_holidays(2023)
    assert not is_day_off(clock=fixed_clock(date(2023, 3, 27)))


def test_next_holiday():
    """Test finding the next holiday."""
    upcoming = next_holiday(date(2024, 5, 2))
    assert upcoming is not None
    assert upcoming.date == date(2024, 5, 19)

    upcoming = next_holiday(date(2024, 10, 29))
    assert upcoming is not None
    assert upcoming.date == date(2025, 1, 1)
    assert upcoming.name == "Yılbaşı"


def test_next_holiday_last_year():
    """Test that nothing follows the last representable holiday."""
    assert next_holiday(date(9999, 10, 29)) is None


def test_holidays_in_year_include_earlier_landing_religious_dates():
    """Test that religious dates computed for the next year are found in this one."""
    holidays = get_holidays_in_year(2024)

    assert [holiday.date for holiday in holidays] == sorted(holiday.date for holiday in holidays)
    assert all(holiday.date.year == 2024 for holiday in holidays)
    religious = [holiday for holiday in holidays if holiday.kind == HolidayKind.RELIGIOUS]
    assert to_iso_strings(holiday.date for holiday in religious) == [
        "2024-03-15",
        "2024-03-16",
        "2024-03-17",
        "2024-05-23",
        "2024-05-24",
        "2024-05-25",
        "2024-05-26",
    ]
    assert len(holidays) == 14


def test_holidays_in_year_across_lunar_year_skip():
    """Test the years around a skipped lunar year."""
    # 2041 maps two lunar years ahead of 2040, so 2039 gets no religious dates
    assert get_holiday_name(date(2040, 9, 12)) == "Ramazan Bayramı"
    assert get_holiday_name(date(2040, 11, 20)) == "Kurban Bayramı"
    assert all(holiday.kind == HolidayKind.FIXED for holiday in get_holidays_in_year(2039))


def test_religious_holiday_lookups():
    """Test name and membership lookups on a religious holiday."""
    # March 15, 2024 is a Friday, computed for the 2025 holiday set
    assert get_holiday_name(date(2024, 3, 15)) == "Ramazan Bayramı"
    assert get_holiday_name(date(2024, 5, 26)) == "Kurban Bayramı"
    assert is_public_holiday(date(2024, 3, 15))
    assert not is_working_day(date(2024, 3, 15))
    # is_day_off only consults the holiday set computed for today's year
    assert not is_day_off(clock=fixed_clock(date(2024, 3, 15)))


def test_next_holiday_religious():
    """Test that the next holiday can be a religious one."""
    upcoming = next_holiday(date(2024, 3, 1))
    assert upcoming is not None
    assert upcoming.date == date(2024, 3, 15)
    assert upcoming.name == "Ramazan Bayramı"
    assert upcoming.kind == HolidayKind.RELIGIOUS
