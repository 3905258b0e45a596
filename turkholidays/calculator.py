"""Month calendar generation."""

from calendar import monthrange
from collections.abc import Collection
from datetime import date

from turkholidays.holidays import get_holidays_in_year, is_weekend
from turkholidays.models import DayRecord, DayType


def generate_month_calendar(
    year: int, month: int, extra_days_off: Collection[date] = ()
) -> list[DayRecord]:
    """
    Generate a calendar for the entire month.

    Holidays take precedence over weekends, and weekends over configured
    extra days off.
    """
    _, days_in_month = monthrange(year, month)
    holiday_names = {holiday.date: holiday.name for holiday in get_holidays_in_year(year)}

    calendar = []
    for day in range(1, days_in_month + 1):
        target_date = date(year, month, day)

        # Determine day type
        if target_date in holiday_names:
            day_type = DayType.HOLIDAY
        elif is_weekend(target_date):
            day_type = DayType.WEEKEND
        elif target_date in extra_days_off:
            day_type = DayType.EXTRA_DAY_OFF
        else:
            day_type = DayType.WORKING_DAY

        calendar.append(
            DayRecord(
                date=target_date,
                day_type=day_type,
                holiday_name=holiday_names.get(target_date, ""),
            )
        )

    return calendar


def count_working_days(year: int, month: int, extra_days_off: Collection[date] = ()) -> int:
    """Count working days in a month."""
    return sum(
        1
        for record in generate_month_calendar(year, month, extra_days_off)
        if record.day_type == DayType.WORKING_DAY
    )
