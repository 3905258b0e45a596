"""Turkish public holiday calendar.

Fixed civil holidays fall on the same month/day every year. The two religious
holidays (Ramazan Bayramı and Kurban Bayramı) follow the Hijri calendar and are
placed with an arithmetic approximation, so they can differ from the officially
announced dates by a day or more.
"""

import logging
from collections.abc import Callable, Collection, Iterable
from datetime import date, timedelta

from turkholidays.errors import YearOutOfRangeError
from turkholidays.models import Holiday, HolidayKind

logger = logging.getLogger(__name__)

# (month, day, name)
FIXED_HOLIDAYS: list[tuple[int, int, str]] = [
    (1, 1, "Yılbaşı"),
    (4, 23, "Ulusal Egemenlik ve Çocuk Bayramı"),
    (5, 1, "Emek ve Dayanışma Günü"),
    (5, 19, "Atatürk'ü Anma, Gençlik ve Spor Bayramı"),
    (7, 15, "Demokrasi ve Milli Birlik Günü"),
    (8, 30, "Zafer Bayramı"),
    (10, 29, "Cumhuriyet Bayramı"),
]

EID_AL_FITR_NAME = "Ramazan Bayramı"
EID_AL_ADHA_NAME = "Kurban Bayramı"

# (hijri month, hijri day, days observed)
EID_AL_FITR = (10, 1, 3)  # 1st of Shawwal
EID_AL_ADHA = (12, 10, 4)  # 10th of Dhu al-Hijjah

HIJRI_EPOCH_YEAR = 622
HIJRI_EPOCH_JDN = 1948440
HIJRI_JDN_ADJUSTMENT = -385

# Julian Day Number of date(1, 1, 1) minus one
JDN_ORDINAL_OFFSET = 1721425

# Holiday sets searched around a calendar year for dates landing inside it
LANDING_YEARS_BEFORE = 2
LANDING_YEARS_AFTER = 6


def _intdiv(numerator: int, denominator: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def _check_year(year: int) -> None:
    if not date.min.year <= year <= date.max.year:
        raise YearOutOfRangeError(
            f"Year {year} is outside the supported range {date.min.year}-{date.max.year}"
        )


def _hijri_to_gregorian(gregorian_year: int, hijri_month: int, hijri_day: int) -> date:
    """Convert a Hijri month/day in the lunar year overlapping `gregorian_year`.

    The lunar year is approximated from the Gregorian one (33 Gregorian years
    per 32 lunar years), turned into a Julian Day Number with a fixed linear
    formula and then mapped back onto the proleptic Gregorian calendar.
    """
    years_since_epoch = gregorian_year - HIJRI_EPOCH_YEAR
    hijri_year = years_since_epoch + _intdiv(years_since_epoch, 33)

    julian_day = (
        _intdiv(11 * hijri_year + 3, 30)
        + 354 * hijri_year
        + 30 * (hijri_month - 1)
        + hijri_day
        + HIJRI_EPOCH_JDN
        + HIJRI_JDN_ADJUSTMENT
    )

    ordinal = julian_day - JDN_ORDINAL_OFFSET
    if not 1 <= ordinal <= date.max.toordinal():
        raise YearOutOfRangeError(
            f"Julian day {julian_day} for year {gregorian_year} cannot be represented as a date"
        )

    result = date.fromordinal(ordinal)
    logger.debug(
        "Hijri %d-%02d-%02d (year %d) -> JDN %d -> %s",
        hijri_year,
        hijri_month,
        hijri_day,
        gregorian_year,
        julian_day,
        result,
    )
    return result


def _observance(start: date, days: int) -> list[date]:
    return [start + timedelta(days=offset) for offset in range(days)]


def get_fixed_holidays(year: int) -> list[date]:
    """Get the seven fixed-date holidays of a year."""
    _check_year(year)
    return [date(year, month, day) for month, day, _ in FIXED_HOLIDAYS]


def get_religious_holidays(year: int) -> list[date]:
    """
    Get the religious holidays for a year.

    Returns the three days of Ramazan Bayramı followed by the four days of
    Kurban Bayramı, each run starting at its converted Hijri date.
    """
    _check_year(year)
    holidays = []
    for hijri_month, hijri_day, days in (EID_AL_FITR, EID_AL_ADHA):
        start = _hijri_to_gregorian(year, hijri_month, hijri_day)
        holidays.extend(_observance(start, days))
    return holidays


def get_public_holidays(year: int | None = None) -> list[date]:
    """Get all Turkish public holidays for a year (defaults to the current year)."""
    if year is None:
        year = date.today().year
    return get_fixed_holidays(year) + get_religious_holidays(year)


def get_named_holidays(year: int | None = None) -> list[Holiday]:
    """Get public holidays with their names, in the same order as get_public_holidays."""
    if year is None:
        year = date.today().year

    names = [name for _, _, name in FIXED_HOLIDAYS]
    names += [EID_AL_FITR_NAME] * EID_AL_FITR[2] + [EID_AL_ADHA_NAME] * EID_AL_ADHA[2]
    kinds = [HolidayKind.FIXED] * len(FIXED_HOLIDAYS)
    kinds += [HolidayKind.RELIGIOUS] * (EID_AL_FITR[2] + EID_AL_ADHA[2])

    return [
        Holiday(date=day, name=name, kind=kind)
        for day, name, kind in zip(get_public_holidays(year), names, kinds, strict=True)
    ]


def get_holidays_in_year(year: int) -> list[Holiday]:
    """Get the holidays whose date falls inside a calendar year, sorted by date.

    Religious dates computed for one year usually land in an earlier calendar
    year, so the holiday sets of neighbouring years are searched as well.
    """
    _check_year(year)
    first = max(date.min.year, year - LANDING_YEARS_BEFORE)
    last = min(date.max.year, year + LANDING_YEARS_AFTER)
    source_years = [year] + [other for other in range(first, last + 1) if other != year]

    found: dict[date, Holiday] = {}
    for source_year in source_years:
        for holiday in get_named_holidays(source_year):
            if holiday.date.year == year:
                found.setdefault(holiday.date, holiday)
    return sorted(found.values(), key=lambda holiday: holiday.date)


def get_holiday_name(target_date: date) -> str | None:
    """Get the name of a Turkish holiday, or None if not a holiday."""
    for holiday in get_holidays_in_year(target_date.year):
        if holiday.date == target_date:
            return holiday.name
    return None


def is_public_holiday(target_date: date) -> bool:
    """Check if a date is a Turkish public holiday."""
    return any(holiday.date == target_date for holiday in get_holidays_in_year(target_date.year))


def is_weekend(target_date: date) -> bool:
    """Check if a date falls on Saturday or Sunday."""
    # 5 = Saturday, 6 = Sunday
    return target_date.weekday() in (5, 6)


def is_working_day(target_date: date, extra_days_off: Collection[date] = ()) -> bool:
    """
    Check if a date is a working day.

    A working day is:
    - Not a weekend (Saturday/Sunday)
    - Not a Turkish public holiday
    - Not one of the configured extra days off
    """
    if is_weekend(target_date):
        return False
    if target_date in extra_days_off:
        return False
    return not is_public_holiday(target_date)


def is_day_off(
    clock: Callable[[], date] = date.today, extra_days_off: Collection[date] = ()
) -> bool:
    """Check if today is a weekend or a public holiday in Turkey."""
    today = clock()

    if is_weekend(today):
        return True

    if today in extra_days_off:
        return True

    # Only the holiday set computed for today's year counts here
    return today in get_public_holidays(today.year)


def next_holiday(after: date) -> Holiday | None:
    """Get the first holiday strictly after a date, looking into the following year."""
    years = range(after.year, min(after.year + 1, date.max.year) + 1)
    upcoming = [
        holiday
        for year in years
        for holiday in get_holidays_in_year(year)
        if holiday.date > after
    ]
    if not upcoming:
        return None
    return min(upcoming, key=lambda holiday: holiday.date)


def to_iso_strings(dates: Iterable[date]) -> list[str]:
    """Format dates as YYYY-MM-DD strings."""
    return [day.isoformat() for day in dates]
