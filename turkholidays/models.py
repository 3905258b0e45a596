"""Data models for holidays and calendar days."""

from dataclasses import dataclass
from datetime import date
from enum import Enum


class HolidayKind(str, Enum):
    """Kind of public holiday."""

    FIXED = "fixed"
    RELIGIOUS = "religious"


class DayType(str, Enum):
    """Type of day."""

    WORKING_DAY = "working_day"
    WEEKEND = "weekend"
    HOLIDAY = "holiday"
    EXTRA_DAY_OFF = "extra_day_off"


@dataclass(frozen=True)
class Holiday:
    """A single public holiday date."""

    date: date
    name: str
    kind: HolidayKind

    @property
    def iso(self) -> str:
        """Holiday date as a YYYY-MM-DD string."""
        return self.date.isoformat()


@dataclass
class DayRecord:
    """Record for a single calendar day."""

    date: date
    day_type: DayType
    holiday_name: str = ""

    @property
    def is_day_off(self) -> bool:
        """Whether no work is expected on this day."""
        return self.day_type != DayType.WORKING_DAY
