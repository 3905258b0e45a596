"""Custom exceptions."""


class TurkHolidaysError(Exception):
    """Base exception for turkholidays."""


class YearOutOfRangeError(TurkHolidaysError, OverflowError):
    """Raised when a year or a converted date falls outside the supported range."""


class ConfigError(TurkHolidaysError):
    """Raised when configuration values cannot be parsed."""
