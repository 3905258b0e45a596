"""Main entry point for turkholidays."""

import logging
import os
import sys
from collections.abc import Callable
from datetime import date

from turkholidays.config import DEFAULT_CONFIG_PATH, Config, parse_dates
from turkholidays.errors import TurkHolidaysError
from turkholidays.holidays import get_holiday_name, get_named_holidays, is_day_off, is_weekend

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "TURKHOLIDAYS_LOG_LEVEL"
USAGE = "Usage: python -m turkholidays [list [YEAR] | today | config]\n"


def configure() -> None:
    """Interactive configuration setup."""
    sys.stdout.write("Turkish Holidays Configuration\n")
    sys.stdout.write("=" * 40 + "\n")
    value = input("Extra days off (comma-separated YYYY-MM-DD): ")

    config = Config(extra_days_off=parse_dates(value))
    config.save()
    sys.stdout.write("\n✓ Configuration saved successfully!\n")
    sys.stdout.write(f"Config file: {DEFAULT_CONFIG_PATH}\n")


def list_holidays(year: int | None) -> None:
    """Print the holidays of a year, one per line."""
    for holiday in get_named_holidays(year):
        sys.stdout.write(f"{holiday.iso}  {holiday.name}\n")


def check_today(config: Config, clock: Callable[[], date] = date.today) -> bool:
    """Print whether today is a day off and return the answer."""
    today = clock()
    day_off = is_day_off(clock=lambda: today, extra_days_off=config.extra_days_off)

    if not day_off:
        sys.stdout.write(f"{today.isoformat()}: working day\n")
        return False

    if is_weekend(today):
        reason = "weekend"
    elif today in config.extra_days_off:
        reason = "extra day off"
    else:
        reason = get_holiday_name(today) or "holiday"
    sys.stdout.write(f"{today.isoformat()}: day off ({reason})\n")
    return True


def run(argv: list[str]) -> int:
    """Dispatch a command and return the exit status."""
    command = argv[0] if argv else None

    if command == "config":
        configure()
        return 0

    if command == "list":
        if len(argv) > 2:
            sys.stderr.write(USAGE)
            return 2
        try:
            year = int(argv[1]) if len(argv) == 2 else None
        except ValueError:
            sys.stderr.write(f"Invalid year: {argv[1]}\n")
            return 2
        list_holidays(year)
        return 0

    if command == "today":
        return 0 if check_today(Config.resolve()) else 1

    if command is not None:
        sys.stderr.write(USAGE)
        return 2

    from turkholidays.app import TurkHolidaysApp

    TurkHolidaysApp(config=Config.resolve()).run()
    return 0


def main() -> None:
    """Main entry point."""
    level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        sys.stderr.write(f"Error: unknown log level in {LOG_LEVEL_ENV}: {level_name}\n")
        sys.exit(2)

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        status = run(sys.argv[1:])
    except TurkHolidaysError as e:
        logger.debug("Command failed", exc_info=True)
        sys.stderr.write(f"Error: {e}\n")
        status = 1
    sys.exit(status)


if __name__ == "__main__":
    main()
