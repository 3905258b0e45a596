"""Configuration management."""

import configparser
import os
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path

from turkholidays.errors import ConfigError

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "turkholidays" / "config.ini"
EXTRA_DAYS_OFF_ENV = "TURKHOLIDAYS_EXTRA_DAYS_OFF"


def parse_dates(value: str) -> frozenset[date]:
    """Parse a comma-separated list of ISO dates."""
    days = set()
    for item in value.split(","):
        item = item.strip()
        if not item:
            continue
        try:
            days.add(date.fromisoformat(item))
        except ValueError as e:
            raise ConfigError(f"Invalid date in extra days off: {item!r}") from e
    return frozenset(days)


@dataclass
class Config:
    """Extra non-working days on top of the public holidays."""

    extra_days_off: frozenset[date] = field(default_factory=frozenset)

    @classmethod
    def from_env(cls) -> "Config | None":
        """Load configuration from environment variables."""
        try:
            value = os.environ[EXTRA_DAYS_OFF_ENV]
        except KeyError:
            return None
        return cls(extra_days_off=parse_dates(value))

    @classmethod
    def load(cls, path: Path = DEFAULT_CONFIG_PATH) -> "Config | None":
        """Load configuration from file."""
        if not path.is_file():
            return None

        config = configparser.ConfigParser(interpolation=None)
        config.read(path, encoding="utf-8")
        return cls(extra_days_off=parse_dates(config.get("days_off", "extra", fallback="")))

    @classmethod
    def resolve(cls, path: Path = DEFAULT_CONFIG_PATH) -> "Config":
        """Environment first, then file, then an empty configuration."""
        return cls.from_env() or cls.load(path) or cls()

    def save(self, path: Path = DEFAULT_CONFIG_PATH) -> None:
        """Save configuration to file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        config = configparser.ConfigParser(interpolation=None)
        config["days_off"] = {
            "extra": ", ".join(day.isoformat() for day in sorted(self.extra_days_off)),
        }
        with path.open("w", encoding="utf-8") as config_file:
            config.write(config_file)
