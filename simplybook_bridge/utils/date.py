"""
Salon-local date and time helpers.
"""

from datetime import datetime, timedelta
from typing import Optional

import pytz

DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"
DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M:%S"


class SalonClock:
    """Date/time parsing and arithmetic in the salon's timezone."""

    def __init__(self, timezone: str):
        self.tz = pytz.timezone(timezone)

    def now(self) -> datetime:
        """Current time in the salon timezone."""
        return datetime.now(self.tz)

    def parse(self, value: str, fmt: str = DATETIME_FORMAT) -> Optional[datetime]:
        """
        Parse a naive salon-local timestamp.

        Args:
            value: Timestamp text, e.g. ``2025-03-01 10:00:00``
            fmt: strptime format the text must match exactly

        Returns:
            Timezone-aware datetime or None if the text does not match
        """
        if not isinstance(value, str):
            return None
        try:
            naive = datetime.strptime(value.strip(), fmt)
        except ValueError:
            return None
        return self.tz.localize(naive)

    def parse_date_time(self, date: str, time: str) -> Optional[datetime]:
        """Parse separate ``YYYY-MM-DD`` and ``HH:MM[:SS]`` parts."""
        if not isinstance(date, str) or not isinstance(time, str):
            return None
        time = time.strip()
        fmt = DATETIME_FORMAT if time.count(":") == 2 else "%Y-%m-%d %H:%M"
        return self.parse(f"{date.strip()} {time}", fmt)

    def add_minutes(self, moment: datetime, minutes: int) -> datetime:
        """Shift by elapsed minutes, keeping the offset correct across DST."""
        return self.tz.normalize(moment + timedelta(minutes=minutes))

    def hours_until(self, moment: datetime, now: Optional[datetime] = None) -> float:
        now = now or self.now()
        return (moment - now).total_seconds() / 3600.0

    @staticmethod
    def minutes_between(start: datetime, end: datetime) -> int:
        return round((end - start).total_seconds() / 60.0)

    @staticmethod
    def format(moment: datetime, fmt: str = DATETIME_FORMAT) -> str:
        return moment.strftime(fmt)
