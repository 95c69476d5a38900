"""Calendar date helpers for YYYY-MM-DD strings."""
from datetime import date, datetime, timedelta, timezone
from typing import List


def parse_date(value: str) -> date:
    """Parse a YYYY-MM-DD string; raises ValueError when malformed."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def add_days(value: str, days: int) -> str:
    """Shift a YYYY-MM-DD date by a number of days."""
    return (parse_date(value) + timedelta(days=days)).isoformat()


def date_window(center: str, radius: int) -> List[str]:
    """Dates from center - radius to center + radius, inclusive."""
    return [add_days(center, offset) for offset in range(-radius, radius + 1)]


def today_utc() -> str:
    """Today's date in UTC."""
    return datetime.now(timezone.utc).date().isoformat()
