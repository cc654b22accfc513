from __future__ import annotations

from datetime import datetime

from ..core.constants import DATE_FORMAT, SECONDS_PER_HOUR


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mock easier.
    """
    return datetime.now()


def hours_between(start: datetime, end: datetime) -> float:
    """Fractional hours from start to end (not truncated)."""
    return (end - start).total_seconds() / SECONDS_PER_HOUR


def format_timestamp(value: datetime) -> str:
    """Format like ``01/02/06 3:04PM``."""
    hour = value.hour % 12 or 12
    suffix = "AM" if value.hour < 12 else "PM"
    return f"{value.strftime(DATE_FORMAT)} {hour}:{value.minute:02d}{suffix}"


def format_money(amount: float) -> str:
    return f"${amount:.2f}"
