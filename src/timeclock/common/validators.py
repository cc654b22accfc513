from __future__ import annotations

import math
from typing import Optional


def missing(value: Optional[str]) -> bool:
    return not value or not value.strip()


def check_rate(rate: float) -> tuple[Optional[float], Optional[str]]:
    """Check an already-numeric hourly rate; same return shape as parse_rate."""
    if not math.isfinite(rate):
        return None, "Hourly rate must be a numeric value."
    if rate < 0:
        return None, "Hourly rate must not be negative."
    return rate, None


def parse_rate(value: Optional[str]) -> tuple[Optional[float], Optional[str]]:
    """Parse an hourly rate.

    Returns ``(rate, None)`` on success or ``(None, problem)`` where problem is
    the message to report for the field.
    """
    text = (value or "").strip()
    if not text:
        return None, "Missing hourly rate"
    try:
        rate = float(text)
    except ValueError:
        return None, "Hourly rate must be a numeric value."
    return check_rate(rate)
