from __future__ import annotations

from datetime import datetime

from ...common.datetime_utils import hours_between
from .base import WageCalculator


class StandardWageCalculator(WageCalculator):
    """Standard rule: fractional hours worked times the hourly rate."""

    def wage(self, *, clock_in_at: datetime, clock_out_at: datetime, hourly_rate: float) -> float:
        return hours_between(clock_in_at, clock_out_at) * hourly_rate
