from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..common.datetime_utils import hours_between


@dataclass(frozen=True)
class Session:
    """Domain entity: one completed clock-in/clock-out interval.

    Note: wage is frozen at clock-out with the rate in effect at that time, so
    later rate changes never alter it.
    """

    clock_in_at: datetime
    clock_out_at: datetime
    wage: float

    @property
    def hours(self) -> float:
        return hours_between(self.clock_in_at, self.clock_out_at)
