from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime


class WageCalculator(ABC):
    """Calculator interface (Strategy Pattern for wages)."""

    @abstractmethod
    def wage(self, *, clock_in_at: datetime, clock_out_at: datetime, hourly_rate: float) -> float:
        raise NotImplementedError
