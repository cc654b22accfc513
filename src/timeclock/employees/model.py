from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..core.enums import EmployeeStatus
from ..sessions.model import Session


@dataclass
class Employee:
    """Domain entity: an hourly employee.

    ``active_clock_in`` is set iff the employee is currently clocked in.
    ``sessions`` is append-only, in order of completion.
    """

    employee_id: int
    first_name: str
    last_name: str
    hourly_rate: float
    middle_name: str = ""
    active_clock_in: Optional[datetime] = None
    sessions: list[Session] = field(default_factory=list)

    @property
    def full_name(self) -> str:
        parts = [self.first_name]
        if self.middle_name:
            parts.append(self.middle_name)
        parts.append(self.last_name)
        return " ".join(parts)

    @property
    def is_clocked_in(self) -> bool:
        return self.active_clock_in is not None

    @property
    def status(self) -> EmployeeStatus:
        # IDLE is never reported: an employee with no sessions is "clocked out".
        if self.is_clocked_in:
            return EmployeeStatus.CLOCKED_IN
        return EmployeeStatus.CLOCKED_OUT

    @property
    def total_wage(self) -> float:
        return sum(s.wage for s in self.sessions)
