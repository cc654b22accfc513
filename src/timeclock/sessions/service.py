from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import now_local
from ..core.exceptions import AlreadyClockedInError, NotClockedInError, ValidationError
from ..employees.model import Employee
from .calculator.base import WageCalculator
from .calculator.standard_calculator import StandardWageCalculator
from .model import Session

logger = logging.getLogger(__name__)


class SessionService:
    """Use case: clock employees in and out, freezing the wage per session."""

    def __init__(self, *, calculator: Optional[WageCalculator] = None):
        self._calculator = calculator or StandardWageCalculator()

    def clock_in(self, employee: Employee, *, now: Optional[datetime] = None) -> None:
        if employee.active_clock_in is not None:
            raise AlreadyClockedInError()

        employee.active_clock_in = now or now_local()
        logger.info("Employee id=%s clocked in at %s", employee.employee_id, employee.active_clock_in.isoformat())

    def clock_out(self, employee: Employee, *, now: Optional[datetime] = None) -> Session:
        started = employee.active_clock_in
        if started is None:
            raise NotClockedInError()

        now = now or now_local()
        if now < started:
            raise ValidationError("Clock-out time is before clock-in time.")

        session = Session(
            clock_in_at=started,
            clock_out_at=now,
            wage=self._calculator.wage(clock_in_at=started, clock_out_at=now, hourly_rate=employee.hourly_rate),
        )
        employee.sessions.append(session)
        employee.active_clock_in = None

        logger.info(
            "Employee id=%s clocked out: %.2f hours, wage %.2f",
            employee.employee_id,
            session.hours,
            session.wage,
        )
        return session
