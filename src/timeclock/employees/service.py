from __future__ import annotations

import logging
from typing import Optional

from ..common.validators import check_rate, missing, parse_rate
from ..core.exceptions import ValidationError
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class RosterService:
    """Use case: manage the roster (add, remove, look up)."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    @property
    def next_id(self) -> int:
        return self._employees.next_id

    def add(self, first_name: str, last_name: str, middle_name: str, hourly_rate: Optional[str | float]) -> Employee:
        """Validate and register a new employee.

        Every missing or invalid field is reported in one ValidationError.
        """
        problems: list[str] = []
        if missing(first_name):
            problems.append("Missing first name")
        if missing(last_name):
            problems.append("Missing last name")

        if hourly_rate is None or isinstance(hourly_rate, str):
            rate, problem = parse_rate(hourly_rate)
        else:
            rate, problem = check_rate(float(hourly_rate))
        if problem:
            problems.append(problem)

        if problems:
            logger.debug("Rejected new employee: %s", "; ".join(problems))
            raise ValidationError(problems)

        employee = self._employees.create(
            first_name=first_name.strip(),
            last_name=last_name.strip(),
            middle_name=(middle_name or "").strip(),
            hourly_rate=float(rate),
        )
        logger.info("Added employee id=%s name=%r rate=%.2f", employee.employee_id, employee.full_name, employee.hourly_rate)
        return employee

    def remove_at(self, index: Optional[int]) -> None:
        removed = self._employees.remove_at(index)
        if removed is None:
            logger.debug("Ignored removal of out-of-range index %s", index)
            return
        logger.info("Removed employee id=%s", removed.employee_id)

    def get(self, index: Optional[int]) -> Optional[Employee]:
        return self._employees.get(index)

    def list_all(self) -> list[Employee]:
        return list(self._employees)

    def __len__(self) -> int:
        return len(self._employees)
