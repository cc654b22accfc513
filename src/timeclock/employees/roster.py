from __future__ import annotations

from typing import Iterator, Optional

from ..core.constants import STARTING_EMPLOYEE_ID
from .model import Employee


class Roster:
    """In-memory EmployeeRepository: ordered employees plus the ID allocator.

    IDs behave like an auto-increment column: allocated on create, never
    reused, unaffected by removals.
    """

    def __init__(self, *, starting_id: int = STARTING_EMPLOYEE_ID):
        self._employees: list[Employee] = []
        self._next_id = int(starting_id)

    @property
    def next_id(self) -> int:
        return self._next_id

    def create(self, *, first_name: str, last_name: str, middle_name: str, hourly_rate: float) -> Employee:
        employee = Employee(
            employee_id=self._next_id,
            first_name=first_name,
            middle_name=middle_name,
            last_name=last_name,
            hourly_rate=hourly_rate,
        )
        self._next_id += 1
        self._employees.append(employee)
        return employee

    def get(self, index: Optional[int]) -> Optional[Employee]:
        if not self._in_bounds(index):
            return None
        return self._employees[index]

    def remove_at(self, index: Optional[int]) -> Optional[Employee]:
        if not self._in_bounds(index):
            return None
        return self._employees.pop(index)

    def _in_bounds(self, index: Optional[int]) -> bool:
        return index is not None and 0 <= index < len(self._employees)

    def __len__(self) -> int:
        return len(self._employees)

    def __iter__(self) -> Iterator[Employee]:
        return iter(list(self._employees))
