from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence

from ..common.datetime_utils import format_money, format_timestamp
from ..employees.model import Employee
from ..sessions.model import Session


class ListItemLike(Protocol):
    """What a list row must offer to the list widget."""

    @property
    def title(self) -> str: ...

    @property
    def description(self) -> str: ...

    @property
    def filter_value(self) -> str: ...


@dataclass(frozen=True)
class EmployeeItem:
    """Read-model row for the employee list."""

    employee_id: int
    title: str
    description: str

    @property
    def filter_value(self) -> str:
        return self.title


@dataclass(frozen=True)
class SessionItem:
    """Read-model row for the session history list."""

    number: int
    session: Session

    @property
    def title(self) -> str:
        return (
            f"Session #{self.number}: "
            f"{format_timestamp(self.session.clock_in_at)} - {format_timestamp(self.session.clock_out_at)}"
        )

    @property
    def description(self) -> str:
        return f"Duration: {self.session.hours:.2f} hours | Wage: {format_money(self.session.wage)}"

    @property
    def filter_value(self) -> str:
        return self.title


def employee_item(e: Employee) -> EmployeeItem:
    return EmployeeItem(
        employee_id=e.employee_id,
        title=f"{e.full_name} ({e.status.value})",
        description=f"ID: {e.employee_id} | Rate: {format_money(e.hourly_rate)}/hr",
    )


def session_items(sessions: Sequence[Session]) -> tuple[SessionItem, ...]:
    """Most recent first, numbered from 1 in chronological order."""
    total = len(sessions)
    return tuple(SessionItem(number=total - i, session=s) for i, s in enumerate(reversed(sessions)))
