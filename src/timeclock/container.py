from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from .common.datetime_utils import now_local
from .core.constants import STARTING_EMPLOYEE_ID
from .employees.roster import Roster
from .employees.service import RosterService
from .sessions.calculator.base import WageCalculator
from .sessions.calculator.standard_calculator import StandardWageCalculator
from .sessions.service import SessionService
from .state.machine import StateMachine


@dataclass(frozen=True)
class Container:
    employees_repo: Roster

    roster_service: RosterService
    session_service: SessionService

    machine: StateMachine


def build_container(
    *,
    clock: Callable[[], datetime] = now_local,
    calculator: Optional[WageCalculator] = None,
    starting_id: int = STARTING_EMPLOYEE_ID,
) -> Container:
    employees_repo = Roster(starting_id=starting_id)

    roster_service = RosterService(employees_repo)
    session_service = SessionService(calculator=calculator or StandardWageCalculator())

    machine = StateMachine(roster_service, session_service, clock=clock)

    return Container(
        employees_repo=employees_repo,
        roster_service=roster_service,
        session_service=session_service,
        machine=machine,
    )
