from __future__ import annotations

from enum import Enum


class EmployeeStatus(str, Enum):
    """Status label shown next to an employee's name."""

    # Defined but never produced, see EmployeeStatus usage in employees.model.
    IDLE = "idle"
    CLOCKED_IN = "clocked in"
    CLOCKED_OUT = "clocked out"


class Mode(str, Enum):
    """Exclusive top-level UI state."""

    LIST = "list"
    ADD_EMPLOYEE = "add_employee"
    VIEW_SESSIONS = "view_sessions"
    CONFIRM_DELETE = "confirm_delete"


class AddField(str, Enum):
    """Field in focus while adding an employee, in navigation order."""

    FIRST_NAME = "first_name"
    MIDDLE_NAME = "middle_name"
    LAST_NAME = "last_name"
    RATE = "rate"

    def next(self) -> "AddField | None":
        order = list(AddField)
        idx = order.index(self)
        return order[idx + 1] if idx + 1 < len(order) else None

    def previous(self) -> "AddField | None":
        order = list(AddField)
        idx = order.index(self)
        return order[idx - 1] if idx > 0 else None


class Command(str, Enum):
    """Logical commands a key press can map to."""

    QUIT = "quit"
    ADD = "add"
    DELETE = "delete"
    CLOCK_IN = "clock_in"
    CLOCK_OUT = "clock_out"
    VIEW_SESSIONS = "view_sessions"
    BACK = "back"
    CONFIRM = "confirm"
    DECLINE = "decline"
    ADVANCE = "advance"
    RETREAT = "retreat"
    CANCEL = "cancel"


class Outcome(str, Enum):
    """What happened to an input event."""

    HANDLED = "handled"
    DELEGATED = "delegated"
    QUIT = "quit"
