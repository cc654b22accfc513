"""Map the application state to a renderable view model.

No business logic lives here: everything is read from ``AppState`` and the
roster and turned into plain strings for the terminal toolkit.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Union

from ..common.datetime_utils import format_money
from ..core.constants import APP_TITLE
from ..core.enums import AddField, Mode
from ..employees.model import Employee
from ..state.keymap import HELP_TEXT
from ..state.machine import AppState
from .items import EmployeeItem, SessionItem, employee_item

FIELD_LABELS = {
    AddField.FIRST_NAME: "First name*:",
    AddField.MIDDLE_NAME: "Middle name:",
    AddField.LAST_NAME: "Last name*:",
    AddField.RATE: "Hourly rate*:",
}

FIELD_PLACEHOLDERS = {
    AddField.FIRST_NAME: "First name",
    AddField.MIDDLE_NAME: "Middle name",
    AddField.LAST_NAME: "Last name",
    AddField.RATE: "Hourly rate (e.g. 25.50)",
}


@dataclass(frozen=True)
class ListViewModel:
    title: str
    rows: tuple[EmployeeItem, ...]
    help: str
    error: Optional[str] = None
    message: str = ""

    mode = Mode.LIST


@dataclass(frozen=True)
class FormFieldView:
    field: AddField
    label: str
    placeholder: str
    value: str
    focused: bool


@dataclass(frozen=True)
class AddEmployeeViewModel:
    title: str
    fields: tuple[FormFieldView, ...]
    required_note: str
    help: str
    error: Optional[str] = None

    mode = Mode.ADD_EMPLOYEE

    @property
    def focused_field(self) -> AddField:
        return next(f.field for f in self.fields if f.focused)


@dataclass(frozen=True)
class SessionsViewModel:
    title: Optional[str]
    summary: Optional[str]
    rows: tuple[SessionItem, ...]
    list_title: str
    help: str

    mode = Mode.VIEW_SESSIONS


@dataclass(frozen=True)
class ConfirmDeleteViewModel:
    title: str
    prompt: str
    help: str

    mode = Mode.CONFIRM_DELETE


ViewModel = Union[ListViewModel, AddEmployeeViewModel, SessionsViewModel, ConfirmDeleteViewModel]


def project(state: AppState, employees: Sequence[Employee]) -> ViewModel:
    if state.mode == Mode.ADD_EMPLOYEE:
        return _project_add(state)
    if state.mode == Mode.VIEW_SESSIONS:
        return _project_sessions(state, employees)
    if state.mode == Mode.CONFIRM_DELETE:
        return _project_confirm(state, employees)
    return _project_list(state, employees)


def _project_list(state: AppState, employees: Sequence[Employee]) -> ListViewModel:
    return ListViewModel(
        title=APP_TITLE,
        rows=tuple(employee_item(e) for e in employees),
        help=HELP_TEXT[Mode.LIST],
        error=state.error,
        message=state.wage_message,
    )


def _project_add(state: AppState) -> AddEmployeeViewModel:
    fields = tuple(
        FormFieldView(
            field=f,
            label=FIELD_LABELS[f],
            placeholder=FIELD_PLACEHOLDERS[f],
            value=state.form.get(f),
            focused=f == state.focus,
        )
        for f in AddField
    )
    return AddEmployeeViewModel(
        title="Add Employee",
        fields=fields,
        required_note="* = required field",
        help=HELP_TEXT[Mode.ADD_EMPLOYEE],
        error=state.error,
    )


def _lookup(employees: Sequence[Employee], index: Optional[int]) -> Optional[Employee]:
    if index is None or not 0 <= index < len(employees):
        return None
    return employees[index]


def _project_sessions(state: AppState, employees: Sequence[Employee]) -> SessionsViewModel:
    e = _lookup(employees, state.selected_index)
    title = summary = None
    if e is not None:
        title = f"Session History: {e.full_name}"
        summary = (
            f"ID: {e.employee_id} | Rate: {format_money(e.hourly_rate)}/hr | "
            f"Total Sessions: {len(e.sessions)} | Total Wage: {format_money(e.total_wage)}"
        )
    return SessionsViewModel(
        title=title,
        summary=summary,
        rows=state.session_items,
        list_title="Session History",
        help=HELP_TEXT[Mode.VIEW_SESSIONS],
    )


def _project_confirm(state: AppState, employees: Sequence[Employee]) -> ConfirmDeleteViewModel:
    e = _lookup(employees, state.pending_delete_index)
    name = e.full_name if e is not None else ""
    return ConfirmDeleteViewModel(
        title="Confirm Delete",
        prompt=f"Delete {name or 'selected employee'}? (y/n)",
        help=HELP_TEXT[Mode.CONFIRM_DELETE],
    )
