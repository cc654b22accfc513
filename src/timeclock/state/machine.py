from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Mapping, Optional

from ..common.datetime_utils import format_money, now_local
from ..core.enums import AddField, Command, Mode, Outcome
from ..core.exceptions import DomainError, NoSelectionError
from ..employees.model import Employee
from ..employees.service import RosterService
from ..sessions.service import SessionService
from ..view.items import SessionItem, session_items
from .keymap import KEYMAP

logger = logging.getLogger(__name__)


@dataclass
class AddEmployeeForm:
    """In-progress values of the add-employee form."""

    first_name: str = ""
    middle_name: str = ""
    last_name: str = ""
    rate: str = ""

    def get(self, which: AddField) -> str:
        return getattr(self, which.value)

    def set(self, which: AddField, value: str) -> None:
        setattr(self, which.value, value)


@dataclass
class AppState:
    """The single authoritative application state.

    Transient fields belong to one mode and are reset when leaving it:
    ``focus``/``form`` (ADD_EMPLOYEE), ``selected_index``/``session_items``
    (VIEW_SESSIONS), ``pending_delete_index`` (CONFIRM_DELETE).
    """

    mode: Mode = Mode.LIST
    focus: AddField = AddField.FIRST_NAME
    form: AddEmployeeForm = field(default_factory=AddEmployeeForm)
    selected_index: Optional[int] = None
    session_items: tuple[SessionItem, ...] = ()
    pending_delete_index: Optional[int] = None
    error: Optional[str] = None
    wage_message: str = ""


Handler = Callable[[Optional[int]], Optional[Outcome]]


class StateMachine:
    """Mode state machine: routes input events by mode and applies rules.

    Input events are processed synchronously, one at a time. After the
    terminal adapter renders a state it must call ``acknowledge_render`` so
    the error line is shown exactly once.
    """

    def __init__(
        self,
        roster: RosterService,
        sessions: SessionService,
        *,
        clock: Callable[[], datetime] = now_local,
        keymap: Mapping[Mode, Mapping[str, Command]] = KEYMAP,
    ):
        self.roster = roster
        self.sessions = sessions
        self.state = AppState()
        self._clock = clock
        self._keymap = keymap
        self._handlers: dict[tuple[Mode, Command], Handler] = {
            (Mode.LIST, Command.QUIT): self._quit,
            (Mode.LIST, Command.ADD): self._start_add,
            (Mode.LIST, Command.DELETE): self._request_delete,
            (Mode.LIST, Command.CLOCK_IN): self._clock_in,
            (Mode.LIST, Command.CLOCK_OUT): self._clock_out,
            (Mode.LIST, Command.VIEW_SESSIONS): self._view_sessions,
            (Mode.VIEW_SESSIONS, Command.BACK): self._back,
            (Mode.CONFIRM_DELETE, Command.CONFIRM): self._confirm_delete,
            (Mode.CONFIRM_DELETE, Command.DECLINE): self._decline_delete,
            (Mode.ADD_EMPLOYEE, Command.ADVANCE): self._advance,
            (Mode.ADD_EMPLOYEE, Command.RETREAT): self._retreat,
            (Mode.ADD_EMPLOYEE, Command.CANCEL): self._cancel_add,
        }

    @property
    def mode(self) -> Mode:
        return self.state.mode

    # -- input events -----------------------------------------------------

    def command_for(self, key: str) -> Optional[Command]:
        return self._keymap.get(self.state.mode, {}).get(key)

    def handles(self, key: str) -> bool:
        return self.command_for(key) is not None

    def handle_key(self, key: str, *, selected: Optional[int] = None) -> Outcome:
        """Process a key press; unbound keys are left to the active widget."""
        command = self.command_for(key)
        if command is None:
            return Outcome.DELEGATED
        return self.dispatch(command, selected=selected)

    def dispatch(self, command: Command, *, selected: Optional[int] = None) -> Outcome:
        handler = self._handlers.get((self.state.mode, command))
        if handler is None:
            logger.debug("Command %s ignored in mode %s", command.value, self.state.mode.value)
            return Outcome.DELEGATED

        try:
            outcome = handler(selected)
        except DomainError as e:
            logger.debug("Command %s rejected: %s", command.value, e)
            self.state.error = str(e)
            return Outcome.HANDLED
        return outcome or Outcome.HANDLED

    def edit_field(self, which: AddField, value: str) -> None:
        """Text typed into a form field by the toolkit's input widget."""
        if self.state.mode != Mode.ADD_EMPLOYEE:
            return
        self.state.form.set(which, value)

    def acknowledge_render(self) -> None:
        """The current state has been rendered: consume the error line."""
        self.state.error = None

    # -- helpers ------------------------------------------------------------

    def selected_employee(self, selected: Optional[int]) -> tuple[int, Employee]:
        employee = self.roster.get(selected)
        if employee is None or selected is None:
            raise NoSelectionError()
        return selected, employee

    def _return_to_list(self) -> None:
        s = self.state
        s.mode = Mode.LIST
        s.focus = AddField.FIRST_NAME
        s.form = AddEmployeeForm()
        s.selected_index = None
        s.session_items = ()
        s.pending_delete_index = None

    # -- LIST ---------------------------------------------------------------

    def _quit(self, selected: Optional[int]) -> Outcome:
        return Outcome.QUIT

    def _start_add(self, selected: Optional[int]) -> None:
        self.state.wage_message = ""
        self.state.form = AddEmployeeForm()
        self.state.focus = AddField.FIRST_NAME
        self.state.mode = Mode.ADD_EMPLOYEE

    def _request_delete(self, selected: Optional[int]) -> None:
        idx, _ = self.selected_employee(selected)
        self.state.pending_delete_index = idx
        self.state.mode = Mode.CONFIRM_DELETE

    def _clock_in(self, selected: Optional[int]) -> None:
        self.state.wage_message = ""
        _, employee = self.selected_employee(selected)
        self.sessions.clock_in(employee, now=self._clock())

    def _clock_out(self, selected: Optional[int]) -> None:
        _, employee = self.selected_employee(selected)
        session = self.sessions.clock_out(employee, now=self._clock())
        self.state.wage_message = f"{employee.full_name} clocked out - Session wage: {format_money(session.wage)}"

    def _view_sessions(self, selected: Optional[int]) -> None:
        idx, employee = self.selected_employee(selected)
        self.state.selected_index = idx
        self.state.session_items = session_items(employee.sessions)
        self.state.mode = Mode.VIEW_SESSIONS

    # -- VIEW_SESSIONS ------------------------------------------------------

    def _back(self, selected: Optional[int]) -> None:
        self._return_to_list()

    # -- CONFIRM_DELETE -----------------------------------------------------

    def _confirm_delete(self, selected: Optional[int]) -> None:
        self.roster.remove_at(self.state.pending_delete_index)
        self.state.wage_message = ""
        self._return_to_list()

    def _decline_delete(self, selected: Optional[int]) -> None:
        self._return_to_list()

    # -- ADD_EMPLOYEE -------------------------------------------------------

    def _advance(self, selected: Optional[int]) -> None:
        nxt = self.state.focus.next()
        if nxt is not None:
            self.state.focus = nxt
            return

        form = self.state.form
        self.roster.add(form.first_name, form.last_name, form.middle_name, form.rate)
        self.state.error = None
        self._return_to_list()

    def _retreat(self, selected: Optional[int]) -> None:
        prev = self.state.focus.previous()
        if prev is not None:
            self.state.focus = prev

    def _cancel_add(self, selected: Optional[int]) -> None:
        self._return_to_list()
