"""Textual adapter for the state machine.

Key presses bound in the current mode become machine commands; all other keys
reach the focused widget (list navigation, text editing). After every event
the view model is projected, painted, and the render is acknowledged.
"""

from __future__ import annotations

import logging
from typing import Optional

from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Input, Label, ListItem, ListView, Static

from ..container import Container
from ..core.enums import AddField, Mode, Outcome
from ..state.keymap import all_keys
from ..state.machine import StateMachine
from ..view.items import ListItemLike
from ..view.projection import (
    FIELD_LABELS,
    FIELD_PLACEHOLDERS,
    AddEmployeeViewModel,
    ConfirmDeleteViewModel,
    ListViewModel,
    SessionsViewModel,
    ViewModel,
    project,
)

logger = logging.getLogger(__name__)

TITLE_STYLE = "bold"
HELP_STYLE = "color(241)"
ERROR_STYLE = "color(196)"
CONFIRM_STYLE = "bold on color(196)"

MODE_CONTAINERS = {
    Mode.LIST: "#list-mode",
    Mode.ADD_EMPLOYEE: "#add-mode",
    Mode.VIEW_SESSIONS: "#sessions-mode",
    Mode.CONFIRM_DELETE: "#confirm-mode",
}


def _input_id(field: AddField) -> str:
    return f"field-{field.value}"


def _field_of(widget: Input) -> AddField:
    return AddField(str(widget.id)[len("field-"):])


class TimeclockApp(App[None]):
    """Employee time clock."""

    CSS = """
    Screen {
        padding: 0 1;
    }

    .hidden {
        display: none;
    }

    #employees, #sessions {
        height: 1fr;
        max-height: 14;
    }

    .item-description {
        color: $text-muted;
    }

    Input {
        margin-bottom: 1;
    }
    """

    BINDINGS = [Binding(key, f"press('{key}')", show=False, priority=True) for key in all_keys()]

    def __init__(self, machine: StateMachine, **kwargs):
        super().__init__(**kwargs)
        self.machine = machine
        self._employee_rows: tuple = ()
        self._session_rows: tuple = ()

    def compose(self) -> ComposeResult:
        with Vertical(id="list-mode"):
            yield Static(id="list-title")
            yield ListView(id="employees")
            yield Static(id="list-help")
            yield Static(id="list-error")
            yield Static(id="list-message")
        with Vertical(id="add-mode", classes="hidden"):
            yield Static(id="add-title")
            for field in AddField:
                yield Static(FIELD_LABELS[field])
                yield Input(placeholder=FIELD_PLACEHOLDERS[field], id=_input_id(field))
            yield Static(id="add-required")
            yield Static(id="add-help")
            yield Static(id="add-error")
        with Vertical(id="sessions-mode", classes="hidden"):
            yield Static(id="sessions-title")
            yield Static(id="sessions-summary")
            yield Static(id="sessions-list-title")
            yield ListView(id="sessions")
            yield Static(id="sessions-help")
        with Vertical(id="confirm-mode", classes="hidden"):
            yield Static(id="confirm-title")
            yield Static(id="confirm-prompt")
            yield Static(id="confirm-help")

    async def on_mount(self) -> None:
        await self.refresh_view()

    # -- input events -------------------------------------------------------

    def check_action(self, action: str, parameters: tuple[object, ...]) -> Optional[bool]:
        if action == "press":
            return self.machine.handles(str(parameters[0]))
        return True

    async def action_press(self, key: str) -> None:
        outcome = self.machine.handle_key(key, selected=self.selected_index)
        logger.debug("key %s -> %s (mode=%s)", key, outcome.value, self.machine.mode.value)
        if outcome == Outcome.QUIT:
            self.exit()
            return
        await self.refresh_view()

    async def on_input_changed(self, event: Input.Changed) -> None:
        if not event.input.id:
            return
        self.machine.edit_field(_field_of(event.input), event.value)
        await self.refresh_view()

    async def on_list_view_highlighted(self, event: ListView.Highlighted) -> None:
        await self.refresh_view()

    async def on_key(self, event: events.Key) -> None:
        # Keys left to the widgets still count as a render pass, even when
        # they change nothing (e.g. "down" on the last row).
        focused = self.focused
        if isinstance(focused, Input) and focused.id:
            # The widget may have edited its value before Input.Changed arrives.
            self.machine.edit_field(_field_of(focused), focused.value)
        await self.refresh_view()

    @property
    def selected_index(self) -> Optional[int]:
        return self.query_one("#employees", ListView).index

    # -- rendering ----------------------------------------------------------

    async def refresh_view(self) -> None:
        vm = project(self.machine.state, self.machine.roster.list_all())
        for mode, selector in MODE_CONTAINERS.items():
            self.query_one(selector).set_class(mode != vm.mode, "hidden")

        if isinstance(vm, ListViewModel):
            await self._paint_list(vm)
        elif isinstance(vm, AddEmployeeViewModel):
            self._paint_add(vm)
        elif isinstance(vm, SessionsViewModel):
            await self._paint_sessions(vm)
        else:
            self._paint_confirm(vm)

        self.machine.acknowledge_render()

    async def _paint_list(self, vm: ListViewModel) -> None:
        self.query_one("#list-title", Static).update(Text(vm.title, style=TITLE_STYLE))
        self.query_one("#list-help", Static).update(Text(vm.help, style=HELP_STYLE))
        self.query_one("#list-error", Static).update(Text(vm.error or "", style=ERROR_STYLE))
        self.query_one("#list-message", Static).update(Text(vm.message, style=TITLE_STYLE))

        employees = self.query_one("#employees", ListView)
        if vm.rows != self._employee_rows:
            await self._replace_rows(employees, vm.rows)
            self._employee_rows = vm.rows
        employees.focus()

    def _paint_add(self, vm: AddEmployeeViewModel) -> None:
        self.query_one("#add-title", Static).update(Text(vm.title, style=TITLE_STYLE))
        self.query_one("#add-required", Static).update(vm.required_note)
        self.query_one("#add-help", Static).update(Text(vm.help, style=HELP_STYLE))
        self.query_one("#add-error", Static).update(Text(vm.error or "", style=ERROR_STYLE))

        with self.prevent(Input.Changed):
            for f in vm.fields:
                widget = self.query_one(f"#{_input_id(f.field)}", Input)
                if widget.value != f.value:
                    widget.value = f.value
                if f.focused:
                    widget.focus()

    async def _paint_sessions(self, vm: SessionsViewModel) -> None:
        self.query_one("#sessions-title", Static).update(Text(vm.title or "", style=TITLE_STYLE))
        self.query_one("#sessions-summary", Static).update(vm.summary or "")
        self.query_one("#sessions-list-title", Static).update(Text(vm.list_title, style=TITLE_STYLE))
        self.query_one("#sessions-help", Static).update(Text(vm.help, style=HELP_STYLE))

        sessions = self.query_one("#sessions", ListView)
        if vm.rows != self._session_rows:
            await self._replace_rows(sessions, vm.rows, index=0)
            self._session_rows = vm.rows
        sessions.focus()

    def _paint_confirm(self, vm: ConfirmDeleteViewModel) -> None:
        self.query_one("#confirm-title", Static).update(Text(vm.title, style=CONFIRM_STYLE))
        self.query_one("#confirm-prompt", Static).update(vm.prompt)
        self.query_one("#confirm-help", Static).update(Text(vm.help, style=HELP_STYLE))
        self.set_focus(None)

    async def _replace_rows(self, list_view: ListView, rows: tuple[ListItemLike, ...], *, index: Optional[int] = None) -> None:
        """Replace the rows of a list widget, keeping the cursor where it was unless told otherwise."""
        if index is None:
            index = list_view.index
        with self.prevent(ListView.Highlighted):
            await list_view.clear()
            await list_view.extend(
                ListItem(
                    Label(row.title),
                    Label(row.description, classes="item-description"),
                )
                for row in rows
            )
            if rows:
                list_view.index = min(index or 0, len(rows) - 1)


def create_app(container: Container) -> TimeclockApp:
    return TimeclockApp(container.machine)
