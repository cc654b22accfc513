"""Example: drive the state machine without the terminal UI.

Goal: show that the Textual app is a thin adapter; the rules live in the
services and the state machine.
"""

from datetime import datetime, timedelta

from timeclock.container import build_container
from timeclock.core.enums import AddField
from timeclock.view.projection import project


def main():
    now = datetime(2025, 1, 1, 9, 0)
    container = build_container(clock=lambda: now)
    machine = container.machine

    machine.handle_key("a")
    machine.edit_field(AddField.FIRST_NAME, "Ana")
    machine.edit_field(AddField.LAST_NAME, "Lee")
    machine.edit_field(AddField.RATE, "20.00")
    for _ in AddField:
        machine.handle_key("enter")

    machine.handle_key("i", selected=0)
    now += timedelta(hours=8)
    machine.handle_key("o", selected=0)

    vm = project(machine.state, container.roster_service.list_all())
    for row in vm.rows:
        print(row.title)
        print(row.description)
    print(vm.message)


if __name__ == "__main__":
    main()
