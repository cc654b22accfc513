"""Key bindings per mode.

Keys use the terminal toolkit's key names. A key missing from a mode's table
belongs to that mode's active widget.
"""

from __future__ import annotations

from typing import Mapping

from ..core.enums import Command, Mode

KEYMAP: Mapping[Mode, Mapping[str, Command]] = {
    Mode.LIST: {
        "ctrl+c": Command.QUIT,
        "q": Command.QUIT,
        "a": Command.ADD,
        "d": Command.DELETE,
        "i": Command.CLOCK_IN,
        "o": Command.CLOCK_OUT,
        "v": Command.VIEW_SESSIONS,
    },
    Mode.VIEW_SESSIONS: {
        "escape": Command.BACK,
        "q": Command.BACK,
    },
    Mode.CONFIRM_DELETE: {
        "y": Command.CONFIRM,
        "enter": Command.CONFIRM,
        "n": Command.DECLINE,
        "escape": Command.DECLINE,
    },
    Mode.ADD_EMPLOYEE: {
        "escape": Command.CANCEL,
        "enter": Command.ADVANCE,
        "tab": Command.ADVANCE,
        "shift+tab": Command.RETREAT,
    },
}

HELP_TEXT: Mapping[Mode, str] = {
    Mode.LIST: "[a] add  [d] delete  [i] clock in  [o] clock out  [v] view sessions  [q] quit",
    Mode.ADD_EMPLOYEE: "[enter/tab] next [shift+tab] previous [esc] cancel",
    Mode.VIEW_SESSIONS: "[esc/q] back",
    Mode.CONFIRM_DELETE: "[y/enter] yes  [n/esc] no",
}


def all_keys() -> list[str]:
    """Every key bound in any mode, in first-seen order."""
    seen: dict[str, None] = {}
    for bindings in KEYMAP.values():
        for key in bindings:
            seen.setdefault(key, None)
    return list(seen)
