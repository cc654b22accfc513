"""Timeclock package.

Organized by feature modules (employees, sessions, state, view) with a thin
Textual adapter on top of a plain, toolkit-independent state machine.
"""

__version__ = "0.1.0"
