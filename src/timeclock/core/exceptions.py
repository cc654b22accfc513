from __future__ import annotations

from typing import Iterable, Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules.

    ``problems`` lists every violated field; ``str(error)`` joins them with
    newlines so the whole list can be shown on the error line.
    """

    def __init__(self, problems: Iterable[str] | str, *args: object):
        if isinstance(problems, str):
            problems = [problems]
        self.problems: list[str] = list(problems)
        super().__init__("\n".join(self.problems), *args)


class AlreadyClockedInError(DomainError):
    """Raised when clocking in an employee that is already clocked in."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or "Employee is already clocked in.")


class NotClockedInError(DomainError):
    """Raised when clocking out an employee that never clocked in."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or "Employee is not clocked in yet.")


class NoSelectionError(DomainError):
    """Raised when an action needs a selected employee and there is none."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or "No employee selected.")
