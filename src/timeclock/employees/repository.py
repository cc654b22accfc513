from __future__ import annotations

from typing import Iterator, Optional, Protocol

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Note (DIP): services depend on this interface, not on a concrete store.
    """

    @property
    def next_id(self) -> int:
        raise NotImplementedError

    def create(self, *, first_name: str, last_name: str, middle_name: str, hourly_rate: float) -> Employee:
        raise NotImplementedError

    def get(self, index: int) -> Optional[Employee]:
        raise NotImplementedError

    def remove_at(self, index: int) -> Optional[Employee]:
        raise NotImplementedError

    def __len__(self) -> int:
        raise NotImplementedError

    def __iter__(self) -> Iterator[Employee]:
        raise NotImplementedError
