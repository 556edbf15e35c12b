from __future__ import annotations

from typing import Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    def list_all(self, *, active_only: bool = True) -> Sequence[Employee]:
        raise NotImplementedError
