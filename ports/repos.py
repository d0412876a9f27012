from __future__ import annotations

from typing import Iterable, List, Optional, Protocol

from models.employee import Employee


class EmployeesRepoPort(Protocol):
    def add(self, name: str, department_code: int, salary: float) -> Employee:
        ...

    def list(self) -> List[Employee]:
        ...

    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        ...

    def replace_all(self, records: Iterable[Employee]) -> None:
        ...

    def size(self) -> int:
        ...
