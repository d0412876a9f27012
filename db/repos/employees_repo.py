from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional

from models.employee import MAX_NAME_LENGTH, Employee
from utils.logging_setup import op_extra

logger = logging.getLogger(__name__)


class EmployeesRepo:
    """Ordered in-memory employee store for the current run."""

    def __init__(self, records: Optional[Iterable[Employee]] = None):
        self._records: List[Employee] = list(records or [])

    def add(self, name: str, department_code: int, salary: float) -> Employee:
        """Append a new employee with id = size() + 1.

        Names are stripped and cut to MAX_NAME_LENGTH so every stored record
        fits one line of the employees file; an empty name raises ValueError.
        Department code and salary are taken as given.
        """
        name = (name or "").strip()[:MAX_NAME_LENGTH]
        if not name:
            raise ValueError("Employee name must not be empty")
        employee = Employee(
            id=self.size() + 1,
            name=name,
            department_code=department_code,
            salary=salary,
        )
        self._records.append(employee)
        logger.debug("employee added", extra=op_extra("add", "ok", count=self.size()))
        return employee

    def list(self) -> List[Employee]:
        """All records in insertion order (empty list when none)."""
        return list(self._records)

    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        for employee in self._records:
            if employee.id == employee_id:
                return employee
        return None

    def replace_all(self, records: Iterable[Employee]) -> None:
        """Discard current contents and take the given records as-is (no renumbering)."""
        self._records = list(records)
        logger.debug("store replaced", extra=op_extra("replace_all", "ok", count=self.size()))

    def size(self) -> int:
        return len(self._records)

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[Employee]:
        return iter(list(self._records))
