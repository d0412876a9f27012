"""
Flat-file storage for employee records.

One record per line as ``id,name,department_code,salary`` with the salary
rendered to two decimals. There is no escaping: a name containing a comma or a
newline corrupts its line and stops the next load at that point.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Union

from models.employee import MAX_NAME_LENGTH, Employee
from utils.logging_setup import op_extra
from utils.number_parsing import parse_float, parse_int

logger = logging.getLogger(__name__)


# Canonical field order for one line of the file.
FIELDS: List[str] = [
    "id",
    "name",
    "department_code",
    "salary",
]

ENCODING = "utf-8"


class StorageError(RuntimeError):
    """Raised when the employees file cannot be opened, read or written."""

    def __init__(self, message: str, path: Union[str, Path]):
        super().__init__(f"{message}: {path}")
        self.path = str(path)


@dataclass
class LoadResult:
    employees: List[Employee] = field(default_factory=list)
    found: bool = True
    # 1-based line where parsing stopped; None when the whole file parsed
    stopped_at_line: Optional[int] = None

    @property
    def stopped_early(self) -> bool:
        return self.stopped_at_line is not None


def format_employee_line(employee: Employee) -> str:
    return f"{employee.id},{employee.name},{employee.department_code},{employee.salary:.2f}"


def parse_employee_line(line: str) -> Optional[Employee]:
    """Parse one ``id,name,department_code,salary`` line; None if malformed."""
    parts = line.rstrip("\r\n").split(",")
    if len(parts) != len(FIELDS):
        return None
    raw_id, name, raw_dept, raw_salary = parts
    if not name or len(name) > MAX_NAME_LENGTH:
        return None
    employee_id = parse_int(raw_id)
    department_code = parse_int(raw_dept)
    salary = parse_float(raw_salary)
    if employee_id is None or department_code is None or salary is None:
        return None
    return Employee(id=employee_id, name=name, department_code=department_code, salary=salary)


def save_employees(records: Iterable[Employee], path: Union[str, Path]) -> int:
    """Write all records to ``path``, replacing its contents. Returns records written."""
    lines = [format_employee_line(e) + "\n" for e in records]
    try:
        with open(path, "w", encoding=ENCODING) as f:
            f.write("".join(lines))
    except OSError as exc:
        logger.error("save failed", extra=op_extra("save", "error", path))
        raise StorageError("Error opening file", path) from exc
    logger.info("employees saved", extra=op_extra("save", "ok", path, len(lines)))
    return len(lines)


def load_employees(path: Union[str, Path]) -> LoadResult:
    """Read records from ``path``; stops silently at the first malformed line.

    A line that is not valid UTF-8 counts as malformed. A missing file is
    reported through ``LoadResult.found`` rather than raised.
    """
    p = Path(path)
    if not p.exists():
        logger.info("no saved file", extra=op_extra("load", "missing", p))
        return LoadResult(found=False)
    result = LoadResult()
    try:
        with p.open("rb") as f:
            for lineno, raw in enumerate(f, start=1):
                try:
                    line = raw.decode(ENCODING)
                except UnicodeDecodeError:
                    result.stopped_at_line = lineno
                    break
                if not line.strip():
                    continue
                employee = parse_employee_line(line)
                if employee is None:
                    result.stopped_at_line = lineno
                    break
                result.employees.append(employee)
    except OSError as exc:
        logger.error("load failed", extra=op_extra("load", "error", p))
        raise StorageError("Error reading file", p) from exc
    if result.stopped_early:
        logger.warning(
            "load stopped at malformed line %s", result.stopped_at_line,
            extra=op_extra("load", "truncated", p, len(result.employees)),
        )
    else:
        logger.info("employees loaded", extra=op_extra("load", "ok", p, len(result.employees)))
    return result
