from __future__ import annotations

from typing import Callable, List, Optional, Sequence

from models.employee import Employee


def format_employee(employee: Employee) -> str:
    return (
        f"ID: {employee.id} | Name: {employee.name} | "
        f"Dept: {employee.department_name} | Salary: {employee.salary:.2f}"
    )


def format_employee_list(employees: Sequence[Employee]) -> List[str]:
    """Lines of the employee list block, or the empty-store message."""
    if not employees:
        return ["No employees found!"]
    lines = ["", "--- Employee List ---"]
    lines.extend(format_employee(e) for e in employees)
    lines.append("-" * 22)
    lines.append("")
    return lines


def format_search_result(employee: Optional[Employee]) -> str:
    if employee is None:
        return "Employee not found!"
    return f"Found: {employee.name} from {employee.department_name} with salary {employee.salary:.2f}"


def print_employee_list(employees: Sequence[Employee], output_fn: Callable[[str], None] = print) -> None:
    for line in format_employee_list(employees):
        output_fn(line)
