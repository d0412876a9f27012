from .department import Department, department_name
from .employee import Employee

__all__ = [
    "Department",
    "department_name",
    "Employee",
]
