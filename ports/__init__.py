from .repos import EmployeesRepoPort

__all__ = [
    "EmployeesRepoPort",
]
