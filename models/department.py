from __future__ import annotations

from enum import IntEnum


class Department(IntEnum):
    """Fixed organizational units; UNKNOWN stands in for any out-of-range code."""

    UNKNOWN = 0
    HR = 1
    ENGINEERING = 2
    SALES = 3
    MARKETING = 4

    @classmethod
    def from_code(cls, code: int) -> "Department":
        try:
            return cls(code)
        except ValueError:
            return cls.UNKNOWN

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    Department.UNKNOWN: "Unknown",
    Department.HR: "HR",
    Department.ENGINEERING: "Engineering",
    Department.SALES: "Sales",
    Department.MARKETING: "Marketing",
}


def department_name(code: int) -> str:
    """Display name for a raw department code ("Unknown" outside 1-4)."""
    return Department.from_code(code).display_name
