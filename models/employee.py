from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from models.department import Department

# Longest name one line of the employees file can carry
MAX_NAME_LENGTH = 49


class Employee(BaseModel):
    """In-memory/file record shape: one line of the employees file."""

    id: int
    name: str = Field(min_length=1, max_length=MAX_NAME_LENGTH)
    department_code: int
    salary: float

    model_config = ConfigDict(extra="ignore")

    @property
    def department(self) -> Department:
        return Department.from_code(self.department_code)

    @property
    def department_name(self) -> str:
        return self.department.display_name
