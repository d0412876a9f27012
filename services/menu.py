"""Interactive console menu over a single employees repo."""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional

from db.file_storage import StorageError, load_employees, save_employees
from ports.repos import EmployeesRepoPort
from services.reporting import format_search_result, print_employee_list
from utils.logging_setup import op_extra
from utils.number_parsing import parse_float, parse_int

logger = logging.getLogger(__name__)

EXIT_CHOICE = 6

MENU_LINES = [
    "",
    "====== Employee Management System ======",
    "1. Add Employee",
    "2. Display Employees",
    "3. Search Employee",
    "4. Save to File",
    "5. Load from File",
    "6. Exit",
]

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def build_actions(
    repo: EmployeesRepoPort,
    data_file: str,
    input_fn: InputFn,
    output_fn: OutputFn,
) -> Dict[int, Callable[[], None]]:
    """Map menu choice codes to handlers closed over the shared repo."""

    def add_employee() -> None:
        name = input_fn("Enter name: ").strip()
        if not name:
            output_fn("Invalid name!")
            return
        department_code = parse_int(input_fn("Enter department (1-HR, 2-ENG, 3-SALES, 4-MKT): "))
        if department_code is None:
            output_fn("Invalid number!")
            return
        salary = parse_float(input_fn("Enter salary: "))
        if salary is None:
            output_fn("Invalid number!")
            return
        try:
            repo.add(name, department_code, salary)
        except MemoryError:
            logger.error("store could not grow", extra=op_extra("add", "error"))
            output_fn("Memory allocation failed!")
            return
        output_fn("Employee added successfully!")
        output_fn("")

    def display_employees() -> None:
        print_employee_list(repo.list(), output_fn)

    def search_employee() -> None:
        if repo.size() == 0:
            output_fn("No employees to search!")
            return
        employee_id = parse_int(input_fn("Enter Employee ID to search: "))
        if employee_id is None:
            output_fn("Invalid number!")
            return
        output_fn(format_search_result(repo.find_by_id(employee_id)))

    def save_to_file() -> None:
        try:
            save_employees(repo.list(), data_file)
        except StorageError:
            output_fn("Error opening file!")
            return
        output_fn(f"Data saved to {data_file}")
        output_fn("")

    def load_from_file() -> None:
        try:
            result = load_employees(data_file)
        except StorageError:
            output_fn("Error opening file!")
            return
        if not result.found:
            output_fn("No saved file found.")
            return
        repo.replace_all(result.employees)
        output_fn(f"Data loaded from {data_file}")
        output_fn("")

    return {
        1: add_employee,
        2: display_employees,
        3: search_employee,
        4: save_to_file,
        5: load_from_file,
    }


def run_menu(
    repo: EmployeesRepoPort,
    data_file: str,
    input_fn: Optional[InputFn] = None,
    output_fn: Optional[OutputFn] = None,
) -> int:
    """Run the menu loop until Exit (or end of input). Always returns 0."""
    input_fn = input_fn or input
    output_fn = output_fn or print
    actions = build_actions(repo, data_file, input_fn, output_fn)
    while True:
        for line in MENU_LINES:
            output_fn(line)
        try:
            choice = parse_int(input_fn("Enter your choice: "))
            if choice == EXIT_CHOICE:
                break
            action = actions.get(choice) if choice is not None else None
            if action is None:
                output_fn("Invalid choice!")
                continue
            action()
        except EOFError:
            break
    output_fn("Exiting... Goodbye!")
    return 0
