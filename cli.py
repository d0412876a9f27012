import argparse
import sys

import logging
from config.settings import get_settings
from db.file_storage import StorageError, load_employees, save_employees
from db.repos.employees_repo import EmployeesRepo
from services.menu import run_menu
from services.reporting import format_employee, format_search_result, print_employee_list
from utils.logging_setup import init_logging, op_extra
from utils.number_parsing import parse_float


logger = logging.getLogger(__name__)


def _salary_arg(value: str) -> float:
	salary = parse_float(value)
	if salary is None:
		raise argparse.ArgumentTypeError(f"invalid salary: {value!r}")
	return salary


def _load_repo(path: str):
	"""Load the data file into a fresh repo; returns (repo, load result)."""
	result = load_employees(path)
	return EmployeesRepo(result.employees), result


def cmd_menu(args):
	repo = EmployeesRepo()
	return run_menu(repo, args.file)


def cmd_list(args):
	repo, result = _load_repo(args.file)
	if not result.found:
		print("No saved file found.")
		return 0
	print_employee_list(repo.list())
	return 0


def cmd_search(args):
	repo, result = _load_repo(args.file)
	if not result.found:
		print("No saved file found.")
		return 0
	if repo.size() == 0:
		print("No employees to search!")
		return 0
	print(format_search_result(repo.find_by_id(args.id)))
	return 0


def cmd_add(args):
	repo, result = _load_repo(args.file)
	# Rewriting would drop every record after the malformed line
	if result.stopped_early:
		print(f"Malformed line {result.stopped_at_line} in {args.file}; fix it before adding.")
		return 1
	try:
		employee = repo.add(args.name, args.department, args.salary)
	except ValueError:
		print("Invalid name!")
		return 1
	try:
		save_employees(repo.list(), args.file)
	except StorageError as e:
		logger.error(str(e), extra=op_extra("add", "error", e.path))
		print("Error opening file!")
		return 1
	print("Employee added successfully!")
	print(format_employee(employee))
	return 0


def main(argv=None):
	settings = get_settings()
	init_logging(settings.log_level)
	parser = argparse.ArgumentParser(description="Employee records CLI")
	parser.add_argument("--file", default=settings.data_file, help="Path to employees file (default from settings)")
	sub = parser.add_subparsers(dest="cmd")

	p_menu = sub.add_parser("menu", help="Interactive menu (default)")
	p_menu.set_defaults(func=cmd_menu)

	p_list = sub.add_parser("list", help="Display employees stored in the file")
	p_list.set_defaults(func=cmd_list)

	p_search = sub.add_parser("search", help="Find an employee by id in the file")
	p_search.add_argument("--id", type=int, required=True, help="Employee id")
	p_search.set_defaults(func=cmd_search)

	p_add = sub.add_parser("add", help="Append an employee to the file")
	p_add.add_argument("--name", required=True)
	p_add.add_argument("--department", type=int, required=True, help="1-HR, 2-ENG, 3-SALES, 4-MKT")
	p_add.add_argument("--salary", type=_salary_arg, required=True)
	p_add.set_defaults(func=cmd_add)

	args = parser.parse_args(argv)
	func = getattr(args, "func", cmd_menu)
	try:
		return func(args)
	except StorageError as e:
		logger.error(str(e), extra=op_extra(args.cmd or "menu", "error", e.path))
		print("Error opening file!")
		return 1


if __name__ == "__main__":
	sys.exit(main())
