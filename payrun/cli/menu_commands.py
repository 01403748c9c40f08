"""Interactive numbered menu.

A prompt-driven front end over the same SDK calls the employees and
payroll command groups use. An error in one action is reported and the
menu is shown again.
"""

from pathlib import Path

import click

from payrun.sdk import (
    DEFAULT_EXPORT_FILENAME,
    EmployeeDirectory,
    PayrollCalculator,
    PayrunError,
    parse_employee_id,
    write_payroll_csv,
)

from .context import make_calculator, open_directory
from .employees_commands import format_employee
from .payroll_commands import format_line_text

MENU_OPTIONS = [
    ("1", "Add employee"),
    ("2", "Show employee by id"),
    ("3", "List employees"),
    ("4", "Edit employee"),
    ("5", "Delete employee"),
    ("6", "Show monthly payroll"),
    ("7", "Export payroll to CSV"),
    ("8", "Exit"),
]


def _ask(label: str) -> str:
    return click.prompt(label, default="", show_default=False).strip()


def _ask_id(label: str = "Employee id") -> int:
    return parse_employee_id(_ask(label))


def add_employee(directory: EmployeeDirectory) -> None:
    name = _ask("Name")
    department = _ask("Department")
    salary = _ask("Base salary")
    employee = directory.add(name, department, salary)
    click.echo(f"Employee added with Id {employee.id}.")


def show_employee(directory: EmployeeDirectory) -> None:
    employee = directory.get(_ask_id())
    click.echo(format_employee(employee))


def list_employees(directory: EmployeeDirectory) -> None:
    roster = directory.list()
    if not roster:
        click.echo("No employees registered.")
        return
    for e in roster:
        click.echo(format_employee(e))


def edit_employee(directory: EmployeeDirectory) -> None:
    current = directory.get(_ask_id("Id to edit"))
    name = _ask(f"Name ({current.name})")
    department = _ask(f"Department ({current.department})")
    salary = _ask(f"Salary ({current.base_salary})")
    directory.update(current.id, name=name, department=department, base_salary=salary)
    click.echo("Employee updated.")


def delete_employee(directory: EmployeeDirectory) -> None:
    current = directory.get(_ask_id("Id to delete"))
    if click.confirm(f"Delete '{current.name}'?", default=False):
        directory.delete(current.id)
        click.echo("Employee deleted.")
    else:
        click.echo("Cancelled.")


def show_payroll(directory: EmployeeDirectory, calculator: PayrollCalculator) -> None:
    run = calculator.generate_payroll_run(directory.list())
    if run.is_empty:
        click.echo("No employees to run payroll for.")
        return
    click.echo(format_line_text(run))


def export_payroll(directory: EmployeeDirectory, calculator: PayrollCalculator) -> None:
    run = calculator.generate_payroll_run(directory.list())
    if run.is_empty:
        click.echo("No employees to export.")
        return
    path = write_payroll_csv(run, Path(DEFAULT_EXPORT_FILENAME))
    click.echo(f"Exported {len(run)} line(s) to: {path}")


@click.command("menu")
@click.pass_context
def menu(ctx):
    """Interactive menu for managing employees and payroll."""
    directory = open_directory(ctx)
    calculator = make_calculator(ctx)

    actions = {
        "1": lambda: add_employee(directory),
        "2": lambda: show_employee(directory),
        "3": lambda: list_employees(directory),
        "4": lambda: edit_employee(directory),
        "5": lambda: delete_employee(directory),
        "6": lambda: show_payroll(directory, calculator),
        "7": lambda: export_payroll(directory, calculator),
    }

    try:
        while True:
            click.echo("\n=== Payroll ===")
            for key, label in MENU_OPTIONS:
                click.echo(f"{key}. {label}")
            choice = _ask("Choose an option")

            if choice == "8":
                break

            action = actions.get(choice)
            if action is None:
                click.echo("Invalid option.")
                continue

            try:
                action()
            except PayrunError as e:
                click.echo(click.style(f"Error: {e}", fg="red"))
    finally:
        directory.close()

    click.echo("Goodbye.")
