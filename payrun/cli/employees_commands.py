"""Employees command group for roster management."""

import json

import click
from rich.console import Console

from payrun.sdk import Employee, PayrunError

from .context import open_directory
from .renderers.payroll_renderer import render_employees


def format_employee(e: Employee) -> str:
    """One-line description of an employee."""
    return f"Id: {e.id} | Name: {e.name} | Department: {e.department} | Salary: {e.base_salary}"


def employee_to_dict(e: Employee) -> dict:
    return {
        "id": e.id,
        "name": e.name,
        "department": e.department,
        "base_salary": str(e.base_salary),
    }


@click.group()
def employees():
    """Manage the employee roster.

    \b
    Examples:
      payrun employees add "Ana Perez" --department Sales --salary 30000
      payrun employees list
      payrun employees show 3
      payrun employees edit 3 --salary 32000
      payrun employees remove 3
    """
    pass


@employees.command("add")
@click.argument("name")
@click.option("--department", "-d", default="", help="Department (may be empty).")
@click.option("--salary", "-s", required=True, help="Monthly base salary, e.g. 30000.00")
@click.pass_context
def employees_add(ctx, name: str, department: str, salary: str):
    """Add an employee named NAME."""
    directory = open_directory(ctx)
    try:
        employee = directory.add(name, department, salary)
    except PayrunError as e:
        raise click.ClickException(str(e))
    finally:
        directory.close()

    click.echo(f"Employee added with Id {employee.id}.")


@employees.command("show")
@click.argument("employee_id", type=int)
@click.option("--format", "output_format", type=click.Choice(["text", "json"]),
              default="text", help="Output format.")
@click.pass_context
def employees_show(ctx, employee_id: int, output_format: str):
    """Show one employee by EMPLOYEE_ID."""
    directory = open_directory(ctx)
    try:
        employee = directory.get(employee_id)
    except PayrunError as e:
        raise click.ClickException(str(e))
    finally:
        directory.close()

    if output_format == "json":
        click.echo(json.dumps(employee_to_dict(employee), indent=2))
        return
    click.echo(format_employee(employee))


@employees.command("list")
@click.option("--format", "output_format", type=click.Choice(["text", "table", "json"]),
              default="text", help="Output format.")
@click.option("--count", is_flag=True, help="Only print the number of employees.")
@click.pass_context
def employees_list(ctx, output_format: str, count: bool):
    """List all employees ordered by id."""
    directory = open_directory(ctx)
    try:
        roster = directory.list()
    finally:
        directory.close()

    if count:
        click.echo(str(len(roster)))
        return

    if output_format == "json":
        click.echo(json.dumps([employee_to_dict(e) for e in roster], indent=2))
        return

    if not roster:
        click.echo("No employees registered.")
        return

    if output_format == "table":
        render_employees(Console(), roster)
        return

    for e in roster:
        click.echo(format_employee(e))
    click.echo(f"Total: {len(roster)} employee(s)")


@employees.command("edit")
@click.argument("employee_id", type=int)
@click.option("--name", "-n", help="New name.")
@click.option("--department", "-d", help="New department.")
@click.option("--salary", "-s", help="New monthly base salary.")
@click.pass_context
def employees_edit(ctx, employee_id: int, name, department, salary):
    """Update fields of employee EMPLOYEE_ID. Omitted fields are unchanged."""
    if name is None and department is None and salary is None:
        raise click.UsageError("Nothing to update. Pass --name, --department or --salary.")

    directory = open_directory(ctx)
    try:
        employee = directory.update(employee_id, name=name, department=department, base_salary=salary)
    except PayrunError as e:
        raise click.ClickException(str(e))
    finally:
        directory.close()

    click.echo("Employee updated.")
    click.echo(format_employee(employee))


@employees.command("remove")
@click.argument("employee_id", type=int)
@click.option("--yes", "-y", is_flag=True, help="Don't ask for confirmation.")
@click.pass_context
def employees_remove(ctx, employee_id: int, yes: bool):
    """Delete employee EMPLOYEE_ID."""
    directory = open_directory(ctx)
    try:
        employee = directory.get(employee_id)
        if not yes and not click.confirm(f"Delete '{employee.name}'?", default=False):
            click.echo("Cancelled.")
            return
        directory.delete(employee_id)
    except PayrunError as e:
        raise click.ClickException(str(e))
    finally:
        directory.close()

    click.echo("Employee deleted.")
