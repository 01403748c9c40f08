"""Rich renderer for employee lists and payroll runs."""

from decimal import Decimal
from typing import Iterable

from rich import box
from rich.console import Console
from rich.table import Table

from payrun.sdk import Employee, PayrollRun, RateTable


def fmt_amount(amount: Decimal) -> str:
    """Format money with thousands separators and two places."""
    return f"{amount.quantize(Decimal('0.01')):,}"


def fmt_rate(rate: Decimal) -> str:
    """Format a rate as a percentage, e.g. 0.0287 -> 2.87%."""
    pct = (rate * 100).normalize()
    return f"{pct:f}%"


def render_employees(console: Console, employees: Iterable[Employee]) -> None:
    """Render the employee roster as a table."""
    table = Table(title="Employees", box=box.SIMPLE_HEAD)
    table.add_column("Id", justify="right")
    table.add_column("Name")
    table.add_column("Department")
    table.add_column("Salary", justify="right")

    for e in employees:
        table.add_row(str(e.id), e.name, e.department, fmt_amount(e.base_salary))

    console.print(table)


def render_payroll_run(console: Console, run: PayrollRun) -> None:
    """Render a payroll run with one row per employee and a totals footer."""
    table = Table(title="Monthly Payroll", box=box.SIMPLE_HEAD, show_footer=True)
    table.add_column("Employee", footer="Total")
    table.add_column("Gross", justify="right", footer=fmt_amount(run.total_gross))
    table.add_column("AFP", justify="right")
    table.add_column("ARS", justify="right")
    table.add_column("ISR", justify="right")
    table.add_column("Deductions", justify="right", footer=fmt_amount(run.total_deductions))
    table.add_column("Net", justify="right", footer=fmt_amount(run.total_net))

    for line in run.lines:
        table.add_row(
            line.employee.name,
            fmt_amount(line.gross_salary),
            fmt_amount(line.afp),
            fmt_amount(line.ars),
            fmt_amount(line.isr),
            fmt_amount(line.total_deductions),
            fmt_amount(line.net_salary),
        )

    console.print(table)
    console.print(f"Total paid by the company (sum of net): [bold]{fmt_amount(run.total_net)}[/bold]")


def render_rate_table(console: Console, rates: RateTable) -> None:
    """Render the effective deduction rates."""
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("key", style="dim")
    table.add_column("value")

    table.add_row("AFP (retirement)", fmt_rate(rates.afp_rate))
    table.add_row("ARS (health)", fmt_rate(rates.ars_rate))

    lower = None
    for bracket in rates.isr_brackets:
        if bracket.up_to is None:
            label = f"ISR over {fmt_amount(lower)}" if lower is not None else "ISR"
        elif lower is None:
            label = f"ISR up to {fmt_amount(bracket.up_to)}"
        else:
            label = f"ISR {fmt_amount(lower)} - {fmt_amount(bracket.up_to)}"
        table.add_row(label, fmt_rate(bracket.rate))
        lower = bracket.up_to

    console.print(table)
