"""Payroll command group: compute, display and export the monthly payroll."""

import json
from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from payrun.sdk import (
    DEFAULT_EXPORT_FILENAME,
    PayrollRun,
    PayrunError,
    run_to_dict,
    write_payroll_csv,
)

from .context import make_calculator, open_directory
from .renderers.payroll_renderer import fmt_amount, render_payroll_run, render_rate_table


def build_run(ctx: click.Context, workers: Optional[int] = None) -> PayrollRun:
    """Compute the payroll run for every employee on file."""
    calculator = make_calculator(ctx)
    directory = open_directory(ctx)
    try:
        roster = directory.list()
    finally:
        directory.close()

    try:
        return calculator.generate_payroll_run(roster, max_workers=workers)
    except PayrunError as e:
        raise click.ClickException(str(e))


def format_line_text(run: PayrollRun) -> str:
    """Pipe-separated text rendering, one line per employee plus total."""
    out = ["Employee | Gross | AFP | ARS | ISR | Deductions | Net"]
    for line in run.lines:
        out.append(
            f"{line.employee.name} | {fmt_amount(line.gross_salary)} | {fmt_amount(line.afp)} | "
            f"{fmt_amount(line.ars)} | {fmt_amount(line.isr)} | "
            f"{fmt_amount(line.total_deductions)} | {fmt_amount(line.net_salary)}"
        )
    out.append(f"Total paid by the company (sum of net): {fmt_amount(run.total_net)}")
    return "\n".join(out)


@click.group()
def payroll():
    """Compute and export the monthly payroll.

    \b
    Deductions per employee:
      AFP  retirement fund      2.87% of gross
      ARS  health insurance     3.04% of gross
      ISR  income tax           0% / 5% / 10% of the whole gross
                                (<= 20,000 / <= 40,000 / above)

    Rates can be overridden with rates.yaml in the config directory.
    """
    pass


@payroll.command("show")
@click.option("--format", "output_format", type=click.Choice(["table", "text", "json"]),
              default="table", help="Output format.")
@click.option("--workers", type=click.IntRange(min=1), default=None,
              help="Compute lines on a thread pool of this size.")
@click.pass_context
def payroll_show(ctx, output_format: str, workers: Optional[int]):
    """Show the payroll for all employees."""
    run = build_run(ctx, workers)

    if output_format == "json":
        click.echo(json.dumps(run_to_dict(run), indent=2))
        return

    if run.is_empty:
        click.echo("No employees to run payroll for.")
        return

    if output_format == "text":
        click.echo(format_line_text(run))
        return

    render_payroll_run(Console(), run)


@payroll.command("export")
@click.option("--output", "-o", type=click.Path(dir_okay=False),
              default=DEFAULT_EXPORT_FILENAME, show_default=True,
              help="CSV file to write.")
@click.pass_context
def payroll_export(ctx, output: str):
    """Export the payroll for all employees to CSV."""
    run = build_run(ctx)

    if run.is_empty:
        click.echo("No employees to export.")
        return

    try:
        path = write_payroll_csv(run, Path(output))
    except PayrunError as e:
        raise click.ClickException(str(e))

    click.echo(f"Exported {len(run)} line(s) to: {path}")


@payroll.command("rates")
@click.pass_context
def payroll_rates(ctx):
    """Show the deduction rates in effect."""
    calculator = make_calculator(ctx)
    render_rate_table(Console(), calculator.rates)
