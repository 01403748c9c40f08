"""Helpers shared by the CLI command groups."""

import click

from payrun.sdk import ConfigError, EmployeeDirectory, load_rate_table, PayrollCalculator


def open_directory(ctx: click.Context) -> EmployeeDirectory:
    """Open the employee directory for the --db-url given to the root command."""
    obj = ctx.find_root().obj or {}
    try:
        return EmployeeDirectory(obj.get("db_url"))
    except ConfigError as e:
        raise click.ClickException(str(e))


def make_calculator(ctx: click.Context) -> PayrollCalculator:
    """Calculator using rates.yaml (or --rates) if present, defaults otherwise."""
    obj = ctx.find_root().obj or {}
    try:
        return PayrollCalculator(load_rate_table(obj.get("rates_path")))
    except ConfigError as e:
        raise click.ClickException(str(e))
