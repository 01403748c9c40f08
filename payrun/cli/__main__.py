"""Payrun CLI - Command-line interface for the employee roster and payroll."""

import click

from payrun import __version__
from payrun.sdk.log import configure_logging

from .employees_commands import employees as employees_group
from .payroll_commands import payroll as payroll_group
from .settings_commands import settings as settings_group
from .menu_commands import menu as menu_command


@click.group()
@click.version_option(version=__version__, prog_name="payrun")
@click.option("--db-url", envvar="PAYRUN_DB_URL", default=None,
              help="Database URL (default: sqlite file in the data directory).")
@click.option("--rates", "rates_path", type=click.Path(dir_okay=False, exists=True), default=None,
              help="rates.yaml to use instead of the one in the config directory.")
@click.pass_context
def cli(ctx, db_url, rates_path):
    """Payrun - Employee roster and monthly payroll deductions.

    Computes AFP (retirement), ARS (health insurance) and ISR (income tax)
    for every employee and shows or exports the result.

    Configuration is loaded from (in order):

    \b
    1. PAYRUN_CONFIG_PATH environment variable
    2. ~/.config/payrun/ (XDG default)

    Run 'payrun settings show' to see the effective paths.
    """
    ctx.ensure_object(dict)
    ctx.obj["db_url"] = db_url
    ctx.obj["rates_path"] = rates_path


cli.add_command(employees_group)
cli.add_command(payroll_group)
cli.add_command(settings_group)
cli.add_command(menu_command)


def main():
    """Entry point for the CLI."""
    configure_logging()
    cli(obj={})


if __name__ == "__main__":
    main()
