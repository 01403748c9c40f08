"""Settings CLI commands for Payrun.

Manages settings.json - data directory and database URL.
"""

import click
from pathlib import Path

from payrun.sdk import (
    ConfigError,
    load_settings,
    set_setting,
    clear_setting,
    get_setting,
    get_settings_path,
    get_rates_path,
    get_data_path,
    get_db_url,
)


@click.group()
def settings():
    """Manage settings (settings.json).

    Available settings:
    - data_dir: directory holding payroll.db
    - db_url: full database URL (overrides data_dir)
    """
    pass


@settings.command("show")
def settings_show():
    """Show current settings and their values."""
    settings_path = get_settings_path()
    try:
        current = load_settings()
        effective_db = get_db_url()
    except ConfigError as e:
        raise click.ClickException(str(e))

    click.echo(f"Settings file: {settings_path}")
    click.echo(f"File exists: {settings_path.exists()}")
    click.echo()

    if not current:
        click.echo("No settings configured (using defaults).")
    else:
        click.echo("Current settings:")
        for key, value in current.items():
            click.echo(f"  {key}: {value}")

    rates_path = get_rates_path()
    click.echo()
    click.echo("Effective values:")
    click.echo(f"  data_dir: {get_data_path()}")
    click.echo(f"  db_url: {effective_db}")
    click.echo(f"  rates: {rates_path if rates_path.exists() else 'built-in defaults'}")


@settings.command("db-url")
@click.argument("url", required=False)
@click.option("--clear", is_flag=True, help="Clear custom db_url, revert to default")
def settings_db_url(url, clear):
    """Set or clear the database URL.

    URL is any SQLAlchemy URL, e.g. sqlite:////home/me/payroll.db

    Examples:
        payrun settings db-url sqlite:////srv/payroll/payroll.db
        payrun settings db-url --clear
    """
    if clear:
        if clear_setting("db_url"):
            click.echo("Cleared db_url setting.")
        else:
            click.echo("db_url was not set.")
        click.echo(f"Database is now: {get_db_url()}")
        return

    if not url:
        current = get_setting("db_url")
        if current:
            click.echo(f"Current db_url: {current}")
        else:
            click.echo(f"No custom db_url set. Using default: {get_db_url()}")
        return

    set_setting("db_url", url)
    click.echo(f"Set db_url: {url}")
    click.echo(f"Saved to: {get_settings_path()}")


@settings.command("data-dir")
@click.argument("path", required=False, type=click.Path())
@click.option("--clear", is_flag=True, help="Clear custom data_dir, revert to default")
def settings_data_dir(path, clear):
    """Set or clear the custom data directory.

    PATH is the directory where payrun keeps payroll.db.

    Examples:
        payrun settings data-dir ~/payroll-data
        payrun settings data-dir --clear
    """
    if clear:
        if clear_setting("data_dir"):
            click.echo("Cleared data_dir setting.")
            click.echo(f"Data directory is now: {get_data_path()} (default)")
        else:
            click.echo("data_dir was not set.")
        return

    if not path:
        current_data_dir = get_setting("data_dir")
        if current_data_dir:
            click.echo(f"Current data_dir: {current_data_dir}")
        else:
            click.echo(f"No custom data_dir set. Using default: {get_data_path()}")
        return

    data_path = Path(path).expanduser().resolve()

    if data_path.exists():
        if not data_path.is_dir():
            raise click.ClickException(f"Path exists but is not a directory: {data_path}")
    else:
        try:
            data_path.mkdir(parents=True, exist_ok=True)
            click.echo(f"Created directory: {data_path}")
        except OSError as e:
            raise click.ClickException(f"Cannot create directory: {data_path}\n{e}")

    set_setting("data_dir", str(data_path))
    click.echo(f"Set data_dir: {data_path}")
    click.echo(f"Saved to: {get_settings_path()}")
