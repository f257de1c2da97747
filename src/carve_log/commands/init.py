"""Initialize project command."""

import click

from ..db import get_data_dir, get_db_path, init_db
from .base import async_command, echo_info, echo_success


@click.command()
@async_command
async def init():
    """Initialize the carve-log data directory and database.

    Creates the data directory and the SQLite database that holds the
    workout and nutrition logs. Safe to run more than once.
    """
    data_dir = get_data_dir()
    db_path = get_db_path(data_dir)

    echo_info(f"Initializing carve-log in {data_dir}")

    await init_db(db_path)
    echo_success("Database initialized")

    click.echo()
    click.echo("carve-log is ready to use!")
    click.echo()
    click.echo("Next steps:")
    click.echo("  1. Log a workout:")
    click.echo('     carve-log workouts add --name "Leg day" --duration 45 --muscle legs')
    click.echo()
    click.echo("  2. Log a meal:")
    click.echo('     carve-log nutrition add --name "Oats" --calories 350 --protein 12')
