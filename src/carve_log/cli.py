"""CLI entry point for carve-log."""

import click

from . import __version__
from .app_logging import configure_logging
from .commands import init, nutrition, serve, workouts


@click.group()
@click.version_option(version=__version__, prog_name="carve-log")
def main():
    """carve-log: personal workout and nutrition log.

    Workouts and meals are stored locally and grouped by calendar day.

    Example usage:

        # Initialize the project
        carve-log init

        # Log a session and a meal
        carve-log workouts add --name "Push" --duration 50 -m chest -m triceps
        carve-log nutrition add --name "Chicken rice" --calories 650 --protein 45

        # Review today
        carve-log workouts stats
        carve-log nutrition show
    """
    pass


# Register commands
main.add_command(init)
main.add_command(workouts)
main.add_command(nutrition)
main.add_command(serve)


def run():
    """Run the CLI."""
    configure_logging()
    main()


if __name__ == "__main__":
    run()
