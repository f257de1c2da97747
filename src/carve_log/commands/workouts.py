"""Workout log commands."""

from datetime import date, datetime

import click
import questionary
from questionary import Style

from ..containers import open_stores
from ..models.workout import MuscleGroup, Workout
from .base import (
    DATETIME_FORMATS,
    DAY_FORMATS,
    async_command,
    echo_error,
    echo_info,
    echo_success,
    echo_warning,
    ensure_initialized,
    format_table,
    parse_id,
)

custom_style = Style([
    ("qmark", "fg:cyan bold"),
    ("question", "bold"),
    ("pointer", "fg:cyan bold"),
    ("highlighted", "fg:cyan bold"),
    ("selected", "fg:green"),
])


async def ask_muscle_groups() -> list[MuscleGroup]:
    """Ask which muscle groups a session worked."""
    selected = await questionary.checkbox(
        "Which muscle groups did you work? (Select all that apply)",
        choices=[questionary.Choice(mg.display_name, mg) for mg in MuscleGroup],
        style=custom_style,
    ).ask_async()
    return selected or []


@click.group()
def workouts():
    """Log and review workout sessions.

    Sessions are grouped by local calendar day; listing and stats default
    to today.
    """
    pass


@workouts.command("add")
@click.option("--name", "-n", required=True, help="Session name")
@click.option(
    "--duration", "-d", required=True, type=click.IntRange(min=0), help="Duration in minutes"
)
@click.option(
    "--muscle",
    "-m",
    "muscles",
    multiple=True,
    type=click.Choice([mg.value for mg in MuscleGroup]),
    help="Muscle group worked (repeatable; prompts if omitted)",
)
@click.option("--exercise", "-e", "exercises", multiple=True, help="Exercise performed (repeatable)")
@click.option(
    "--at", "performed_at", type=click.DateTime(formats=DATETIME_FORMATS), help="When the session happened (default: now)"
)
@click.pass_context
@async_command
async def add(
    ctx: click.Context,
    name: str,
    duration: int,
    muscles: tuple[str, ...],
    exercises: tuple[str, ...],
    performed_at: datetime | None,
):
    """Log a completed workout."""
    ensure_initialized(ctx)

    muscle_groups = [MuscleGroup(m) for m in muscles]
    if not muscle_groups:
        muscle_groups = await ask_muscle_groups()
    if not muscle_groups:
        echo_error("At least one muscle group is required.")
        ctx.exit(1)

    workout = Workout(
        name=name,
        duration=duration,
        muscle_groups=muscle_groups,
        date=performed_at or datetime.now(),
        exercises=exercises,
    )

    stores = await open_stores()
    await stores.workouts.add(workout)
    echo_success(f"Logged '{name}' ({duration} min) as {workout.id}")


@workouts.command("remove")
@click.argument("workout_id")
@click.pass_context
@async_command
async def remove(ctx: click.Context, workout_id: str):
    """Delete a logged workout by id."""
    ensure_initialized(ctx)
    target = parse_id(ctx, workout_id)

    stores = await open_stores()
    if await stores.workouts.remove(target):
        echo_success(f"Removed workout {target}")
    else:
        echo_warning(f"No workout with id {target}.")


@workouts.command("list")
@click.option("--day", type=click.DateTime(formats=DAY_FORMATS), help="Day to show (default: today)")
@click.pass_context
@async_command
async def list_workouts(ctx: click.Context, day: datetime | None):
    """List the workouts logged on one day, newest first."""
    ensure_initialized(ctx)
    target = day.date() if day else date.today()

    stores = await open_stores()
    records = stores.workouts.records_on_date(target)

    if not records:
        echo_info(f"No workouts logged on {target.isoformat()}.")
        return

    rows = [
        [
            w.date.strftime("%H:%M"),
            w.name,
            f"{w.duration} min",
            w.get_muscle_groups_display(),
            str(w.id),
        ]
        for w in records
    ]

    click.echo()
    click.echo(format_table(["Time", "Name", "Duration", "Muscle Groups", "ID"], rows))
    click.echo()


@workouts.command("stats")
@click.option("--day", type=click.DateTime(formats=DAY_FORMATS), help="Day to summarize (default: today)")
@click.pass_context
@async_command
async def stats(ctx: click.Context, day: datetime | None):
    """Show derived totals for one day."""
    ensure_initialized(ctx)
    target = day.date() if day else date.today()

    stores = await open_stores()
    day_stats = stores.workouts.stats_for_date(target)
    primary = stores.workouts.primary_muscle_group_on_date(target)

    click.echo()
    click.echo(click.style(f"Workouts on {target.isoformat()}", bold=True))
    click.echo("=" * 40)
    click.echo(f"Sets: {day_stats.sets}")
    click.echo(f"Duration: {day_stats.duration} min")
    click.echo(f"Exercises: {day_stats.exercises}")
    if primary:
        click.echo(f"Main focus: {primary.display_name}")
    click.echo()
