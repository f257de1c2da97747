"""Nutrition log commands."""

from datetime import date, datetime

import click

from ..containers import open_stores
from ..models.nutrition import Meal
from .base import (
    DATETIME_FORMATS,
    DAY_FORMATS,
    async_command,
    echo_info,
    echo_success,
    echo_warning,
    ensure_initialized,
    format_table,
    parse_id,
)


@click.group()
def nutrition():
    """Log meals and review daily nutrition totals."""
    pass


@nutrition.command("add")
@click.option("--name", "-n", required=True, help="Meal name")
@click.option("--calories", "-c", required=True, type=click.IntRange(min=0))
@click.option("--protein", "-p", default=0, type=click.IntRange(min=0), help="Protein (g)")
@click.option("--carbs", default=0, type=click.IntRange(min=0), help="Carbohydrates (g)")
@click.option("--fat", default=0, type=click.IntRange(min=0), help="Fat (g)")
@click.option(
    "--at", "eaten_at", type=click.DateTime(formats=DATETIME_FORMATS), help="When the meal was eaten (default: now)"
)
@click.pass_context
@async_command
async def add(
    ctx: click.Context,
    name: str,
    calories: int,
    protein: int,
    carbs: int,
    fat: int,
    eaten_at: datetime | None,
):
    """Log a meal."""
    ensure_initialized(ctx)

    when = eaten_at or datetime.now()
    meal = Meal(name=name, calories=calories, protein=protein, carbs=carbs, fat=fat, date=when)

    stores = await open_stores()
    await stores.nutrition.add_meal(meal, when)
    total = stores.nutrition.total_calories_for_date(when)
    echo_success(f"Logged '{name}' ({calories} kcal) as {meal.id}. Day total: {total} kcal")


@nutrition.command("remove")
@click.argument("meal_id")
@click.pass_context
@async_command
async def remove(ctx: click.Context, meal_id: str):
    """Delete a logged meal by id."""
    ensure_initialized(ctx)
    target = parse_id(ctx, meal_id)

    stores = await open_stores()
    if await stores.nutrition.remove_meal(target):
        echo_success(f"Removed meal {target}")
    else:
        echo_warning(f"No meal with id {target}.")


@nutrition.command("show")
@click.option("--day", type=click.DateTime(formats=DAY_FORMATS), help="Day to show (default: today)")
@click.pass_context
@async_command
async def show(ctx: click.Context, day: datetime | None):
    """Show the meals and macro totals for one day."""
    ensure_initialized(ctx)
    target = day.date() if day else date.today()

    stores = await open_stores()
    daily = stores.nutrition.nutrition_for(target)

    click.echo()
    click.echo(click.style(f"Nutrition on {target.isoformat()}", bold=True))
    click.echo("=" * 40)

    if not daily.meals:
        echo_info("No meals logged yet.")
    else:
        rows = [
            [m.time_display, m.name, m.calories, m.protein, m.carbs, m.fat, str(m.id)]
            for m in daily.meals
        ]
        click.echo(
            format_table(["Time", "Meal", "kcal", "Protein", "Carbs", "Fat", "ID"], rows)
        )

    click.echo()
    click.echo(f"Calories: {daily.total_calories} kcal")
    click.echo(f"Protein: {daily.total_protein} g")
    click.echo(f"Carbs: {daily.total_carbs} g")
    click.echo(f"Fat: {daily.total_fat} g")
    click.echo()
