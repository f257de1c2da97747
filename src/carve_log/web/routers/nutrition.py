"""Nutrition log routes."""

from datetime import date, datetime
from uuid import UUID

from fastapi import APIRouter, Form, Request

from ...models.nutrition import Meal
from .workouts import get_stores

router = APIRouter(prefix="/nutrition", tags=["nutrition"])


@router.get("")
async def daily_nutrition(request: Request, day: date | None = None):
    """Meals and macro totals for one day (default: today)."""
    target = day or date.today()
    daily = get_stores(request).nutrition.nutrition_for(target)
    return {"day": target.isoformat(), **daily.to_dict()}


@router.post("/meals")
async def add_meal(
    request: Request,
    name: str = Form(...),
    calories: int = Form(..., ge=0),
    protein: int = Form(0, ge=0),
    carbs: int = Form(0, ge=0),
    fat: int = Form(0, ge=0),
    eaten_at: datetime | None = Form(None),
):
    """Log a meal on the day it was eaten."""
    when = eaten_at or datetime.now()
    meal = Meal(name=name, calories=calories, protein=protein, carbs=carbs, fat=fat, date=when)
    store = get_stores(request).nutrition
    await store.add_meal(meal, when)
    return {
        "status": "added",
        "meal": meal.to_dict(),
        "total_calories": store.total_calories_for_date(when),
    }


@router.delete("/meals/{meal_id}")
async def remove_meal(request: Request, meal_id: UUID):
    """Delete a meal; the day's totals are rebuilt from what remains."""
    removed = await get_stores(request).nutrition.remove_meal(meal_id)
    return {"status": "removed" if removed else "not_found"}
