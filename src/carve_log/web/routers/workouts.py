"""Workout log routes."""

from datetime import date, datetime
from uuid import UUID

from fastapi import APIRouter, Form, Request

from ...containers import LogStores
from ...models.workout import MuscleGroup, Workout

router = APIRouter(prefix="/workouts", tags=["workouts"])


def get_stores(request: Request) -> LogStores:
    """Get the stores from app state."""
    return request.app.state.stores


@router.get("")
async def list_workouts(request: Request, day: date | None = None):
    """Workouts on one day (default: today), newest first."""
    target = day or date.today()
    records = get_stores(request).workouts.records_on_date(target)
    return {
        "day": target.isoformat(),
        "workouts": [w.to_dict() for w in records],
    }


@router.get("/stats")
async def workout_stats(request: Request, day: date | None = None):
    """Derived totals for one day (default: today)."""
    target = day or date.today()
    store = get_stores(request).workouts
    stats = store.stats_for_date(target)
    primary = store.primary_muscle_group_on_date(target)
    return {
        "day": target.isoformat(),
        "sets": stats.sets,
        "duration": stats.duration,
        "exercises": stats.exercises,
        "muscle_groups": [mg.value for mg in store.muscle_groups_on_date(target)],
        "primary_muscle_group": primary.value if primary else None,
    }


@router.post("")
async def add_workout(
    request: Request,
    name: str = Form(...),
    duration: int = Form(..., ge=0),
    muscle_groups: list[MuscleGroup] = Form(...),
    exercises: list[str] = Form([]),
    performed_at: datetime | None = Form(None),
):
    """Log a completed workout."""
    workout = Workout(
        name=name,
        duration=duration,
        muscle_groups=muscle_groups,
        date=performed_at or datetime.now(),
        exercises=exercises,
    )
    await get_stores(request).workouts.add(workout)
    return {"status": "added", "workout": workout.to_dict()}


@router.delete("/{workout_id}")
async def remove_workout(request: Request, workout_id: UUID):
    """Delete a workout; unknown ids are reported, not rejected."""
    removed = await get_stores(request).workouts.remove(workout_id)
    return {"status": "removed" if removed else "not_found"}
