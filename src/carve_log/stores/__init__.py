"""Persistence-backed event stores."""

from .base import EventStore
from .nutrition import NutritionStore
from .workouts import SETS_PER_WORKOUT, WorkoutStats, WorkoutStore

__all__ = [
    "EventStore",
    "NutritionStore",
    "SETS_PER_WORKOUT",
    "WorkoutStats",
    "WorkoutStore",
]
