"""Data models for carve-log."""

from .nutrition import DailyNutrition, Meal
from .workout import MuscleGroup, Workout

__all__ = [
    "DailyNutrition",
    "Meal",
    "MuscleGroup",
    "Workout",
]
