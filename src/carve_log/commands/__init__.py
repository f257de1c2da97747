"""CLI commands for carve-log."""

from .init import init
from .nutrition import nutrition
from .serve import serve
from .workouts import workouts

__all__ = [
    "init",
    "nutrition",
    "serve",
    "workouts",
]
