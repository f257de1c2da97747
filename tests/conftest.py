"""Pytest configuration and fixtures."""

import asyncio
import tempfile
from datetime import datetime
from pathlib import Path

import aiosqlite
import pytest

from carve_log.db.engine import init_db
from carve_log.db.repositories import KeyValueRepository
from carve_log.models.nutrition import Meal
from carve_log.models.workout import MuscleGroup, Workout


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


class FailingRepository:
    """Repository whose every call fails like a broken database."""

    async def get(self, key):
        raise aiosqlite.OperationalError("disk I/O error")

    async def set(self, key, value):
        raise aiosqlite.OperationalError("disk I/O error")


@pytest.fixture
def failing_repository():
    """Repository that cannot read or write."""
    return FailingRepository()


@pytest.fixture
def repository(temp_db_path):
    """Key-value repository over a freshly initialized database."""
    asyncio.run(init_db(temp_db_path))
    return KeyValueRepository(temp_db_path)


@pytest.fixture
def sample_workout():
    """A leg session on the morning of 2024-01-01."""
    return Workout(
        name="Leg Day",
        duration=30,
        muscle_groups=[MuscleGroup.LEGS],
        date=datetime(2024, 1, 1, 8, 0),
        exercises=["Squat", "Lunge"],
    )


@pytest.fixture
def sample_meals():
    """Two meals eaten on 2024-01-01."""
    return [
        Meal(
            name="Breakfast",
            calories=500,
            protein=30,
            carbs=50,
            fat=10,
            date=datetime(2024, 1, 1, 8, 30),
        ),
        Meal(
            name="Lunch",
            calories=300,
            protein=20,
            carbs=20,
            fat=5,
            date=datetime(2024, 1, 1, 12, 15),
        ),
    ]
