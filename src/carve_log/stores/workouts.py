"""Workout log store."""

from datetime import date, datetime
from typing import NamedTuple
from uuid import UUID

from ..db.persistence import CollectionSlot
from ..db.repositories import KeyValueRepository
from ..models.workout import MuscleGroup, Workout
from ..utils.dates import local_datetime, local_day
from .base import EventStore

WORKOUTS_KEY = "workouts"

# Placeholder: no per-set data is logged, so each workout counts as 3 sets
SETS_PER_WORKOUT = 3


class WorkoutStats(NamedTuple):
    """Derived totals for one day of workouts."""

    sets: int
    duration: int
    exercises: int


class WorkoutStore(EventStore[Workout]):
    """All logged workouts, queried by local calendar day."""

    def __init__(self, slot: CollectionSlot[Workout]):
        super().__init__(slot)
        self._workouts: list[Workout] = []

    @classmethod
    def for_repository(cls, repository: KeyValueRepository) -> "WorkoutStore":
        return cls(CollectionSlot(repository, WORKOUTS_KEY, Workout))

    @property
    def workouts(self) -> tuple[Workout, ...]:
        """Every workout, in the order they were added."""
        return tuple(self._workouts)

    async def add(self, workout: Workout) -> None:
        """Append a workout."""
        async with self._lock:
            self._workouts.append(workout)
            await self._commit()

    async def remove(self, workout_id: UUID) -> bool:
        """Remove a workout by id.

        An unknown id is not an error: nothing changes and False is returned.
        """
        async with self._lock:
            for index, workout in enumerate(self._workouts):
                if workout.id == workout_id:
                    del self._workouts[index]
                    break
            else:
                return False
            await self._commit()
            return True

    def records_on_date(self, day: date | datetime) -> list[Workout]:
        """Workouts on the same local day as ``day``, newest first."""
        target = local_day(day)
        matches = [w for w in self._workouts if local_day(w.date) == target]
        return sorted(matches, key=lambda w: local_datetime(w.date), reverse=True)

    def muscle_groups_on_date(self, day: date | datetime) -> list[MuscleGroup]:
        """Muscle groups of every workout on ``day``, duplicates kept."""
        return [mg for w in self.records_on_date(day) for mg in w.muscle_groups]

    def primary_muscle_group_on_date(self, day: date | datetime) -> MuscleGroup | None:
        """First muscle group worked on ``day``, if any."""
        muscle_groups = self.muscle_groups_on_date(day)
        return muscle_groups[0] if muscle_groups else None

    def stats_for_date(self, day: date | datetime) -> WorkoutStats:
        """Set estimate, total minutes and workout count for ``day``."""
        records = self.records_on_date(day)
        return WorkoutStats(
            sets=SETS_PER_WORKOUT * len(records),
            duration=sum(w.duration for w in records),
            exercises=len(records),
        )

    def todays_records(self) -> list[Workout]:
        return self.records_on_date(datetime.now())

    def _restore(self, items: list[Workout]) -> None:
        self._workouts = list(items)

    def _items(self) -> list[Workout]:
        return self._workouts
