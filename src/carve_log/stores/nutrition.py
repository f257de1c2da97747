"""Nutrition log store."""

from datetime import date, datetime
from uuid import UUID

from ..db.persistence import CollectionSlot
from ..db.repositories import KeyValueRepository
from ..models.nutrition import DailyNutrition, Meal
from ..utils.dates import as_datetime, local_day
from .base import EventStore

NUTRITION_KEY = "daily_nutritions"


class NutritionStore(EventStore[DailyNutrition]):
    """Meals grouped into one bucket per local calendar day.

    Buckets are keyed by day, so a day never has more than one. Reads hand
    out copies; bucket contents only change through this store.
    """

    def __init__(self, slot: CollectionSlot[DailyNutrition]):
        super().__init__(slot)
        self._buckets: dict[date, DailyNutrition] = {}

    @classmethod
    def for_repository(cls, repository: KeyValueRepository) -> "NutritionStore":
        return cls(CollectionSlot(repository, NUTRITION_KEY, DailyNutrition))

    @property
    def daily_nutritions(self) -> tuple[DailyNutrition, ...]:
        """Every bucket, in the order the days were first logged."""
        return tuple(bucket.snapshot() for bucket in self._buckets.values())

    async def add_meal(self, meal: Meal, day: date | datetime | None = None) -> None:
        """Log a meal on ``day`` (default: now).

        Creates the day's bucket if this is its first meal.
        """
        when = as_datetime(day) if day is not None else datetime.now()
        async with self._lock:
            key = local_day(when)
            bucket = self._buckets.get(key)
            if bucket is None:
                self._buckets[key] = DailyNutrition(date=when, meals=[meal])
            else:
                bucket.add_meal(meal)
            await self._commit()

    async def remove_meal(self, meal_id: UUID) -> bool:
        """Remove a meal by id from whichever day holds it.

        The day's bucket stays, even if it ends up empty. An unknown id is a
        no-op and returns False.
        """
        async with self._lock:
            for bucket in self._buckets.values():
                if bucket.remove_meal(meal_id):
                    break
            else:
                return False
            await self._commit()
            return True

    def nutrition_for(self, day: date | datetime) -> DailyNutrition:
        """The day's bucket, or an empty one if nothing was logged."""
        bucket = self._buckets.get(local_day(day))
        if bucket is None:
            return DailyNutrition(date=as_datetime(day))
        return bucket.snapshot()

    def meals_for(self, day: date | datetime) -> list[Meal]:
        bucket = self._buckets.get(local_day(day))
        if bucket is None:
            return []
        return list(bucket.meals)

    def total_calories_for_date(self, day: date | datetime) -> int:
        return self.nutrition_for(day).total_calories

    def total_protein_for_date(self, day: date | datetime) -> int:
        return self.nutrition_for(day).total_protein

    def total_carbs_for_date(self, day: date | datetime) -> int:
        return self.nutrition_for(day).total_carbs

    def total_fat_for_date(self, day: date | datetime) -> int:
        return self.nutrition_for(day).total_fat

    def todays_total_calories(self) -> int:
        return self.total_calories_for_date(datetime.now())

    def todays_total_protein(self) -> int:
        return self.total_protein_for_date(datetime.now())

    def todays_total_carbs(self) -> int:
        return self.total_carbs_for_date(datetime.now())

    def todays_total_fat(self) -> int:
        return self.total_fat_for_date(datetime.now())

    def _restore(self, items: list[DailyNutrition]) -> None:
        self._buckets = {}
        for bucket in items:
            existing = self._buckets.get(bucket.day)
            if existing is None:
                self._buckets[bucket.day] = bucket
                continue
            # Older data may hold two buckets for one day; fold them together
            for meal in bucket.meals:
                existing.add_meal(meal)

    def _items(self) -> list[DailyNutrition]:
        return list(self._buckets.values())
