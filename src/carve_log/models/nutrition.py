"""Meal records and per-day nutrition buckets."""

from dataclasses import dataclass, field
from datetime import date, datetime
from uuid import UUID, uuid4

from ..utils.dates import local_day

MACROS = ("calories", "protein", "carbs", "fat")


@dataclass(frozen=True)
class Meal:
    """A single logged meal."""

    name: str
    calories: int
    protein: int
    carbs: int = 0
    fat: int = 0
    date: datetime = field(default_factory=datetime.now)
    id: UUID = field(default_factory=uuid4)

    @property
    def time_display(self) -> str:
        """Time of day the meal was logged, e.g. ``08:30 AM``."""
        return self.date.strftime("%I:%M %p")

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "id": str(self.id),
            "name": self.name,
            "calories": self.calories,
            "protein": self.protein,
            "carbs": self.carbs,
            "fat": self.fat,
            "date": self.date.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Meal":
        """Create from dictionary."""
        return cls(
            id=UUID(data["id"]),
            name=data.get("name", ""),
            calories=int(data["calories"]),
            protein=int(data["protein"]),
            carbs=int(data.get("carbs", 0)),
            fat=int(data.get("fat", 0)),
            date=datetime.fromisoformat(data["date"]),
        )


@dataclass
class DailyNutrition:
    """All meals logged on one local calendar day, with cached totals.

    The ``total_*`` fields are a materialized view over ``meals``. They are
    recomputed from scratch whenever the meal list changes and cannot be
    passed in by callers.
    """

    date: datetime
    meals: list[Meal] = field(default_factory=list)
    id: UUID = field(default_factory=uuid4)
    total_calories: int = field(default=0, init=False)
    total_protein: int = field(default=0, init=False)
    total_carbs: int = field(default=0, init=False)
    total_fat: int = field(default=0, init=False)

    def __post_init__(self):
        self.meals = list(self.meals)
        self.recompute_totals()

    @property
    def day(self) -> date:
        """Local calendar day this bucket covers."""
        return local_day(self.date)

    def add_meal(self, meal: Meal) -> None:
        """Append a meal and refresh the totals."""
        self.meals.append(meal)
        self.recompute_totals()

    def remove_meal(self, meal_id: UUID) -> bool:
        """Drop the meal with ``meal_id``; returns False if it isn't here."""
        for index, meal in enumerate(self.meals):
            if meal.id == meal_id:
                del self.meals[index]
                self.recompute_totals()
                return True
        return False

    def recompute_totals(self) -> None:
        """Rebuild every cached total from the meal list."""
        for macro in MACROS:
            setattr(self, f"total_{macro}", sum(getattr(m, macro) for m in self.meals))

    def snapshot(self) -> "DailyNutrition":
        """Copy that shares the (immutable) meals but not the list."""
        return DailyNutrition(date=self.date, meals=list(self.meals), id=self.id)

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "id": str(self.id),
            "date": self.date.isoformat(),
            "total_calories": self.total_calories,
            "total_protein": self.total_protein,
            "total_carbs": self.total_carbs,
            "total_fat": self.total_fat,
            "meals": [meal.to_dict() for meal in self.meals],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "DailyNutrition":
        """Create from dictionary.

        Stored totals are ignored; they are rebuilt from the meals.
        """
        return cls(
            id=UUID(data["id"]),
            date=datetime.fromisoformat(data["date"]),
            meals=[Meal.from_dict(m) for m in data.get("meals", [])],
        )
