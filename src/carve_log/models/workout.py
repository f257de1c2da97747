"""Workout session records."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from uuid import UUID, uuid4


class MuscleGroup(str, Enum):
    """Muscle groups a session can work."""

    CHEST = "chest"
    BACK = "back"
    SHOULDERS = "shoulders"
    BICEPS = "biceps"
    TRICEPS = "triceps"
    LEGS = "legs"
    CORE = "core"
    CARDIO = "cardio"

    @property
    def display_name(self) -> str:
        return self.value.title()


@dataclass(frozen=True)
class Workout:
    """A completed training session.

    Workouts are never edited after creation; the store only appends them
    or removes them by ``id``.
    """

    name: str
    duration: int  # Minutes
    muscle_groups: tuple[MuscleGroup, ...]
    date: datetime
    exercises: tuple[str, ...] = ()
    id: UUID = field(default_factory=uuid4)

    def __post_init__(self):
        # Callers may pass lists; store tuples so shared records stay read-only
        object.__setattr__(self, "muscle_groups", tuple(self.muscle_groups))
        object.__setattr__(self, "exercises", tuple(self.exercises))

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "id": str(self.id),
            "name": self.name,
            "duration": self.duration,
            "muscle_groups": [mg.value for mg in self.muscle_groups],
            "date": self.date.isoformat(),
            "exercises": list(self.exercises),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Workout":
        """Create from dictionary."""
        return cls(
            id=UUID(data["id"]),
            name=data.get("name", ""),
            duration=int(data["duration"]),
            muscle_groups=tuple(MuscleGroup(mg) for mg in data["muscle_groups"]),
            date=datetime.fromisoformat(data["date"]),
            exercises=tuple(data.get("exercises", ())),
        )

    def get_muscle_groups_display(self) -> str:
        """Get a comma-separated list of muscle group names."""
        return ", ".join(mg.display_name for mg in self.muscle_groups)
