"""Tests for the key-value repository and collection slots."""

import asyncio
import json
import logging
from datetime import datetime

from carve_log.db.persistence import CollectionSlot
from carve_log.db.repositories import KeyValueRepository
from carve_log.models.nutrition import DailyNutrition
from carve_log.models.workout import MuscleGroup, Workout


class TestKeyValueRepository:
    """Tests for KeyValueRepository."""

    def test_get_missing_key(self, repository):
        """Test absent keys read as None."""
        assert asyncio.run(repository.get("nothing")) is None

    def test_set_replaces_value(self, repository):
        """Test writing a key twice keeps only the latest value."""

        async def scenario():
            await repository.set("k", b"first")
            await repository.set("k", b"second")
            return await repository.get("k")

        assert asyncio.run(scenario()) == b"second"

    def test_delete(self, repository):
        async def scenario():
            await repository.set("k", b"value")
            await repository.delete("k")
            return await repository.get("k")

        assert asyncio.run(scenario()) is None


class TestCollectionSlot:
    """Tests for CollectionSlot."""

    def test_round_trip_preserves_order(self, repository, sample_workout):
        """Test load(save(collection)) == collection."""
        slot = CollectionSlot(repository, "workouts", Workout)
        later = Workout(
            name="Pull",
            duration=50,
            muscle_groups=[MuscleGroup.BACK, MuscleGroup.BICEPS],
            date=datetime(2024, 1, 2, 19, 0),
        )

        async def scenario():
            assert await slot.save([later, sample_workout]) is True
            return await slot.load()

        assert asyncio.run(scenario()) == [later, sample_workout]

    def test_round_trip_buckets(self, repository, sample_meals):
        slot = CollectionSlot(repository, "daily_nutritions", DailyNutrition)
        bucket = DailyNutrition(date=datetime(2024, 1, 1, 8, 30), meals=sample_meals)

        async def scenario():
            await slot.save([bucket])
            return await slot.load()

        assert asyncio.run(scenario()) == [bucket]

    def test_stored_format_is_field_tagged_json(self, repository, sample_workout):
        """Test the slot holds a JSON array of keyed objects."""
        slot = CollectionSlot(repository, "workouts", Workout)

        async def scenario():
            await slot.save([sample_workout])
            return await repository.get("workouts")

        stored = json.loads(asyncio.run(scenario()))
        assert stored[0]["name"] == "Leg Day"
        assert stored[0]["muscle_groups"] == ["legs"]

    def test_cold_start_is_empty(self, repository):
        """Test an absent slot loads as an empty collection."""
        slot = CollectionSlot(repository, "workouts", Workout)
        assert asyncio.run(slot.load()) == []

    def test_missing_table_is_empty(self, temp_db_path):
        """Test a database without the schema loads as empty."""
        slot = CollectionSlot(KeyValueRepository(temp_db_path), "workouts", Workout)
        assert asyncio.run(slot.load()) == []

    def test_corrupt_data_is_empty(self, repository, caplog):
        """Test undecodable data loads as empty and is logged."""
        slot = CollectionSlot(repository, "workouts", Workout)

        async def scenario():
            await repository.set("workouts", b"{not json")
            return await slot.load()

        with caplog.at_level(logging.WARNING, logger="carve_log"):
            assert asyncio.run(scenario()) == []
        assert "unreadable" in caplog.text

    def test_malformed_records_are_empty(self, repository):
        """Test well-formed JSON with the wrong shape loads as empty."""
        slot = CollectionSlot(repository, "workouts", Workout)

        async def scenario():
            await repository.set("workouts", json.dumps([{"name": "no id"}]).encode())
            first = await slot.load()
            await repository.set("workouts", json.dumps({"not": "a list"}).encode())
            second = await slot.load()
            return first, second

        assert asyncio.run(scenario()) == ([], [])

    def test_encode_failure_keeps_previous_value(self, repository, sample_workout):
        """Test a failed encode leaves the stored data untouched."""
        slot = CollectionSlot(repository, "workouts", Workout)
        unencodable = Workout(
            name="Broken",
            duration=10,
            muscle_groups=[MuscleGroup.CORE],
            date=datetime(2024, 1, 1, 9, 0),
            exercises=[object()],
        )

        async def scenario():
            await slot.save([sample_workout])
            saved = await slot.save([sample_workout, unencodable])
            return saved, await slot.load()

        saved, loaded = asyncio.run(scenario())
        assert saved is False
        assert loaded == [sample_workout]

    def test_write_failure_is_swallowed(self, failing_repository, sample_workout):
        """Test database errors never reach the caller."""
        slot = CollectionSlot(failing_repository, "workouts", Workout)
        assert asyncio.run(slot.save([sample_workout])) is False
        assert asyncio.run(slot.load()) == []
