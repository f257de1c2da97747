"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from carve_log.web import create_app


@pytest.fixture
def client(temp_db_path):
    with TestClient(create_app(temp_db_path)) as test_client:
        yield test_client


class TestWorkoutRoutes:
    """Tests for /workouts."""

    def test_add_and_query(self, client):
        response = client.post(
            "/workouts",
            data={
                "name": "Leg Day",
                "duration": "30",
                "muscle_groups": ["legs"],
                "performed_at": "2024-01-01T08:00:00",
            },
        )
        assert response.status_code == 200
        workout_id = response.json()["workout"]["id"]

        stats = client.get("/workouts/stats", params={"day": "2024-01-01"}).json()
        assert (stats["sets"], stats["duration"], stats["exercises"]) == (3, 30, 1)
        assert stats["primary_muscle_group"] == "legs"

        listing = client.get("/workouts", params={"day": "2024-01-01"}).json()
        assert [w["id"] for w in listing["workouts"]] == [workout_id]

        assert client.delete(f"/workouts/{workout_id}").json() == {"status": "removed"}
        assert client.get("/workouts", params={"day": "2024-01-01"}).json()["workouts"] == []

    def test_remove_unknown(self, client):
        response = client.delete("/workouts/00000000-0000-0000-0000-000000000000")
        assert response.json() == {"status": "not_found"}

    def test_rejects_unknown_muscle_group(self, client):
        response = client.post(
            "/workouts",
            data={"name": "Odd", "duration": "10", "muscle_groups": ["wings"]},
        )
        assert response.status_code == 422


class TestNutritionRoutes:
    """Tests for /nutrition."""

    def test_meals_add_up(self, client):
        for name, calories, protein, carbs, fat in [
            ("Breakfast", 500, 30, 50, 10),
            ("Lunch", 300, 20, 20, 5),
        ]:
            response = client.post(
                "/nutrition/meals",
                data={
                    "name": name,
                    "calories": str(calories),
                    "protein": str(protein),
                    "carbs": str(carbs),
                    "fat": str(fat),
                    "eaten_at": "2024-01-01T12:00:00",
                },
            )
            assert response.status_code == 200

        daily = client.get("/nutrition", params={"day": "2024-01-01"}).json()
        assert daily["total_calories"] == 800
        assert daily["total_fat"] == 15
        assert len(daily["meals"]) == 2

        meal_id = daily["meals"][0]["id"]
        assert client.delete(f"/nutrition/meals/{meal_id}").json() == {"status": "removed"}
        daily = client.get("/nutrition", params={"day": "2024-01-01"}).json()
        assert daily["total_calories"] == 300

    def test_empty_day(self, client):
        daily = client.get("/nutrition", params={"day": "2024-02-02"}).json()
        assert daily["meals"] == []
        assert daily["total_calories"] == 0


def test_health(client):
    assert client.get("/health").json()["status"] == "healthy"


def test_state_persists_across_app_restarts(temp_db_path):
    with TestClient(create_app(temp_db_path)) as first:
        first.post(
            "/nutrition/meals",
            data={"name": "Oats", "calories": "350", "eaten_at": "2024-01-01T08:00:00"},
        )

    with TestClient(create_app(temp_db_path)) as second:
        daily = second.get("/nutrition", params={"day": "2024-01-01"}).json()
        assert daily["total_calories"] == 350
