from datetime import timedelta

from fitdiet import db
from fitdiet.models import Workout
from fitdiet.utils import utc_today


def add_workout(client, **overrides):
    payload = {"exercise_name": "Running", "duration": 30, "calories_burned": 300}
    payload.update(overrides)
    return client.post("/api/workouts", json=payload)


class TestCreateWorkout:
    def test_create_defaults_to_today(self, auth_client):
        res = add_workout(auth_client, notes="easy pace")
        assert res.status_code == 201
        body = res.get_json()
        assert body["exercise_name"] == "Running"
        assert body["duration"] == 30
        assert body["calories_burned"] == 300
        assert body["notes"] == "easy pace"
        assert body["date"] == utc_today().isoformat()
        assert body["user_id"] == auth_client.user_id

    def test_notes_are_optional(self, auth_client):
        res = add_workout(auth_client)
        assert res.status_code == 201
        assert res.get_json()["notes"] is None

    def test_explicit_date(self, auth_client):
        res = add_workout(auth_client, date="2024-03-01")
        assert res.status_code == 201
        assert res.get_json()["date"] == "2024-03-01"

    def test_missing_fields(self, auth_client):
        res = auth_client.post("/api/workouts", json={"exercise_name": "Running"})
        assert res.status_code == 400
        assert res.get_json()["error"] == "Exercise name, duration, and calories burned are required"

    def test_non_positive_values_rejected(self, auth_client):
        assert add_workout(auth_client, duration=0).status_code == 400
        assert add_workout(auth_client, calories_burned=-50).status_code == 400

    def test_non_numeric_rejected(self, auth_client):
        res = add_workout(auth_client, duration="half an hour")
        assert res.status_code == 400
        assert "duration" in res.get_json()["error"]

    def test_bad_date_rejected(self, auth_client):
        assert add_workout(auth_client, date="31/01/2025").status_code == 400

    def test_requires_session(self, client):
        assert add_workout(client).status_code == 401


class TestListWorkouts:
    def test_ordered_by_date_then_creation(self, auth_client):
        today = utc_today()
        add_workout(auth_client, exercise_name="Old", date=(today - timedelta(days=3)).isoformat())
        add_workout(auth_client, exercise_name="First today")
        add_workout(auth_client, exercise_name="Second today")

        names = [w["exercise_name"] for w in auth_client.get("/api/workouts").get_json()]
        assert names == ["Second today", "First today", "Old"]

    def test_recent_capped_at_five(self, auth_client):
        for i in range(7):
            add_workout(auth_client, exercise_name=f"W{i}")

        recent = auth_client.get("/api/workouts/recent").get_json()
        assert len(recent) == 5
        assert recent[0]["exercise_name"] == "W6"

    def test_only_own_workouts(self, make_user):
        alice = make_user("alice")
        bob = make_user("bob")
        add_workout(alice)

        assert len(alice.get("/api/workouts").get_json()) == 1
        assert bob.get("/api/workouts").get_json() == []


class TestDeleteWorkout:
    def test_delete_own(self, auth_client):
        workout_id = add_workout(auth_client).get_json()["id"]

        res = auth_client.delete(f"/api/workouts/{workout_id}")
        assert res.status_code == 200
        assert auth_client.get("/api/workouts").get_json() == []

    def test_delete_other_users_workout(self, app, make_user):
        alice = make_user("alice")
        bob = make_user("bob")
        workout_id = add_workout(alice).get_json()["id"]

        res = bob.delete(f"/api/workouts/{workout_id}")
        assert res.status_code == 404
        assert res.get_json()["error"] == "Workout not found"

        with app.app_context():
            assert db.session.get(Workout, workout_id) is not None

    def test_delete_missing(self, auth_client):
        assert auth_client.delete("/api/workouts/9999").status_code == 404
