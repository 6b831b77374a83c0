from fitdiet import db
from fitdiet.models import UserProfile


FULL_PROFILE = {
    "age": 30,
    "height": 175.5,
    "weight": 72.3,
    "fitness_goal": "lose_weight",
    "activity_level": "moderate",
    "target_calories": 2200,
}


def test_new_profile_is_empty(auth_client):
    res = auth_client.get("/api/profile")
    assert res.status_code == 200
    profile = res.get_json()
    assert profile["user_id"] == auth_client.user_id
    for field in FULL_PROFILE:
        assert profile[field] is None


def test_update_profile(auth_client):
    res = auth_client.put("/api/profile", json=FULL_PROFILE)
    assert res.status_code == 200
    assert res.get_json()["message"] == "Profile updated successfully"

    profile = auth_client.get("/api/profile").get_json()
    for field, value in FULL_PROFILE.items():
        assert profile[field] == value


def test_update_replaces_whole_row(auth_client):
    auth_client.put("/api/profile", json=FULL_PROFILE)
    auth_client.put("/api/profile", json={"age": 31})

    profile = auth_client.get("/api/profile").get_json()
    assert profile["age"] == 31
    assert profile["weight"] is None
    assert profile["fitness_goal"] is None


def test_update_rejects_non_numeric(auth_client):
    res = auth_client.put("/api/profile", json={"age": "thirty"})
    assert res.status_code == 400


def test_missing_profile_is_created_on_read(app, auth_client):
    with app.app_context():
        UserProfile.query.filter_by(user_id=auth_client.user_id).delete()
        db.session.commit()

    # update has nothing to update yet
    assert auth_client.put("/api/profile", json=FULL_PROFILE).status_code == 404

    res = auth_client.get("/api/profile")
    assert res.status_code == 200
    assert res.get_json()["age"] is None

    with app.app_context():
        assert UserProfile.query.filter_by(user_id=auth_client.user_id).count() == 1


def test_profile_stats(auth_client):
    auth_client.post("/api/workouts", json={"exercise_name": "Rowing", "duration": 20, "calories_burned": 200})
    auth_client.post("/api/workouts", json={"exercise_name": "Cycling", "duration": 40, "calories_burned": 350})
    auth_client.post(
        "/api/meals",
        json={"food_name": "Oats", "quantity": 1, "meal_type": "breakfast", "calories": 300},
    )

    stats = auth_client.get("/api/profile/stats").get_json()
    assert stats["totalWorkouts"] == 2
    assert stats["totalCaloriesBurned"] == 550
    assert stats["totalMeals"] == 1
    assert stats["memberSince"] is not None
