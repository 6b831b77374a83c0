from unittest.mock import patch

from sqlalchemy.exc import OperationalError


def test_health(client):
    res = client.get("/api/health")
    assert res.status_code == 200
    body = res.get_json()
    assert body["message"] == "Server is running"
    assert "timestamp" in body


def test_spa_fallback_serves_index(client):
    res = client.get("/dashboard/progress")
    assert res.status_code == 200
    assert b'id="root"' in res.data


def test_root_serves_index(client):
    res = client.get("/")
    assert res.status_code == 200
    assert b'id="root"' in res.data


def test_unknown_api_path_is_json_404(client):
    res = client.get("/api/does-not-exist")
    assert res.status_code == 404
    assert "error" in res.get_json()


def test_client_dir_override(app, tmp_path):
    (tmp_path / "index.html").write_text("<html>custom build</html>")
    (tmp_path / "app.js").write_text("console.log('hi')")
    app.config["CLIENT_DIR"] = str(tmp_path)
    client = app.test_client()

    assert b"custom build" in client.get("/workouts").data
    assert b"console.log" in client.get("/app.js").data


def test_database_errors_are_generic(auth_client):
    with patch(
        "fitdiet.services.workout_service.WorkoutService.list_all",
        side_effect=OperationalError("SELECT", {}, Exception("database is locked")),
    ):
        res = auth_client.get("/api/workouts")

    assert res.status_code == 500
    assert res.get_json() == {"error": "Internal server error"}


def test_non_object_bodies_are_rejected(auth_client):
    cases = [
        ("post", "/api/workouts", [1]),
        ("post", "/api/meals", 42),
        ("post", "/api/community/posts", ["hello"]),
        ("put", "/api/profile", "tall"),
    ]
    for method, path, body in cases:
        res = getattr(auth_client, method)(path, json=body)
        assert res.status_code == 400, path
        assert res.get_json() == {"error": "Request body must be a JSON object"}


def test_missing_body_reads_as_empty_object(auth_client):
    res = auth_client.post("/api/workouts")
    assert res.status_code == 400
    assert res.get_json()["error"] == "Exercise name, duration, and calories burned are required"
