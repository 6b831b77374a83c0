"""
Shared fixtures.

Every test gets a fresh app backed by an in-memory SQLite database, so
tests never touch fitness_diet.db. Flask's test client keeps the session
cookie between requests, like a browser would.
"""

import pytest

from config import TestConfig
from fitdiet import create_app


class FakeMailer:
    def __init__(self, fail_for=()):
        self.sent = []
        self.fail_for = set(fail_for)

    def send(self, to, subject, html):
        if to in self.fail_for:
            raise ConnectionError(f"SMTP refused {to}")
        self.sent.append({"to": to, "subject": subject, "html": html})
        return True


@pytest.fixture
def mailer():
    return FakeMailer()


@pytest.fixture
def app(mailer):
    app = create_app(TestConfig, mailer=mailer)
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def register(client, username="alice", email="alice@example.com", password="password123"):
    return client.post(
        "/api/register",
        json={"username": username, "email": email, "password": password},
    )


def login(client, email="alice@example.com", password="password123"):
    return client.post("/api/login", json={"email": email, "password": password})


@pytest.fixture
def make_user(app):
    """Returns a factory that registers a user on its own test client."""
    def _make(username="alice", email=None, password="password123"):
        c = app.test_client()
        res = register(c, username=username, email=email or f"{username}@example.com", password=password)
        assert res.status_code == 201, res.get_json()
        c.user_id = res.get_json()["userId"]
        return c

    return _make


@pytest.fixture
def auth_client(make_user):
    return make_user("alice")
