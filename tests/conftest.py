from __future__ import annotations

from datetime import datetime, timezone

import pytest

from classroom_attendance.container import build_container
from classroom_attendance.main import create_app


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 1, 9, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def container(fixed_now):
    return build_container(seed_attendance=False, random_seed=42, now=fixed_now)


@pytest.fixture
def app():
    return create_app("config.testing")


@pytest.fixture
def client(app):
    return app.test_client()


def sign_in(client, email: str, password: str = "password123"):
    return client.post("/login", data={"mode": "login", "email": email, "password": password})


@pytest.fixture
def teacher_client(client):
    sign_in(client, "teacher@example.com")
    return client


@pytest.fixture
def student_client(client):
    sign_in(client, "student@example.com")
    return client
