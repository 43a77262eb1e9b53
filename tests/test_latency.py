from __future__ import annotations

import pytest

from classroom_attendance.common import latency
from classroom_attendance.common.latency import SimulatedLatency
from classroom_attendance.container import build_container
from classroom_attendance.core.enums import Role
from config import get_settings_module

AUTH_DELAY = 0.8
DATA_DELAY = 0.5


@pytest.fixture
def sleeps(monkeypatch):
    calls: list[float] = []
    monkeypatch.setattr(latency.time, "sleep", calls.append)
    return calls


@pytest.fixture
def slow_container(fixed_now):
    return build_container(
        auth_latency=AUTH_DELAY,
        data_latency=DATA_DELAY,
        seed_attendance=False,
        random_seed=3,
        now=fixed_now,
    )


def test_zero_latency_does_not_sleep(sleeps):
    SimulatedLatency().wait()
    SimulatedLatency(0.0).wait()

    assert sleeps == []


def test_latency_sleeps_for_configured_seconds(sleeps):
    SimulatedLatency(0.25).wait()

    assert sleeps == [0.25]


def test_login_waits_for_auth_delay(slow_container, sleeps):
    slow_container.auth_service.login("student@example.com", "password123")

    assert sleeps == [AUTH_DELAY]


def test_register_waits_for_auth_delay(slow_container, sleeps):
    slow_container.auth_service.register(name="Lee", email="lee@example.com", password="pw", role=Role.STUDENT)

    assert sleeps == [AUTH_DELAY]


def test_create_room_waits_for_data_delay(slow_container, sleeps):
    teacher = slow_container.auth_service.get_user("t1")

    slow_container.room_service.create_room(teacher=teacher, name="Geometry", subject_id="sub1")

    assert sleeps == [DATA_DELAY]


def test_join_room_waits_for_data_delay(slow_container, sleeps):
    slow_container.room_service.join_room("MATH123")

    assert sleeps == [DATA_DELAY]


def test_mark_attendance_waits_for_data_delay(slow_container, sleeps, fixed_now):
    slow_container.attendance_service.mark_attendance("room1", "s1", "present", now=fixed_now)

    assert sleeps == [DATA_DELAY]


def test_check_in_waits_for_join_then_mark(slow_container, sleeps, fixed_now):
    student = slow_container.auth_service.get_user("s1")

    slow_container.attendance_service.check_in(student, "SCI456", now=fixed_now)

    assert sleeps == [DATA_DELAY, DATA_DELAY]


def test_testing_settings_turn_latency_off(sleeps):
    from classroom_attendance.main import create_app

    client = create_app("config.testing").test_client()
    client.post("/login", data={"mode": "login", "email": "student@example.com", "password": "password123"})
    client.post("/student/join", data={"room_code": "MATH123"})

    assert sleeps == []


@pytest.mark.parametrize(
    "env,expected",
    [
        (None, "config.development"),
        ("development", "config.development"),
        ("staging", "config.development"),
        ("PROD", "config.production"),
        ("production", "config.production"),
        ("test", "config.testing"),
        ("Testing", "config.testing"),
    ],
)
def test_settings_module_follows_app_env(monkeypatch, env, expected):
    if env is None:
        monkeypatch.delenv("APP_ENV", raising=False)
    else:
        monkeypatch.setenv("APP_ENV", env)

    assert get_settings_module() == expected
