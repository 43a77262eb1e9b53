from __future__ import annotations

import pytest

from classroom_attendance.core.enums import Role
from classroom_attendance.core.exceptions import AuthenticationError, ValidationError
from classroom_attendance.users.memory_user_repository import InMemoryUserRepository
from classroom_attendance.users.service import AuthService


@pytest.fixture
def auth():
    return AuthService(InMemoryUserRepository.with_demo_users())


def test_login_matches_email_case_insensitively(auth):
    user = auth.login("  Teacher@Example.COM ", "password123")

    assert user.id == "t1"
    assert user.role == Role.TEACHER


def test_login_wrong_password_raises(auth):
    with pytest.raises(AuthenticationError):
        auth.login("student@example.com", "wrong")


def test_login_unknown_email_raises(auth):
    with pytest.raises(AuthenticationError):
        auth.login("nobody@example.com", "password123")


def test_register_assigns_role_prefixed_id_and_allows_login(auth):
    user = auth.register(name="Nina Park", email="nina@example.com", password="secret", role=Role.STUDENT)

    assert user.id == "s5"
    assert auth.login("NINA@example.com", "secret") == user


def test_register_accepts_role_as_string(auth):
    user = auth.register(name="Omar", email="omar@example.com", password="pw", role="teacher")

    assert user.role == Role.TEACHER
    assert user.id == "t5"


def test_register_rejects_existing_email_regardless_of_case(auth):
    with pytest.raises(ValidationError):
        auth.register(name="Copy", email="STUDENT@example.com", password="pw", role=Role.STUDENT)

    assert len(auth.get_users()) == 4


@pytest.mark.parametrize(
    "name,email,password",
    [
        ("", "a@example.com", "pw"),
        ("A", "", "pw"),
        ("A", "a@example.com", "  "),
    ],
)
def test_register_requires_all_fields(auth, name, email, password):
    with pytest.raises(ValidationError):
        auth.register(name=name, email=email, password=password, role=Role.STUDENT)


def test_register_rejects_unknown_role(auth):
    with pytest.raises(ValidationError):
        auth.register(name="A", email="a@example.com", password="pw", role="admin")


def test_get_students_only_returns_students(auth):
    assert [u.id for u in auth.get_students()] == ["s1", "s2"]
