from __future__ import annotations

import logging
from typing import Optional, Sequence

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.latency import SimulatedLatency
from ..common.validators import normalize_email, require_non_empty
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, ValidationError
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: sign in and register users."""

    def __init__(self, users: UserRepository, *, latency: Optional[SimulatedLatency] = None):
        self._users = users
        self._latency = latency or SimulatedLatency()

    def login(self, email: str, password: str) -> User:
        self._latency.wait()

        normalized = normalize_email(email)
        user = self._users.get_by_email(normalized)
        if not user:
            logger.info("Login failed for %s: unknown email", normalized)
            raise AuthenticationError("Invalid email or password. Please try again.")

        password_hash = self._users.get_password_hash(user.id)
        try:
            ok = bool(password_hash) and check_password_hash(password_hash, password or "")
        except ValueError:
            # e.g. corrupted or unsupported hash formats
            ok = False

        if not ok:
            logger.info("Login failed for %s: wrong password", normalized)
            raise AuthenticationError("Invalid email or password. Please try again.")

        logger.info("User %s signed in as %s", user.id, user.role.value)
        return user

    def register(self, *, name: str, email: str, password: str, role: Role) -> User:
        name = require_non_empty(name, "your name")
        if not (email or "").strip() or not (password or "").strip():
            raise ValidationError("Please enter both email and password.")
        email = email.strip()
        try:
            role = Role(role)
        except ValueError:
            raise ValidationError("Invalid account type")

        self._latency.wait()

        if self._users.get_by_email(email):
            raise ValidationError("This email is already registered or there was an error.")

        user = self._users.create_user(
            name=name,
            email=email,
            role=role,
            password_hash=generate_password_hash(password),
        )
        if not user:
            raise ValidationError("This email is already registered or there was an error.")
        logger.info("Registered %s %s", user.role.value, user.id)
        return user

    def get_user(self, user_id: str) -> Optional[User]:
        return self._users.get_by_id(user_id)

    def get_users(self) -> Sequence[User]:
        return self._users.list_all()

    def get_students(self) -> Sequence[User]:
        return self._users.list_by_role(Role.STUDENT)
