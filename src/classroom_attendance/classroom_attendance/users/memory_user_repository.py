from __future__ import annotations

import threading
from typing import Iterable, Optional, Sequence

from werkzeug.security import generate_password_hash

from ..common.validators import normalize_email
from ..core.constants import DEMO_PASSWORD
from ..core.enums import Role
from .model import User
from .repository import UserRepository

DEMO_USERS = (
    User(id="t1", name="John Smith", email="teacher@example.com", role=Role.TEACHER),
    User(id="t2", name="Jane Doe", email="teacher2@example.com", role=Role.TEACHER),
    User(id="s1", name="Alex Johnson", email="student@example.com", role=Role.STUDENT),
    User(id="s2", name="Sam Wilson", email="student2@example.com", role=Role.STUDENT),
)


class InMemoryUserRepository(UserRepository):
    """User store kept in process memory; resets on restart."""

    def __init__(self, users: Iterable[tuple[User, str]] = ()):
        self._users: list[User] = []
        # keyed by the email exactly as registered
        self._password_hashes: dict[str, str] = {}
        self._lock = threading.Lock()
        for user, password_hash in users:
            self._users.append(user)
            self._password_hashes[user.email] = password_hash

    @classmethod
    def with_demo_users(cls) -> "InMemoryUserRepository":
        password_hash = generate_password_hash(DEMO_PASSWORD)
        return cls((u, password_hash) for u in DEMO_USERS)

    def get_by_id(self, user_id: str) -> Optional[User]:
        return next((u for u in self._users if u.id == user_id), None)

    def get_by_email(self, email: str) -> Optional[User]:
        wanted = normalize_email(email)
        return next((u for u in self._users if u.email.lower() == wanted), None)

    def get_password_hash(self, user_id: str) -> Optional[str]:
        user = self.get_by_id(user_id)
        if not user:
            return None
        return self._password_hashes.get(user.email)

    def create_user(self, *, name: str, email: str, role: Role, password_hash: str) -> Optional[User]:
        # duplicate check and id numbering must not interleave across request threads
        with self._lock:
            if self.get_by_email(email):
                return None
            user = User(id=f"{role.value[0]}{len(self._users) + 1}", name=name, email=email, role=role)
            self._users.append(user)
            self._password_hashes[email] = password_hash
            return user

    def list_all(self) -> Sequence[User]:
        return list(self._users)

    def list_by_role(self, role: Role) -> Sequence[User]:
        return [u for u in self._users if u.role == role]
