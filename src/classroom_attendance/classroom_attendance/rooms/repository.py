from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional, Protocol, Sequence

from .model import Room


class RoomRepository(Protocol):
    def get_by_id(self, room_id: str) -> Optional[Room]:
        raise NotImplementedError

    def get_by_code(self, room_code: str) -> Optional[Room]:
        raise NotImplementedError

    def list_for_teacher(self, teacher_id: str) -> Sequence[Room]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Room]:
        raise NotImplementedError

    def create_room(
        self,
        *,
        name: str,
        subject: str,
        teacher_id: str,
        created_at: datetime,
        code_candidates: Iterable[str],
    ) -> Optional[Room]:
        """Store a new room under the first candidate code not already taken.

        Returns None when every candidate is in use.
        """

        raise NotImplementedError
