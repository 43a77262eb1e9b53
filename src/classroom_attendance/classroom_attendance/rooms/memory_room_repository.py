from __future__ import annotations

import threading
from datetime import datetime
from typing import Iterable, Optional, Sequence

from ..common.validators import normalize_room_code
from .model import Room
from .repository import RoomRepository


def demo_rooms(created_at: datetime) -> list[Room]:
    return [
        Room(id="room1", name="Mathematics Class", subject="sub1", teacher_id="t1", created_at=created_at, room_code="MATH123"),
        Room(id="room2", name="Science Lab", subject="sub2", teacher_id="t1", created_at=created_at, room_code="SCI456"),
        Room(id="room3", name="History Seminar", subject="sub3", teacher_id="t2", created_at=created_at, room_code="HIST789"),
    ]


class InMemoryRoomRepository(RoomRepository):
    """Room store kept in process memory. Rooms are append-only."""

    def __init__(self, rooms: Iterable[Room] = ()):
        self._rooms: list[Room] = list(rooms)
        self._lock = threading.Lock()

    def get_by_id(self, room_id: str) -> Optional[Room]:
        return next((r for r in self._rooms if r.id == room_id), None)

    def get_by_code(self, room_code: str) -> Optional[Room]:
        wanted = normalize_room_code(room_code)
        if not wanted:
            return None
        return next((r for r in self._rooms if r.room_code.upper() == wanted), None)

    def list_for_teacher(self, teacher_id: str) -> Sequence[Room]:
        return [r for r in self._rooms if r.teacher_id == teacher_id]

    def list_all(self) -> Sequence[Room]:
        return list(self._rooms)

    def create_room(
        self,
        *,
        name: str,
        subject: str,
        teacher_id: str,
        created_at: datetime,
        code_candidates: Iterable[str],
    ) -> Optional[Room]:
        # id numbering and the free-code check must not interleave across request threads
        with self._lock:
            room_code = next((c for c in code_candidates if not self.get_by_code(c)), None)
            if room_code is None:
                return None
            room = Room(
                id=f"room{len(self._rooms) + 1}",
                name=name,
                subject=subject,
                teacher_id=teacher_id,
                created_at=created_at,
                room_code=room_code,
            )
            self._rooms.append(room)
            return room
