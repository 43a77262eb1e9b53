from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..common.datetime_utils import to_iso


@dataclass(frozen=True)
class Room:
    """Domain entity: a class a teacher runs, joined by students through its code."""

    id: str
    name: str
    subject: str
    teacher_id: str
    created_at: datetime
    room_code: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "subject": self.subject,
            "teacherId": self.teacher_id,
            "createdAt": to_iso(self.created_at),
            "roomCode": self.room_code,
        }
