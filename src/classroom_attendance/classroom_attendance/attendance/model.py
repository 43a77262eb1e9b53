from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import to_iso, utc_day
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one student's attendance in one room on one day."""

    id: str
    room_id: str
    student_id: str
    marked_at: datetime
    status: AttendanceStatus

    @property
    def day(self) -> date:
        return utc_day(self.marked_at)

    def with_status(self, status: AttendanceStatus) -> "AttendanceRecord":
        return replace(self, status=status)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "roomId": self.room_id,
            "studentId": self.student_id,
            "date": to_iso(self.marked_at),
            "status": self.status.value,
        }


@dataclass(frozen=True)
class StudentSessionRow:
    """Read-model: one student's line in a room session table."""

    student_id: str
    student_name: str
    status_label: str
    css_class: str
    time_marked: Optional[datetime]


@dataclass(frozen=True)
class RoomSession:
    """All marks of a room on one calendar day."""

    day: date
    rows: list[StudentSessionRow]
