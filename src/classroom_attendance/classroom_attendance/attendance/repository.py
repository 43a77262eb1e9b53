from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_for_student(self, student_id: str, *, room_id: Optional[str] = None) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_for_room(self, room_id: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_for_day(self, *, room_id: str, student_id: str, day: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def upsert_for_day(
        self,
        *,
        room_id: str,
        student_id: str,
        marked_at: datetime,
        status: AttendanceStatus,
    ) -> tuple[AttendanceRecord, bool]:
        """Create the record for the day of `marked_at`, or set the status of the existing one.

        Returns the stored record and whether it was created.
        """

        raise NotImplementedError
