from __future__ import annotations

import threading
from datetime import date, datetime
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import utc_day
from ..core.enums import AttendanceStatus
from .model import AttendanceRecord
from .repository import AttendanceRepository


class InMemoryAttendanceRepository(AttendanceRepository):
    """Attendance store kept in process memory, in insertion order."""

    def __init__(self, records: Iterable[AttendanceRecord] = ()):
        self._records: list[AttendanceRecord] = list(records)
        self._lock = threading.Lock()

    def list_all(self) -> Sequence[AttendanceRecord]:
        return list(self._records)

    def list_for_student(self, student_id: str, *, room_id: Optional[str] = None) -> Sequence[AttendanceRecord]:
        return [
            r
            for r in self._records
            if r.student_id == student_id and (room_id is None or r.room_id == room_id)
        ]

    def list_for_room(self, room_id: str) -> Sequence[AttendanceRecord]:
        return [r for r in self._records if r.room_id == room_id]

    def _index_for_day(self, *, room_id: str, student_id: str, day: date) -> Optional[int]:
        return next(
            (
                i
                for i, r in enumerate(self._records)
                if r.room_id == room_id and r.student_id == student_id and r.day == day
            ),
            None,
        )

    def get_for_day(self, *, room_id: str, student_id: str, day: date) -> Optional[AttendanceRecord]:
        i = self._index_for_day(room_id=room_id, student_id=student_id, day=day)
        return None if i is None else self._records[i]

    def upsert_for_day(
        self,
        *,
        room_id: str,
        student_id: str,
        marked_at: datetime,
        status: AttendanceStatus,
    ) -> tuple[AttendanceRecord, bool]:
        # lookup and write must not interleave across request threads
        with self._lock:
            i = self._index_for_day(room_id=room_id, student_id=student_id, day=utc_day(marked_at))
            if i is not None:
                self._records[i] = self._records[i].with_status(status)
                return self._records[i], False

            record = AttendanceRecord(
                id=f"att-{student_id}-{room_id}-{int(marked_at.timestamp() * 1000)}",
                room_id=room_id,
                student_id=student_id,
                marked_at=marked_at,
                status=status,
            )
            self._records.append(record)
            return record, True
