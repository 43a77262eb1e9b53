from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import now_utc
from ..common.latency import SimulatedLatency
from ..core.enums import AttendanceStatus, Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..rooms.model import Room
from ..rooms.repository import RoomRepository
from ..rooms.service import RoomService
from ..users.model import User
from ..users.repository import UserRepository
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def attendance_percentage(records: Iterable[AttendanceRecord]) -> int:
    """Share of present records as a whole percentage, rounded half up; 0 without records."""

    total = 0
    present = 0
    for r in records:
        total += 1
        if r.status == AttendanceStatus.PRESENT:
            present += 1
    if total == 0:
        return 0
    return (present * 200 + total) // (total * 2)


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        rooms: RoomRepository,
        users: UserRepository,
        *,
        room_service: RoomService,
        latency: Optional[SimulatedLatency] = None,
    ):
        self._attendance = attendance
        self._rooms = rooms
        self._users = users
        self._room_service = room_service
        self._latency = latency or SimulatedLatency()

    def mark_attendance(
        self,
        room_id: str,
        student_id: str,
        status: AttendanceStatus | str,
        *,
        now: Optional[datetime] = None,
    ) -> AttendanceRecord:
        try:
            status = AttendanceStatus(status)
        except ValueError:
            raise ValidationError("Invalid attendance status")

        if not self._rooms.get_by_id(room_id):
            raise NotFoundError("Room not found")
        student = self._users.get_by_id(student_id)
        if not student or student.role != Role.STUDENT:
            raise NotFoundError("Student not found")

        self._latency.wait()

        record, created = self._attendance.upsert_for_day(
            room_id=room_id,
            student_id=student_id,
            marked_at=now or now_utc(),
            status=status,
        )
        if created:
            logger.info("Student %s marked %s in %s", student_id, status.value, room_id)
        else:
            logger.debug("Updated %s to %s", record.id, status.value)
        return record

    def check_in(self, student: User, room_code: str, *, now: Optional[datetime] = None) -> Room:
        """Join a room by its code and mark the student present for today."""

        if student.role != Role.STUDENT:
            raise AuthorizationError("Only students can mark attendance")

        room = self._room_service.join_room(room_code)
        self.mark_attendance(room.id, student.id, AttendanceStatus.PRESENT, now=now)
        return room

    def get_student_attendance(self, student_id: str) -> Sequence[AttendanceRecord]:
        return self._attendance.list_for_student(student_id)

    def get_room_attendance(self, room_id: str) -> Sequence[AttendanceRecord]:
        return self._attendance.list_for_room(room_id)

    def get_student_rooms(self, student_id: str) -> Sequence[Room]:
        """Rooms the student has at least one record in (joining a room means attending it)."""

        room_ids = {r.room_id for r in self._attendance.list_for_student(student_id)}
        return [room for room in self._rooms.list_all() if room.id in room_ids]

    def calculate_attendance_percentage(self, student_id: str, room_id: Optional[str] = None) -> int:
        return attendance_percentage(self._attendance.list_for_student(student_id, room_id=room_id))
