from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..attendance.model import AttendanceRecord, RoomSession, StudentSessionRow
from ..attendance.repository import AttendanceRepository
from ..attendance.service import AttendanceService, attendance_percentage
from ..core.constants import DEFAULT_HISTORY_LIMIT
from ..core.enums import AttendanceStatus, Role
from ..core.exceptions import NotFoundError
from ..rooms.model import Room
from ..rooms.repository import RoomRepository
from ..subjects.model import Subject
from ..subjects.repository import SubjectRepository
from ..users.repository import UserRepository

STATUS_LABELS = {
    AttendanceStatus.PRESENT: ("Present", "text-success"),
    AttendanceStatus.ABSENT: ("Absent", "text-danger"),
}
NOT_MARKED = ("Not Marked", "text-muted")


@dataclass(frozen=True)
class RoomOverview:
    room: Room
    subject: Optional[Subject]
    total_records: int
    unique_student_count: int
    sessions: list[RoomSession]

    @property
    def session_count(self) -> int:
        return len(self.sessions)


@dataclass(frozen=True)
class StudentRoomSummary:
    room: Room
    subject: Optional[Subject]
    percentage: int


@dataclass(frozen=True)
class StudentOverview:
    overall_percentage: int
    rooms: list[StudentRoomSummary]


@dataclass(frozen=True)
class StudentRoomHistory:
    room: Room
    subject: Optional[Subject]
    percentage: int
    records: list[AttendanceRecord]


class AttendanceReportService:
    """Read-side aggregation for the teacher and student dashboards."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        rooms: RoomRepository,
        subjects: SubjectRepository,
        users: UserRepository,
        attendance_service: AttendanceService,
    ):
        self._attendance = attendance
        self._attendance_service = attendance_service
        self._rooms = rooms
        self._subjects = subjects
        self._users = users

    def _room(self, room_id: str) -> Room:
        room = self._rooms.get_by_id(room_id)
        if not room:
            raise NotFoundError("Room not found")
        return room

    def room_overview(self, room_id: str) -> RoomOverview:
        room = self._room(room_id)
        records = self._attendance.list_for_room(room_id)

        by_day: dict[date, list[AttendanceRecord]] = {}
        for r in records:
            by_day.setdefault(r.day, []).append(r)

        students = self._users.list_by_role(Role.STUDENT)
        sessions: list[RoomSession] = []
        for day in sorted(by_day, reverse=True):
            day_records = by_day[day]
            rows = []
            for student in students:
                record = next((r for r in day_records if r.student_id == student.id), None)
                label, css = STATUS_LABELS[record.status] if record else NOT_MARKED
                rows.append(
                    StudentSessionRow(
                        student_id=student.id,
                        student_name=student.name,
                        status_label=label,
                        css_class=css,
                        time_marked=record.marked_at if record else None,
                    )
                )
            sessions.append(RoomSession(day=day, rows=rows))

        return RoomOverview(
            room=room,
            subject=self._subjects.get_by_id(room.subject),
            total_records=len(records),
            unique_student_count=len({r.student_id for r in records}),
            sessions=sessions,
        )

    def student_overview(self, student_id: str) -> StudentOverview:
        svc = self._attendance_service
        summaries = [
            StudentRoomSummary(
                room=room,
                subject=self._subjects.get_by_id(room.subject),
                percentage=svc.calculate_attendance_percentage(student_id, room.id),
            )
            for room in svc.get_student_rooms(student_id)
        ]
        return StudentOverview(overall_percentage=svc.calculate_attendance_percentage(student_id), rooms=summaries)

    def student_room_history(self, student_id: str, room_id: str, *, limit: int = DEFAULT_HISTORY_LIMIT) -> StudentRoomHistory:
        room = self._room(room_id)
        records = self._attendance.list_for_student(student_id, room_id=room_id)
        recent = sorted(records, key=lambda r: r.marked_at, reverse=True)[: max(int(limit), 0)]
        return StudentRoomHistory(
            room=room,
            subject=self._subjects.get_by_id(room.subject),
            percentage=attendance_percentage(records),
            records=recent,
        )
