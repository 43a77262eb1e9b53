from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import now_utc
from ..common.latency import SimulatedLatency
from ..common.validators import normalize_room_code
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..subjects.model import Subject
from ..subjects.repository import SubjectRepository
from ..users.model import User
from .code_generator import RoomCodeGenerator
from .model import Room
from .repository import RoomRepository

logger = logging.getLogger(__name__)

MAX_CODE_ATTEMPTS = 20


class RoomService:
    """Use cases around rooms: create (teachers), join by code (students), lookups."""

    def __init__(
        self,
        rooms: RoomRepository,
        subjects: SubjectRepository,
        *,
        code_generator: Optional[RoomCodeGenerator] = None,
        latency: Optional[SimulatedLatency] = None,
    ):
        self._rooms = rooms
        self._subjects = subjects
        self._codes = code_generator or RoomCodeGenerator()
        self._latency = latency or SimulatedLatency()

    def create_room(self, *, teacher: User, name: str, subject_id: str, now: Optional[datetime] = None) -> Room:
        if teacher.role != Role.TEACHER:
            raise AuthorizationError("Only teachers can create rooms")

        name = (name or "").strip()
        subject_id = (subject_id or "").strip()
        if not name or not subject_id:
            raise ValidationError("Please fill in all fields")
        if not self._subjects.get_by_id(subject_id):
            raise ValidationError("Unknown subject")

        self._latency.wait()

        room = self._rooms.create_room(
            name=name,
            subject=subject_id,
            teacher_id=teacher.id,
            created_at=now or now_utc(),
            code_candidates=(self._codes.generate() for _ in range(MAX_CODE_ATTEMPTS)),
        )
        if not room:
            raise ValidationError("Could not generate a free room code")
        logger.info("Teacher %s created %s (%s) with code %s", teacher.id, room.id, room.name, room.room_code)
        return room

    def join_room(self, room_code: str) -> Room:
        code = normalize_room_code(room_code)
        if not code:
            raise ValidationError("Please enter a room code")

        self._latency.wait()

        room = self._rooms.get_by_code(code)
        if not room:
            logger.info("Join attempt with unknown room code %s", code)
            raise ValidationError("Invalid room code. Please try again.")
        return room

    def get_room(self, room_id: str) -> Room:
        room = self._rooms.get_by_id(room_id)
        if not room:
            raise NotFoundError("Room not found")
        return room

    def find_room(self, room_id: str) -> Optional[Room]:
        return self._rooms.get_by_id(room_id)

    def get_room_by_code(self, room_code: str) -> Optional[Room]:
        return self._rooms.get_by_code(room_code)

    def get_teacher_rooms(self, teacher_id: str) -> Sequence[Room]:
        return self._rooms.list_for_teacher(teacher_id)

    def get_subject(self, subject_id: str) -> Optional[Subject]:
        return self._subjects.get_by_id(subject_id)

    def get_subject_by_name(self, name: str) -> Optional[Subject]:
        return self._subjects.get_by_name(name)

    def list_subjects(self) -> Sequence[Subject]:
        return self._subjects.list_all()
