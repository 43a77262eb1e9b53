from __future__ import annotations

import random
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .attendance.memory_attendance_repository import InMemoryAttendanceRepository
from .attendance.seed import generate_mock_attendance
from .attendance.service import AttendanceService
from .common.datetime_utils import now_utc
from .common.latency import SimulatedLatency
from .reports.service import AttendanceReportService
from .rooms.code_generator import RoomCodeGenerator
from .rooms.memory_room_repository import InMemoryRoomRepository, demo_rooms
from .rooms.service import RoomService
from .subjects.repository import StaticSubjectRepository
from .users.memory_user_repository import InMemoryUserRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    users_repo: InMemoryUserRepository
    subjects_repo: StaticSubjectRepository
    rooms_repo: InMemoryRoomRepository
    attendance_repo: InMemoryAttendanceRepository

    auth_service: AuthService
    room_service: RoomService
    attendance_service: AttendanceService
    report_service: AttendanceReportService


def build_container(
    *,
    auth_latency: float = 0.0,
    data_latency: float = 0.0,
    seed_attendance: bool = True,
    random_seed: Optional[int] = None,
    now: Optional[datetime] = None,
) -> Container:
    now = now or now_utc()
    rng = random.Random(random_seed)

    users_repo = InMemoryUserRepository.with_demo_users()
    subjects_repo = StaticSubjectRepository()
    seed_rooms = demo_rooms(now)
    rooms_repo = InMemoryRoomRepository(seed_rooms)
    attendance_repo = InMemoryAttendanceRepository(
        generate_mock_attendance(seed_rooms, now=now, rng=rng) if seed_attendance else ()
    )

    data_delay = SimulatedLatency(data_latency)
    code_generator = RoomCodeGenerator(rng=rng) if random_seed is not None else RoomCodeGenerator()

    auth_service = AuthService(users_repo, latency=SimulatedLatency(auth_latency))
    room_service = RoomService(rooms_repo, subjects_repo, code_generator=code_generator, latency=data_delay)
    attendance_service = AttendanceService(
        attendance_repo,
        rooms_repo,
        users_repo,
        room_service=room_service,
        latency=data_delay,
    )
    report_service = AttendanceReportService(attendance_repo, rooms_repo, subjects_repo, users_repo, attendance_service)

    return Container(
        users_repo=users_repo,
        subjects_repo=subjects_repo,
        rooms_repo=rooms_repo,
        attendance_repo=attendance_repo,
        auth_service=auth_service,
        room_service=room_service,
        attendance_service=attendance_service,
        report_service=report_service,
    )
