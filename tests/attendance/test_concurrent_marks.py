from __future__ import annotations

import sys
import threading

import pytest

from classroom_attendance.attendance.memory_attendance_repository import InMemoryAttendanceRepository
from classroom_attendance.attendance.service import AttendanceService
from classroom_attendance.core.enums import Role
from classroom_attendance.rooms.memory_room_repository import InMemoryRoomRepository, demo_rooms
from classroom_attendance.rooms.service import RoomService
from classroom_attendance.subjects.repository import StaticSubjectRepository
from classroom_attendance.users.memory_user_repository import DEMO_USERS, InMemoryUserRepository

THREADS = 8
ROUNDS = 50


@pytest.fixture
def fast_switching():
    previous = sys.getswitchinterval()
    sys.setswitchinterval(1e-6)
    yield
    sys.setswitchinterval(previous)


def _run_together(target, count=THREADS):
    barrier = threading.Barrier(count)
    errors = []

    def worker(i):
        barrier.wait()
        try:
            target(i)
        except Exception as e:  # surfaced through the assertion below
            errors.append(e)

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(count)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert errors == []


def test_parallel_marks_same_day_keep_a_single_record(fixed_now, fast_switching):
    users = InMemoryUserRepository((u, "x") for u in DEMO_USERS)
    rooms = InMemoryRoomRepository(demo_rooms(fixed_now))
    room_service = RoomService(rooms, StaticSubjectRepository())

    for _ in range(ROUNDS):
        attendance = InMemoryAttendanceRepository()
        svc = AttendanceService(attendance, rooms, users, room_service=room_service)

        _run_together(lambda i: svc.mark_attendance("room1", "s1", "present", now=fixed_now))

        assert len(attendance.list_for_student("s1", room_id="room1")) == 1


def test_parallel_room_creation_gives_distinct_ids_and_codes(fixed_now, fast_switching):
    teacher = DEMO_USERS[0]
    rooms = InMemoryRoomRepository(demo_rooms(fixed_now))
    svc = RoomService(rooms, StaticSubjectRepository())

    _run_together(lambda i: svc.create_room(teacher=teacher, name=f"Room {i}", subject_id="sub1", now=fixed_now))

    created = rooms.list_all()
    assert len(created) == 3 + THREADS
    assert len({r.id for r in created}) == len(created)
    assert len({r.room_code for r in created}) == len(created)


def test_parallel_registration_of_one_email_creates_one_user(fast_switching):
    users = InMemoryUserRepository((u, "x") for u in DEMO_USERS)

    _run_together(lambda i: users.create_user(name=f"N{i}", email="same@example.com", role=Role.STUDENT, password_hash="x"))

    assert [u.email for u in users.list_all()].count("same@example.com") == 1
    assert len({u.id for u in users.list_all()}) == len(users.list_all())
