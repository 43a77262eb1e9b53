from __future__ import annotations

import random

import pytest

from classroom_attendance.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from classroom_attendance.rooms.code_generator import RoomCodeGenerator
from classroom_attendance.rooms.memory_room_repository import InMemoryRoomRepository, demo_rooms
from classroom_attendance.rooms.service import RoomService
from classroom_attendance.subjects.repository import StaticSubjectRepository
from classroom_attendance.users.memory_user_repository import DEMO_USERS


class FixedCodes:
    def __init__(self, *codes):
        self._codes = list(codes)

    def generate(self):
        return self._codes.pop(0)


TEACHER = DEMO_USERS[0]
STUDENT = DEMO_USERS[2]


@pytest.fixture
def rooms(fixed_now):
    return InMemoryRoomRepository(demo_rooms(fixed_now))


def test_create_room_assigns_next_id_and_code(rooms, fixed_now):
    svc = RoomService(rooms, StaticSubjectRepository(), code_generator=FixedCodes("AB12CD"))

    room = svc.create_room(teacher=TEACHER, name="  Algebra ", subject_id="sub1", now=fixed_now)

    assert room.id == "room4"
    assert room.name == "Algebra"
    assert room.room_code == "AB12CD"
    assert room.teacher_id == "t1"
    assert room.created_at == fixed_now
    assert [r.id for r in svc.get_teacher_rooms("t1")] == ["room1", "room2", "room4"]


def test_create_room_regenerates_code_already_in_use(rooms):
    svc = RoomService(rooms, StaticSubjectRepository(), code_generator=FixedCodes("MATH123", "ZZ99ZZ"))

    room = svc.create_room(teacher=TEACHER, name="Algebra", subject_id="sub1")

    assert room.room_code == "ZZ99ZZ"


def test_create_room_requires_teacher(rooms):
    svc = RoomService(rooms, StaticSubjectRepository())

    with pytest.raises(AuthorizationError):
        svc.create_room(teacher=STUDENT, name="Algebra", subject_id="sub1")


@pytest.mark.parametrize("name,subject_id", [("", "sub1"), ("Algebra", ""), ("Algebra", "sub99")])
def test_create_room_validates_fields(rooms, name, subject_id):
    svc = RoomService(rooms, StaticSubjectRepository())

    with pytest.raises(ValidationError):
        svc.create_room(teacher=TEACHER, name=name, subject_id=subject_id)


def test_join_room_resolves_code_trimmed_and_case_insensitive(rooms):
    svc = RoomService(rooms, StaticSubjectRepository())

    assert svc.join_room(" sci456 ").id == "room2"


@pytest.mark.parametrize("code", ["NOPE42", "", "   "])
def test_join_room_with_unknown_code_fails(rooms, code):
    svc = RoomService(rooms, StaticSubjectRepository())

    with pytest.raises(ValidationError):
        svc.join_room(code)


def test_get_room_unknown_raises_not_found(rooms):
    svc = RoomService(rooms, StaticSubjectRepository())

    with pytest.raises(NotFoundError):
        svc.get_room("room99")
    assert svc.find_room("room99") is None


def test_subject_lookups(rooms):
    svc = RoomService(rooms, StaticSubjectRepository())

    assert svc.get_subject("sub5").name == "Computer Science"
    assert svc.get_subject_by_name("history").code == "HIST101"
    assert svc.get_subject_by_name("Art") is None


def test_code_generator_produces_six_uppercase_alphanumerics():
    code = RoomCodeGenerator(rng=random.Random(3)).generate()

    assert len(code) == 6
    assert code == code.upper()
    assert code.isalnum()


def test_get_room_by_code_returns_none_for_unknown(rooms):
    svc = RoomService(rooms, StaticSubjectRepository())

    assert svc.get_room_by_code("HIST789").id == "room3"
    assert svc.get_room_by_code("HIST000") is None
