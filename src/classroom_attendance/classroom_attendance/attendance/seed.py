"""Demo attendance history for the seed rooms."""

from __future__ import annotations

import random
from datetime import datetime, timedelta
from typing import Optional, Sequence

from ..core.constants import MOCK_ATTENDANCE_DAYS
from ..core.enums import AttendanceStatus
from ..rooms.model import Room
from .model import AttendanceRecord

# student id -> probability of being present on a given day
DEMO_PRESENCE = (("s1", 0.8), ("s2", 0.7))


def generate_mock_attendance(
    rooms: Sequence[Room],
    *,
    now: datetime,
    rng: Optional[random.Random] = None,
    days: int = MOCK_ATTENDANCE_DAYS,
) -> list[AttendanceRecord]:
    """One record per demo student, seed room and day for the last `days` days (today included)."""

    rng = rng or random.Random()
    records: list[AttendanceRecord] = []
    for i in range(days):
        marked_at = now - timedelta(days=i)
        for room in rooms:
            for student_id, presence in DEMO_PRESENCE:
                status = AttendanceStatus.PRESENT if rng.random() < presence else AttendanceStatus.ABSENT
                records.append(
                    AttendanceRecord(
                        id=f"att-{student_id}-{room.id}-{i}",
                        room_id=room.id,
                        student_id=student_id,
                        marked_at=marked_at,
                        status=status,
                    )
                )
    return records
