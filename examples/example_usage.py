"""Example: drive the service layer directly (no Flask).

Controllers are a thin layer; the attendance rules live in the services.
"""

from classroom_attendance.container import build_container


def main():
    container = build_container(random_seed=7)

    student = container.auth_service.login("Student@Example.com", "password123")
    room = container.attendance_service.check_in(student, "math123")
    print(f"{student.name} marked present in {room.name}")

    overview = container.report_service.student_overview(student.id)
    print(f"overall: {overview.overall_percentage}%")
    for item in overview.rooms:
        print(f"  {item.room.name}: {item.percentage}%")


if __name__ == "__main__":
    main()
