from __future__ import annotations

from flask import Flask, flash, redirect, render_template, request, url_for

from ..container import Container
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..users.session import current_user, teacher_required


def register(app: Flask, container: Container) -> None:
    @app.route("/teacher", endpoint="teacher_dashboard")
    @teacher_required
    def teacher_dashboard():
        user = current_user()
        rooms = [
            {"room": room, "subject": container.room_service.get_subject(room.subject)}
            for room in container.room_service.get_teacher_rooms(user.id)
        ]
        return render_template(
            "teacher/dashboard.html",
            rooms=rooms,
            subjects=container.room_service.list_subjects(),
            active_page="teacher_dashboard",
        )

    @app.route("/teacher/rooms", methods=["POST"], endpoint="create_room")
    @teacher_required
    def create_room():
        try:
            room = container.room_service.create_room(
                teacher=current_user(),
                name=request.form.get("name", ""),
                subject_id=request.form.get("subject", ""),
            )
            flash(f"Room created successfully. Share code {room.room_code} with your students.", "success")
        except (ValidationError, AuthorizationError) as e:
            flash(str(e), "danger")
        except Exception:
            app.logger.exception("Failed to create room")
            flash("Failed to create room", "danger")

        return redirect(url_for("teacher_dashboard"))

    @app.route("/teacher/rooms/<room_id>", endpoint="teacher_room")
    @teacher_required
    def teacher_room(room_id: str):
        user = current_user()
        try:
            overview = container.report_service.room_overview(room_id)
        except NotFoundError as e:
            flash(str(e), "warning")
            return redirect(url_for("teacher_dashboard"))

        if overview.room.teacher_id != user.id:
            return render_template("403.html", current_user=user), 403

        return render_template("teacher/room.html", overview=overview, active_page="teacher_dashboard")
