from __future__ import annotations

from flask import Flask, flash, jsonify, redirect, render_template, request, url_for

from ..container import Container
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..users.session import current_user, student_required


def register(app: Flask, container: Container, *, history_limit: int = 5) -> None:
    @app.route("/student", endpoint="student_dashboard")
    @student_required
    def student_dashboard():
        overview = container.report_service.student_overview(current_user().id)
        return render_template("student/dashboard.html", overview=overview, active_page="student_dashboard")

    @app.route("/student/join", methods=["POST"], endpoint="join_room")
    @student_required
    def join_room():
        room_code = request.form.get("room_code", "")
        if not room_code.strip():
            flash("Please enter a room code", "danger")
            return redirect(url_for("student_dashboard"))

        try:
            room = container.attendance_service.check_in(current_user(), room_code)
            flash(f"Attendance marked successfully for {room.name}", "success")
        except (ValidationError, AuthorizationError, NotFoundError) as e:
            flash(str(e), "danger")
        except Exception:
            app.logger.exception("Failed to join room")
            flash("Failed to join room", "danger")

        return redirect(url_for("student_dashboard"))

    @app.route("/student/rooms/<room_id>", endpoint="student_room")
    @student_required
    def student_room(room_id: str):
        try:
            history = container.report_service.student_room_history(current_user().id, room_id, limit=history_limit)
        except NotFoundError as e:
            flash(str(e), "warning")
            return redirect(url_for("student_dashboard"))

        return render_template("student/room.html", history=history, active_page="student_dashboard")

    @app.route("/api/student/attendance", endpoint="api_student_attendance")
    @student_required
    def api_student_attendance():
        overview = container.report_service.student_overview(current_user().id)
        return jsonify(
            {
                "success": True,
                "overall": overview.overall_percentage,
                "rooms": [
                    {
                        "room": s.room.to_dict(),
                        "subject": s.subject.name if s.subject else None,
                        "percentage": s.percentage,
                    }
                    for s in overview.rooms
                ],
            }
        )

    @app.route("/api/student/join", methods=["POST"], endpoint="api_student_join")
    @student_required
    def api_student_join():
        """JSON variant of the join form: join by code and mark present."""
        try:
            data = request.get_json(silent=True) or {}
            room_code = str(data.get("room_code", "")).strip()

            if not room_code:
                return jsonify({"success": False, "message": "Please enter a room code"}), 400

            room = container.attendance_service.check_in(current_user(), room_code)
            return jsonify(
                {
                    "success": True,
                    "message": "Attendance marked successfully",
                    "room": room.to_dict(),
                }
            ), 200
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except AuthorizationError as e:
            return jsonify({"success": False, "message": str(e)}), 403
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except Exception:
            app.logger.exception("Failed to join room via API")
            return jsonify({"success": False, "message": "Failed to join room"}), 500
