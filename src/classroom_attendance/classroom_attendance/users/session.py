"""Signed-in user kept in the Flask session under the `user` key."""

from __future__ import annotations

import logging
from functools import wraps
from typing import Optional

from flask import flash, g, jsonify, redirect, render_template, request, session, url_for

from ..core.constants import SESSION_USER_KEY
from ..core.enums import Role
from .model import User

logger = logging.getLogger(__name__)


def load_session_user() -> None:
    """Restore the current user from the session; drop values that do not parse."""

    g.user = None
    stored = session.get(SESSION_USER_KEY)
    if stored is None:
        return
    try:
        g.user = User.from_dict(stored)
    except (KeyError, TypeError, ValueError):
        logger.error("Failed to parse stored user: %r", stored)
        session.pop(SESSION_USER_KEY, None)


def current_user() -> Optional[User]:
    return g.get("user")


def sign_in(user: User) -> None:
    session[SESSION_USER_KEY] = user.to_dict()
    g.user = user


def sign_out() -> None:
    session.pop(SESSION_USER_KEY, None)
    g.user = None


def dashboard_endpoint(user: User) -> str:
    return "teacher_dashboard" if user.role == Role.TEACHER else "student_dashboard"


def _forbidden(user: User):
    if request.path.startswith("/api/"):
        return jsonify({"success": False, "message": "You do not have access to this page"}), 403
    return render_template("403.html", current_user=user), 403


def role_required(role: Role):
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            user = current_user()
            if not user:
                if request.path.startswith("/api/"):
                    return jsonify({"success": False, "message": "Not signed in"}), 401
                flash("Please sign in to continue.", "warning")
                return redirect(url_for("login"))
            if user.role != role:
                return _forbidden(user)
            return view(*args, **kwargs)

        return wrapper

    return decorator


teacher_required = role_required(Role.TEACHER)
student_required = role_required(Role.STUDENT)
