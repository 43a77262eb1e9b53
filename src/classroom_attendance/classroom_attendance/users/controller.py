from __future__ import annotations

from flask import Flask, flash, jsonify, redirect, render_template, request, url_for

from ..container import Container
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, ValidationError
from .session import current_user, dashboard_endpoint, load_session_user, sign_in, sign_out


def register(app: Flask, container: Container) -> None:
    app.before_request(load_session_user)

    @app.context_processor
    def inject_current_user():
        return {"current_user": current_user()}

    @app.route("/", endpoint="index")
    def index():
        user = current_user()
        if user:
            return redirect(url_for(dashboard_endpoint(user)))
        return redirect(url_for("login"))

    @app.route("/login", methods=["GET", "POST"], endpoint="login")
    def login():
        user = current_user()
        if user:
            return redirect(url_for(dashboard_endpoint(user)))

        mode = request.values.get("mode", "login")
        if mode not in {"login", "register"}:
            mode = "login"
        form = {"name": "", "email": "", "role": Role.STUDENT.value}

        if request.method == "POST":
            email = request.form.get("email", "").strip()
            password = request.form.get("password", "")
            name = request.form.get("name", "").strip()
            role_s = request.form.get("role", Role.STUDENT.value)
            form = {"name": name, "email": email, "role": role_s}

            try:
                if mode == "login":
                    if not email or not password.strip():
                        raise ValidationError("Please enter both email and password.")
                    user = container.auth_service.login(email, password)
                    flash(f"Welcome back, {user.name}!", "success")
                else:
                    user = container.auth_service.register(name=name, email=email, password=password, role=role_s)
                    flash("Your account has been created.", "success")

                sign_in(user)
                return redirect(url_for(dashboard_endpoint(user)))
            except (AuthenticationError, ValidationError) as e:
                title = "Login Failed" if mode == "login" else "Registration Failed"
                flash(f"{title}: {e}", "danger")
            except Exception:
                app.logger.exception("Unexpected error during %s", mode)
                flash("Something went wrong. Please try again.", "danger")

        return render_template("login.html", mode=mode, form=form, roles=list(Role))

    @app.route("/logout", endpoint="logout")
    def logout():
        sign_out()
        flash("You have been signed out.", "info")
        return redirect(url_for("login"))

    @app.route("/api/me", endpoint="api_me")
    def api_me():
        user = current_user()
        if not user:
            return jsonify({"success": False, "message": "Not signed in"}), 401
        return jsonify({"success": True, "user": user.to_dict()})
