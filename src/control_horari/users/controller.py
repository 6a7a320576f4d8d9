from __future__ import annotations

from flask import Flask, current_app, jsonify, request, session

from ..common.datetime_utils import format_clock, format_hours_minutes, now_local
from ..common.decorators import current_user, login_required
from ..container import Container
from .service import SessionUser


def _start_session(s_user: SessionUser) -> None:
    session.clear()
    session["user_id"] = s_user.user_id
    session["name"] = s_user.name
    session["role"] = s_user.role.value


def register(app: Flask, container: Container) -> None:
    @app.route("/api/login", methods=["POST"], endpoint="login")
    def login():
        data = request.get_json(silent=True) or {}
        s_user = container.auth_service.login(str(data.get("pin", "")))
        _start_session(s_user)
        return jsonify({"success": True, "user": {"id": s_user.user_id, "name": s_user.name, "role": s_user.role.value}})

    @app.route("/api/register", methods=["POST"], endpoint="register")
    def register_user():
        data = request.get_json(silent=True) or {}
        s_user = container.auth_service.register(str(data.get("name", "")), str(data.get("pin", "")))
        _start_session(s_user)
        return jsonify({"success": True, "user": {"id": s_user.user_id, "name": s_user.name, "role": s_user.role.value}}), 201

    @app.route("/api/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"success": True})

    @app.route("/api/me", methods=["GET"], endpoint="me")
    @login_required
    def me():
        user = current_user()
        now = now_local()
        clock = container.clock_service
        live = clock.live_seconds(user.user_id, now)

        return jsonify(
            {
                "user": {"id": user.user_id, "name": user.name, "role": user.role.value},
                "working": clock.is_working(user.user_id, now.date()),
                "timer": format_clock(live),
                "timer_seconds": live,
                "worked_today": format_hours_minutes(clock.worked_today(user.user_id, now)),
                "today": [
                    {
                        "id": e.entry_id,
                        "type": e.kind.value,
                        "time": e.timestamp.strftime("%H:%M"),
                        "location_label": e.location_label,
                    }
                    for e in clock.today_entries(user.user_id, now.date())
                ],
                "geo_timeout_seconds": current_app.config["GEO_TIMEOUT_SECONDS"],
                "site": container.classifier.site.name,
            }
        )
