from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local, parse_iso_date
from ..common.decorators import current_user, login_required
from ..container import Container
from ..core.exceptions import ValidationError
from .model import VacationRequest


def request_to_dict(r: VacationRequest) -> dict:
    return {
        "id": r.request_id,
        "user_id": r.user_id,
        "user_name": r.user_name,
        "start_date": r.start_date.isoformat(),
        "end_date": r.end_date.isoformat(),
        "status": r.status.value,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/calendar", methods=["GET"], endpoint="calendar")
    @login_required
    def calendar_view():
        today = now_local().date()
        year = request.args.get("year", type=int) or today.year
        month = request.args.get("month", type=int) or today.month
        if not 1 <= month <= 12:
            raise ValidationError("Mes no vàlid")

        user_id = current_user().user_id
        days = container.vacation_service.month_calendar(user_id, year, month, today)
        return jsonify(
            {
                "year": year,
                "month": month,
                "vacation_days_used": container.vacation_service.approved_days(user_id, year),
                "days": [
                    {
                        "date": d.day.isoformat(),
                        "holiday": d.holiday.name if d.holiday else None,
                        "holiday_kind": d.holiday.kind.value if d.holiday else None,
                        "on_vacation": d.on_vacation,
                        "is_today": d.is_today,
                    }
                    for d in days
                ],
            }
        )

    @app.route("/api/vacations", methods=["GET"], endpoint="vacations_list")
    @login_required
    def vacations_list():
        rows = container.vacation_service.list_for_user(current_user().user_id)
        return jsonify([request_to_dict(r) for r in rows])

    @app.route("/api/vacations", methods=["POST"], endpoint="vacations_create")
    @login_required
    def vacations_create():
        data = request.get_json(silent=True) or {}
        try:
            start = parse_iso_date(str(data.get("start", "")))
            end = parse_iso_date(str(data.get("end", "")))
        except ValueError:
            raise ValidationError("Data no vàlida (AAAA-MM-DD)")

        req = container.vacation_service.request(current_user(), start, end)
        return jsonify({"success": True, "request": request_to_dict(req)}), 201
