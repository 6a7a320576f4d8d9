from __future__ import annotations

from datetime import date, timedelta

from flask import Flask, jsonify, request

from ..common.datetime_utils import day_bounds, now_local, parse_iso_date
from ..common.decorators import current_user, login_required
from ..container import Container
from ..core.exceptions import ValidationError


def _date_arg(name: str, default: date) -> date:
    value = request.args.get(name)
    if not value:
        return default
    try:
        return parse_iso_date(value)
    except ValueError:
        raise ValidationError("Data no vàlida (AAAA-MM-DD)")


def register(app: Flask, container: Container) -> None:
    @app.route("/api/reports/weekly", methods=["GET"], endpoint="report_weekly")
    @login_required
    def report_weekly():
        week_of = _date_arg("week", now_local().date())
        return jsonify(container.report_service.weekly_hours(current_user().user_id, week_of))

    @app.route("/api/reports/monthly", methods=["GET"], endpoint="report_monthly")
    @login_required
    def report_monthly():
        year = request.args.get("year", type=int) or now_local().year
        return jsonify(container.report_service.monthly_trend(current_user().user_id, year))

    @app.route("/api/reports/detail", methods=["GET"], endpoint="report_detail")
    @login_required
    def report_detail():
        now = now_local()
        end = _date_arg("end", now.date())
        start = _date_arg("start", end - timedelta(days=30))
        if end < start:
            raise ValidationError("La data final no pot ser anterior a la inicial")

        user_id = current_user().user_id
        rows = container.report_service.detail_rows(user_id, start=start, end=end, now=now)
        total = container.report_service.live_total(user_id, day_bounds(start)[0], day_bounds(end)[1], now)
        return jsonify({"rows": rows, "total_hours": round(total.total_seconds() / 3600, 2)})
