from __future__ import annotations

from flask import Flask, Response, jsonify

from ..common.datetime_utils import now_local
from ..common.decorators import admin_required, current_user
from ..container import Container
from ..reports.export import export_entries_csv
from ..vacations.controller import request_to_dict


def register(app: Flask, container: Container) -> None:
    @app.route("/api/admin/overview", methods=["GET"], endpoint="admin_overview")
    @admin_required
    def admin_overview():
        today = now_local().date()
        roster = container.roster_service.roster(today)
        return jsonify(
            {
                "pending": [request_to_dict(r) for r in container.vacation_service.list_pending()],
                "last_movements": container.roster_service.last_movements(),
                "roster": [
                    {
                        "user_id": w.user_id,
                        "name": w.name,
                        "status": w.status.value,
                        "label": w.label,
                        "since": w.since.strftime("%H:%M") if w.since else None,
                    }
                    for w in roster
                ],
            }
        )

    @app.route("/api/admin/vacations/<request_id>/approve", methods=["POST"], endpoint="admin_vacation_approve")
    @admin_required
    def admin_vacation_approve(request_id: str):
        container.vacation_service.approve(current_role=current_user().role, request_id=request_id)
        return jsonify({"success": True})

    @app.route("/api/admin/vacations/<request_id>/reject", methods=["POST"], endpoint="admin_vacation_reject")
    @admin_required
    def admin_vacation_reject(request_id: str):
        container.vacation_service.reject(current_role=current_user().role, request_id=request_id)
        return jsonify({"success": True})

    @app.route("/api/admin/export.csv", methods=["GET"], endpoint="admin_export_csv")
    @admin_required
    def admin_export_csv():
        content = export_entries_csv(container.entries_repo.list_all())
        return Response(
            content,
            mimetype="text/csv",
            headers={"Content-Disposition": "attachment; filename=registre_horari.csv"},
        )

    @app.route("/api/admin/sync", methods=["POST"], endpoint="admin_sync")
    @admin_required
    def admin_sync():
        if not container.sync.enabled:
            return jsonify({"success": False, "message": "Sincronització desactivada"}), 400
        pushed = container.sync.push_pending()
        return jsonify({"success": True, "pushed": pushed})
