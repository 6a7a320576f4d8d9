from __future__ import annotations

from typing import Optional

from flask import Flask, jsonify, request

from ..common.decorators import current_user, login_required
from ..container import Container
from ..core.enums import EntryKind
from ..core.exceptions import ValidationError
from .model import Location


def _parse_location(data: dict) -> Optional[Location]:
    """Missing coordinates are the normal "no GPS" case, not an error."""
    lat, lng = data.get("latitude"), data.get("longitude")
    if lat is None or lng is None:
        return None
    try:
        accuracy = data.get("accuracy")
        return Location(
            latitude=float(lat),
            longitude=float(lng),
            accuracy=float(accuracy) if accuracy is not None else None,
        )
    except (TypeError, ValueError):
        raise ValidationError("Coordenades no vàlides")


def register(app: Flask, container: Container) -> None:
    @app.route("/api/clock", methods=["POST"], endpoint="clock")
    @login_required
    def clock():
        data = request.get_json(silent=True) or {}
        user = current_user()
        location = _parse_location(data)

        kind = data.get("kind")
        if kind:
            try:
                entry_kind = EntryKind(str(kind).upper())
            except ValueError:
                raise ValidationError("Tipus de fitxatge no vàlid")
            entry = container.clock_service.clock(user, entry_kind, location=location)
        else:
            entry = container.clock_service.toggle(user, location=location)

        return jsonify(
            {
                "success": True,
                "entry": {
                    "id": entry.entry_id,
                    "type": entry.kind.value,
                    "timestamp": entry.timestamp.isoformat(),
                    "location_label": entry.location_label,
                },
            }
        ), 201
