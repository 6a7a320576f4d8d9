from __future__ import annotations

from functools import wraps

from flask import jsonify, session

from ..core.enums import Role
from ..users.service import SessionUser


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return jsonify({"success": False, "message": "Cal iniciar sessió"}), 401
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return jsonify({"success": False, "message": "Cal iniciar sessió"}), 401
        if session.get("role") != Role.ADMIN.value:
            return jsonify({"success": False, "message": "No tens permisos"}), 403
        return view(*args, **kwargs)

    return wrapper


def current_user() -> SessionUser:
    """Rebuild the logged-in SessionUser from the Flask session."""
    return SessionUser(user_id=session["user_id"], name=session["name"], role=Role(session["role"]))
