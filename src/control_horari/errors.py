from __future__ import annotations

import structlog
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from .core.exceptions import AuthenticationError, AuthorizationError, DomainError, ValidationError

log = structlog.get_logger(__name__)


def register(app: Flask) -> None:
    """Map domain errors to JSON responses."""

    @app.errorhandler(ValidationError)
    def _validation(e: ValidationError):
        return jsonify({"success": False, "message": str(e)}), 400

    @app.errorhandler(AuthenticationError)
    def _authentication(e: AuthenticationError):
        return jsonify({"success": False, "message": str(e)}), 401

    @app.errorhandler(AuthorizationError)
    def _authorization(e: AuthorizationError):
        return jsonify({"success": False, "message": str(e)}), 403

    @app.errorhandler(DomainError)
    def _domain(e: DomainError):
        return jsonify({"success": False, "message": str(e)}), 400

    @app.errorhandler(Exception)
    def _unexpected(e: Exception):
        if isinstance(e, HTTPException):
            return e
        log.exception("unhandled_error")
        return jsonify({"success": False, "message": "Error del sistema"}), 500
