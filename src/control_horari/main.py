from __future__ import annotations

import importlib
from pathlib import Path
from typing import Optional

import structlog
from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .admin.controller import register as register_admin
from .common.logging import setup_logging
from .container import Container, build_container
from .core.constants import DEFAULT_GEO_TIMEOUT_SECONDS
from .database.bootstrap import apply_schema
from .database.connection import DBConfig, DatabaseConnection
from .entries.controller import register as register_entries
from .errors import register as register_errors
from .reports.controller import register as register_reports
from .users.controller import register as register_users
from .vacations.controller import register as register_vacations

log = structlog.get_logger(__name__)


def create_app(container: Optional[Container] = None, *, settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["GEO_TIMEOUT_SECONDS"] = int(getattr(settings, "GEO_TIMEOUT_SECONDS", DEFAULT_GEO_TIMEOUT_SECONDS))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
            schema_path = Path(__file__).resolve().parents[2] / "database" / "schema.sql"
            apply_schema(conn, database=str(db_config["database"]), schema_path=schema_path)
        container = build_container(settings=settings)

    log.info("app_configured", settings=settings_module, site=container.classifier.site.name)

    register_errors(app)
    register_users(app, container)
    register_entries(app, container)
    register_reports(app, container)
    register_vacations(app, container)
    register_admin(app, container)

    return app
